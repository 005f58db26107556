"""
Registro estático tipo de recurso → fábrica de provider.
"""

import logging
from typing import Callable, Dict

from resource_plane.controller.contracts import ManagementController
from resource_plane.core.errors import ValidationError
from resource_plane.core.provider.contracts import ResourceProvider
from resource_plane.core.provider.notifier import ChangeNotifier
from resource_plane.core.resource import ResourceType

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[ManagementController, ChangeNotifier], ResourceProvider]

_FACTORIES: Dict[ResourceType, ProviderFactory] = {}


def register_provider(resource_type: ResourceType, factory: ProviderFactory) -> None:
    """Registra la fábrica de un tipo; se llama al importar el módulo del provider."""
    if resource_type in _FACTORIES and _FACTORIES[resource_type] != factory:
        raise ValidationError(f"Ya hay un provider registrado para {resource_type.value}")
    _FACTORIES[resource_type] = factory


def registered_types() -> list:
    return sorted(_FACTORIES, key=lambda t: t.value)


def create_provider(
    resource_type: ResourceType,
    controller: ManagementController,
    notifier: ChangeNotifier,
) -> ResourceProvider:
    factory = _FACTORIES.get(resource_type)
    if factory is None:
        raise ValidationError(f"No hay provider registrado para {resource_type.value}")
    logger.debug("Creando provider para %s", resource_type.value)
    return factory(controller, notifier)
