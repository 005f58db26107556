"""
Contratos y piezas compartidas por todos los providers de recursos.

Los providers (extensions, ...) implementan el contrato y componen estas piezas;
no hay clase base obligatoria.
"""

from resource_plane.core.provider.contracts import ResourceProvider
from resource_plane.core.provider.executor import execute, translate_failure
from resource_plane.core.provider.notifier import ChangeNotifier, EventType, ResourceProviderEvent
from resource_plane.core.provider.registry import create_provider, register_provider, registered_types
from resource_plane.core.provider.schema import ResourceSchema
from resource_plane.core.provider.status import get_request_status

__all__ = [
    "ResourceProvider",
    "ResourceSchema",
    "get_request_status",
    "ChangeNotifier",
    "EventType",
    "ResourceProviderEvent",
    "execute",
    "translate_failure",
    "create_provider",
    "register_provider",
    "registered_types",
]
