"""
Provider de recursos Extension (solo lectura).

Una extensión es como una versión de stack pero con servicios propios; el provider
la expone con el protocolo genérico de consulta sin implementar filtrado ni proyección.
"""

import logging
from typing import Any, Dict, Optional, Set

from resource_plane.controller.contracts import ManagementController
from resource_plane.controller.models import ExtensionRequest, ExtensionResponse
from resource_plane.core.errors import UnsupportedOperationError
from resource_plane.core.predicate import Predicate, to_property_maps
from resource_plane.core.properties import get_property_id
from resource_plane.core.provider.executor import execute
from resource_plane.core.provider.notifier import ChangeNotifier
from resource_plane.core.provider.registry import register_provider
from resource_plane.core.provider.schema import ResourceSchema
from resource_plane.core.provider.status import get_request_status
from resource_plane.core.resource import PropertyMap, Request, RequestStatus, Resource, ResourceType

logger = logging.getLogger(__name__)

EXTENSIONS_CATEGORY = "Extensions"

EXTENSION_NAME_PROPERTY_ID = get_property_id(EXTENSIONS_CATEGORY, "extension_name")

EXTENSION_SCHEMA = ResourceSchema.build(
    resource_type=ResourceType.EXTENSION,
    property_ids=[EXTENSION_NAME_PROPERTY_ID],
    key_property_ids={ResourceType.EXTENSION: EXTENSION_NAME_PROPERTY_ID},
    pk_property_ids=[EXTENSION_NAME_PROPERTY_ID],
)


class ExtensionResourceProvider:
    """Sin estado tras construirse: esquema inmutable y referencia al controlador."""

    def __init__(
        self,
        controller: ManagementController,
        notifier: Optional[ChangeNotifier] = None,
        schema: ResourceSchema = EXTENSION_SCHEMA,
    ):
        self._controller = controller
        self._notifier = notifier or ChangeNotifier()
        self._schema = schema

    @classmethod
    def create(cls, controller: ManagementController, notifier: ChangeNotifier) -> "ExtensionResourceProvider":
        return cls(controller, notifier)

    @property
    def schema(self) -> ResourceSchema:
        return self._schema

    def get_resources(self, request: Optional[Request], predicate: Optional[Predicate]) -> Set[Resource]:
        """
        Convierte el predicado en requests por clave primaria, los ejecuta en una sola
        llamada al backend y proyecta cada respuesta sobre las propiedades pedidas.

        Los filtros que no son de clave no se envían al backend; se refinan arriba.
        """
        requested_ids = self._schema.request_property_ids(request, predicate)

        requests = {self._get_request(property_map) for property_map in to_property_maps(predicate)}
        logger.debug("Extension: %d request(s) al backend", len(requests))

        responses = execute(lambda: self._controller.get_extensions(requests))

        resources: Set[Resource] = set()
        for response in responses:
            resource = Resource(ResourceType.EXTENSION)
            for property_id, value in self._response_properties(response).items():
                self._schema.set_resource_property(resource, property_id, value, requested_ids)
            # La clave primaria siempre va en el recurso
            resource.set_property(EXTENSION_NAME_PROPERTY_ID, response.extension_name)
            resources.add(resource)
        return resources

    def update_resources(self, request: Optional[Request], predicate: Optional[Predicate]) -> RequestStatus:
        """
        Dispara un refresco global de la metadata de stacks, ignorando payload y predicado.
        Siempre una llamada al backend y una notificación por invocación.
        """
        # TODO: usar un update por extensión cuando el controlador lo exponga; hoy
        # se reutiliza update_stacks y el contrato es provisional.
        response = execute(self._controller.update_stacks)

        self._notifier.notify_update(ResourceType.EXTENSION, request, predicate)

        return get_request_status(response)

    def create_resources(self, request: Optional[Request]) -> RequestStatus:
        raise UnsupportedOperationError("Las extensiones son de solo lectura: create no soportado")

    def delete_resources(self, request: Optional[Request], predicate: Optional[Predicate]) -> RequestStatus:
        raise UnsupportedOperationError("Las extensiones son de solo lectura: delete no soportado")

    def _get_request(self, properties: PropertyMap) -> ExtensionRequest:
        """Solo las propiedades de clave primaria llegan al backend; el nombre siempre como str."""
        name = properties.get(EXTENSION_NAME_PROPERTY_ID)
        return ExtensionRequest(extension_name=None if name is None else str(name))

    @staticmethod
    def _response_properties(response: ExtensionResponse) -> Dict[str, Any]:
        return {
            get_property_id(EXTENSIONS_CATEGORY, field): value
            for field, value in response.model_dump().items()
        }


register_provider(ResourceType.EXTENSION, ExtensionResourceProvider.create)
