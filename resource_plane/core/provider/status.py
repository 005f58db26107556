"""
Traducción de la respuesta de escritura del backend a un RequestStatus genérico.
"""

from typing import Iterable, Optional

from resource_plane.controller.models import RequestStatusResponse
from resource_plane.core.resource import (
    REQUEST_ID_PROPERTY_ID,
    REQUEST_STATUS_PROPERTY_ID,
    RequestStatus,
    RequestStatusKind,
    Resource,
    ResourceType,
)


def get_request_status(
    response: Optional[RequestStatusResponse],
    associated_resources: Iterable[Resource] = (),
) -> RequestStatus:
    """
    Sin id de seguimiento → COMPLETE; con id → ACCEPTED y un recurso Request
    (Requests/id, Requests/status) para consultar el progreso por fuera.
    """
    associated = frozenset(associated_resources)
    if response is None or response.request_id is None:
        return RequestStatus(status=RequestStatusKind.COMPLETE, associated_resources=associated)

    request_resource = Resource(ResourceType.REQUEST)
    request_resource.set_property(REQUEST_ID_PROPERTY_ID, response.request_id)
    request_resource.set_property(REQUEST_STATUS_PROPERTY_ID, response.status)
    return RequestStatus(
        status=RequestStatusKind.ACCEPTED,
        request_resource=request_resource,
        associated_resources=associated,
    )
