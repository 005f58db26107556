"""
Contrato del controlador de gestión (colaborador externo).

El core solo depende de estas dos operaciones; la orquestación y persistencia
viven fuera.
"""

from typing import Protocol, Set

from resource_plane.controller.models import ExtensionRequest, ExtensionResponse, RequestStatusResponse


class ManagementController(Protocol):
    def get_extensions(self, requests: Set[ExtensionRequest]) -> Set[ExtensionResponse]:
        """Una sola llamada para todos los requests; puede lanzar ControllerError."""
        ...

    def update_stacks(self) -> RequestStatusResponse:
        """Refresca la metadata de stacks; puede lanzar ControllerError."""
        ...
