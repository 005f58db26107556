"""
Contrato que deben implementar los providers de recursos.

Cada tipo de recurso es una variante que expone {get, create, update, delete, schema};
el core no depende de ningún provider concreto.
"""

from typing import Optional, Protocol, Set

from resource_plane.core.predicate import Predicate
from resource_plane.core.provider.schema import ResourceSchema
from resource_plane.core.resource import Request, RequestStatus, Resource


class ResourceProvider(Protocol):
    """
    Todos los métodos pueden lanzar ResourceSystemError, UnsupportedPropertyError,
    NoSuchResourceError, NoSuchParentResourceError o UnsupportedOperationError.
    """

    @property
    def schema(self) -> ResourceSchema:
        """Propiedades y claves del tipo de recurso."""
        ...

    def get_resources(self, request: Request, predicate: Optional[Predicate]) -> Set[Resource]:
        """Lectura idempotente; predicate None = todas las instancias."""
        ...

    def create_resources(self, request: Request) -> RequestStatus:
        ...

    def update_resources(self, request: Request, predicate: Optional[Predicate]) -> RequestStatus:
        ...

    def delete_resources(self, request: Request, predicate: Optional[Predicate]) -> RequestStatus:
        ...
