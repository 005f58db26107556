"""
Consultas del lado del transporte: post-filtrado y búsqueda de un único recurso.

Los providers traen de más por clave primaria; aquí se aplica el predicado completo.
Solo la búsqueda individual lanza NoSuchResourceError.
"""

from typing import Optional, Set

from resource_plane.core.errors import NoSuchResourceError
from resource_plane.core.predicate import EqualsPredicate, Predicate
from resource_plane.core.provider.contracts import ResourceProvider
from resource_plane.core.resource import Request, Resource


class QueryRunner:
    def __init__(self, provider: ResourceProvider):
        self.provider = provider

    def get_resources(self, request: Optional[Request] = None, predicate: Optional[Predicate] = None) -> Set[Resource]:
        resources = self.provider.get_resources(request or Request.read(), predicate)
        if predicate is None:
            return resources
        return {r for r in resources if predicate.evaluate(r)}

    def get_resource(self, key_value, request: Optional[Request] = None) -> Resource:
        """Busca por clave primaria; exactamente un resultado o NoSuchResourceError."""
        schema = self.provider.schema
        key_property_id = schema.key_property_ids[schema.resource_type]
        resources = self.get_resources(request, EqualsPredicate(key_property_id, key_value))
        if not resources:
            raise NoSuchResourceError(
                f"{schema.resource_type.value} no encontrado: {key_property_id}={key_value}"
            )
        return next(iter(resources))
