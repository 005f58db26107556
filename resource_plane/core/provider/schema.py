"""
Esquema estático de un tipo de recurso: propiedades soportadas y claves.

Inmutable tras construirse; seguro de compartir entre hilos.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Mapping, Optional

from resource_plane.core.errors import UnsupportedPropertyError
from resource_plane.core.predicate import Predicate
from resource_plane.core.properties import get_categories, is_property_requested
from resource_plane.core.resource import Request, Resource, ResourceType


@dataclass(frozen=True)
class ResourceSchema:
    resource_type: ResourceType
    property_ids: FrozenSet[str]
    key_property_ids: Mapping[ResourceType, str]
    pk_property_ids: FrozenSet[str]

    @classmethod
    def build(
        cls,
        resource_type: ResourceType,
        property_ids: Iterable[str],
        key_property_ids: Mapping[ResourceType, str],
        pk_property_ids: Iterable[str],
    ) -> "ResourceSchema":
        return cls(
            resource_type=resource_type,
            property_ids=frozenset(property_ids),
            key_property_ids=dict(key_property_ids),
            pk_property_ids=frozenset(pk_property_ids),
        )

    @property
    def categories(self) -> FrozenSet[str]:
        return frozenset(c for pid in self.property_ids for c in get_categories(pid))

    def unsupported_property_ids(self, property_ids: Iterable[str]) -> FrozenSet[str]:
        """Ids que no son propiedad ni categoría del esquema."""
        known = self.property_ids | self.categories
        return frozenset(pid for pid in property_ids if pid not in known)

    def check_property_ids(self, property_ids: Iterable[str]) -> None:
        unsupported = self.unsupported_property_ids(property_ids)
        if unsupported:
            raise UnsupportedPropertyError(self.resource_type, unsupported)

    def request_property_ids(self, request: Optional[Request], predicate: Optional[Predicate]) -> FrozenSet[str]:
        """
        Propiedades a poblar en los recursos devueltos.

        Request sin propiedades → todas las del esquema; si no, las pedidas más las
        que aparecen en el predicado. Falla con UnsupportedPropertyError antes de
        tocar el backend si alguna no pertenece al esquema.
        """
        predicate_ids = predicate.property_ids() if predicate is not None else frozenset()
        self.check_property_ids(predicate_ids)

        requested = request.property_ids if request is not None else frozenset()
        if not requested:
            return self.property_ids
        self.check_property_ids(requested)
        return frozenset(requested) | predicate_ids

    def set_resource_property(self, resource: Resource, property_id: str, value, requested_ids: Iterable[str]) -> bool:
        """Copia el valor al recurso solo si la propiedad fue pedida. Devuelve True si se copió."""
        if is_property_requested(property_id, requested_ids):
            resource.set_property(property_id, value)
            return True
        return False
