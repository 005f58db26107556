"""
Modelo genérico: Resource, Request y RequestStatus.

Agnóstico del tipo de entidad; los providers traducen desde/hacia los objetos
request/response propios de cada backend.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from resource_plane.core.properties import get_property_id

PropertyMap = Mapping[str, Any]

EMPTY_PROPERTY_MAP: PropertyMap = MappingProxyType({})


def freeze_property_map(properties: Optional[Mapping[str, Any]]) -> PropertyMap:
    """Copia inmutable de un mapa de propiedades."""
    if not properties:
        return EMPTY_PROPERTY_MAP
    return MappingProxyType(dict(properties))


class ResourceType(str, Enum):
    EXTENSION = "Extension"
    REQUEST = "Request"


REQUEST_ID_PROPERTY_ID = get_property_id("Requests", "id")
REQUEST_STATUS_PROPERTY_ID = get_property_id("Requests", "status")


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return tuple(sorted((k, _hashable(v)) for k, v in value.items()))
    if isinstance(value, (set, frozenset)):
        return frozenset(_hashable(v) for v in value)
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(v) for v in value)
    return value


class Resource:
    """Bolsa mutable de propiedades etiquetada con su tipo."""

    def __init__(self, resource_type: ResourceType, properties: Optional[Mapping[str, Any]] = None):
        self.type = resource_type
        self._properties: Dict[str, Any] = dict(properties or {})

    def set_property(self, property_id: str, value: Any) -> None:
        self._properties[property_id] = value

    def get_property(self, property_id: str, default: Any = None) -> Any:
        return self._properties.get(property_id, default)

    def has_property(self, property_id: str) -> bool:
        return property_id in self._properties

    @property
    def property_ids(self) -> FrozenSet[str]:
        return frozenset(self._properties)

    @property
    def properties(self) -> PropertyMap:
        """Vista de solo lectura; para serializar usar to_dict()."""
        return MappingProxyType(self._properties)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._properties)

    # Igualdad por tipo + todas las propiedades (no solo por clave primaria)
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.type == other.type and self._properties == other._properties

    def __hash__(self) -> int:
        return hash((self.type, frozenset(_hashable(self._properties))))

    def __repr__(self) -> str:
        return f"Resource({self.type.value}, {self._properties!r})"


@dataclass(frozen=True)
class Request:
    """
    Petición genérica inmutable.

    property_ids: propiedades pedidas (vacío = todas las conocidas).
    properties: payloads para create/update (uno por recurso).
    request_info: propiedades adicionales del request (no del recurso).
    """
    property_ids: FrozenSet[str] = frozenset()
    properties: Tuple[PropertyMap, ...] = ()
    request_info: PropertyMap = field(default_factory=lambda: EMPTY_PROPERTY_MAP)

    @classmethod
    def read(cls, property_ids: Iterable[str] = ()) -> "Request":
        return cls(property_ids=frozenset(property_ids))

    @classmethod
    def write(cls, *payloads: Mapping[str, Any], request_info: Optional[Mapping[str, Any]] = None) -> "Request":
        return cls(
            properties=tuple(freeze_property_map(p) for p in payloads),
            request_info=freeze_property_map(request_info),
        )


class RequestStatusKind(str, Enum):
    ACCEPTED = "Accepted"
    COMPLETE = "Complete"


@dataclass(frozen=True)
class RequestStatus:
    """
    Resultado de una operación de escritura.

    Si el backend la sigue de forma asíncrona, request_resource lleva el id de seguimiento
    (Requests/id) y su estado; si no, status es COMPLETE y request_resource es None.
    """
    status: RequestStatusKind = RequestStatusKind.COMPLETE
    request_resource: Optional[Resource] = None
    associated_resources: FrozenSet[Resource] = field(default_factory=frozenset)

    @property
    def request_id(self) -> Optional[int]:
        if self.request_resource is None:
            return None
        return self.request_resource.get_property(REQUEST_ID_PROPERTY_ID)
