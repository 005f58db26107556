"""
Errores del Resource Plane.

El core solo define excepciones; las capas (CLI/API) se encargan del formato de salida
(p. ej. traducirlas a códigos HTTP o de salida).
"""

from enum import Enum
from typing import Iterable, Optional


class FailureKind(str, Enum):
    """Clase de fallo pública que ve quien llama a un provider."""
    SYSTEM = "system"
    UNSUPPORTED_PROPERTY = "unsupported_property"
    NO_SUCH_RESOURCE = "no_such_resource"
    NO_SUCH_PARENT_RESOURCE = "no_such_parent_resource"
    UNSUPPORTED_OPERATION = "unsupported_operation"


class ResourcePlaneError(Exception):
    """Error base del Resource Plane."""
    kind: Optional[FailureKind] = None

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(ResourcePlaneError):
    """Error de validación (catálogo, predicados mal formados, registros)."""
    pass


class ConfigError(ResourcePlaneError):
    """Error de configuración (archivo faltante, formato inválido)."""
    pass


class ResourceSystemError(ResourcePlaneError):
    """Fallo inesperado del backend durante la ejecución de un comando."""
    kind = FailureKind.SYSTEM


class UnsupportedPropertyError(ResourcePlaneError):
    """Se pidió o filtró por una propiedad que no pertenece al esquema del tipo."""
    kind = FailureKind.UNSUPPORTED_PROPERTY

    def __init__(self, resource_type, property_ids: Iterable[str]):
        self.resource_type = resource_type
        self.property_ids = frozenset(property_ids)
        names = ", ".join(sorted(self.property_ids))
        type_name = getattr(resource_type, "value", resource_type)
        super().__init__(f"Propiedades no soportadas para {type_name}: {names}")


class NoSuchResourceError(ResourcePlaneError):
    """El recurso pedido no existe en el backend."""
    kind = FailureKind.NO_SUCH_RESOURCE


class NoSuchParentResourceError(ResourcePlaneError):
    """El recurso padre no existe (solo tipos jerárquicos)."""
    kind = FailureKind.NO_SUCH_PARENT_RESOURCE


class UnsupportedOperationError(ResourcePlaneError):
    """El tipo de recurso no soporta la operación pedida (p. ej. delete en solo lectura)."""
    kind = FailureKind.UNSUPPORTED_OPERATION
