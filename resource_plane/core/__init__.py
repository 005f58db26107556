"""
Core: contrato genérico de providers de recursos.

ENFORCEMENT (arquitectura limpia):
- Este paquete NO debe importar: resource_plane.cli, resource_plane.runtime ni providers
  concretos (resource_plane.extensions), ni acceder al filesystem.
- Permitido: typing, resource_plane.core.*, y el contrato/modelos/excepciones de
  resource_plane.controller (la frontera con el backend).
- Los providers y la CLI importan desde core; nunca al revés.
"""

from resource_plane.core.errors import (
    ConfigError,
    FailureKind,
    NoSuchParentResourceError,
    NoSuchResourceError,
    ResourcePlaneError,
    ResourceSystemError,
    UnsupportedOperationError,
    UnsupportedPropertyError,
    ValidationError,
)

__all__ = [
    "ResourcePlaneError",
    "FailureKind",
    "ValidationError",
    "ConfigError",
    "ResourceSystemError",
    "UnsupportedPropertyError",
    "NoSuchResourceError",
    "NoSuchParentResourceError",
    "UnsupportedOperationError",
]
