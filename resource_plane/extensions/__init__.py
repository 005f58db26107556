"""
Extensions: provider de solo lectura para las extensiones de stack.

Importar el paquete registra el provider en el registro estático.
"""

from resource_plane.extensions.provider import (
    EXTENSION_NAME_PROPERTY_ID,
    EXTENSION_SCHEMA,
    ExtensionResourceProvider,
)

__all__ = ["EXTENSION_NAME_PROPERTY_ID", "EXTENSION_SCHEMA", "ExtensionResourceProvider"]
