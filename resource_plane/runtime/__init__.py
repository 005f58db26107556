"""
Runtime: resolución de rutas y configuración de ejecución.

Fuera del core: aquí sí se mira el filesystem y el entorno.
"""

from resource_plane.runtime.resolver import find_catalog_path
from resource_plane.runtime.settings import Settings, load_settings

__all__ = ["find_catalog_path", "Settings", "load_settings"]
