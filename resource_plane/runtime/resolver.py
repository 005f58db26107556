"""
Resolución de la ruta del catálogo de extensiones.

Orden: variable RESOURCE_PLANE_CATALOG → .resource_plane/catalog/extensions.yaml en cwd
o sus padres → ~/.resource_plane/catalog/extensions.yaml. El core NO lee disco; solo la
CLI y el controlador en memoria usan estas rutas.
"""

import os
from pathlib import Path
from typing import Optional

CATALOG_ENV_VAR = "RESOURCE_PLANE_CATALOG"

PROJECT_DIR_NAME = ".resource_plane"
CATALOG_RELATIVE_PATH = Path("catalog") / "extensions.yaml"


def home_catalog_path() -> Path:
    return Path.home() / PROJECT_DIR_NAME / CATALOG_RELATIVE_PATH


def find_catalog_path(start: Optional[Path] = None) -> Optional[Path]:
    """Devuelve la primera ruta existente según el orden de resolución, o None."""
    explicit = os.environ.get(CATALOG_ENV_VAR, "").strip()
    if explicit:
        return Path(explicit).expanduser().resolve()

    cwd = (start or Path.cwd()).resolve()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / PROJECT_DIR_NAME / CATALOG_RELATIVE_PATH
        if candidate.exists():
            return candidate

    home_catalog = home_catalog_path()
    if home_catalog.exists():
        return home_catalog
    return None


def project_env_file(start: Optional[Path] = None) -> Optional[Path]:
    """.env del proyecto (junto a .resource_plane/) o del cwd."""
    cwd = (start or Path.cwd()).resolve()
    for parent in [cwd, *cwd.parents]:
        if (parent / PROJECT_DIR_NAME).exists() and (parent / ".env").exists():
            return parent / ".env"
    if (cwd / ".env").exists():
        return cwd / ".env"
    return None
