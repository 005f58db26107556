"""
Catálogo declarativo de extensiones (YAML).

Formato:
    extensions:
      - extension_name: EXT-1.0
      - extension_name: EXT-2.0
"""

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from resource_plane.core.errors import ConfigError, ValidationError


class ExtensionDefinition(BaseModel):
    extension_name: str = Field(..., description="Nombre único de la extensión")


class ExtensionCatalog(BaseModel):
    version: int = Field(1, description="Versión del esquema")
    extensions: List[ExtensionDefinition] = Field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [e.extension_name for e in self.extensions]


def validate_extension_name(name: str) -> None:
    """Valida que el nombre sea usable como clave y en rutas de la API."""
    if not name or not name.strip():
        raise ValidationError("El nombre de la extensión no puede estar vacío")
    if any(c in name for c in "/\\:*?\"<>|&=!()"):
        raise ValidationError(f"El nombre '{name}' contiene caracteres prohibidos")


def validate_catalog(catalog: ExtensionCatalog) -> List[str]:
    """
    Valida el catálogo completo.
    Devuelve lista de mensajes de error; si vacía, es válido.
    """
    errors: List[str] = []
    seen = set()
    for name in catalog.names:
        try:
            validate_extension_name(name)
        except ValidationError as e:
            errors.append(e.message)
            continue
        if name in seen:
            errors.append(f"Extensión duplicada: '{name}'")
        seen.add(name)
    return errors


def load_catalog(path: Path) -> ExtensionCatalog:
    """Carga y valida el catálogo; ConfigError si no se puede leer, ValidationError si es inválido."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Catálogo no encontrado: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Error al parsear {path}: {e}", cause=e) from e
    if not isinstance(data, dict):
        raise ConfigError(f"El catálogo {path} debe ser un mapa YAML")

    try:
        catalog = ExtensionCatalog(**data)
    except PydanticValidationError as e:
        raise ValidationError(f"Catálogo inválido {path}: {e}", cause=e) from e

    errors = validate_catalog(catalog)
    if errors:
        raise ValidationError("Catálogo inválido:\n" + "\n".join(f"  - {e}" for e in errors))
    return catalog
