"""
Configuración de ejecución: .env del proyecto + variables de entorno.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from resource_plane.core.errors import ConfigError
from resource_plane.runtime.resolver import find_catalog_path, project_env_file

LOG_LEVEL_ENV_VAR = "RESOURCE_PLANE_LOG_LEVEL"

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    catalog_path: Optional[Path] = Field(None, description="Catálogo YAML de extensiones")
    log_level: str = Field("WARNING", description="Nivel de logging")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Nivel de log debe ser uno de: {sorted(_LEVELS)}")
        return level


def load_settings(catalog_path: Optional[Path] = None, start: Optional[Path] = None) -> Settings:
    """
    Carga .env (sin pisar variables ya definidas) y arma Settings.
    Un catalog_path explícito tiene prioridad sobre la resolución.
    """
    env_file = project_env_file(start)
    if env_file:
        load_dotenv(env_file, override=False)

    try:
        return Settings(
            catalog_path=catalog_path or find_catalog_path(start),
            log_level=os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING"),
        )
    except PydanticValidationError as e:
        raise ConfigError(f"Configuración inválida: {e}", cause=e) from e
