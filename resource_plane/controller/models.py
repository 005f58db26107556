"""
Objetos request/response del backend para extensiones.

Efímeros: se construyen por invocación y no se cachean.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExtensionRequest(BaseModel):
    """Filtro por clave primaria; extension_name None = sin restricción (todas)."""
    model_config = ConfigDict(frozen=True)

    extension_name: Optional[str] = Field(None, description="Nombre de la extensión")


class ExtensionResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    extension_name: str = Field(..., description="Nombre de la extensión")


class RequestStatusResponse(BaseModel):
    """
    Respuesta de una operación de escritura del backend.
    request_id None = completada de inmediato; si no, se sigue de forma asíncrona.
    """
    model_config = ConfigDict(frozen=True)

    request_id: Optional[int] = None
    status: str = Field("Accepted", description="Estado reportado por el backend")
    message: Optional[str] = None
