"""
Command Executor: único punto donde los fallos del backend se traducen a la
taxonomía pública.

Un comando es un callable sin argumentos que devuelve la respuesta tipada del backend
o lanza un ControllerError.
"""

import logging
from typing import Callable, TypeVar

from resource_plane.controller.errors import ControllerError, ObjectNotFoundError, ParentObjectNotFoundError
from resource_plane.core.errors import (
    NoSuchParentResourceError,
    NoSuchResourceError,
    ResourcePlaneError,
    ResourceSystemError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Command = Callable[[], T]


def translate_failure(exc: ControllerError) -> ResourcePlaneError:
    """Convierte una excepción del backend en el error público equivalente (con su kind)."""
    if isinstance(exc, ObjectNotFoundError):
        error: ResourcePlaneError = NoSuchResourceError(str(exc) or "Recurso no encontrado", cause=exc)
    elif isinstance(exc, ParentObjectNotFoundError):
        error = NoSuchParentResourceError(str(exc) or "Recurso padre no encontrado", cause=exc)
    else:
        error = ResourceSystemError(f"Fallo del backend: {exc}", cause=exc)
    return error


def execute(command: Command[T]) -> T:
    """
    Invoca el comando exactamente una vez.
    Éxito → respuesta intacta; ControllerError → error público con la causa encadenada.
    """
    try:
        return command()
    except ControllerError as exc:
        error = translate_failure(exc)
        logger.debug("Comando fallido (%s): %s", error.kind.value, exc)
        raise error from exc
