"""
Excepciones de dominio del controlador de gestión.

Nunca cruzan la frontera del provider: el Command Executor las traduce.
"""


class ControllerError(Exception):
    """Error base del backend de gestión."""
    pass


class ObjectNotFoundError(ControllerError):
    """La entidad pedida no existe en el backend."""
    pass


class ParentObjectNotFoundError(ControllerError):
    """La entidad padre de la pedida no existe en el backend."""
    pass
