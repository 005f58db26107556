"""
Frontera con el controlador de gestión: contrato, modelos y excepciones de dominio.
"""

from resource_plane.controller.contracts import ManagementController
from resource_plane.controller.catalog import ExtensionCatalog, load_catalog
from resource_plane.controller.errors import ControllerError, ObjectNotFoundError, ParentObjectNotFoundError
from resource_plane.controller.models import ExtensionRequest, ExtensionResponse, RequestStatusResponse
from resource_plane.controller.memory import InMemoryManagementController

__all__ = [
    "ManagementController",
    "InMemoryManagementController",
    "ExtensionCatalog",
    "load_catalog",
    "ControllerError",
    "ObjectNotFoundError",
    "ParentObjectNotFoundError",
    "ExtensionRequest",
    "ExtensionResponse",
    "RequestStatusResponse",
]
