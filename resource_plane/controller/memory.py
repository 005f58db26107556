"""
Controlador de gestión en memoria respaldado por el catálogo YAML.

Pensado para la CLI y las pruebas; un controlador real orquesta clusters y persiste
el estado, lo que queda fuera de este paquete.
"""

import logging
import threading
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Set

from resource_plane.controller.catalog import load_catalog
from resource_plane.controller.errors import ControllerError
from resource_plane.controller.models import ExtensionRequest, ExtensionResponse, RequestStatusResponse
from resource_plane.core.errors import ResourcePlaneError

logger = logging.getLogger(__name__)


class InMemoryManagementController:
    """Implementa ManagementController; el snapshot de extensiones se reemplaza bajo lock."""

    def __init__(self, catalog_path: Optional[Path] = None, extensions: Optional[Iterable[str]] = None):
        self._lock = threading.Lock()
        self._catalog_path = Path(catalog_path) if catalog_path else None
        self.refresh_count = 0
        if extensions is not None:
            self._extensions: FrozenSet[str] = frozenset(extensions)
        elif self._catalog_path is not None:
            self._extensions = frozenset(load_catalog(self._catalog_path).names)
        else:
            self._extensions = frozenset()

    @property
    def extension_names(self) -> FrozenSet[str]:
        return self._extensions

    def get_extensions(self, requests: Set[ExtensionRequest]) -> Set[ExtensionResponse]:
        """Nombre None = todas; nombres desconocidos no aportan respuestas."""
        snapshot = self._extensions
        names = set()
        for request in requests:
            if request.extension_name is None:
                names.update(snapshot)
            elif request.extension_name in snapshot:
                names.add(request.extension_name)
        return {ExtensionResponse(extension_name=name) for name in names}

    def update_stacks(self) -> RequestStatusResponse:
        """Recarga el catálogo de forma síncrona; sin id de seguimiento."""
        if self._catalog_path is None:
            names = self._extensions
        else:
            try:
                names = frozenset(load_catalog(self._catalog_path).names)
            except ResourcePlaneError as e:
                raise ControllerError(f"No se pudo refrescar el catálogo: {e.message}") from e

        with self._lock:
            self._extensions = names
            self.refresh_count += 1
        logger.info("Catálogo refrescado: %d extensión(es)", len(names))
        return RequestStatusResponse(status="Complete", message=f"{len(names)} extensión(es)")
