"""
Notificación de cambios: avisa a los observadores de que los recursos de un tipo
pueden haber cambiado.

Best-effort: un observador que falla se registra en el log y no interrumpe la operación.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from resource_plane.core.predicate import Predicate
from resource_plane.core.resource import Request, ResourceType

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    UPDATE = "update"


@dataclass(frozen=True)
class ResourceProviderEvent:
    resource_type: ResourceType
    event_type: EventType
    request: Optional[Request]
    predicate: Optional[Predicate]


Observer = Callable[[ResourceProviderEvent], None]


class ChangeNotifier:
    """Lista de observadores copy-on-write; notify no toma el lock."""

    def __init__(self):
        self._lock = threading.Lock()
        self._observers: Tuple[Observer, ...] = ()

    def add_observer(self, observer: Observer) -> None:
        with self._lock:
            self._observers = self._observers + (observer,)

    def remove_observer(self, observer: Observer) -> None:
        with self._lock:
            self._observers = tuple(o for o in self._observers if o != observer)

    def notify_update(self, resource_type: ResourceType, request: Optional[Request], predicate: Optional[Predicate]) -> None:
        self._notify(ResourceProviderEvent(resource_type, EventType.UPDATE, request, predicate))

    def _notify(self, event: ResourceProviderEvent) -> None:
        for observer in self._observers:
            try:
                observer(event)
            except Exception:
                logger.warning("Observador %r falló al notificar %s", observer, event.resource_type.value, exc_info=True)
