"""
Registro de identificadores de propiedad.

Un identificador es la forma aplanada de un par (categoría, nombre):
("Extensions", "extension_name") → "Extensions/extension_name".
Las categorías pueden anidarse ("a/b") y el nombre simple es el último segmento.
"""

import sys
from functools import lru_cache
from typing import Iterable, Optional

SEPARATOR = "/"


@lru_cache(maxsize=None)
def get_property_id(category: Optional[str], name: str) -> str:
    """
    Devuelve el identificador canónico (internado) de una propiedad.
    Mismas entradas → misma instancia de str, estable durante todo el proceso.
    """
    if category:
        return sys.intern(f"{category}{SEPARATOR}{name}")
    return sys.intern(name)


def get_property_category(property_id: str) -> Optional[str]:
    """Categoría del identificador, o None si es una propiedad de primer nivel."""
    index = property_id.rfind(SEPARATOR)
    if index == -1:
        return None
    return property_id[:index]


def get_property_name(property_id: str) -> str:
    """Nombre simple (último segmento) del identificador."""
    return property_id.rsplit(SEPARATOR, 1)[-1]


def get_categories(property_id: str) -> list:
    """Todas las categorías que contienen al identificador, de la más interna a la raíz."""
    categories = []
    category = get_property_category(property_id)
    while category:
        categories.append(category)
        category = get_property_category(category)
    return categories


def is_property_requested(property_id: str, requested_ids: Iterable[str]) -> bool:
    """
    True si la propiedad fue pedida directamente o a través de alguna de sus categorías.
    """
    requested = requested_ids if isinstance(requested_ids, (set, frozenset)) else set(requested_ids)
    if property_id in requested:
        return True
    return any(category in requested for category in get_categories(property_id))
