"""
Predicados: árbol de expresión booleana sobre identificadores de propiedad.

- evaluate(resource): decide si un recurso cumple el predicado (post-filtrado).
- to_property_maps(predicate): enumera las ramas disyuntivas como mapas de propiedades
  concretos (solo igualdades); función pura y total.
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Tuple

from resource_plane.core.resource import PropertyMap, Resource, freeze_property_map


class Predicate(ABC):
    """Clase base abstracta de los predicados."""

    @abstractmethod
    def evaluate(self, resource: Resource) -> bool:
        pass

    @abstractmethod
    def property_ids(self) -> FrozenSet[str]:
        """Identificadores referenciados en el árbol."""
        pass


def _coerce(actual: Any, expected: Any) -> Tuple[Any, Any]:
    """Los valores que llegan desde una query son str; se comparan como número si el recurso lo es."""
    if isinstance(expected, str) and isinstance(actual, (int, float)) and not isinstance(actual, bool):
        try:
            return actual, float(expected)
        except ValueError:
            return str(actual), expected
    return actual, expected


@dataclass(frozen=True)
class ComparisonPredicate(Predicate):
    property_id: str
    value: Any

    operator = "?"

    def evaluate(self, resource: Resource) -> bool:
        if not resource.has_property(self.property_id):
            return self._missing()
        actual, expected = _coerce(resource.get_property(self.property_id), self.value)
        try:
            return self._compare(actual, expected)
        except TypeError:
            return False

    def property_ids(self) -> FrozenSet[str]:
        return frozenset((self.property_id,))

    def _missing(self) -> bool:
        return False

    @abstractmethod
    def _compare(self, actual: Any, expected: Any) -> bool:
        pass

    def __str__(self) -> str:
        return f"{self.property_id}{self.operator}{self.value}"


@dataclass(frozen=True)
class EqualsPredicate(ComparisonPredicate):
    operator = "="

    def _compare(self, actual, expected):
        return actual == expected


@dataclass(frozen=True)
class NotEqualsPredicate(ComparisonPredicate):
    operator = "!="

    def _missing(self) -> bool:
        return self.value is not None

    def _compare(self, actual, expected):
        return actual != expected


@dataclass(frozen=True)
class LessPredicate(ComparisonPredicate):
    operator = "<"

    def _compare(self, actual, expected):
        return actual < expected


@dataclass(frozen=True)
class LessEqualsPredicate(ComparisonPredicate):
    operator = "<="

    def _compare(self, actual, expected):
        return actual <= expected


@dataclass(frozen=True)
class GreaterPredicate(ComparisonPredicate):
    operator = ">"

    def _compare(self, actual, expected):
        return actual > expected


@dataclass(frozen=True)
class GreaterEqualsPredicate(ComparisonPredicate):
    operator = ">="

    def _compare(self, actual, expected):
        return actual >= expected


class AndPredicate(Predicate):
    def __init__(self, *predicates: Predicate):
        self.predicates = tuple(predicates)

    def evaluate(self, resource: Resource) -> bool:
        return all(p.evaluate(resource) for p in self.predicates)

    def property_ids(self) -> FrozenSet[str]:
        return frozenset().union(*(p.property_ids() for p in self.predicates))

    def __eq__(self, other):
        return isinstance(other, AndPredicate) and self.predicates == other.predicates

    def __hash__(self):
        return hash(("and", self.predicates))

    def __str__(self) -> str:
        return "(" + "&".join(str(p) for p in self.predicates) + ")"


class OrPredicate(Predicate):
    def __init__(self, *predicates: Predicate):
        self.predicates = tuple(predicates)

    def evaluate(self, resource: Resource) -> bool:
        return any(p.evaluate(resource) for p in self.predicates)

    def property_ids(self) -> FrozenSet[str]:
        return frozenset().union(*(p.property_ids() for p in self.predicates))

    def __eq__(self, other):
        return isinstance(other, OrPredicate) and self.predicates == other.predicates

    def __hash__(self):
        return hash(("or", self.predicates))

    def __str__(self) -> str:
        return "(" + "|".join(str(p) for p in self.predicates) + ")"


@dataclass(frozen=True)
class NotPredicate(Predicate):
    predicate: Predicate

    def evaluate(self, resource: Resource) -> bool:
        return not self.predicate.evaluate(resource)

    def property_ids(self) -> FrozenSet[str]:
        return self.predicate.property_ids()

    def __str__(self) -> str:
        return f"!{self.predicate}"


class AlwaysPredicate(Predicate):
    """Predicado que acepta cualquier recurso."""

    def evaluate(self, resource: Resource) -> bool:
        return True

    def property_ids(self) -> FrozenSet[str]:
        return frozenset()

    def __eq__(self, other):
        return isinstance(other, AlwaysPredicate)

    def __hash__(self):
        return hash("always")

    def __str__(self) -> str:
        return "*"


def _disjunctive_clauses(predicate: Predicate) -> List[List[Predicate]]:
    """Forma normal disyuntiva: lista de cláusulas, cada una lista de hojas en conjunción."""
    if isinstance(predicate, OrPredicate):
        clauses: List[List[Predicate]] = []
        for child in predicate.predicates:
            clauses.extend(_disjunctive_clauses(child))
        return clauses
    if isinstance(predicate, AndPredicate):
        clauses = [[]]
        for child in predicate.predicates:
            child_clauses = _disjunctive_clauses(child)
            clauses = [left + right for left, right in itertools.product(clauses, child_clauses)]
        return clauses
    if isinstance(predicate, AlwaysPredicate):
        return [[]]
    # Hojas y negaciones se tratan como opacas
    return [[predicate]]


def to_property_maps(predicate: Optional[Predicate]) -> List[PropertyMap]:
    """
    Convierte el predicado en los mapas de propiedades que cubren todo lo que puede cumplirlo.

    Cada cláusula de la forma disyuntiva aporta un mapa con sus igualdades; las demás
    comparaciones y las negaciones no restringen (el provider trae de más y se refina después).
    Una cláusula con dos valores distintos para la misma propiedad no puede cumplirse y no
    aporta mapa. El resultado puede tener duplicados.
    """
    if predicate is None:
        return [freeze_property_map(None)]

    maps: List[PropertyMap] = []
    for clause in _disjunctive_clauses(predicate):
        properties = {}
        contradictory = False
        for leaf in clause:
            if not isinstance(leaf, EqualsPredicate):
                continue
            if leaf.property_id in properties and properties[leaf.property_id] != leaf.value:
                contradictory = True
                break
            properties[leaf.property_id] = leaf.value
        if not contradictory:
            maps.append(freeze_property_map(properties))
    return maps
