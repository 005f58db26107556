"""
Compilador de predicados en formato query string.

Sintaxis: Extensions/extension_name=EXT-1.0|Extensions/extension_name=EXT-2.0
Operadores: = != < <= > >=, conjunción &, disyunción |, negación !(...), paréntesis.
& tiene más precedencia que |.
"""

import re
from typing import List, Optional

from resource_plane.core.errors import ValidationError
from resource_plane.core.predicate import (
    AndPredicate,
    EqualsPredicate,
    GreaterEqualsPredicate,
    GreaterPredicate,
    LessEqualsPredicate,
    LessPredicate,
    NotEqualsPredicate,
    NotPredicate,
    OrPredicate,
    Predicate,
)

_TOKEN = re.compile(r"\s*(!=|<=|>=|[()&|!=<>]|[^()&|!=<>]+)")

_COMPARISONS = {
    "=": EqualsPredicate,
    "!=": NotEqualsPredicate,
    "<": LessPredicate,
    "<=": LessEqualsPredicate,
    ">": GreaterPredicate,
    ">=": GreaterEqualsPredicate,
}

_SYMBOLS = set(_COMPARISONS) | {"(", ")", "&", "|", "!"}


def _tokenize(text: str) -> List[str]:
    tokens = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if not match:
            raise ValidationError(f"Predicado inválido cerca de: {text[pos:]!r}")
        token = match.group(1).strip()
        if token:
            tokens.append(token)
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, tokens: List[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> str:
        token = self.peek()
        if token is None:
            raise ValidationError("Predicado incompleto")
        self.pos += 1
        return token

    def expect(self, expected: str) -> None:
        token = self.take()
        if token != expected:
            raise ValidationError(f"Se esperaba '{expected}' y se encontró '{token}'")

    def parse(self) -> Predicate:
        predicate = self.expression()
        if self.peek() is not None:
            raise ValidationError(f"Token inesperado: '{self.peek()}'")
        return predicate

    def expression(self) -> Predicate:
        terms = [self.term()]
        while self.peek() == "|":
            self.take()
            terms.append(self.term())
        return terms[0] if len(terms) == 1 else OrPredicate(*terms)

    def term(self) -> Predicate:
        factors = [self.factor()]
        while self.peek() == "&":
            self.take()
            factors.append(self.factor())
        return factors[0] if len(factors) == 1 else AndPredicate(*factors)

    def factor(self) -> Predicate:
        token = self.take()
        if token == "!":
            return NotPredicate(self.factor())
        if token == "(":
            predicate = self.expression()
            self.expect(")")
            return predicate
        if token in _SYMBOLS:
            raise ValidationError(f"Se esperaba una propiedad y se encontró '{token}'")
        operator = self.take()
        if operator not in _COMPARISONS:
            raise ValidationError(f"Operador desconocido tras '{token}': '{operator}'")
        value = self.take()
        if value in _SYMBOLS:
            raise ValidationError(f"Falta el valor para '{token}{operator}'")
        return _COMPARISONS[operator](token, value)


def parse_predicate(text: Optional[str]) -> Optional[Predicate]:
    """Compila el texto en un árbol de predicados; None o vacío → sin predicado."""
    if text is None or not text.strip():
        return None
    return _Parser(_tokenize(text)).parse()
