import pytest

from resource_plane.core.errors import ValidationError
from resource_plane.core.predicate import (
    AndPredicate,
    EqualsPredicate,
    GreaterEqualsPredicate,
    NotEqualsPredicate,
    NotPredicate,
    OrPredicate,
)
from resource_plane.core.predicate_parser import parse_predicate

NAME = "Extensions/extension_name"


def test_empty_text_is_no_predicate():
    assert parse_predicate(None) is None
    assert parse_predicate("   ") is None


def test_simple_equality():
    assert parse_predicate(f"{NAME}=EXT-1.0") == EqualsPredicate(NAME, "EXT-1.0")


def test_operators():
    assert parse_predicate("a!=1") == NotEqualsPredicate("a", "1")
    assert parse_predicate("a>=1") == GreaterEqualsPredicate("a", "1")


def test_and_binds_tighter_than_or():
    predicate = parse_predicate("a=1|b=2&c=3")
    assert predicate == OrPredicate(
        EqualsPredicate("a", "1"),
        AndPredicate(EqualsPredicate("b", "2"), EqualsPredicate("c", "3")),
    )


def test_parentheses_and_negation():
    predicate = parse_predicate("!(a=1|a=2) & b=3")
    assert predicate == AndPredicate(
        NotPredicate(OrPredicate(EqualsPredicate("a", "1"), EqualsPredicate("a", "2"))),
        EqualsPredicate("b", "3"),
    )


@pytest.mark.parametrize("text", ["a=", "=1", "a=1|", "(a=1", "a=1)", "a 1"])
def test_malformed_text_raises(text):
    with pytest.raises(ValidationError):
        parse_predicate(text)
