import pytest

from resource_plane.core.predicate import (
    AlwaysPredicate,
    AndPredicate,
    EqualsPredicate,
    GreaterEqualsPredicate,
    GreaterPredicate,
    LessPredicate,
    NotEqualsPredicate,
    NotPredicate,
    OrPredicate,
    to_property_maps,
)
from resource_plane.core.resource import Resource, ResourceType

NAME = "Extensions/extension_name"
SIZE = "Extensions/size"


@pytest.fixture
def resource():
    return Resource(ResourceType.EXTENSION, {NAME: "EXT-1.0", SIZE: 3})


class TestEvaluate:
    def test_equals(self, resource):
        assert EqualsPredicate(NAME, "EXT-1.0").evaluate(resource)
        assert not EqualsPredicate(NAME, "EXT-2.0").evaluate(resource)

    def test_missing_property_does_not_match(self, resource):
        assert not EqualsPredicate("Extensions/other", "x").evaluate(resource)
        assert NotEqualsPredicate("Extensions/other", "x").evaluate(resource)

    def test_numeric_comparison_from_query_strings(self, resource):
        assert GreaterPredicate(SIZE, "2").evaluate(resource)
        assert GreaterEqualsPredicate(SIZE, "3").evaluate(resource)
        assert not LessPredicate(SIZE, "3").evaluate(resource)

    def test_incomparable_types_do_not_match(self, resource):
        assert not LessPredicate(NAME, 5).evaluate(resource)

    def test_logical(self, resource):
        eq1 = EqualsPredicate(NAME, "EXT-1.0")
        eq2 = EqualsPredicate(NAME, "EXT-2.0")
        assert OrPredicate(eq1, eq2).evaluate(resource)
        assert not AndPredicate(eq1, eq2).evaluate(resource)
        assert NotPredicate(eq2).evaluate(resource)
        assert AlwaysPredicate().evaluate(resource)

    def test_property_ids(self):
        predicate = AndPredicate(EqualsPredicate(NAME, "a"), NotPredicate(LessPredicate(SIZE, 1)))
        assert predicate.property_ids() == {NAME, SIZE}


class TestToPropertyMaps:
    def test_absent_predicate_is_one_empty_map(self):
        assert [dict(m) for m in to_property_maps(None)] == [{}]

    def test_single_equality(self):
        maps = to_property_maps(EqualsPredicate(NAME, "EXT-1.0"))
        assert [dict(m) for m in maps] == [{NAME: "EXT-1.0"}]

    def test_or_yields_one_map_per_branch(self):
        maps = to_property_maps(OrPredicate(EqualsPredicate(NAME, "A"), EqualsPredicate(NAME, "B")))
        assert sorted(m[NAME] for m in maps) == ["A", "B"]

    def test_and_distributes_over_or(self):
        predicate = AndPredicate(
            OrPredicate(EqualsPredicate(NAME, "A"), EqualsPredicate(NAME, "B")),
            EqualsPredicate(SIZE, 1),
        )
        maps = [dict(m) for m in to_property_maps(predicate)]
        assert {NAME: "A", SIZE: 1} in maps
        assert {NAME: "B", SIZE: 1} in maps
        assert len(maps) == 2

    def test_non_equality_leaves_do_not_constrain(self):
        maps = to_property_maps(AndPredicate(EqualsPredicate(NAME, "A"), GreaterPredicate(SIZE, 2)))
        assert [dict(m) for m in maps] == [{NAME: "A"}]
        assert [dict(m) for m in to_property_maps(NotPredicate(EqualsPredicate(NAME, "A")))] == [{}]

    def test_contradictory_clause_is_dropped(self):
        predicate = AndPredicate(EqualsPredicate(NAME, "A"), EqualsPredicate(NAME, "B"))
        assert to_property_maps(predicate) == []

    def test_duplicates_are_kept(self):
        predicate = OrPredicate(EqualsPredicate(NAME, "A"), EqualsPredicate(NAME, "A"))
        assert len(to_property_maps(predicate)) == 2

    def test_maps_are_immutable(self):
        (property_map,) = to_property_maps(EqualsPredicate(NAME, "A"))
        with pytest.raises(TypeError):
            property_map[NAME] = "B"
