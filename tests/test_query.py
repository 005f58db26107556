import pytest

from resource_plane.core.errors import NoSuchResourceError
from resource_plane.core.predicate import NotPredicate, EqualsPredicate
from resource_plane.core.query import QueryRunner
from resource_plane.extensions.provider import EXTENSION_NAME_PROPERTY_ID as E


def test_post_filters_with_full_predicate(provider, controller):
    runner = QueryRunner(provider)
    resources = runner.get_resources(predicate=NotPredicate(EqualsPredicate(E, "EXT-1.0")))
    assert [r.get_property(E) for r in resources] == ["EXT-2.0"]
    assert len(controller.get_calls) == 1


def test_get_resource_by_key(provider):
    assert QueryRunner(provider).get_resource("EXT-2.0").get_property(E) == "EXT-2.0"


def test_single_lookup_raises_when_missing(provider):
    with pytest.raises(NoSuchResourceError):
        QueryRunner(provider).get_resource("EXT-9.9")
