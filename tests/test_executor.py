import pytest

from resource_plane.controller.errors import ControllerError, ObjectNotFoundError, ParentObjectNotFoundError
from resource_plane.core.errors import (
    FailureKind,
    NoSuchParentResourceError,
    NoSuchResourceError,
    ResourceSystemError,
)
from resource_plane.core.provider.executor import execute, translate_failure


def test_success_returns_response_untouched():
    response = object()
    assert execute(lambda: response) is response


def test_command_invoked_exactly_once():
    calls = []
    execute(lambda: calls.append(1))
    assert calls == [1]


def test_controller_error_becomes_system_error_with_cause():
    original = ControllerError("boom")

    def command():
        raise original

    with pytest.raises(ResourceSystemError) as excinfo:
        execute(command)
    assert excinfo.value.__cause__ is original
    assert excinfo.value.cause is original
    assert excinfo.value.kind is FailureKind.SYSTEM


@pytest.mark.parametrize("exc, expected, kind", [
    (ObjectNotFoundError("x"), NoSuchResourceError, FailureKind.NO_SUCH_RESOURCE),
    (ParentObjectNotFoundError("x"), NoSuchParentResourceError, FailureKind.NO_SUCH_PARENT_RESOURCE),
    (ControllerError("x"), ResourceSystemError, FailureKind.SYSTEM),
])
def test_translate_failure(exc, expected, kind):
    error = translate_failure(exc)
    assert isinstance(error, expected)
    assert error.kind is kind


def test_non_domain_errors_propagate_unchanged():
    def command():
        raise KeyError("bug")

    with pytest.raises(KeyError):
        execute(command)
