import pytest

from resource_plane.core.errors import ValidationError
from resource_plane.core.provider.notifier import ChangeNotifier
from resource_plane.core.provider.registry import create_provider, register_provider, registered_types
from resource_plane.core.resource import ResourceType
from resource_plane.extensions.provider import ExtensionResourceProvider


def test_extension_provider_is_registered(controller):
    assert ResourceType.EXTENSION in registered_types()
    provider = create_provider(ResourceType.EXTENSION, controller, ChangeNotifier())
    assert isinstance(provider, ExtensionResourceProvider)


def test_unregistered_type_raises(controller):
    with pytest.raises(ValidationError):
        create_provider(ResourceType.REQUEST, controller, ChangeNotifier())


def test_conflicting_registration_raises():
    with pytest.raises(ValidationError):
        register_provider(ResourceType.EXTENSION, lambda controller, notifier: None)
