"""
Fixtures compartidas: controlador falso que registra llamadas y provider de extensiones.
"""

import pytest

from resource_plane.controller.models import ExtensionResponse, RequestStatusResponse
from resource_plane.core.provider.notifier import ChangeNotifier
from resource_plane.extensions.provider import ExtensionResourceProvider


class FakeController:
    """ManagementController en memoria que guarda cada invocación."""

    def __init__(self, names=(), update_response=None, error=None):
        self.names = set(names)
        self.update_response = update_response or RequestStatusResponse()
        self.error = error
        self.get_calls = []
        self.update_calls = 0

    def get_extensions(self, requests):
        self.get_calls.append(set(requests))
        if self.error:
            raise self.error
        out = set()
        for request in requests:
            if request.extension_name is None:
                out.update(self.names)
            elif request.extension_name in self.names:
                out.add(request.extension_name)
        return {ExtensionResponse(extension_name=n) for n in out}

    def update_stacks(self):
        self.update_calls += 1
        if self.error:
            raise self.error
        return self.update_response


@pytest.fixture
def controller():
    return FakeController(names={"EXT-1.0", "EXT-2.0"})


@pytest.fixture
def events():
    return []


@pytest.fixture
def notifier(events):
    n = ChangeNotifier()
    n.add_observer(events.append)
    return n


@pytest.fixture
def provider(controller, notifier):
    return ExtensionResourceProvider(controller, notifier)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """cwd y HOME aislados, sin variables del Resource Plane."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    # setenv antes de delenv para que el teardown también borre lo que cargue load_dotenv
    for name in ("RESOURCE_PLANE_CATALOG", "RESOURCE_PLANE_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "extensions.yaml"
    path.write_text("extensions:\n  - extension_name: EXT-1.0\n  - extension_name: EXT-2.0\n")
    return path
