"""Shared fixtures: a TrackerApp wired to the in-process fake remote resource."""

import httpx
import pytest

from api.client import RemoteClient
from fake_remote import BASE_URL, ROGUE, WIZARD, FakeRemote, build_remote_app
from main import TrackerApp


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote(players=[ROGUE, WIZARD])


@pytest.fixture
def client(remote) -> RemoteClient:
    """RemoteClient wired to the fake resource through an ASGI transport."""
    transport = httpx.ASGITransport(app=build_remote_app(remote))
    return RemoteClient(BASE_URL, http=httpx.AsyncClient(transport=transport))


@pytest.fixture
def alerts() -> list[str]:
    """Collects blocking notifications."""
    return []


@pytest.fixture
def app(client, alerts) -> TrackerApp:
    return TrackerApp(client=client, notify=alerts.append)
