"""Shared fixtures: explicit settings and an in-memory stand-in for LiveKit."""
from __future__ import annotations

from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from videoroom.core.config import Settings
from videoroom.main import create_app
from videoroom.services import rooms as rooms_service


class FakeRoomService:
    """Mimics the subset of LiveKit's RoomService the server calls."""

    def __init__(self) -> None:
        self.rooms: set[str] = set()
        self.create_calls: list[str] = []
        self.create_error: Exception | None = None

    async def list_rooms(self, request):
        return SimpleNamespace(rooms=[SimpleNamespace(name=name) for name in request.names if name in self.rooms])

    async def create_room(self, request):
        self.create_calls.append(request.name)
        if self.create_error is not None:
            raise self.create_error
        self.rooms.add(request.name)
        return SimpleNamespace(name=request.name)


class FakeLiveKitAPI:
    def __init__(self, room_service: FakeRoomService) -> None:
        self.room = room_service
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        livekit_api_key="devkey",
        livekit_api_secret="devsecret-for-tests-only-0123456789",
        livekit_api_url="https://example.livekit.cloud",
        livekit_ws_url="wss://example.livekit.cloud",
    )


@pytest.fixture
def room_service() -> FakeRoomService:
    return FakeRoomService()


@pytest.fixture
def livekit_clients(monkeypatch, room_service: FakeRoomService) -> list[FakeLiveKitAPI]:
    """Route every LiveKit client the server builds to ``room_service``."""

    clients: list[FakeLiveKitAPI] = []

    def connect_stub(_settings: Settings) -> FakeLiveKitAPI:
        client = FakeLiveKitAPI(room_service)
        clients.append(client)
        return client

    monkeypatch.setattr(rooms_service, "_connect", connect_stub)
    return clients


@pytest_asyncio.fixture
async def client(settings: Settings, livekit_clients):
    transport = ASGITransport(app=create_app(settings))
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
