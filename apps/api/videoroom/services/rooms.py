"""Room provisioning against the LiveKit room service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from livekit import api

from ..core.config import Settings

ROOM_EXISTS_NOTE = "Room already exists"

logger = logging.getLogger(__name__)


class RoomServiceError(RuntimeError):
    """Raised when LiveKit rejects or fails a room request for any reason but a conflict."""


@dataclass(slots=True)
class RoomCreation:
    created: bool
    note: str | None = None


def _connect(settings: Settings) -> api.LiveKitAPI:
    """Build a fresh LiveKit API client; callers must close it."""

    return api.LiveKitAPI(
        url=settings.livekit_api_url,
        api_key=settings.livekit_api_key,
        api_secret=settings.livekit_api_secret,
    )


def _is_conflict(exc: api.TwirpError) -> bool:
    return exc.status == 409 or exc.code == "already_exists"


async def ensure_room(name: str, settings: Settings) -> RoomCreation:
    """Create ``name`` on LiveKit unless a room with that name is already live.

    LiveKit answers CreateRoom for an existing name by returning the room, so
    the lookup comes first; a 409 from the server is treated the same way.
    """

    lkapi = _connect(settings)
    try:
        existing = await lkapi.room.list_rooms(api.ListRoomsRequest(names=[name]))
        if existing.rooms:
            logger.info("Room %r already exists", name)
            return RoomCreation(created=False, note=ROOM_EXISTS_NOTE)

        await lkapi.room.create_room(api.CreateRoomRequest(name=name))
    except api.TwirpError as exc:
        if _is_conflict(exc):
            logger.info("Room %r already exists (conflict)", name)
            return RoomCreation(created=False, note=ROOM_EXISTS_NOTE)
        raise RoomServiceError(f"LiveKit refused to create room {name!r}: {exc.code}") from exc
    except Exception as exc:
        raise RoomServiceError(f"LiveKit room request failed for {name!r}") from exc
    finally:
        await lkapi.aclose()

    logger.info("Created room %r", name)
    return RoomCreation(created=True)
