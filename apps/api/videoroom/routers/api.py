"""Room provisioning and token issuance endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..core.config import Settings, get_settings
from ..schemas.rooms import CreateRoomResponse, ErrorResponse, TokenResponse
from ..services import rooms as rooms_service
from ..services import tokens as tokens_service

MISSING_ROOM = "Missing room parameter"

logger = logging.getLogger(__name__)

router = APIRouter()

_missing_room = {400: {"model": ErrorResponse}}


@router.get("/health", tags=["meta"])
async def health() -> dict[str, str]:
    """Simple liveness probe."""

    return {"status": "ok"}


@router.head("/health", tags=["meta"])
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)


@router.get(
    "/create-room",
    response_model=CreateRoomResponse,
    response_model_exclude_none=True,
    responses={**_missing_room, 500: {"model": ErrorResponse}},
    tags=["rooms"],
)
async def create_room(
    room: str | None = None,
    settings: Settings = Depends(get_settings),
) -> CreateRoomResponse:
    """Make sure the room exists on LiveKit; an existing room is not an error."""

    if not room:
        raise HTTPException(status_code=400, detail=MISSING_ROOM)

    try:
        outcome = await rooms_service.ensure_room(room, settings)
    except rooms_service.RoomServiceError as exc:
        logger.exception("Failed to create room %r: %s", room, exc)
        raise HTTPException(status_code=500, detail="Failed to create room") from exc

    return CreateRoomResponse(created=outcome.created, note=outcome.note)


@router.get("/token", response_model=TokenResponse, responses=_missing_room, tags=["rooms"])
async def token(
    room: str | None = None,
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Return a join token for a random identity plus the LiveKit WebSocket URL."""

    if not room:
        raise HTTPException(status_code=400, detail=MISSING_ROOM)

    issued = tokens_service.issue_token(room, settings)
    return TokenResponse(token=issued.token, ws_url=settings.livekit_ws_url)
