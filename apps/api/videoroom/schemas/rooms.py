"""Data contracts for the room and token endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateRoomResponse(BaseModel):
    created: bool = Field(..., description="False when the room already existed upstream")
    note: str | None = Field(default=None, description="Why nothing was created")


class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="JWT granting join/publish/subscribe in the room")
    ws_url: str = Field(..., alias="wsUrl", description="LiveKit WebSocket URL for the browser client")


class ErrorResponse(BaseModel):
    error: str
