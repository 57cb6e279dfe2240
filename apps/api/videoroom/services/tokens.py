"""LiveKit access token issuance.

Identities are random and short-lived; two requests may collide, which the
platform tolerates by disconnecting the older participant.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from livekit import api

from ..core.config import Settings

IDENTITY_PREFIX = "user-"
IDENTITY_SPACE = 10_000

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IssuedToken:
    token: str
    identity: str


def generate_identity() -> str:
    return f"{IDENTITY_PREFIX}{secrets.randbelow(IDENTITY_SPACE)}"


def issue_token(room: str, settings: Settings) -> IssuedToken:
    """Sign a token letting a fresh identity join, publish and subscribe in ``room``."""

    identity = generate_identity()
    token = (
        api.AccessToken(settings.livekit_api_key, settings.livekit_api_secret)
        .with_identity(identity)
        .with_grants(
            api.VideoGrants(
                room_join=True,
                room=room,
                can_publish=True,
                can_subscribe=True,
            )
        )
        .to_jwt()
    )

    logger.info("Issued token: room=%s identity=%s", room, identity)
    return IssuedToken(token=token, identity=identity)
