"""Application configuration for the video room server."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    The four LiveKit values have no defaults: the process must not start
    without them.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    livekit_api_key: str = Field(..., min_length=1)
    livekit_api_secret: str = Field(..., min_length=1)
    livekit_api_url: str = Field(..., min_length=1)
    livekit_ws_url: str = Field(..., min_length=1)

    app_env: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated env values for CORS origins."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
