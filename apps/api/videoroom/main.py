"""FastAPI application for the LiveKit video room server."""
from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import Settings, get_settings
from .routers import api as api_router
from .routers import pages as pages_router

STATIC_DIR = Path(__file__).parent / "static"


async def _error_body(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": message}``."""

    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around an explicit settings object.

    Without ``settings`` the environment is read, raising
    ``pydantic.ValidationError`` when any LiveKit value is missing.
    """

    if settings is None:
        settings = get_settings()

    app = FastAPI(title="LiveKit Video Room", version=__version__)
    app.dependency_overrides[get_settings] = lambda: settings

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(StarletteHTTPException, _error_body)

    app.mount("/css", StaticFiles(directory=STATIC_DIR / "css"), name="css")
    app.include_router(pages_router.router)
    app.include_router(api_router.router, prefix="/api")

    return app
