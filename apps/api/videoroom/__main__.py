"""Command-line entrypoint: ``python -m videoroom``."""
from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

from .core.config import get_settings
from .main import create_app

LIVEKIT_FIELDS = ("livekit_api_key", "livekit_api_secret", "livekit_api_url", "livekit_ws_url")

logger = logging.getLogger("videoroom")


def _report_config_errors(exc: ValidationError) -> None:
    missing: list[str] = []
    invalid: list[str] = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else ""
        if err["type"] == "missing" or field in LIVEKIT_FIELDS:
            missing.append(field.upper())
        else:
            invalid.append(f"{field.upper()} ({err['msg']})")

    if missing:
        logger.error("Missing LiveKit environment variables: %s", ", ".join(missing))
    if invalid:
        logger.error("Invalid configuration: %s", ", ".join(invalid))


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.ERROR)
        _report_config_errors(exc)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    logger.info("Server listening on port %d (%s)", settings.port, settings.app_env)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
