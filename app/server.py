"""Server bootstrap: bind the fixed address and serve until terminated."""

import logging
import socket
from typing import Optional

import uvicorn
from fastapi import FastAPI
from uvicorn.config import LOG_LEVELS

from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.main import app as default_app

logger = logging.getLogger(__name__)


def build_config(app: FastAPI, settings: Settings) -> uvicorn.Config:
    log_level = settings.log_level.lower()
    if log_level not in LOG_LEVELS:
        log_level = "info"
    return uvicorn.Config(app, host=settings.host, port=settings.port, log_level=log_level)


def bind_listener(config: uvicorn.Config) -> socket.socket:
    """Bind the configured address, exiting with status 1 when it is unavailable."""
    try:
        return config.bind_socket()
    except SystemExit as exc:
        # uvicorn logs the OSError and exits with its own startup-failure code
        raise SystemExit(1) from exc


def serve(app: Optional[FastAPI] = None, settings: Optional[Settings] = None) -> None:
    """Bind the listening socket and serve requests.

    Exits the process with status 1 if the bind fails; there is no retry.
    """
    settings = settings or get_settings()
    if app is None:
        app = default_app

    configure_logging(settings.log_level)
    logger.info("Starting %s on %s", settings.app_name, settings.bind_address)

    app.state.log_level = settings.log_level
    config = build_config(app, settings)
    sock = bind_listener(config)
    uvicorn.Server(config).run(sockets=[sock])


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
