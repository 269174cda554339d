"""Entry point for the Employee Portal demo API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example in a
container where you only specify a single Python file to run.

The listen address is taken from the ``HOST`` and ``PORT``
environment variables (defaults ``0.0.0.0`` and ``8080``).  See
``employee_portal_api/app/core/config.py`` for the other supported
variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_portal_api.app.core.config import settings
from employee_portal_api.app.main import app


UVICORN_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def _uvicorn_log_level(level: str) -> str:
    level = level.lower()
    return level if level in UVICORN_LOG_LEVELS else "info"


async def run_server() -> None:
    """Serve the application until the process is stopped.

    If the port cannot be bound, uvicorn logs the error and exits the
    process with a non‑zero status.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=_uvicorn_log_level(settings.log_level),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
