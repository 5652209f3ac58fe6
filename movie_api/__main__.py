"""Entry point for serving the Movie API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables via ``Settings``; defaults are ``0.0.0.0`` and ``3000``.

Usage:
    python -m movie_api
"""
import asyncio
import logging

from uvicorn import Config, Server
from uvicorn.config import LOG_LEVELS

from movie_api.app.core.config import settings
from movie_api.app.main import app


def uvicorn_log_level(level: str) -> str:
    """Map a logging level name onto one uvicorn accepts.

    Unknown names fall back to ``info``, as ``setup_logging`` does.
    """
    name = level.lower()
    return name if name in LOG_LEVELS else "info"


async def serve() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=uvicorn_log_level(settings.log_level),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
