"""Entry point for the CityEase API server.

Serves ``cityease_api.app.main:app`` with Uvicorn.  Host, port,
database location and the token signing secret are read from the
environment (or a ``.env`` file in this directory); see
``cityease_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from cityease_api.app.core.config import settings
from cityease_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Logging is configured by the app; keep uvicorn from installing its own.
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "CityEase backend running on http://%s:%s (API under /api)", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
