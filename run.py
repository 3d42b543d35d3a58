"""Entry point for the RoomEase API server.

This script launches the FastAPI application under Uvicorn.  It is
intended to be executed from the project root, for example under
Docker or a process manager, where you only specify a single Python
file to run.

Configuration such as JWT_SECRET, STORAGE_BACKEND, DATABASE_URL and
FRONTEND_URL is read from environment variables; see
``roomease_api/app/core/config.py`` for the full list.  Uvicorn's own
log configuration is disabled so its lines go through the handlers
installed by ``setup_logging``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from roomease_api.app.core.config import settings
from roomease_api.app.main import app


async def main() -> None:
    """Serve the API on ``settings.host``/``settings.port`` (defaults ``0.0.0.0:3000``)."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger("roomease_api.run").info("Server stopped")
