"""Entry point for the Sport Community API.

Launches the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example under Docker, where you only specify
a single Python file to run.

Configuration (JWT_SECRET, DATABASE_URL, UPLOAD_DIR, HOST, PORT, ...)
is read from the environment or from a ``.env`` file in the same
directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from sport_community_api.app.main import app


async def main() -> None:
    """Serve the API on the configured host and port."""
    settings = app.state.settings
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting server on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
