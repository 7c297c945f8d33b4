"""Entry point for the CRUD Demo API server.

This script starts the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as HOST, PORT, APP_ENV and LOG_LEVEL is read from
environment variables (see ``crud_demo_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from crud_demo_api.app.core.config import settings


async def run_api() -> None:
    """Serve the API using uvicorn on ``settings.host``/``settings.port``."""
    config = Config(
        app="crud_demo_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "%s running in %s on port %s", settings.app_name, settings.environment, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
