"""Entry point for serving the Customer Location API.

Host, port and log level are taken from the application settings
(``HOST``, ``PORT`` and ``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from customer_location_api.app.core.config import settings
from customer_location_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
