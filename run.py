"""Entry point for the Rick and Morty character API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example in a
container where you only specify a single Python file to run.

Configuration is read from environment variables; see
``rickandmorty_api.app.core.config`` for the supported names.  Host and
port are read from ``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and
``8000``).

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from rickandmorty_api.app.core.config import settings
from rickandmorty_api.app.main import app


async def main() -> None:
    """Start the API server and wait until it stops."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
