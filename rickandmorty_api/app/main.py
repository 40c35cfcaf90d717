"""
Main entrypoint for the Rick and Morty character API.

This module assembles the FastAPI application, sets up logging, builds
the upstream client and services, and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn or another ASGI server, e.g.::

    uvicorn rickandmorty_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .clients.upstream import RickAndMortyClient, UpstreamClient
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.character_repository import CharacterRepository
from .services.character_service import CharacterService


def create_app(
    settings: Optional[Settings] = None,
    upstream: Optional[UpstreamClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    upstream : Optional[UpstreamClient]
        Client used to reach the character API.  When omitted a
        :class:`RickAndMortyClient` is built from ``settings``; tests
        pass a stub here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    owned_client: Optional[RickAndMortyClient] = None
    if upstream is None:
        owned_client = RickAndMortyClient(
            base_url=settings.rickandmorty_api_url,
            timeout=settings.upstream_timeout,
        )
        upstream = owned_client

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Serving characters from %s", settings.rickandmorty_api_url)
        yield
        if owned_client is not None:
            owned_client.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.character_service = CharacterService(CharacterRepository(upstream))

    # The character routes live under /api/characters.
    app.include_router(v1_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
