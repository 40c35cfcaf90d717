"""
Character endpoints for API v1.

These routes expose read‑only queries over the upstream Rick and Morty
characters: the full list, a single character, the characters with a
given status and the number of characters matching a status and a
species.  Handlers are plain functions because the upstream call is
blocking; FastAPI runs them in its thread pool.

Failures raised by the services are translated here:

* ``NotFoundError`` becomes HTTP 404;
* ``UpstreamError`` and ``DecodeError`` become HTTP 502.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status

from rickandmorty_api.app.core.exceptions import DecodeError, NotFoundError, UpstreamError
from rickandmorty_api.app.schemas.character import Character
from rickandmorty_api.app.services.character_service import CharacterService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_character_service(request: Request) -> CharacterService:
    """Return the service built by ``create_app`` for this application."""
    return request.app.state.character_service


def _bad_gateway(exc: Exception) -> HTTPException:
    logger.error("Upstream failure: %s", exc)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


# Fixed paths are declared before ``/{character_id}`` so they are not
# captured by the id route.
@router.get("", response_model=List[Character])
def list_characters(service: CharacterService = Depends(get_character_service)) -> List[Character]:
    """Return all characters of the upstream collection in upstream order."""
    try:
        return service.get_all_characters()
    except (UpstreamError, DecodeError) as exc:
        raise _bad_gateway(exc)


@router.get("/status", response_model=List[Character])
def list_characters_by_status(
    status_value: str = Query(..., alias="status"),
    service: CharacterService = Depends(get_character_service),
) -> List[Character]:
    """Return the characters upstream reports for ``status``.

    Filtering is done by upstream; records are returned exactly as
    received.
    """
    try:
        return service.get_characters_by_status(status_value)
    except (UpstreamError, DecodeError) as exc:
        raise _bad_gateway(exc)


@router.get("/species-statistic", response_model=int)
def get_species_statistic(
    status_value: str = Query(..., alias="status"),
    species: str = Query(...),
    service: CharacterService = Depends(get_character_service),
) -> int:
    """Return the number of characters with both ``status`` and ``species``.

    The body is the bare count (e.g. ``2``), not an object.
    """
    try:
        return service.get_species_statistic(status_value, species)
    except (UpstreamError, DecodeError) as exc:
        raise _bad_gateway(exc)


@router.get("/{character_id}", response_model=Character)
def get_character(
    character_id: int = Path(..., ge=1),
    service: CharacterService = Depends(get_character_service),
) -> Character:
    """Retrieve a single character by ID.

    Returns HTTP 404 if upstream has no such character.
    """
    try:
        return service.get_character_by_id(character_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except (UpstreamError, DecodeError) as exc:
        raise _bad_gateway(exc)
