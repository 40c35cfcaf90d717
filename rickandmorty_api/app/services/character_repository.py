"""
Repository for upstream character records.

The repository knows the upstream routes (``/character`` and
``/character/{id}``) and what each one is expected to return.  It
performs no filtering of its own: status filtering is delegated to
upstream by passing the value through as a query parameter.
"""

from __future__ import annotations

import logging
from typing import List

from rickandmorty_api.app.clients.upstream import UpstreamClient
from rickandmorty_api.app.core.exceptions import DecodeError, NotFoundError, UpstreamError
from rickandmorty_api.app.schemas.character import Character, CharacterPage


logger = logging.getLogger(__name__)

CHARACTER_PATH = "/character"


class CharacterRepository:
    """Read‑only access to upstream characters."""

    def __init__(self, client: UpstreamClient) -> None:
        self.client = client

    def list_all(self) -> List[Character]:
        """Return every character of the collection endpoint in upstream order."""
        return self._fetch_collection({})

    def get_by_id(self, character_id: int) -> Character:
        """Return the character with ``character_id``.

        Raises ``NotFoundError`` when upstream answers 404 or with an
        empty body.  Upstream never assigns ids below 1, so such ids
        are rejected without a request.
        """
        if character_id < 1:
            raise NotFoundError(character_id)
        try:
            result = self.client.fetch(f"{CHARACTER_PATH}/{character_id}")
        except UpstreamError as exc:
            if exc.status_code == 404:
                logger.warning("Character %s not found upstream", character_id)
                raise NotFoundError(character_id) from exc
            raise
        if result is None:
            logger.warning("Empty upstream body for character %s", character_id)
            raise NotFoundError(character_id)
        if not isinstance(result, Character):
            raise DecodeError("id", result.model_dump(), "expected a single character")
        return result

    def list_by_status(self, status: str) -> List[Character]:
        """Return the characters upstream reports for ``status``, unfiltered."""
        return self._fetch_collection({"status": status})

    def _fetch_collection(self, params: dict) -> List[Character]:
        try:
            result = self.client.fetch(CHARACTER_PATH, params or None)
        except DecodeError as exc:
            # Without ``results`` the client reads the body as a single
            # character; report the missing wrapper instead.
            if isinstance(exc.raw, dict) and "results" not in exc.raw:
                raise DecodeError("results", exc.raw, "collection response has no results") from exc
            raise
        if not isinstance(result, CharacterPage):
            raw = result.model_dump() if result is not None else None
            raise DecodeError("results", raw, "collection response has no results")
        return list(result.results)
