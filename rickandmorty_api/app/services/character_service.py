"""
Query service for the character API.

``CharacterService`` answers the four queries exposed over HTTP.  Three
of them are direct pass‑throughs to the repository.  The species
statistic loads the unfiltered collection and matches status and
species locally, whereas the status listing leaves filtering to
upstream; the two strategies are kept as they are.

Errors from the repository (``UpstreamError``, ``DecodeError``,
``NotFoundError``) propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import List

from rickandmorty_api.app.schemas.character import Character
from rickandmorty_api.app.services.character_repository import CharacterRepository
from rickandmorty_api.app.services.statistics_service import StatisticsService


logger = logging.getLogger(__name__)


class CharacterService:
    """Compose the repository and statistics into API queries."""

    def __init__(
        self,
        repository: CharacterRepository,
        statistics: StatisticsService | None = None,
    ) -> None:
        self.repository = repository
        self.statistics = statistics or StatisticsService()

    def get_all_characters(self) -> List[Character]:
        return self.repository.list_all()

    def get_character_by_id(self, character_id: int) -> Character:
        return self.repository.get_by_id(character_id)

    def get_characters_by_status(self, status: str) -> List[Character]:
        return self.repository.list_by_status(status)

    def get_species_statistic(self, status: str, species: str) -> int:
        """Return how many characters have both ``status`` and ``species``."""
        characters = self.repository.list_all()
        count = self.statistics.count_matching(characters, status, species)
        logger.info(
            "Species statistic status=%s species=%s: %d of %d characters",
            status,
            species,
            count,
            len(characters),
        )
        return count
