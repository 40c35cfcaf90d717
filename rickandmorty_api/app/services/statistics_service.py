"""
Service layer for character statistics.

Statistics are computed in Python over an already decoded collection;
nothing here performs I/O or modifies its input.
"""

from __future__ import annotations

from typing import Iterable

from rickandmorty_api.app.schemas.character import Character


class StatisticsService:
    """Aggregations over character collections."""

    @staticmethod
    def count_matching(characters: Iterable[Character], status: str, species: str) -> int:
        """Count characters with exactly this ``status`` and ``species``.

        Both comparisons are case sensitive and always applied
        together.  An empty collection yields 0.
        """
        return sum(
            1
            for character in characters
            if character.status == status and character.species == species
        )
