"""
Pydantic models for character data.

A ``Character`` mirrors one record of the upstream API, restricted to
the fields this service exposes.  ``CharacterPage`` wraps the
``results`` list returned by collection endpoints together with the
optional ``info`` block.  Models are frozen so a decoded record cannot
be modified, and field types are strict so ``"20"`` is rejected as an
id instead of being coerced.  Extra upstream fields (``gender``,
``image``, ``episode`` ...) are ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class Origin(BaseModel):
    """Location a character comes from.

    ``url`` is an empty string when the upstream location is unknown.
    """

    name: StrictStr = Field(..., examples=["Earth (C-137)"])
    url: StrictStr = Field(..., examples=["https://rickandmortyapi.com/api/location/1"])

    model_config = {"frozen": True}


class Character(BaseModel):
    """Schema for a single character record."""

    id: StrictInt = Field(..., examples=[1])
    name: StrictStr = Field(..., examples=["Rick Sanchez"])
    species: StrictStr = Field(..., examples=["Human"])
    # Passed through as given; upstream uses "Alive", "Dead" and "unknown".
    status: StrictStr = Field(..., examples=["Alive"])
    origin: Origin

    model_config = {"frozen": True}


class PageInfo(BaseModel):
    """Paging metadata of a collection response.

    Only ``count`` is part of the documented contract.  Nothing in the
    service relies on these values.
    """

    count: StrictInt
    pages: Optional[StrictInt] = None
    next: Optional[StrictStr] = None
    prev: Optional[StrictStr] = None

    model_config = {"frozen": True}


class CharacterPage(BaseModel):
    """Schema for a collection response (``{"results": [...], "info": {...}}``)."""

    results: List[Character]
    info: Optional[PageInfo] = None

    model_config = {"frozen": True}
