"""
Top‑level router for version 1 of the API.

The character routes are published under ``/characters``; the
application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import characters

router = APIRouter()

router.include_router(characters.router, prefix="/characters", tags=["characters"])
