"""
Error types raised by the character query layers.

Three failures can end a query: the upstream could not be reached or
answered with an error status (``UpstreamError``), the upstream body
did not have the expected shape (``DecodeError``), or a by‑id lookup
found nothing (``NotFoundError``).  None of them is recovered inside
the services; the HTTP layer decides how each one is presented.
"""

from __future__ import annotations

from typing import Any, Optional


class RickAndMortyError(Exception):
    """Base class for all errors raised while answering a query."""


class UpstreamError(RickAndMortyError):
    """The upstream request failed or returned a non‑success status.

    ``status_code`` is ``None`` when no HTTP response was received at
    all (connection refused, DNS failure, timeout).
    """

    def __init__(self, cause: str, status_code: Optional[int] = None) -> None:
        self.cause = cause
        self.status_code = status_code
        if status_code is not None:
            message = f"Upstream request failed with status {status_code}: {cause}"
        else:
            message = f"Upstream request failed: {cause}"
        super().__init__(message)


class DecodeError(RickAndMortyError):
    """The upstream body does not match the character schema."""

    def __init__(self, field: Optional[str], raw: Any, reason: str = "") -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        where = f"field '{field}'" if field else "response body"
        message = f"Cannot decode upstream {where}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NotFoundError(RickAndMortyError):
    """No upstream character exists for the requested id."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(f"Character {id} not found")
