"""Rick and Morty API client.

This module wraps the public Rick and Morty REST API behind a single
``fetch`` operation.  The client uses the ``requests`` library
internally and decodes every JSON body into the character schemas:

* a body with a top‑level ``results`` field is a collection response
  and becomes a :class:`CharacterPage`;
* any other object is a by‑id response and becomes a
  :class:`Character`;
* an empty body yields ``None`` so callers can decide what "nothing"
  means for their endpoint.

Transport problems and non‑success statuses raise
:class:`UpstreamError`; bodies that do not match the schemas raise
:class:`DecodeError`.  Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, Union

import requests
from pydantic import ValidationError

from rickandmorty_api.app.core.exceptions import DecodeError, UpstreamError
from rickandmorty_api.app.schemas.character import Character, CharacterPage


logger = logging.getLogger(__name__)

FetchResult = Union[CharacterPage, Character, None]


class UpstreamClient(Protocol):
    """Anything able to answer a GET against the character API."""

    def fetch(self, path: str, params: Optional[Dict[str, str]] = None) -> FetchResult:
        ...


class RickAndMortyClient:
    """Client for the upstream character endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g.
                ``https://rickandmortyapi.com/api``.  A trailing slash is
                ignored.
            timeout: Seconds to wait for the upstream to answer.
            session: Optional requests session.  If not supplied a
                session will be created and owned by the client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Release the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, path: str, params: Optional[Dict[str, str]] = None) -> Optional[Any]:
        """Perform a GET request and return the parsed JSON body.

        Args:
            path: Path relative to :attr:`base_url` (e.g. ``/character``).
            params: Query parameters; ``requests`` URL‑encodes them.
        Returns:
            The parsed JSON value, or ``None`` when the body is empty.
        Raises:
            UpstreamError: on connection failures, timeouts and
                non‑2xx statuses.
            DecodeError: when the body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s params=%s", url, params)
            response = self.session.request(
                method="GET",
                url=url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc.response) or str(exc)
            logger.error("Upstream request to %s failed (%s): %s", url, status, message)
            raise UpstreamError(message, status_code=status) from exc
        except requests.RequestException as exc:
            logger.error("Upstream request to %s failed: %s", url, exc)
            raise UpstreamError(str(exc)) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Upstream response from %s is not JSON", url)
            raise DecodeError(None, response.text, "body is not valid JSON") from exc

    # ------------------------------------------------------------------
    # Character operations
    # ------------------------------------------------------------------
    def fetch(self, path: str, params: Optional[Dict[str, str]] = None) -> FetchResult:
        """GET ``path`` and decode the body into character schemas."""
        data = self._request(path, params)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise DecodeError(None, data, "expected a JSON object")
        model = CharacterPage if "results" in data else Character
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or None
            logger.warning("Invalid payload from %s at %s: %s", path, field, error["msg"])
            raise DecodeError(field, data, error["msg"]) from exc


def _error_message(response: Optional[requests.Response]) -> str:
    """Extract the upstream error text, e.g. ``{"error": "Character not found"}``."""
    if response is None:
        return ""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or body)
    return str(body)
