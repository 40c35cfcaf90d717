"""Pytest configuration helpers.

The upstream API is replaced by ``StubSession``, an object with the
same ``request`` signature as ``requests.Session`` that answers from a
queue of canned responses and records every prepared request.  The
responses are real ``requests.Response`` objects, so status handling
and JSON parsing go through the same code as in production.
"""
import json
from typing import Any, List, Optional, Union

import pytest
import requests
from fastapi.testclient import TestClient

from rickandmorty_api.app.clients.upstream import RickAndMortyClient
from rickandmorty_api.app.core.config import Settings
from rickandmorty_api.app.main import create_app
from rickandmorty_api.app.services.character_repository import CharacterRepository
from rickandmorty_api.app.services.character_service import CharacterService


BASE_URL = "http://upstream.test/api"


def make_response(body: Any = None, status_code: int = 200, text: Optional[str] = None) -> requests.Response:
    """Build a ``requests.Response`` carrying ``body`` as JSON (or raw ``text``)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


class StubSession:
    """In-process stand-in for the upstream server."""

    def __init__(self) -> None:
        self.queue: List[Union[requests.Response, Exception]] = []
        self.requests: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []
        self.closed = False

    def enqueue(self, body: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self.queue.append(make_response(body, status_code, text))

    def fail_with(self, exc: Exception) -> None:
        self.queue.append(exc)

    def request(self, method, url, params=None, headers=None, timeout=None, **kwargs):
        prepared = requests.Request(method, url, params=params, headers=headers).prepare()
        self.requests.append(prepared)
        self.timeouts.append(timeout)
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        item.url = prepared.url
        item.request = prepared
        return item

    def close(self) -> None:
        self.closed = True

    @property
    def last_url(self) -> str:
        return self.requests[-1].url


@pytest.fixture
def rick() -> dict:
    return {
        "id": 1,
        "name": "Rick Sanchez",
        "species": "Human",
        "status": "Alive",
        "origin": {"name": "Earth (C-137)", "url": "https://rickandmortyapi.com/api/location/1"},
    }


@pytest.fixture
def einstein() -> dict:
    return {
        "id": 11,
        "name": "Albert Einstein",
        "species": "Human",
        "status": "Dead",
        "origin": {"name": "Earth (C-137)", "url": "https://rickandmortyapi.com/api/location/1"},
    }


@pytest.fixture
def ants() -> dict:
    return {
        "id": 20,
        "name": "Ants in my Eyes Johnson",
        "species": "Human",
        "status": "unknown",
        "origin": {"name": "unknown", "url": ""},
    }


@pytest.fixture
def statistic_payload(rick, einstein, ants) -> dict:
    """Two living humans and one dead human."""
    return {
        "info": {"count": 3},
        "results": [
            {**einstein, "status": "Alive"},
            {**ants, "status": "Alive"},
            {**rick, "status": "Dead"},
        ],
    }


@pytest.fixture
def stub_session() -> StubSession:
    return StubSession()


@pytest.fixture
def upstream(stub_session) -> RickAndMortyClient:
    return RickAndMortyClient(base_url=BASE_URL + "/", timeout=5.0, session=stub_session)


@pytest.fixture
def repository(upstream) -> CharacterRepository:
    return CharacterRepository(upstream)


@pytest.fixture
def service(repository) -> CharacterService:
    return CharacterService(repository)


@pytest.fixture
def api(upstream) -> TestClient:
    settings = Settings(rickandmorty_api_url=BASE_URL, log_level="WARNING")
    return TestClient(create_app(settings, upstream=upstream))
