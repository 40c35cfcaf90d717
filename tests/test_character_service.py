import pytest

from rickandmorty_api.app.core.exceptions import NotFoundError, UpstreamError
from rickandmorty_api.app.schemas.character import CharacterPage
from rickandmorty_api.app.services.character_repository import CharacterRepository
from rickandmorty_api.app.services.character_service import CharacterService

from conftest import BASE_URL


class RecordingUpstream:
    """Minimal ``UpstreamClient`` returning a fixed result."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def fetch(self, path, params=None):
        self.calls.append((path, params))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def test_get_all_characters_round_trips_upstream_records(service, stub_session, rick, einstein, ants):
    payload = [ants, rick, einstein]
    stub_session.enqueue({"info": {"count": 3}, "results": payload})

    characters = service.get_all_characters()

    assert [c.model_dump() for c in characters] == payload


def test_get_character_by_id_returns_requested_id(service, stub_session, rick):
    stub_session.enqueue(rick)

    assert service.get_character_by_id(1).id == 1


def test_get_character_by_id_not_found(service, stub_session):
    stub_session.enqueue({"error": "Character not found"}, status_code=404)

    with pytest.raises(NotFoundError):
        service.get_character_by_id(404)


def test_get_characters_by_status_keeps_upstream_mismatches(service, stub_session, rick, einstein):
    stub_session.enqueue({"results": [einstein, rick]})

    characters = service.get_characters_by_status("Dead")

    assert [c.id for c in characters] == [11, 1]


def test_species_statistic_counts_two_living_humans(service, stub_session, statistic_payload):
    stub_session.enqueue(statistic_payload)

    assert service.get_species_statistic("Alive", "Human") == 2


def test_species_statistic_fetches_unfiltered_collection(service, stub_session, statistic_payload):
    stub_session.enqueue(statistic_payload)

    service.get_species_statistic("Alive", "Human")

    assert stub_session.last_url == BASE_URL + "/character"


def test_species_statistic_ignores_info_count(service, stub_session, statistic_payload):
    stub_session.enqueue({**statistic_payload, "info": {"count": 826}})

    assert service.get_species_statistic("Dead", "Human") == 1


def test_any_upstream_client_can_back_the_service(statistic_payload):
    upstream = RecordingUpstream(CharacterPage.model_validate(statistic_payload))
    service = CharacterService(CharacterRepository(upstream))

    assert service.get_species_statistic("Alive", "Human") == 2
    assert upstream.calls == [("/character", None)]


def test_errors_propagate_unchanged():
    error = UpstreamError("connection refused")
    service = CharacterService(CharacterRepository(RecordingUpstream(error)))

    with pytest.raises(UpstreamError) as excinfo:
        service.get_species_statistic("Alive", "Human")

    assert excinfo.value is error
