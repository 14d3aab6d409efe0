import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from movietracker.core.config import settings
from movietracker.exceptions.import_exceptions import (
    MetadataNotFoundError,
    MetadataProviderConfigError,
)

from ..fixtures.omdb import FakeOmdbClient, omdb_payload

MOVIES_URL = f"{settings.API_PREFIX}/movies"
IMPORT_URL = f"{MOVIES_URL}/import"


def test_import_movie(client: TestClient, omdb_client: FakeOmdbClient) -> None:
    r = client.post(
        IMPORT_URL, json={"imdbLink": "https://www.imdb.com/title/tt0111161/"}
    )
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Movie imported successfully"
    movie = body["movie"]
    assert movie["title"] == "The Shawshank Redemption"
    assert movie["type"] == "movie"
    assert movie["genre"] == ["Drama"]
    assert movie["rating"] == 9
    assert movie["watched"] is False
    assert movie["priority"] == 3
    assert movie["review"] == "Two imprisoned men bond over a number of years."
    assert omdb_client.requested_ids == ["tt0111161"]


def test_import_movie_twice_conflicts(
    client: TestClient, omdb_client: FakeOmdbClient
) -> None:
    first = client.post(IMPORT_URL, json={"imdbLink": "tt0111161"})
    assert first.status_code == 201

    second = client.post(IMPORT_URL, json={"imdbLink": "tt0111161"})
    assert second.status_code == 409
    assert second.json()["error"] == "movie_already_exists"
    assert "The Shawshank Redemption" in second.json()["message"]

    assert len(client.get(MOVIES_URL).json()) == 1
    assert omdb_client.requested_ids == ["tt0111161", "tt0111161"]


def test_import_conflicts_with_manual_movie(
    client: TestClient, omdb_client: FakeOmdbClient
) -> None:
    client.post(MOVIES_URL, json={"title": "THE SHAWSHANK REDEMPTION"})

    r = client.post(IMPORT_URL, json={"imdbLink": "tt0111161"})
    assert r.status_code == 409


@pytest.mark.parametrize("payload", [{}, {"imdbLink": ""}, {"imdbLink": None}])
def test_import_missing_link(
    client: TestClient, omdb_client: FakeOmdbClient, payload
) -> None:
    r = client.post(IMPORT_URL, json=payload)
    assert r.status_code == 400
    assert r.json()["error"] == "missing_field"
    assert omdb_client.requested_ids == []


def test_import_invalid_link(
    client: TestClient, omdb_client: FakeOmdbClient
) -> None:
    r = client.post(IMPORT_URL, json={"imdbLink": "https://example.com/movie"})
    assert r.status_code == 400
    assert r.json()["error"] == "invalid_imdb_link"
    assert omdb_client.requested_ids == []


def test_import_not_found(client: TestClient, omdb_client: FakeOmdbClient) -> None:
    r = client.post(IMPORT_URL, json={"imdbLink": "tt9999999"})
    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "movie_not_found"
    assert "tt9999999" in body["message"]
    assert client.get(MOVIES_URL).json() == []


def test_import_provider_unavailable(
    client: TestClient, omdb_client: FakeOmdbClient, mocker: MockerFixture
) -> None:
    mock_logger = mocker.patch("movietracker.exceptions.handlers.logger")
    omdb_client.error = MetadataNotFoundError(
        "tt0111161", "metadata provider unavailable", provider_unavailable=True
    )

    r = client.post(IMPORT_URL, json={"imdbLink": "tt0111161"})
    assert r.status_code == 404
    assert r.json()["error"] == "movie_not_found"
    mock_logger.error.assert_called_once()
    mock_logger.warning.assert_not_called()


def test_import_not_found_logged_as_warning(
    client: TestClient, omdb_client: FakeOmdbClient, mocker: MockerFixture
) -> None:
    mock_logger = mocker.patch("movietracker.exceptions.handlers.logger")

    r = client.post(IMPORT_URL, json={"imdbLink": "tt9999999"})
    assert r.status_code == 404
    mock_logger.warning.assert_called_once()
    mock_logger.error.assert_not_called()


def test_import_oversized_rating(
    client: TestClient, omdb_client: FakeOmdbClient
) -> None:
    omdb_client.payloads["tt0111161"] = omdb_payload(imdbRating="1e30")

    r = client.post(IMPORT_URL, json={"imdbLink": "tt0111161"})
    assert r.status_code == 201
    assert r.json()["movie"]["rating"] is None


def test_import_provider_misconfigured(
    client: TestClient,
    omdb_client: FakeOmdbClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    omdb_client.error = MetadataProviderConfigError()

    r = client.post(IMPORT_URL, json={"imdbLink": "tt0111161"})
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "provider_configuration_error"
    assert body["message"] == "An unexpected error occurred."
    assert client.get(MOVIES_URL).json() == []
