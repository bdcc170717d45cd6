"""
Tests for the FastAPI surface using TestClient.
"""

import pytest
from fastapi.testclient import TestClient

import api
from movie_catalog.models import Review
from movie_catalog.reviews import ReviewStore
from movie_catalog.search_engine import NO_RESULTS_MESSAGE, MovieSearchEngine

from conftest import DATA_PATH, REVIEWS_PATH


@pytest.fixture
def client(monkeypatch, engine):
	monkeypatch.setattr(api, "ENGINE", engine)
	monkeypatch.setattr(api, "REVIEWS", ReviewStore([
		Review(movie_id=1, reviewer="Sarah Chen", rating=5.0, comment="Hopeful."),
	]))
	return TestClient(api.app)


def test_health(client):
	body = client.get("/health").json()
	assert body["status"] == "ok"
	assert body["engine_ready"] is True
	assert body["movie_count"] == 12


def test_list_movies(client):
	body = client.get("/movies").json()
	assert body["count"] == 12
	assert body["movies"][0]["title"] == "The Prison Escape"


def test_get_movie(client):
	resp = client.get("/movies/2")
	assert resp.status_code == 200
	assert resp.json()["title"] == "The Family Boss"


@pytest.mark.parametrize("movie_id", [0, -1, 999])
def test_get_movie_not_found(client, movie_id):
	resp = client.get(f"/movies/{movie_id}")
	assert resp.status_code == 404
	assert f"Movie with ID {movie_id} was not found." == resp.json()["detail"]


def test_movie_details_include_reviews(client):
	body = client.get("/movies/1/details").json()
	assert body["movie"]["id"] == 1
	assert [r["reviewer"] for r in body["reviews"]] == ["Sarah Chen"]


def test_movie_details_without_reviews(client):
	body = client.get("/movies/3/details").json()
	assert body["reviews"] == []


def test_movie_details_not_found(client):
	assert client.get("/movies/999/details").status_code == 404


def test_search_by_name(client):
	body = client.get("/movies/search", params={"name": "Prison"}).json()
	assert body["search_performed"] is True
	assert body["no_results"] is False
	assert body["count"] == 1
	assert body["movies"][0]["title"] == "The Prison Escape"
	assert body["message"] == "Found 1 movie matching your search."


def test_search_case_insensitive(client):
	body = client.get("/movies/search", params={"name": "FAMILY"}).json()
	assert [m["title"] for m in body["movies"]] == ["The Family Boss"]


def test_search_combined(client):
	body = client.get("/movies/search", params={"name": "Family", "id": 2, "genre": "Crime"}).json()
	assert [m["id"] for m in body["movies"]] == [2]
	assert body["id"] == 2
	assert body["genre"] == "Crime"


def test_search_plural_message(client):
	body = client.get("/movies/search", params={"genre": "Action"}).json()
	assert body["count"] > 1
	assert body["message"] == f"Found {body['count']} movies matching your search."


def test_search_no_results(client):
	body = client.get("/movies/search", params={"name": "NonExistentMovie"}).json()
	assert body["search_performed"] is True
	assert body["no_results"] is True
	assert body["movies"] == []
	assert body["message"] == NO_RESULTS_MESSAGE


@pytest.mark.parametrize("params", [{}, {"name": "  "}, {"id": 0}, {"name": "", "genre": ""}])
def test_search_without_criteria_lists_everything(client, params):
	body = client.get("/movies/search", params=params).json()
	assert body["search_performed"] is False
	assert body["count"] == 12
	assert "at least one search criterion" in body["message"]


def test_search_rejects_non_numeric_id(client):
	assert client.get("/movies/search", params={"id": "abc"}).status_code == 422


def test_engine_not_ready(monkeypatch):
	monkeypatch.setattr(api, "ENGINE", None)
	client = TestClient(api.app)
	assert client.get("/movies").status_code == 503
	assert client.get("/health").json()["engine_ready"] is False


def test_startup_loads_configured_files(monkeypatch):
	monkeypatch.setattr(api, "ENGINE", None)
	monkeypatch.setattr(api, "REVIEWS", None)
	monkeypatch.setenv("MOVIE_CATALOG_DATA_PATH", str(DATA_PATH))
	monkeypatch.setenv("MOVIE_CATALOG_REVIEWS_PATH", str(REVIEWS_PATH))
	with TestClient(api.app) as client:
		assert client.get("/health").json()["movie_count"] == 12
		assert len(client.get("/movies/1/details").json()["reviews"]) == 2


def test_startup_with_broken_data_serves_empty_catalog(monkeypatch, tmp_path):
	bad = tmp_path / 'movies.json'
	bad.write_text('not json', encoding='utf-8')
	monkeypatch.setattr(api, "ENGINE", None)
	monkeypatch.setattr(api, "REVIEWS", None)
	monkeypatch.setenv("MOVIE_CATALOG_DATA_PATH", str(bad))
	monkeypatch.setenv("MOVIE_CATALOG_REVIEWS_PATH", str(tmp_path / 'missing.json'))
	with TestClient(api.app) as client:
		health = client.get("/health").json()
		assert health["engine_ready"] is True
		assert health["movie_count"] == 0
		assert client.get("/movies/1").status_code == 404
		assert client.get("/movies/search", params={"name": "Prison"}).json()["no_results"] is True
	assert isinstance(api.ENGINE, MovieSearchEngine)
