"""
Tests for environment-driven settings.
"""

import pytest

from movie_catalog.config import Settings, load_settings
from movie_catalog.exceptions import ConfigurationError

ENV_VARS = (
	"MOVIE_CATALOG_DATA_PATH",
	"MOVIE_CATALOG_REVIEWS_PATH",
	"MOVIE_CATALOG_LOG_LEVEL",
	"MOVIE_CATALOG_API_URL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
	for name in ENV_VARS:
		monkeypatch.delenv(name, raising=False)


def test_defaults():
	assert load_settings() == Settings()


def test_overrides(monkeypatch):
	monkeypatch.setenv("MOVIE_CATALOG_DATA_PATH", "/srv/movies.json")
	monkeypatch.setenv("MOVIE_CATALOG_LOG_LEVEL", "debug")
	monkeypatch.setenv("MOVIE_CATALOG_API_URL", "http://catalog:9000/")
	settings = load_settings()
	assert settings.data_path == "/srv/movies.json"
	assert settings.log_level == "DEBUG"
	assert settings.api_url == "http://catalog:9000"


def test_blank_values_fall_back_to_defaults(monkeypatch):
	monkeypatch.setenv("MOVIE_CATALOG_DATA_PATH", "   ")
	assert load_settings().data_path == Settings.data_path


def test_unknown_log_level(monkeypatch):
	monkeypatch.setenv("MOVIE_CATALOG_LOG_LEVEL", "LOUD")
	with pytest.raises(ConfigurationError):
		load_settings()
