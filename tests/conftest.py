"""
Shared fixtures: the bundled 12-movie catalog and a small two-movie scenario.
"""

from pathlib import Path

import pytest

from movie_catalog.data_loader import DataLoader
from movie_catalog.models import Catalog, Movie
from movie_catalog.search_engine import MovieSearchEngine

ROOT = Path(__file__).resolve().parents[1]
DATA_PATH = ROOT / 'data' / 'movies.json'
REVIEWS_PATH = ROOT / 'data' / 'reviews.json'


def make_movie(movie_id, title, genre, **overrides):
	values = dict(
		id=movie_id,
		title=title,
		director='Test Director',
		year=2000,
		genre=genre,
		description='Test description',
		duration=120,
		rating=4.5,
	)
	values.update(overrides)
	return Movie(**values)


@pytest.fixture
def scenario_catalog():
	return Catalog.from_movies([
		make_movie(1, 'The Prison Escape', 'Drama'),
		make_movie(2, 'The Family Boss', 'Crime/Drama'),
	])


@pytest.fixture
def scenario_engine(scenario_catalog):
	return MovieSearchEngine(scenario_catalog)


@pytest.fixture(scope='session')
def bundled_catalog():
	return DataLoader().load_catalog(DATA_PATH)


@pytest.fixture
def engine(bundled_catalog):
	return MovieSearchEngine(bundled_catalog)
