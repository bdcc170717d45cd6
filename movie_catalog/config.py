"""
Configuration loading.
Settings come from environment variables; a local .env file is honored for development.
"""

import os  # environment access
import sys  # stderr sink for logging
from dataclasses import dataclass  # plain settings container

from dotenv import load_dotenv  # .env support for local runs
from loguru import logger  # console logger

from .exceptions import ConfigurationError

LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')  # loguru level names


@dataclass(frozen=True)
class Settings:
	# Data files
	data_path: str = 'data/movies.json'
	reviews_path: str = 'data/reviews.json'

	# Logging
	log_level: str = 'INFO'

	# Streamlit client
	api_url: str = 'http://localhost:8000'


def get_optional_env(name: str, default: str) -> str:
	value = os.getenv(name)
	if value is None or not value.strip():
		return default
	return value.strip()


def load_settings() -> Settings:
	"""
	Build Settings from MOVIE_CATALOG_* environment variables.

	:raises: ConfigurationError if the log level is not a known loguru level
	"""
	load_dotenv()  # no-op when there is no .env file

	log_level = get_optional_env('MOVIE_CATALOG_LOG_LEVEL', 'INFO').upper()
	if log_level not in LOG_LEVELS:
		raise ConfigurationError(
			f"MOVIE_CATALOG_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
		)

	return Settings(
		data_path=get_optional_env('MOVIE_CATALOG_DATA_PATH', Settings.data_path),
		reviews_path=get_optional_env('MOVIE_CATALOG_REVIEWS_PATH', Settings.reviews_path),
		log_level=log_level,
		api_url=get_optional_env('MOVIE_CATALOG_API_URL', Settings.api_url).rstrip('/'),
	)


def configure_logging(level: str) -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level)
