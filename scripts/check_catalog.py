"""
Check the movie catalog data file.

This script:
1) Loads settings (MOVIE_CATALOG_DATA_PATH, MOVIE_CATALOG_REVIEWS_PATH)
2) Loads the catalog with the same all-or-nothing rules as the API
3) Loads the reviews
4) Logs a short summary of the dataset

Usage:
    python -m scripts.check_catalog

Exits with status 1 when the catalog comes out empty, so it can guard deployments.
"""

import sys  # exit status
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from movie_catalog.config import configure_logging, load_settings  # env-based settings
from movie_catalog.data_loader import DataLoader  # data ingestion
from movie_catalog.reviews import ReviewStore  # review lookups


def main() -> int:
	settings = load_settings()  # resolve paths
	configure_logging(settings.log_level)  # apply level

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Movie Catalog Check")
	logger.info("=" * 60)

	# 1) Load data
	logger.info(f"[1/3] Loading movies from {Path(settings.data_path)}...")
	loader = DataLoader()  # loader instance
	catalog = loader.load_catalog(settings.data_path)  # empty on failure
	if not len(catalog):
		logger.error("[FAIL] Catalog is empty; see the loader error above.")
		return 1
	logger.info(f"[OK] Loaded {len(catalog)} movies ({len(catalog.index)} distinct ids)")

	# 2) Load reviews
	logger.info(f"[2/3] Loading reviews from {Path(settings.reviews_path)}...")
	reviews = ReviewStore.from_file(settings.reviews_path)
	logger.info(f"[OK] Loaded {len(reviews)} reviews")

	# 3) Statistics
	logger.info("[3/3] Dataset statistics")
	years = [m.year for m in catalog.movies]
	logger.info(f"  Genres: {', '.join(loader.get_all_genres(catalog))}")
	logger.info(f"  Directors: {len(loader.get_all_directors(catalog))}")
	logger.info(f"  Year range: {min(years)} - {max(years)}")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke checker
