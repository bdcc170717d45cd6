"""
Search engine module.
Answers point lookups and multi-criterion filtered searches over the loaded catalog.
"""

from typing import List, Optional, Tuple, Union  # type annotations for clarity
from pathlib import Path  # accepted by from_file

# Import project modules for data structures and loading
from .models import Catalog, Movie, SearchCriteria  # core data classes
from .data_loader import DataLoader  # one-shot catalog loading

# Import loguru for console logging
from loguru import logger  # simple structured logger

NO_CRITERIA_MESSAGE = "Provide at least one search criterion: name, id or genre."
NO_RESULTS_MESSAGE = "No movies found matching your search criteria. Try adjusting your search terms."


def describe_results(count: int) -> str:
	"""User-facing summary of a search that ran, shared by the API and the UI."""
	if count == 0:
		return NO_RESULTS_MESSAGE
	return f"Found {count} movie{'' if count == 1 else 's'} matching your search."


class MovieSearchEngine:
	"""
	High-level query API over a read-only Catalog.
	The catalog is handed over once at construction and never reloaded.
	"""
	def __init__(self, catalog: Catalog):
		self.catalog = catalog  # immutable movies + id index
		logger.info(f"[Engine] Ready with {len(catalog)} movies")

	@classmethod
	def from_file(cls, source: Optional[Union[str, Path]]) -> "MovieSearchEngine":
		"""Load the catalog from disk and wrap it; a failed load yields an empty engine."""
		return cls(DataLoader().load_catalog(source))

	def get_all(self) -> Tuple[Movie, ...]:
		"""Return every movie in load order."""
		return self.catalog.movies

	def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		"""
		Look up one movie by identifier.
		None and non-positive ids are never valid and skip the index entirely.
		"""
		if movie_id is None or movie_id <= 0:
			logger.debug(f"[Engine] Rejected lookup for invalid id={movie_id}")
			return None
		return self.catalog.index.get(movie_id)

	def has_valid_criteria(self, name: Optional[str] = None, movie_id: Optional[int] = None, genre: Optional[str] = None) -> bool:
		"""Tell whether the caller asked for anything specific. Does not filter the catalog."""
		is_valid = SearchCriteria(name=name, id=movie_id, genre=genre).has_any()
		if not is_valid:
			logger.warning("[Engine] No valid search criteria provided; all parameters are empty or missing")
		return is_valid

	def search(self, name: Optional[str] = None, movie_id: Optional[int] = None, genre: Optional[str] = None) -> List[Movie]:
		"""
		Return every movie matching all given filters, in catalog order.
		With no filters at all this returns the whole catalog.
		"""
		criteria = SearchCriteria(name=name, id=movie_id, genre=genre)  # per-request filter value
		logger.info(f"[Engine] Searching movies | name='{name}' id={movie_id} genre='{genre}'")

		results = [movie for movie in self.catalog.movies if criteria.matches(movie)]  # single linear pass

		logger.info(f"[Engine] Found {len(results)} of {len(self.catalog)} movies matching the criteria")  # summary
		return results
