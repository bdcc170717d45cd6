"""
Data models for the Movie Catalog Service.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
from functools import cached_property  # compute normalized filters once per criteria
from types import MappingProxyType  # read-only view over the id index
# Import typing helpers for precise and self-documenting types
from typing import Iterable, Mapping, Optional, Tuple  # sequences, mappings and optional values


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie in the catalog.
	Values are frozen once loaded; the catalog is read-only after startup.
	"""
	id: int  # unique positive identifier, the only handle used for indexed lookup
	title: str  # display title as found in the source
	director: str  # director's name
	year: int  # release year (e.g., 1994)
	genre: str  # raw genre text, may hold several genres like "Crime/Drama"
	description: str  # short synopsis
	duration: int  # running time in minutes
	rating: float  # average rating


@dataclass(frozen=True)
class Review:
	"""A single review attached to a movie by its identifier."""
	movie_id: int  # identifier of the reviewed movie
	reviewer: str  # display name of the reviewer
	rating: float  # score given by the reviewer
	comment: str  # free-form review text


@dataclass(frozen=True)
class Catalog:
	"""
	The full load-ordered sequence of movies plus an identifier index.
	Built once at startup and never mutated afterwards.
	"""
	movies: Tuple[Movie, ...] = ()  # load order is preserved
	index: Mapping[int, Movie] = field(default_factory=lambda: MappingProxyType({}), compare=False)  # id -> movie, derived from movies

	@classmethod
	def from_movies(cls, movies: Iterable[Movie]) -> "Catalog":
		"""Build the ordered sequence and its id index in a single pass."""
		ordered = tuple(movies)  # freeze load order
		index = {}  # id -> movie
		for movie in ordered:
			index[movie.id] = movie  # later duplicates overwrite earlier ones
		return cls(movies=ordered, index=MappingProxyType(index))

	@classmethod
	def empty(cls) -> "Catalog":
		"""Catalog with zero movies, used when loading fails."""
		return cls.from_movies(())

	def __len__(self) -> int:
		return len(self.movies)


@dataclass(frozen=True)
class SearchCriteria:
	"""
	The three optional filters of one search request.
	A text filter made only of whitespace counts as absent.
	"""
	name: Optional[str] = None  # title substring filter
	id: Optional[int] = None  # exact identifier filter
	genre: Optional[str] = None  # genre substring filter

	@staticmethod
	def _normalize(text: Optional[str]) -> Optional[str]:
		"""Trim and lowercase a text filter; blank or missing becomes None."""
		if text is None:
			return None
		cleaned = text.strip().lower()
		return cleaned or None

	@cached_property
	def name_filter(self) -> Optional[str]:
		return self._normalize(self.name)

	@cached_property
	def genre_filter(self) -> Optional[str]:
		return self._normalize(self.genre)

	def has_any(self) -> bool:
		"""True if at least one filter asks for something specific."""
		has_name = self.name_filter is not None
		has_id = self.id is not None and self.id > 0
		has_genre = self.genre_filter is not None
		return has_name or has_id or has_genre

	def matches(self, movie: Movie) -> bool:
		"""
		Check one movie against every present filter (logical AND).
		The identifier is checked first as the narrowest filter.
		"""
		if self.id is not None and movie.id != self.id:
			return False
		if self.name_filter is not None and self.name_filter not in movie.title.lower():
			return False
		if self.genre_filter is not None and self.genre_filter not in movie.genre.lower():
			return False
		return True
