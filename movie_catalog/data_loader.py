"""
Data loading module.
Reads the movie catalog from a JSON (or JSON Lines) file and validates every record.
Loading is all-or-nothing: any problem leaves the service with an empty catalog.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON documents
from typing import Any, List, Optional, Sequence, Union  # type hints
from pathlib import Path  # filesystem-safe paths

# Pydantic validates the raw records with strict types
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError  # record schema

# Import our data classes and errors used across the project
from .models import Catalog, Movie  # structured movie record + indexed catalog
from .exceptions import CatalogLoadError  # raised by strict parsing

# Console logging
from loguru import logger  # console logger


class MovieRecord(BaseModel):
	"""
	Schema of one movie object in the source file.
	Strict mode rejects numeric strings and booleans where integers are expected.
	"""
	model_config = ConfigDict(strict=True, frozen=True)

	id: int = Field(gt=0)  # positive identifier
	title: str = Field(min_length=1, validation_alias=AliasChoices('movieName', 'name', 'title'))  # display title
	director: str  # director's name
	year: int  # release year
	genre: str  # raw genre text, e.g. "Crime/Drama"
	description: str  # synopsis
	duration: int  # minutes
	rating: float = Field(validation_alias=AliasChoices('imdbRating', 'rating'))  # ints accepted too

	def to_movie(self) -> Movie:
		"""Convert the validated record into the immutable Movie used by the engine."""
		return Movie(
			id=self.id,
			title=self.title,
			director=self.director,
			year=self.year,
			genre=self.genre,
			description=self.description,
			duration=self.duration,
			rating=self.rating,
		)


class DataLoader:
	"""
	Handles loading movie data into a read-only Catalog.
	"""

	def load_catalog(self, source: Optional[Union[str, Path]]) -> Catalog:
		"""
		Load a catalog from a JSON array file or a JSON Lines file.
		Never raises for bad input: failures are logged and an empty Catalog is returned.
		"""
		if source is None:  # nothing configured
			logger.error("[DataLoader] No movie data source configured; starting with an empty catalog")
			return Catalog.empty()

		filepath = Path(source)  # normalize path
		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		try:
			records = self._read_records(filepath)  # raw dicts from disk
			movies = self.parse_records(records)  # strict conversion
		except (OSError, ValueError, CatalogLoadError) as e:
			logger.error(f"[DataLoader] Failed to load movies from {filepath}: {e}")  # operator diagnostic
			return Catalog.empty()  # degrade, never fail startup

		catalog = Catalog.from_movies(movies)  # build ordered sequence + index
		logger.info(f"[DataLoader] Successfully loaded {len(catalog)} movies.")  # summary
		return catalog

	def build_catalog(self, records: Sequence[Any]) -> Catalog:
		"""Build a catalog from records already in memory, with the same all-or-nothing rule."""
		try:
			movies = self.parse_records(records)
		except CatalogLoadError as e:
			logger.error(f"[DataLoader] Failed to build catalog: {e}")
			return Catalog.empty()
		return Catalog.from_movies(movies)

	def parse_records(self, records: Sequence[Any]) -> List[Movie]:
		"""
		Convert raw dictionaries into Movie objects.
		Raises CatalogLoadError on the first record that is missing a field or has a mistyped one.
		"""
		if not isinstance(records, (list, tuple)):  # top level must be a sequence of objects
			raise CatalogLoadError(f"Expected a sequence of movie objects, got {type(records).__name__}")

		movies = []  # accumulator for parsed Movie objects
		for position, data in enumerate(records):  # keep position for diagnostics
			if not isinstance(data, dict):
				raise CatalogLoadError(f"Movie record at position {position} is not an object")
			try:
				record = MovieRecord.model_validate(data)  # strict field validation
			except ValidationError as e:
				fields = ', '.join(str(err['loc'][0]) for err in e.errors() if err['loc'])  # offending fields
				raise CatalogLoadError(f"Invalid movie record at position {position} (fields: {fields})") from e
			movies.append(record.to_movie())  # collect
		return movies

	def _read_records(self, filepath: Path) -> Any:
		"""Read the raw JSON payload; .jsonl files hold one object per line."""
		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		with open(filepath, 'r', encoding='utf-8') as f:
			try:
				if filepath.suffix.lower() == '.jsonl':
					return [json.loads(line) for line in f if line.strip()]  # skip blank lines only
				return json.load(f)  # single JSON array
			except RecursionError as e:  # nesting deeper than the decoder can follow
				raise CatalogLoadError(f"Movie data in {filepath} is nested too deeply to parse") from e

	def get_all_genres(self, catalog: Catalog) -> List[str]:
		"""Return a sorted list of the distinct genre names, splitting "A/B" genre text."""
		genres = set()  # unique genres
		for movie in catalog.movies:  # iterate dataset
			genres.update(g.strip() for g in movie.genre.split('/') if g.strip())
		return sorted(genres)  # sorted output

	def get_all_directors(self, catalog: Catalog) -> List[str]:
		"""Return a sorted list of all unique director names in the catalog."""
		return sorted({m.director for m in catalog.movies if m.director})
