"""
Review store module.
Holds the read-only reviews shown next to a movie's details, keyed by movie id.
"""

import json  # read the reviews file
from collections import defaultdict  # group reviews per movie
from pathlib import Path  # filesystem paths
from typing import Dict, Iterable, List, Optional, Tuple, Union  # type hints

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError  # review schema

from .models import Review  # immutable review value

from loguru import logger  # console logger


class ReviewRecord(BaseModel):
	"""Schema of one review object in the source file."""
	model_config = ConfigDict(strict=True)

	movie_id: int = Field(gt=0, alias='movieId')
	reviewer: str
	rating: float
	comment: str = ''


_REVIEW_LIST = TypeAdapter(List[ReviewRecord])  # validates the whole array at once


class ReviewStore:
	"""
	Read-only reviews grouped by movie identifier.
	"""

	def __init__(self, reviews: Iterable[Review] = ()):
		grouped: Dict[int, List[Review]] = defaultdict(list)
		for review in reviews:  # keep file order within each movie
			grouped[review.movie_id].append(review)
		self._by_movie: Dict[int, Tuple[Review, ...]] = {k: tuple(v) for k, v in grouped.items()}

	@classmethod
	def from_file(cls, source: Optional[Union[str, Path]]) -> "ReviewStore":
		"""Load reviews from a JSON array file; any failure yields an empty store."""
		if source is None:  # nothing configured
			logger.warning("[Reviews] No reviews source configured; serving movies without reviews")
			return cls()

		filepath = Path(source)
		try:
			with open(filepath, 'r', encoding='utf-8') as f:
				records = _REVIEW_LIST.validate_python(json.load(f))
		except (OSError, ValueError, RecursionError, ValidationError) as e:
			logger.error(f"[Reviews] Failed to load reviews from {filepath}: {e}")
			return cls()

		reviews = [Review(movie_id=r.movie_id, reviewer=r.reviewer, rating=r.rating, comment=r.comment) for r in records]
		logger.info(f"[Reviews] Loaded {len(reviews)} reviews from {filepath}")
		return cls(reviews)

	def get_reviews_for_movie(self, movie_id: int) -> List[Review]:
		return list(self._by_movie.get(movie_id, ()))

	def __len__(self) -> int:
		return sum(len(v) for v in self._by_movie.values())
