"""
Movie catalog service.
Loads a fixed movie catalog once at startup and answers lookups and filtered searches.
"""

from .models import Catalog, Movie, Review, SearchCriteria  # core data classes
from .data_loader import DataLoader  # catalog loading
from .search_engine import MovieSearchEngine  # query engine
from .reviews import ReviewStore  # review lookups

__all__ = [
	"Catalog",
	"Movie",
	"Review",
	"SearchCriteria",
	"DataLoader",
	"MovieSearchEngine",
	"ReviewStore",
]
