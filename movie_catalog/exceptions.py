class MovieCatalogError(Exception):
	"""Base exception for the movie catalog service."""


class CatalogLoadError(MovieCatalogError):
	"""Raised when a record source cannot be turned into movies."""


class ConfigurationError(MovieCatalogError):
	"""Raised when an environment setting is invalid."""
