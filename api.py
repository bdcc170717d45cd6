"""
FastAPI server exposing the movie catalog API.
Endpoints:
- GET /health: basic health check
- GET /movies: every movie in catalog order
- GET /movies/search?name=...&id=...&genre=...: filtered search
- GET /movies/{id}: a single movie
- GET /movies/{id}/details: a movie with its reviews

Startup loads the catalog and reviews once; a missing or broken data file
leaves the API serving an empty catalog instead of failing to boot.
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # startup hook for FastAPI
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, search and reviews
from movie_catalog.config import configure_logging, load_settings  # env-based settings
from movie_catalog.models import Movie, Review  # core data classes
from movie_catalog.reviews import ReviewStore  # reviews keyed by movie id
from movie_catalog.search_engine import NO_CRITERIA_MESSAGE, MovieSearchEngine, describe_results  # core query engine

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Globals that hold the engine, the review store and measured startup time
ENGINE: Optional[MovieSearchEngine] = None  # will point to the initialized engine
REVIEWS: Optional[ReviewStore] = None  # reviews shown on the details endpoint
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	title: str  # human-readable title
	director: str  # director name
	year: int  # release year
	genre: str  # raw genre text
	description: str  # synopsis
	duration: int  # minutes
	rating: float  # average rating


# Pydantic model for a single review
class ReviewOut(BaseModel):
	reviewer: str
	rating: float
	comment: str


class MovieListResponse(BaseModel):
	count: int  # number of movies returned
	movies: List[MovieOut]  # catalog order


class MovieDetailsResponse(BaseModel):
	movie: MovieOut  # movie metadata
	reviews: List[ReviewOut]  # reviews in file order


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	search_performed: bool  # False when no usable criteria were given
	name: Optional[str] = None  # echoed criteria
	id: Optional[int] = None
	genre: Optional[str] = None
	count: int  # number of movies returned
	no_results: bool  # True if a search ran and matched nothing
	message: str  # human-readable summary or error
	elapsed_ms: float  # server-side search time in ms
	movies: List[MovieOut]  # matches in catalog order


def to_movie_out(movie: Movie) -> MovieOut:
	"""Convert an engine Movie into its response schema."""
	return MovieOut(
		id=movie.id,
		title=movie.title,
		director=movie.director,
		year=movie.year,
		genre=movie.genre,
		description=movie.description,
		duration=movie.duration,
		rating=movie.rating,
	)


def to_review_out(review: Review) -> ReviewOut:
	return ReviewOut(reviewer=review.reviewer, rating=review.rating, comment=review.comment)


def get_engine() -> MovieSearchEngine:
	"""Return the engine or answer 503 while startup has not completed."""
	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Request received but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Search engine is not initialized")
	return ENGINE


# Startup hook to initialize the engine once
@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Load settings, the catalog and reviews, and log how long it took."""
	global ENGINE, REVIEWS, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = load_settings()  # environment-driven paths and log level
	configure_logging(settings.log_level)  # apply log level before loading
	logger.info("[API] Startup: loading movies and reviews...")  # log intent

	ENGINE = MovieSearchEngine.from_file(settings.data_path)  # empty engine if the file is bad
	REVIEWS = ReviewStore.from_file(settings.reviews_path)  # empty store if the file is bad

	# Compute and log startup duration
	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(ENGINE.get_all())} movies.")  # summary log

	yield  # serve requests


# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Catalog API", version="1.0.0", lifespan=lifespan)  # web app


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"movie_count": len(ENGINE.get_all()) if ENGINE is not None else 0,  # 0 after a failed load
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_model=MovieListResponse)
async def list_movies():
	"""Return the whole catalog in load order."""
	logger.info("[API] /movies")
	movies = get_engine().get_all()
	return MovieListResponse(count=len(movies), movies=[to_movie_out(m) for m in movies])


# Search endpoint; declared before /movies/{movie_id} so "search" is not read as an id
@app.get("/movies/search", response_model=SearchResponse)
async def search_movies(
	name: Optional[str] = Query(None, description="Case-insensitive title substring"),
	movie_id: Optional[int] = Query(None, alias="id", description="Exact movie id"),
	genre: Optional[str] = Query(None, description="Case-insensitive genre substring"),
):
	"""Filter the catalog by name, id and genre; all given filters must match."""
	engine = get_engine()
	logger.debug(f"[API] /movies/search name='{name}' id={movie_id} genre='{genre}'")  # debug log of input

	# Without any usable criteria show the full catalog and tell the user why
	if not engine.has_valid_criteria(name, movie_id, genre):
		movies = engine.get_all()
		return SearchResponse(
			search_performed=False,
			count=len(movies),
			no_results=False,
			message=NO_CRITERIA_MESSAGE,
			elapsed_ms=0.0,
			movies=[to_movie_out(m) for m in movies],
		)

	# Time the search for latency insight
	start = time.time()  # start timer
	results = engine.search(name, movie_id, genre)  # run search
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /movies/search served {len(results)} results in {elapsed_ms:.2f} ms")  # summary

	return SearchResponse(
		search_performed=True,
		name=name,
		id=movie_id,
		genre=genre,
		count=len(results),
		no_results=not results,
		message=describe_results(len(results)),
		elapsed_ms=round(elapsed_ms, 2),
		movies=[to_movie_out(m) for m in results],
	)


@app.get("/movies/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: int):
	"""Return a single movie or 404."""
	movie = get_engine().get_by_id(movie_id)
	if movie is None:
		logger.warning(f"[API] Movie with ID {movie_id} not found")
		raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} was not found.")
	return to_movie_out(movie)


@app.get("/movies/{movie_id}/details", response_model=MovieDetailsResponse)
async def get_movie_details(movie_id: int):
	"""Return a movie together with its reviews, or 404."""
	logger.info(f"[API] Fetching details for movie ID: {movie_id}")
	movie = get_engine().get_by_id(movie_id)
	if movie is None:
		logger.warning(f"[API] Movie with ID {movie_id} not found")
		raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} was not found.")

	reviews = REVIEWS.get_reviews_for_movie(movie.id) if REVIEWS is not None else []  # reviews are optional
	return MovieDetailsResponse(movie=to_movie_out(movie), reviews=[to_review_out(r) for r in reviews])
