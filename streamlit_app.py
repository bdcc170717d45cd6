"""
Streamlit UI for the Movie Catalog.
Calls the FastAPI server (MOVIE_CATALOG_API_URL, default http://localhost:8000) to search the catalog,
or runs the search engine in-process when the API is unreachable.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from movie_catalog.config import load_settings  # env-based settings
from movie_catalog.search_engine import NO_CRITERIA_MESSAGE, MovieSearchEngine, describe_results  # run lookups + searches

settings = load_settings()  # data path and default API URL

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Catalog Search")  # friendly header

# Cache the local engine so we only load the catalog once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> MovieSearchEngine:
	"""Create a local engine; a broken data file gives an empty catalog rather than an error."""
	return MovieSearchEngine.from_file(settings.data_path)


def movie_to_dict(m) -> dict:
	"""Shape a local Movie like the API's MovieOut payload."""
	return {
		"id": m.id,
		"title": m.title,
		"director": m.director,
		"year": m.year,
		"genre": m.genre,
		"description": m.description,
		"duration": m.duration,
		"rating": m.rating,
	}


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", settings.api_url)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[MovieSearchEngine] = None  # placeholder
if use_local or not api_available:
	local_engine = init_local_engine()  # load catalog once
	st.sidebar.success(f"Local engine ready with {len(local_engine.get_all())} movies.")  # success note

# Search form: every field is optional, all given fields must match
col1, col2, col3 = st.columns([3, 1, 2])  # name | id | genre
with col1:
	name = st.text_input("Movie name", placeholder="e.g., prison")
with col2:
	id_text = st.text_input("ID", placeholder="e.g., 2")
with col3:
	genre = st.text_input("Genre", placeholder="e.g., crime")

search_btn = st.button("Search", type="primary")  # triggers a search

if search_btn:
	# An ID that is not a whole number is reported instead of silently ignored
	movie_id: Optional[int] = None
	if id_text.strip():
		try:
			movie_id = int(id_text.strip())
		except ValueError:
			st.error(f"ID must be a whole number, got '{id_text}'")
			st.stop()

	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				# Local mode: mirror the API's search endpoint in this process
				if local_engine.has_valid_criteria(name, movie_id, genre):
					res = local_engine.search(name, movie_id, genre)
					payload = {
						"search_performed": True,
						"no_results": not res,
						"message": describe_results(len(res)),
						"movies": [movie_to_dict(m) for m in res],
					}
				else:
					payload = {
						"search_performed": False,
						"message": NO_CRITERIA_MESSAGE,
						"movies": [movie_to_dict(m) for m in local_engine.get_all()],
					}
			else:
				# API mode: call the server and let it perform the search
				params = {k: v for k, v in {"name": name, "id": movie_id, "genre": genre}.items() if v not in (None, "")}
				resp = requests.get(f"{api_url}/movies/search", params=params, timeout=30)
				resp.raise_for_status()  # raise error if server responded with an error code
				payload = resp.json()  # parse JSON returned by API

			# Report the outcome
			if payload.get("search_performed") and not payload.get("no_results"):
				st.success(payload.get("message", ""))
			else:
				st.warning(payload.get("message", ""))
			st.divider()  # visual separator

			# Render each movie as a details row
			for i, movie in enumerate(payload.get("movies", []), start=1):
				st.subheader(f"{i}. {movie['title']} ({movie['year']})")  # title + year
				st.caption(f"ID {movie['id']} | {movie['genre']} | {movie['duration']} min | Rating {movie['rating']}")
				st.write(f"Director: {movie['director']}")  # director
				st.write(movie['description'])  # synopsis
				st.divider()  # separator

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
