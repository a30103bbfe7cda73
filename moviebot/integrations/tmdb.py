from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from moviebot.core.config import settings
from moviebot.core.constants import GENRE_TAG_MAPPING
from moviebot.core.exceptions import TMDBError

logger = logging.getLogger(__name__)

TMDB_MOVIE_URL = "https://www.themoviedb.org/movie/{movie_id}"
IMDB_TITLE_URL = "https://www.imdb.com/title/{imdb_id}"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={key}"
TOP_CAST = 5


def _safe_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _extract_year(release_date: Optional[str]) -> Optional[str]:
    # TMDB returns release_date as "YYYY-MM-DD"
    if not release_date:
        return None
    if len(release_date) >= 4 and release_date[:4].isdigit():
        return release_date[:4]
    return None


@dataclass(frozen=True)
class MovieCandidate:
    movie_id: int
    title: str
    year: Optional[str]

    @property
    def choice_label(self) -> str:
        return f"{self.title} ({self.year})" if self.year else self.title


@dataclass(frozen=True)
class MovieDetails:
    movie_id: int
    title: str
    year: Optional[str]
    rating: Optional[float]
    plot: str
    genres: list[str] = field(default_factory=list)
    genre_ids: list[int] = field(default_factory=list)
    cast: list[str] = field(default_factory=list)
    director: Optional[str] = None
    runtime: Optional[int] = None
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    tmdb_url: Optional[str] = None
    imdb_url: Optional[str] = None

    @property
    def external_link_url(self) -> Optional[str]:
        return self.imdb_url

    @property
    def genre_tags(self) -> list[str]:
        """Forum tag names for the genres we map, in TMDB order."""
        tags: list[str] = []
        for gid in self.genre_ids:
            name = GENRE_TAG_MAPPING.get(gid)
            if name and name not in tags:
                tags.append(name)
        return tags


async def _tmdb_get(path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Low-level GET against TMDB v3 (api_key query param).
    Raises TMDBError on any transport, HTTP or payload problem.
    """
    final_params = dict(params or {})
    final_params["api_key"] = settings.tmdb_api_key
    final_params.setdefault("language", settings.tmdb_language)

    timeout = httpx.Timeout(10.0, connect=10.0)
    async with httpx.AsyncClient(base_url=settings.tmdb_base_url, timeout=timeout) as client:
        try:
            resp = await client.get(path, params=final_params)
        except httpx.HTTPError as e:
            raise TMDBError(f"TMDB network error: {e!r}") from e

    if resp.status_code == 401:
        raise TMDBError("TMDB 401 Unauthorized: check TMDB_API_KEY")
    if resp.status_code == 404:
        raise TMDBError(f"TMDB 404 Not Found: {path}")
    if resp.status_code >= 400:
        raise TMDBError(f"TMDB HTTP {resp.status_code}: {resp.text[:300]}")

    try:
        data = resp.json()
    except ValueError as e:
        raise TMDBError("TMDB invalid JSON response") from e

    if not isinstance(data, dict):
        raise TMDBError("TMDB response is not a JSON object")

    return data


# -------------------------
# Public functions
# -------------------------

async def search_movies(query: str) -> list[MovieCandidate]:
    """
    Title search for autocomplete. Returns [] on any failure.
    """
    params: dict[str, Any] = {
        "query": query,
        "page": 1,
        "include_adult": False,
    }
    try:
        data = await _tmdb_get("/search/movie", params=params)
    except TMDBError as e:
        logger.error("TMDB search failed for %r: %s", query, e)
        return []

    return _parse_candidate_list(data.get("results", []))


async def get_movie_details(movie_id: int) -> Optional[MovieDetails]:
    """
    Full details with credits, videos and external ids in one request.
    Returns None when TMDB is unreachable or the movie does not exist.
    """
    try:
        data = await _tmdb_get(
            f"/movie/{movie_id}",
            params={"append_to_response": "credits,videos,external_ids"},
        )
    except TMDBError as e:
        logger.error("TMDB details failed for %s: %s", movie_id, e)
        return None

    details = _parse_details(movie_id, data)
    logger.debug(
        "Movie details fetched id=%s title=%r trailer=%s imdb=%s",
        movie_id, details.title, bool(details.trailer_url), bool(details.imdb_url),
    )
    return details


# -------------------------
# Parsing helpers
# -------------------------

def _parse_candidate_list(results: Any) -> list[MovieCandidate]:
    candidates: list[MovieCandidate] = []
    if not isinstance(results, list):
        return candidates

    for r in results:
        if not isinstance(r, dict):
            continue
        movie_id = _safe_int(r.get("id"))
        title = r.get("title") or r.get("original_title")
        if not movie_id or not title:
            continue
        candidates.append(
            MovieCandidate(
                movie_id=movie_id,
                title=str(title),
                year=_extract_year(r.get("release_date")),
            )
        )
    return candidates


def _parse_details(movie_id: int, data: dict[str, Any]) -> MovieDetails:
    credits = data.get("credits") or {}
    cast_raw = credits.get("cast") or []
    crew_raw = credits.get("crew") or []

    cast = [str(c["name"]) for c in cast_raw[:TOP_CAST] if isinstance(c, dict) and c.get("name")]
    director = next(
        (str(p["name"]) for p in crew_raw if isinstance(p, dict) and p.get("job") == "Director" and p.get("name")),
        None,
    )

    videos = (data.get("videos") or {}).get("results") or []
    trailer = next(
        (v for v in videos if isinstance(v, dict) and v.get("type") == "Trailer" and v.get("site") == "YouTube"),
        None,
    )
    trailer_url = YOUTUBE_WATCH_URL.format(key=trailer["key"]) if trailer and trailer.get("key") else None

    imdb_id = (data.get("external_ids") or {}).get("imdb_id")
    imdb_url = IMDB_TITLE_URL.format(imdb_id=imdb_id) if imdb_id else None

    poster_path = data.get("poster_path")
    poster_url = f"{settings.tmdb_image_base_url}{poster_path}" if poster_path else None

    genres: list[str] = []
    genre_ids: list[int] = []
    for g in data.get("genres") or []:
        if not isinstance(g, dict):
            continue
        if g.get("name"):
            genres.append(str(g["name"]))
        gid = _safe_int(g.get("id"))
        if gid is not None:
            genre_ids.append(gid)

    vote = data.get("vote_average")
    rating = round(float(vote), 1) if vote else None

    resolved_id = _safe_int(data.get("id")) or movie_id

    return MovieDetails(
        movie_id=resolved_id,
        title=str(data.get("title") or data.get("original_title") or ""),
        year=_extract_year(data.get("release_date")),
        rating=rating,
        plot=str(data.get("overview") or "No plot available."),
        genres=genres,
        genre_ids=genre_ids,
        cast=cast,
        director=director,
        runtime=_safe_int(data.get("runtime")),
        poster_url=poster_url,
        trailer_url=trailer_url,
        tmdb_url=TMDB_MOVIE_URL.format(movie_id=resolved_id),
        imdb_url=imdb_url,
    )
