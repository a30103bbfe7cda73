from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from moviebot.core.config import settings
from moviebot.core.constants import (
    MEDIA_STATUS_AVAILABLE,
    MEDIA_STATUS_PARTIALLY_AVAILABLE,
    MEDIA_STATUS_PENDING,
    MEDIA_STATUS_PROCESSING,
    REQUESTS_FETCH_LIMIT,
)
from moviebot.core.exceptions import OverseerrError

logger = logging.getLogger(__name__)

NOT_CONFIGURED_ERROR = "Overseerr is not configured"

_STATUS_ERRORS = {
    409: "This movie has already been requested",
    403: "You don't have permission to request movies",
    429: "You've reached your request quota",
}


@dataclass(frozen=True)
class Availability:
    available: bool = False
    requested: bool = False
    processing: bool = False


@dataclass(frozen=True)
class RequestResult:
    success: bool
    request_id: Optional[int] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class MediaRequest:
    request_id: int
    status: int
    movie_id: Optional[int]
    title: Optional[str]
    is_4k: bool = False


@dataclass(frozen=True)
class OverseerrUser:
    user_id: int
    display_name: Optional[str]
    email: Optional[str]
    plex_username: Optional[str]

    @property
    def label(self) -> str:
        return self.display_name or self.plex_username or self.email or str(self.user_id)


@dataclass(frozen=True)
class ConnectionStatus:
    success: bool
    version: Optional[str] = None
    error: Optional[str] = None


def is_configured() -> bool:
    return settings.overseerr_configured


async def _overseerr_request(
    method: str,
    path: str,
    params: Optional[dict[str, Any]] = None,
    json: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """
    Low-level call to the Overseerr v1 API.
    Raises OverseerrError carrying the HTTP status and decoded body when possible.
    """
    if not is_configured():
        raise OverseerrError(NOT_CONFIGURED_ERROR)

    timeout = httpx.Timeout(float(settings.overseerr_timeout_secs))
    headers = {"X-Api-Key": settings.overseerr_api_key or "", "Content-Type": "application/json"}
    async with httpx.AsyncClient(base_url=settings.overseerr_url or "", headers=headers, timeout=timeout) as client:
        try:
            resp = await client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise OverseerrError(f"Overseerr network error: {e!r}") from e

    payload: Any
    try:
        payload = resp.json()
    except ValueError:
        payload = None

    if resp.status_code >= 400:
        raise OverseerrError(
            f"Overseerr HTTP {resp.status_code} on {method} {path}",
            status_code=resp.status_code,
            payload=payload if isinstance(payload, dict) else None,
        )

    if not isinstance(payload, dict):
        raise OverseerrError("Overseerr response is not a JSON object")

    return payload


# -------------------------
# Public functions
# -------------------------

async def get_movie_status(movie_id: int) -> Availability:
    """
    Availability of a TMDB movie on the media server.
    Unknown movies (404) and every failure read as "nothing known".
    """
    if not is_configured():
        return Availability()

    try:
        data = await _overseerr_request("GET", f"/api/v1/movie/{movie_id}")
    except OverseerrError as e:
        if e.status_code == 404:
            logger.debug("Movie %s not known to Overseerr", movie_id)
        else:
            logger.warning("Overseerr status lookup failed for %s: %s", movie_id, e)
        return Availability()

    media_info = data.get("mediaInfo") or {}
    status = media_info.get("status") or 0

    availability = Availability(
        available=status in (MEDIA_STATUS_AVAILABLE, MEDIA_STATUS_PARTIALLY_AVAILABLE),
        requested=MEDIA_STATUS_PENDING <= status < MEDIA_STATUS_AVAILABLE,
        processing=status == MEDIA_STATUS_PROCESSING,
    )
    logger.debug("Overseerr status for %s: status=%s %s", movie_id, status, availability)
    return availability


async def create_movie_request(movie_id: int, overseerr_user_id: int, is_4k: bool = False) -> RequestResult:
    if not is_configured():
        return RequestResult(success=False, error=NOT_CONFIGURED_ERROR)

    body = {
        "mediaType": "movie",
        "mediaId": int(movie_id),
        "is4k": is_4k,
        "userId": int(overseerr_user_id),
    }
    try:
        data = await _overseerr_request("POST", "/api/v1/request", json=body)
    except OverseerrError as e:
        logger.error("Overseerr request failed for movie %s: %s", movie_id, e)
        return RequestResult(success=False, error=_request_error_message(e))

    logger.info(
        "Overseerr request created for movie %s by user %s%s",
        movie_id, overseerr_user_id, " (4K)" if is_4k else "",
    )
    return RequestResult(success=True, request_id=data.get("id"))


def _request_error_message(error: OverseerrError) -> str:
    if error.payload and error.payload.get("message"):
        return str(error.payload["message"])
    if error.status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[error.status_code]
    return "Failed to create request"


async def get_user_requests(overseerr_user_id: int) -> list[MediaRequest]:
    if not is_configured():
        return []

    params = {
        "take": REQUESTS_FETCH_LIMIT,
        "skip": 0,
        "filter": "all",
        "sort": "added",
        "requestedBy": int(overseerr_user_id),
    }
    try:
        data = await _overseerr_request("GET", "/api/v1/request", params=params)
    except OverseerrError as e:
        logger.error("Overseerr requests lookup failed for user %s: %s", overseerr_user_id, e)
        return []

    requests: list[MediaRequest] = []
    for r in data.get("results") or []:
        if not isinstance(r, dict) or r.get("id") is None:
            continue
        media = r.get("media") or {}
        requests.append(
            MediaRequest(
                request_id=int(r["id"]),
                status=int(r.get("status") or 0),
                movie_id=media.get("tmdbId"),
                title=media.get("title"),
                is_4k=bool(r.get("is4k")),
            )
        )
    return requests


async def get_all_users() -> list[OverseerrUser]:
    if not is_configured():
        return []

    try:
        data = await _overseerr_request("GET", "/api/v1/user")
    except OverseerrError as e:
        logger.error("Overseerr user list failed: %s", e)
        return []

    users: list[OverseerrUser] = []
    for u in data.get("results") or []:
        if not isinstance(u, dict) or u.get("id") is None:
            continue
        users.append(
            OverseerrUser(
                user_id=int(u["id"]),
                display_name=u.get("displayName"),
                email=u.get("email"),
                plex_username=u.get("plexUsername"),
            )
        )
    return users


async def get_user_by_identifier(identifier: str) -> Optional[OverseerrUser]:
    """Matches display name, email or Plex username, case-insensitive."""
    needle = identifier.strip().lower()
    if not needle:
        return None

    for user in await get_all_users():
        candidates = (user.display_name, user.email, user.plex_username)
        if any(c and c.lower() == needle for c in candidates):
            return user
    return None


async def test_connection() -> ConnectionStatus:
    if not is_configured():
        return ConnectionStatus(success=False, error=NOT_CONFIGURED_ERROR)

    try:
        data = await _overseerr_request("GET", "/api/v1/status")
    except OverseerrError as e:
        logger.warning("Overseerr connection test failed: %s", e)
        return ConnectionStatus(success=False, error=str(e))

    return ConnectionStatus(success=True, version=str(data.get("version") or "unknown"))
