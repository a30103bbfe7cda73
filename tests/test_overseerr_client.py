"""
Overseerr client: status mapping, request errors and user lookup.
"""
from __future__ import annotations

import pytest

import moviebot.integrations.overseerr as overseerr
from moviebot.core.exceptions import OverseerrError
from tests.fakes.tmdb_stub import OVERSEERR_MOVIE, OVERSEERR_REQUESTS, OVERSEERR_USERS


@pytest.fixture()
def overseerr_calls(overseerr_enabled, monkeypatch):
    calls = []

    async def _fake_request(method, path, params=None, json=None):
        calls.append((method, path, params, json))
        if method == "GET" and path.startswith("/api/v1/movie/"):
            movie_id = int(path.rsplit("/", 1)[-1])
            if movie_id not in OVERSEERR_MOVIE:
                raise OverseerrError("Overseerr HTTP 404", status_code=404)
            return OVERSEERR_MOVIE[movie_id]
        if method == "GET" and path == "/api/v1/user":
            return OVERSEERR_USERS
        if method == "GET" and path == "/api/v1/request":
            return OVERSEERR_REQUESTS
        if method == "POST" and path == "/api/v1/request":
            return {"id": 77, "status": 1}
        if method == "GET" and path == "/api/v1/status":
            return {"version": "1.33.2"}
        raise AssertionError(f"unexpected Overseerr call {method} {path}")

    monkeypatch.setattr(overseerr, "_overseerr_request", _fake_request)
    return calls


def _fail_with(monkeypatch, error):
    async def _fake_request(method, path, params=None, json=None):
        raise error

    monkeypatch.setattr(overseerr, "_overseerr_request", _fake_request)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("movie_id", "expected"),
    [
        (550, overseerr.Availability(available=True)),
        (603, overseerr.Availability(requested=True)),
        (604, overseerr.Availability(requested=True, processing=True)),
        (605, overseerr.Availability()),
        (606, overseerr.Availability()),
        (404, overseerr.Availability()),
    ],
)
async def test_movie_status(overseerr_calls, movie_id, expected):
    assert await overseerr.get_movie_status(movie_id) == expected


@pytest.mark.asyncio
async def test_not_configured_short_circuits(monkeypatch):
    async def _unexpected(*args, **kwargs):
        raise AssertionError("no HTTP call expected")

    monkeypatch.setattr(overseerr, "_overseerr_request", _unexpected)

    assert overseerr.is_configured() is False
    assert await overseerr.get_movie_status(550) == overseerr.Availability()
    assert await overseerr.get_user_requests(7) == []
    assert await overseerr.get_all_users() == []
    result = await overseerr.create_movie_request(550, 7)
    assert result.success is False
    assert result.error == overseerr.NOT_CONFIGURED_ERROR
    status = await overseerr.test_connection()
    assert status.success is False


@pytest.mark.asyncio
async def test_status_failure_reads_as_unknown(overseerr_enabled, monkeypatch):
    _fail_with(monkeypatch, OverseerrError("Overseerr network error"))
    assert await overseerr.get_movie_status(550) == overseerr.Availability()


@pytest.mark.asyncio
async def test_create_request(overseerr_calls):
    result = await overseerr.create_movie_request(550, 7, is_4k=True)

    assert result.success is True
    assert result.request_id == 77
    method, path, _, body = overseerr_calls[0]
    assert (method, path) == ("POST", "/api/v1/request")
    assert body == {"mediaType": "movie", "mediaId": 550, "is4k": True, "userId": 7}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "message"),
    [
        (OverseerrError("HTTP 409", status_code=409), "This movie has already been requested"),
        (OverseerrError("HTTP 403", status_code=403), "You don't have permission to request movies"),
        (OverseerrError("HTTP 429", status_code=429), "You've reached your request quota"),
        (OverseerrError("HTTP 500", status_code=500), "Failed to create request"),
        (OverseerrError("HTTP 400", status_code=400, payload={"message": "Bad media id"}), "Bad media id"),
        (OverseerrError("HTTP 409", status_code=409, payload={"message": "Request exists"}), "Request exists"),
    ],
)
async def test_create_request_errors(overseerr_enabled, monkeypatch, error, message):
    _fail_with(monkeypatch, error)
    result = await overseerr.create_movie_request(550, 7)
    assert result.success is False
    assert result.error == message


@pytest.mark.asyncio
async def test_user_requests(overseerr_calls):
    requests = await overseerr.get_user_requests(7)

    assert [r.request_id for r in requests] == [11, 12, 13]
    assert requests[0].title == "Fight Club"
    assert requests[1].title is None
    assert requests[1].is_4k is True
    assert [r.status for r in requests] == [2, 3, 4]

    _, _, params, _ = overseerr_calls[0]
    assert params["requestedBy"] == 7
    assert params["take"] == 50


@pytest.mark.asyncio
async def test_user_requests_failure(overseerr_enabled, monkeypatch):
    _fail_with(monkeypatch, OverseerrError("HTTP 500", status_code=500))
    assert await overseerr.get_user_requests(7) == []


@pytest.mark.asyncio
async def test_all_users(overseerr_calls):
    users = await overseerr.get_all_users()
    assert [u.user_id for u in users] == [1, 7, 9]
    assert users[2].label == "quiet@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("identifier", "user_id"),
    [
        ("nikos", 7),
        ("NIKOS@example.com", 7),
        ("nikosplex", 7),
        (" plexadmin ", 1),
        ("nobody", None),
        ("   ", None),
    ],
)
async def test_user_by_identifier(overseerr_calls, identifier, user_id):
    user = await overseerr.get_user_by_identifier(identifier)
    assert (user.user_id if user else None) == user_id


@pytest.mark.asyncio
async def test_connection_check(overseerr_calls):
    status = await overseerr.test_connection()
    assert status.success is True
    assert status.version == "1.33.2"


@pytest.mark.asyncio
async def test_connection_check_failure(overseerr_enabled, monkeypatch):
    _fail_with(monkeypatch, OverseerrError("Overseerr HTTP 401", status_code=401))
    status = await overseerr.test_connection()
    assert status.success is False
    assert "401" in status.error
