"""
Watchlist repository: idempotent adds, removes, counts and listings.
"""
from __future__ import annotations

import pytest

from moviebot.core.constants import STATUS_WANT_TO_WATCH, STATUS_WATCHED
from moviebot.db.repositories.watchlist import (
    add_to_watchlist,
    get_movie_status_count,
    get_user_watchlist,
    get_users_wanting_to_watch,
    is_in_watchlist,
    remove_from_watchlist,
)


@pytest.mark.asyncio
async def test_add_is_idempotent(session):
    assert await add_to_watchlist(session, 1, 550, "Fight Club", "1999", STATUS_WATCHED) is True
    assert await add_to_watchlist(session, 1, 550, "Fight Club", "1999", STATUS_WATCHED) is False

    assert await get_movie_status_count(session, 550, STATUS_WATCHED) == 1


@pytest.mark.asyncio
async def test_statuses_are_independent(session):
    await add_to_watchlist(session, 1, 550, "Fight Club", "1999", STATUS_WATCHED)
    await add_to_watchlist(session, 1, 550, "Fight Club", "1999", STATUS_WANT_TO_WATCH)

    assert await is_in_watchlist(session, 1, 550, STATUS_WATCHED)
    assert await is_in_watchlist(session, 1, 550, STATUS_WANT_TO_WATCH)

    await remove_from_watchlist(session, 1, 550, STATUS_WATCHED)
    assert not await is_in_watchlist(session, 1, 550, STATUS_WATCHED)
    assert await is_in_watchlist(session, 1, 550, STATUS_WANT_TO_WATCH)


@pytest.mark.asyncio
async def test_remove_missing_entry(session):
    assert await remove_from_watchlist(session, 1, 550, STATUS_WATCHED) is False


@pytest.mark.asyncio
async def test_count_per_movie(session):
    for user_id in (1, 2, 3):
        await add_to_watchlist(session, user_id, 550, "Fight Club", "1999", STATUS_WANT_TO_WATCH)
    await add_to_watchlist(session, 1, 603, "The Matrix", "1999", STATUS_WANT_TO_WATCH)

    assert await get_movie_status_count(session, 550, STATUS_WANT_TO_WATCH) == 3
    assert await get_movie_status_count(session, 603, STATUS_WANT_TO_WATCH) == 1
    assert await get_movie_status_count(session, 550, STATUS_WATCHED) == 0


@pytest.mark.asyncio
async def test_user_watchlist_newest_first(session):
    await add_to_watchlist(session, 1, 550, "Fight Club", "1999", STATUS_WATCHED)
    await add_to_watchlist(session, 1, 603, "The Matrix", "1999", STATUS_WATCHED)
    await add_to_watchlist(session, 1, 9000, "Obscure Short", None, STATUS_WATCHED)
    await add_to_watchlist(session, 2, 13, "Forrest Gump", "1994", STATUS_WATCHED)

    entries = await get_user_watchlist(session, 1, STATUS_WATCHED)
    assert [e.movie_id for e in entries] == [9000, 603, 550]
    assert entries[0].movie_year is None


@pytest.mark.asyncio
async def test_users_wanting_to_watch(session):
    for user_id in (30, 10, 20):
        await add_to_watchlist(session, user_id, 550, "Fight Club", "1999", STATUS_WANT_TO_WATCH)
    await add_to_watchlist(session, 40, 550, "Fight Club", "1999", STATUS_WATCHED)

    assert await get_users_wanting_to_watch(session, 550) == [30, 10, 20]
    assert await get_users_wanting_to_watch(session, 603) == []


@pytest.mark.asyncio
async def test_large_discord_ids(session):
    snowflake = 1234567890123456789
    await add_to_watchlist(session, snowflake, 550, "Fight Club", "1999", STATUS_WANT_TO_WATCH)
    assert await get_users_wanting_to_watch(session, 550) == [snowflake]
