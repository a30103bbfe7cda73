from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from moviebot.core.constants import WATCHLIST_STATUSES
from moviebot.core.exceptions import ValidationError
from moviebot.db.repositories.watch_parties import create_watch_party
from moviebot.db.repositories.watchlist import (
    add_to_watchlist,
    get_movie_status_count,
    get_users_wanting_to_watch,
    is_in_watchlist,
    remove_from_watchlist,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    added: bool
    count: int


@dataclass(frozen=True)
class PartyClaim:
    created: bool
    interested_user_ids: list[int] = field(default_factory=list)


async def toggle_watch_status(
    session: AsyncSession,
    *,
    user_id: int,
    movie_id: int,
    title: str,
    year: str | None,
    status: str,
) -> ToggleResult:
    """
    Flips (user, movie, status) and returns the new direction plus the
    movie's count for that status afterwards.
    """
    if status not in WATCHLIST_STATUSES:
        raise ValidationError(f"Unknown watchlist status: {status}")

    if await is_in_watchlist(session, user_id, movie_id, status):
        await remove_from_watchlist(session, user_id, movie_id, status)
        added = False
    else:
        # a concurrent click may have inserted first; that still reads as "added"
        await add_to_watchlist(session, user_id, movie_id, title, year, status)
        added = True

    count = await get_movie_status_count(session, movie_id, status)
    logger.info("user=%s movie=%s status=%s added=%s count=%s", user_id, movie_id, status, added, count)
    return ToggleResult(added=added, count=count)


async def organize_watch_party(
    session: AsyncSession,
    *,
    movie_id: int,
    message_id: int,
    organizer_id: int,
) -> PartyClaim:
    """
    Claims the registry slot first. Callers create the thread message and the
    scheduled event only when `created` is True.
    """
    created = await create_watch_party(session, movie_id, message_id, organizer_id)
    if not created:
        logger.info("Watch party for movie %s already active, claim by %s refused", movie_id, organizer_id)
        return PartyClaim(created=False)

    interested = await get_users_wanting_to_watch(session, movie_id)
    logger.info("Watch party claimed movie=%s organizer=%s interested=%s", movie_id, organizer_id, len(interested))
    return PartyClaim(created=True, interested_user_ids=interested)


def threshold_just_reached(count: int, threshold: int) -> bool:
    """True only on the click that lands exactly on the threshold."""
    return count == threshold
