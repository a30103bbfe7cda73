from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession

from moviebot.db.models import WatchlistEntry
from moviebot.core.constants import STATUS_WANT_TO_WATCH


async def add_to_watchlist(
    session: AsyncSession,
    user_id: int,
    movie_id: int,
    movie_title: str,
    movie_year: str | None,
    status: str,
) -> bool:
    """
    Idempotent insert keyed on (user_id, movie_id, status).
    Returns True only if a new row was written.
    """
    stmt = insert(WatchlistEntry).values(
        user_id=user_id,
        movie_id=movie_id,
        movie_title=movie_title,
        movie_year=movie_year,
        status=status,
    ).on_conflict_do_nothing(
        index_elements=["user_id", "movie_id", "status"]
    )
    result = await session.execute(stmt)
    await session.commit()
    return result.rowcount > 0


async def remove_from_watchlist(session: AsyncSession, user_id: int, movie_id: int, status: str) -> bool:
    result = await session.execute(
        delete(WatchlistEntry).where(
            WatchlistEntry.user_id == user_id,
            WatchlistEntry.movie_id == movie_id,
            WatchlistEntry.status == status,
        )
    )
    await session.commit()
    return result.rowcount > 0


async def is_in_watchlist(session: AsyncSession, user_id: int, movie_id: int, status: str) -> bool:
    n = (await session.execute(
        select(func.count())
        .select_from(WatchlistEntry)
        .where(
            WatchlistEntry.user_id == user_id,
            WatchlistEntry.movie_id == movie_id,
            WatchlistEntry.status == status,
        )
    )).scalar_one()
    return n > 0


async def get_movie_status_count(session: AsyncSession, movie_id: int, status: str) -> int:
    n = (await session.execute(
        select(func.count())
        .select_from(WatchlistEntry)
        .where(WatchlistEntry.movie_id == movie_id, WatchlistEntry.status == status)
    )).scalar_one()
    return int(n)


async def get_user_watchlist(session: AsyncSession, user_id: int, status: str) -> list[WatchlistEntry]:
    rows = (await session.execute(
        select(WatchlistEntry)
        .where(WatchlistEntry.user_id == user_id, WatchlistEntry.status == status)
        .order_by(WatchlistEntry.added_at.desc(), WatchlistEntry.id.desc())
    )).scalars().all()
    return list(rows)


async def get_users_wanting_to_watch(session: AsyncSession, movie_id: int) -> list[int]:
    rows = (await session.execute(
        select(WatchlistEntry.user_id)
        .where(WatchlistEntry.movie_id == movie_id, WatchlistEntry.status == STATUS_WANT_TO_WATCH)
        .order_by(WatchlistEntry.added_at, WatchlistEntry.id)
    )).scalars().all()
    return [int(r) for r in rows]
