from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession

from moviebot.db.models import WatchParty


async def watch_party_exists(session: AsyncSession, movie_id: int) -> bool:
    """Only parties that are not completed count."""
    n = (await session.execute(
        select(func.count())
        .select_from(WatchParty)
        .where(WatchParty.movie_id == movie_id, WatchParty.completed.is_(False))
    )).scalar_one()
    return n > 0


async def get_watch_party(session: AsyncSession, movie_id: int) -> WatchParty | None:
    return (await session.execute(
        select(WatchParty).where(WatchParty.movie_id == movie_id)
    )).scalar_one_or_none()


async def create_watch_party(
    session: AsyncSession,
    movie_id: int,
    message_id: int,
    organized_by: int,
) -> bool:
    """
    Claims the party slot for a movie. Returns False if an active party exists.

    The existence check runs first; the upsert below is what actually guards
    against two organizers clicking at once: movie_id is unique and the
    conflict branch may only take over a completed row.
    """
    if await watch_party_exists(session, movie_id):
        return False

    stmt = insert(WatchParty).values(
        movie_id=movie_id,
        message_id=message_id,
        organized_by=organized_by,
        completed=False,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[WatchParty.movie_id],
        set_={
            "message_id": message_id,
            "organized_by": organized_by,
            "organized_at": func.now(),
            "thread_id": None,
            "event_id": None,
            "event_date": None,
            "completed": False,
        },
        where=WatchParty.completed.is_(True),
    )
    result = await session.execute(stmt)
    await session.commit()
    return result.rowcount > 0


async def attach_watch_party_links(
    session: AsyncSession,
    movie_id: int,
    thread_id: int | None,
    event_id: int | None,
    event_date: datetime | None = None,
) -> None:
    await session.execute(
        update(WatchParty)
        .where(WatchParty.movie_id == movie_id)
        .values(thread_id=thread_id, event_id=event_id, event_date=event_date)
    )
    await session.commit()


async def complete_watch_party(session: AsyncSession, movie_id: int) -> bool:
    result = await session.execute(
        update(WatchParty)
        .where(WatchParty.movie_id == movie_id, WatchParty.completed.is_(False))
        .values(completed=True)
    )
    await session.commit()
    return result.rowcount > 0


async def release_watch_party(session: AsyncSession, movie_id: int, message_id: int) -> bool:
    """
    Frees a claim whose thread and event were never attached, so the movie
    can be organized again. Parties with an attached event are left alone.
    """
    result = await session.execute(
        delete(WatchParty).where(
            WatchParty.movie_id == movie_id,
            WatchParty.message_id == message_id,
            WatchParty.completed.is_(False),
            WatchParty.event_id.is_(None),
        )
    )
    await session.commit()
    return result.rowcount > 0
