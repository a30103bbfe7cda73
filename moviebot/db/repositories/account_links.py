from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession

from moviebot.db.models import AccountLink


async def link_account(
    session: AsyncSession,
    platform_user_id: int,
    external_user_id: int,
    external_username: str | None,
    plex_username: str | None,
    linked_by: int | None,
) -> AccountLink:
    """Links a Discord user to an Overseerr account, replacing any previous link."""
    stmt = insert(AccountLink).values(
        platform_user_id=platform_user_id,
        external_user_id=external_user_id,
        external_username=external_username,
        plex_username=plex_username,
        linked_by=linked_by,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[AccountLink.platform_user_id],
        set_={
            "external_user_id": external_user_id,
            "external_username": external_username,
            "plex_username": plex_username,
            "linked_by": linked_by,
            "linked_at": func.now(),
        },
    )
    await session.execute(stmt)
    await session.commit()

    link = await get_account_link(session, platform_user_id)
    assert link is not None
    await session.refresh(link)
    return link


async def get_account_link(session: AsyncSession, platform_user_id: int) -> AccountLink | None:
    return (await session.execute(
        select(AccountLink).where(AccountLink.platform_user_id == platform_user_id)
    )).scalar_one_or_none()


async def unlink_account(session: AsyncSession, platform_user_id: int) -> bool:
    result = await session.execute(
        delete(AccountLink).where(AccountLink.platform_user_id == platform_user_id)
    )
    await session.commit()
    return result.rowcount > 0


async def list_account_links(session: AsyncSession) -> list[AccountLink]:
    rows = (await session.execute(
        select(AccountLink).order_by(AccountLink.linked_at.desc(), AccountLink.id.desc())
    )).scalars().all()
    return list(rows)
