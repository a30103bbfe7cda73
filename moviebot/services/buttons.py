"""
Computes the ordered button set for a movie post.

reconcile_buttons() is pure: it gets the interest count and party state
as arguments and returns an immutable tuple of ButtonSpec. The discord
renderer in bot/keyboards.py turns that tuple into a View.

Order is fixed: watched, want-to-watch, delete, external link,
availability/request, organize party. Only the organize-party button is
ever dropped for room.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from types import ModuleType

from sqlalchemy.ext.asyncio import AsyncSession

from moviebot.core.config import settings
from moviebot.core.constants import (
    EMOJI_AVAILABLE,
    EMOJI_DELETE,
    EMOJI_EXTERNAL_LINK,
    EMOJI_PENDING,
    EMOJI_REQUEST,
    EMOJI_WANT_TO_WATCH,
    EMOJI_WATCH_PARTY,
    EMOJI_WATCHED,
    MAX_BUTTONS_PER_ROW,
    STATUS_WANT_TO_WATCH,
)
from moviebot.bot.parsing import make_custom_id
from moviebot.db.repositories.watch_parties import watch_party_exists
from moviebot.db.repositories.watchlist import get_movie_status_count
from moviebot.integrations.overseerr import Availability


class ButtonRole(str, enum.Enum):
    WATCHED = "watched"
    INTEREST = "watchlist"
    DELETE = "delete"
    EXTERNAL_LINK = "external_link"
    REQUEST = "request"
    ORGANIZE_PARTY = "watch_party"


@dataclass(frozen=True)
class ButtonSpec:
    role: ButtonRole
    label: str
    enabled: bool = True
    custom_id: str | None = None
    url: str | None = None
    emoji: str | None = None


def _custom_id(role: ButtonRole, author_id: int, movie_id: int) -> str:
    return make_custom_id(role.value, author_id, movie_id)


def reconcile_buttons(
    movie_id: int,
    author_id: int,
    *,
    external_link_url: str | None,
    availability: Availability | None,
    interest_count: int,
    party_exists: bool,
    threshold: int,
    request_integration_active: bool,
    texts: ModuleType | None = None,
) -> tuple[ButtonSpec, ...]:
    if texts is None:
        from moviebot.messages.catalog import get_messages
        texts = get_messages()

    buttons: list[ButtonSpec] = [
        ButtonSpec(
            role=ButtonRole.WATCHED,
            label=texts.BUTTON_WATCHED,
            custom_id=_custom_id(ButtonRole.WATCHED, author_id, movie_id),
            emoji=EMOJI_WATCHED,
        ),
        ButtonSpec(
            role=ButtonRole.INTEREST,
            label=texts.BUTTON_WANT_TO_WATCH,
            custom_id=_custom_id(ButtonRole.INTEREST, author_id, movie_id),
            emoji=EMOJI_WANT_TO_WATCH,
        ),
        ButtonSpec(
            role=ButtonRole.DELETE,
            label=texts.BUTTON_DELETE,
            custom_id=_custom_id(ButtonRole.DELETE, author_id, movie_id),
            emoji=EMOJI_DELETE,
        ),
    ]

    show_organize_party = interest_count >= threshold and not party_exists

    if external_link_url:
        buttons.append(ButtonSpec(
            role=ButtonRole.EXTERNAL_LINK,
            label=texts.BUTTON_IMDB,
            url=external_link_url,
            emoji=EMOJI_EXTERNAL_LINK,
        ))

    if request_integration_active and availability is not None:
        if availability.available:
            buttons.append(ButtonSpec(
                role=ButtonRole.REQUEST,
                label=texts.BUTTON_AVAILABLE_ON_PLEX,
                enabled=False,
                custom_id=f"available:{movie_id}",
                emoji=EMOJI_AVAILABLE,
            ))
        elif availability.requested or availability.processing:
            buttons.append(ButtonSpec(
                role=ButtonRole.REQUEST,
                label=texts.BUTTON_REQUEST_PENDING,
                enabled=False,
                custom_id=f"pending:{movie_id}",
                emoji=EMOJI_PENDING,
            ))
        else:
            buttons.append(ButtonSpec(
                role=ButtonRole.REQUEST,
                label=texts.BUTTON_REQUEST_ON_PLEX,
                custom_id=_custom_id(ButtonRole.REQUEST, author_id, movie_id),
                emoji=EMOJI_REQUEST,
            ))

    if show_organize_party and len(buttons) < MAX_BUTTONS_PER_ROW:
        buttons.append(ButtonSpec(
            role=ButtonRole.ORGANIZE_PARTY,
            label=texts.button_watch_party(interest_count),
            custom_id=_custom_id(ButtonRole.ORGANIZE_PARTY, author_id, movie_id),
            emoji=EMOJI_WATCH_PARTY,
        ))

    assert len(buttons) <= MAX_BUTTONS_PER_ROW
    return tuple(buttons)


async def build_movie_buttons(
    session: AsyncSession,
    movie_id: int,
    author_id: int,
    *,
    external_link_url: str | None,
    availability: Availability | None,
    threshold: int | None = None,
    request_integration_active: bool | None = None,
    texts: ModuleType | None = None,
) -> tuple[ButtonSpec, ...]:
    """Reads interest and party state fresh, then reconciles."""
    interest_count = await get_movie_status_count(session, movie_id, STATUS_WANT_TO_WATCH)
    party_exists = await watch_party_exists(session, movie_id)

    return reconcile_buttons(
        movie_id,
        author_id,
        external_link_url=external_link_url,
        availability=availability,
        interest_count=interest_count,
        party_exists=party_exists,
        threshold=threshold if threshold is not None else settings.watch_party_threshold,
        request_integration_active=(
            request_integration_active
            if request_integration_active is not None
            else settings.overseerr_configured
        ),
        texts=texts,
    )
