from __future__ import annotations

from types import ModuleType
from typing import Optional, Sequence

import discord

from moviebot.core.constants import (
    EMBED_COLOR,
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_AVAILABLE,
    REQUEST_STATUS_PENDING,
    REQUESTS_SECTION_LIMIT,
    WATCHLIST_SECTION_LIMIT,
)
from moviebot.db.models import AccountLink, WatchlistEntry
from moviebot.integrations.overseerr import Availability, MediaRequest
from moviebot.integrations.tmdb import MovieDetails

NA = "N/A"


def movie_embed(movie: MovieDetails, availability: Optional[Availability], texts: ModuleType) -> discord.Embed:
    embed = discord.Embed(
        title=movie.title,
        description=movie.plot,
        color=EMBED_COLOR,
        timestamp=discord.utils.utcnow(),
    )
    embed.add_field(name=texts.EMBED_RELEASE_YEAR, value=movie.year or NA, inline=True)
    embed.add_field(name=texts.EMBED_RATING, value=f"{movie.rating}/10" if movie.rating else NA, inline=True)
    embed.add_field(name=texts.EMBED_RUNTIME, value=f"{movie.runtime} min" if movie.runtime else NA, inline=True)
    embed.add_field(name=texts.EMBED_CAST, value=", ".join(movie.cast) or NA, inline=False)
    embed.add_field(name=texts.EMBED_DIRECTOR, value=movie.director or NA, inline=True)
    embed.add_field(name=texts.EMBED_GENRES, value=", ".join(movie.genres) or NA, inline=True)

    footer = texts.EMBED_FOOTER_DEFAULT
    if availability is not None:
        if availability.available:
            footer = texts.EMBED_FOOTER_AVAILABLE
        elif availability.requested or availability.processing:
            footer = texts.EMBED_FOOTER_PENDING
    embed.set_footer(text=footer)

    if movie.poster_url:
        embed.set_thumbnail(url=movie.poster_url)
    return embed


def movie_from_message(message: Optional[discord.Message], texts: ModuleType) -> tuple[str, Optional[str]]:
    """Title and release year as shown on a movie post's embed."""
    if message is None or not message.embeds:
        return "Unknown", None
    embed = message.embeds[0]
    year = None
    for f in embed.fields:
        if f.name == texts.EMBED_RELEASE_YEAR and f.value and f.value != NA:
            year = f.value
            break
    return embed.title or "Unknown", year


def _movie_lines(entries: Sequence[WatchlistEntry], texts: ModuleType) -> str:
    lines = []
    for e in entries[:WATCHLIST_SECTION_LIMIT]:
        lines.append(f"• {e.movie_title} ({e.movie_year})" if e.movie_year else f"• {e.movie_title}")
    if len(entries) > WATCHLIST_SECTION_LIMIT:
        lines.append(texts.and_more(len(entries) - WATCHLIST_SECTION_LIMIT))
    return "\n".join(lines)


def watchlist_embed(
    username: str,
    avatar_url: Optional[str],
    watched: Sequence[WatchlistEntry],
    want: Sequence[WatchlistEntry],
    texts: ModuleType,
) -> discord.Embed:
    embed = discord.Embed(title=texts.watchlist_title(username), color=EMBED_COLOR, timestamp=discord.utils.utcnow())
    if avatar_url:
        embed.set_thumbnail(url=avatar_url)
    embed.add_field(
        name=texts.WATCHED_MOVIES_HEADER,
        value=_movie_lines(watched, texts) or texts.NO_WATCHED_MOVIES,
        inline=False,
    )
    embed.add_field(
        name=texts.WATCHLIST_HEADER,
        value=_movie_lines(want, texts) or texts.NO_WATCHLIST_MOVIES,
        inline=False,
    )
    return embed


def _request_lines(requests: Sequence[MediaRequest]) -> str:
    lines = []
    for r in requests[:REQUESTS_SECTION_LIMIT]:
        suffix = " (4K)" if r.is_4k else ""
        lines.append(f"• **{r.movie_id}** - {r.title or 'Unknown'}{suffix}")
    return "\n".join(lines)


def requests_embed(requests: Sequence[MediaRequest], link: AccountLink, texts: ModuleType) -> discord.Embed:
    embed = discord.Embed(title=texts.MYREQUESTS_TITLE, color=EMBED_COLOR, timestamp=discord.utils.utcnow())
    embed.set_footer(text=texts.myrequests_linked_as(link.display_name))

    sections = (
        (REQUEST_STATUS_PENDING, texts.myrequests_pending),
        (REQUEST_STATUS_APPROVED, texts.myrequests_approved),
        (REQUEST_STATUS_AVAILABLE, texts.myrequests_available),
    )
    shown = 0
    for status, title in sections:
        group = [r for r in requests if r.status == status]
        if not group:
            continue
        embed.add_field(name=title(len(group)), value=_request_lines(group), inline=False)
        shown += min(len(group), REQUESTS_SECTION_LIMIT)

    if len(requests) > shown:
        embed.description = texts.myrequests_showing(shown, len(requests))
    return embed
