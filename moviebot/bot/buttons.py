"""
Handlers for the buttons on movie posts and the delete confirmation.

Every handler takes (interaction, parsed_custom_id). The bullying gate runs
in route_component before the handler is reached.
"""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

import discord

from moviebot.bot.embeds import movie_from_message
from moviebot.bot.keyboards import confirm_delete_view, extract_external_link, movie_buttons_view
from moviebot.bot.modals import RequestModal, require_account_link
from moviebot.bot.parsing import ParsedCustomId, parse_custom_id
from moviebot.bot.safe_send import safe_send
from moviebot.core.config import settings
from moviebot.core.constants import (
    EMOJI_WANT_TO_WATCH,
    EMOJI_WATCHED,
    EVENT_DURATION_HOURS,
    PLACEHOLDER_EVENT_HOURS,
    STATUS_WANT_TO_WATCH,
    STATUS_WATCHED,
)
from moviebot.db.repositories.watch_parties import attach_watch_party_links, release_watch_party, watch_party_exists
from moviebot.db.repositories.watchlist import get_users_wanting_to_watch
from moviebot.db.utils import get_session
from moviebot.integrations import overseerr
from moviebot.messages.catalog import get_messages
from moviebot.services.buttons import build_movie_buttons
from moviebot.services.watchlist_service import organize_watch_party, threshold_just_reached, toggle_watch_status

if TYPE_CHECKING:
    from moviebot.bot.client import MovieBot

logger = logging.getLogger(__name__)

Handler = Callable[[discord.Interaction, ParsedCustomId], Awaitable[None]]

# actions counted by the bullying tracker
TRACKED_ACTIONS = frozenset({"watched", "watchlist", "watch_party", "delete", "request"})


def _mentions(user_ids: list[int]) -> str:
    return " ".join(f"<@{uid}>" for uid in user_ids)


async def _react(message: Optional[discord.Message], emoji: str) -> None:
    if message is None:
        return
    try:
        await message.add_reaction(emoji)
    except discord.HTTPException as e:
        logger.warning("Could not add reaction %s: %s", emoji, e)


async def rebuild_buttons(message: Optional[discord.Message], movie_id: int, author_id: int) -> None:
    """Re-runs the reconciler for a posted movie and swaps its buttons in place."""
    if message is None:
        return
    availability = await overseerr.get_movie_status(movie_id) if overseerr.is_configured() else None
    async with get_session() as session:
        specs = await build_movie_buttons(
            session,
            movie_id,
            author_id,
            external_link_url=extract_external_link(message),
            availability=availability,
        )
    await message.edit(view=movie_buttons_view(specs))


async def handle_watched(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    title, year = movie_from_message(interaction.message, texts)

    async with get_session() as session:
        result = await toggle_watch_status(
            session,
            user_id=interaction.user.id,
            movie_id=parsed.movie_id,
            title=title,
            year=year,
            status=STATUS_WATCHED,
        )

    if result.added:
        await _react(interaction.message, EMOJI_WATCHED)
        await interaction.response.send_message(texts.marked_as_watched(result.count), ephemeral=True)
    else:
        await interaction.response.send_message(texts.removed_from_watched(result.count), ephemeral=True)


async def handle_watchlist(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    title, year = movie_from_message(interaction.message, texts)

    async with get_session() as session:
        result = await toggle_watch_status(
            session,
            user_id=interaction.user.id,
            movie_id=parsed.movie_id,
            title=title,
            year=year,
            status=STATUS_WANT_TO_WATCH,
        )

    if result.added:
        await _react(interaction.message, EMOJI_WANT_TO_WATCH)
        await interaction.response.send_message(texts.added_to_watchlist(result.count), ephemeral=True)
    else:
        await interaction.response.send_message(texts.removed_from_watchlist(result.count), ephemeral=True)

    await rebuild_buttons(interaction.message, parsed.movie_id, parsed.user_id)

    threshold = settings.watch_party_threshold
    if result.added and threshold_just_reached(result.count, threshold):
        async with get_session() as session:
            interested = await get_users_wanting_to_watch(session, parsed.movie_id)
        if interaction.channel is not None:
            await safe_send(interaction.channel, texts.watch_party_threshold_reached(_mentions(interested), result.count))
        logger.info("Watch party threshold reached for %r (%s interested)", title, result.count)


async def handle_watch_party(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    movie_id = parsed.movie_id
    message = interaction.message

    # fast path; the registry claim below is what actually decides
    async with get_session() as session:
        exists = await watch_party_exists(session, movie_id)
    if message is None or interaction.guild is None:
        await interaction.response.send_message(texts.WATCH_PARTY_ERROR, ephemeral=True)
        return
    if exists:
        await interaction.response.send_message(texts.WATCH_PARTY_ALREADY_EXISTS, ephemeral=True)
        return

    await interaction.response.defer(ephemeral=True, thinking=True)

    async with get_session() as session:
        claim = await organize_watch_party(
            session,
            movie_id=movie_id,
            message_id=message.id,
            organizer_id=interaction.user.id,
        )
    if not claim.created:
        await interaction.followup.send(texts.WATCH_PARTY_ALREADY_EXISTS, ephemeral=True)
        return

    title, _ = movie_from_message(message, texts)
    thread = interaction.channel
    start = discord.utils.utcnow() + timedelta(hours=PLACEHOLDER_EVENT_HOURS)
    end = start + timedelta(hours=EVENT_DURATION_HOURS)
    try:
        event = await interaction.guild.create_scheduled_event(
            name=texts.watch_party_event_name(title)[:100],
            start_time=start,
            end_time=end,
            entity_type=discord.EntityType.external,
            privacy_level=discord.PrivacyLevel.guild_only,
            location=texts.WATCH_PARTY_EVENT_LOCATION,
            description=texts.watch_party_event_description(len(claim.interested_user_ids), thread.id),
        )
        async with get_session() as session:
            await attach_watch_party_links(session, movie_id, thread.id, event.id, start)
    except Exception:
        logger.warning("Watch party for %r failed after the claim, releasing it", title)
        async with get_session() as session:
            await release_watch_party(session, movie_id, message.id)
        raise

    await safe_send(thread, texts.watch_party_coordination(title, _mentions(claim.interested_user_ids)))

    await rebuild_buttons(message, movie_id, parsed.user_id)
    await interaction.followup.send(texts.watch_party_created(title, event.url), ephemeral=True)
    logger.info("Watch party created for %r by %s", title, interaction.user.id)


async def handle_delete(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    if interaction.user.id != parsed.user_id:
        await interaction.response.send_message(texts.DELETE_ONLY_AUTHOR, ephemeral=True)
        return

    await interaction.response.send_message(
        texts.DELETE_CONFIRMATION,
        view=confirm_delete_view(interaction.user.id, texts),
        ephemeral=True,
    )


async def handle_confirm_delete(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    if interaction.user.id != parsed.user_id:
        await interaction.response.send_message(texts.DELETE_ONLY_AUTHOR, ephemeral=True)
        return

    await interaction.response.edit_message(content=texts.DELETING_POST, view=None)

    thread = interaction.channel
    if isinstance(thread, discord.Thread):
        await thread.delete()
        logger.info("Deleted thread %r by %s", thread.name, interaction.user.id)


async def handle_cancel_delete(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    await interaction.response.edit_message(content=texts.DELETE_CANCELLED, view=None)


async def handle_request(interaction: discord.Interaction, parsed: ParsedCustomId) -> None:
    texts = get_messages()
    if not overseerr.is_configured():
        await interaction.response.send_message(texts.NOT_CONFIGURED, ephemeral=True)
        return

    await require_account_link(interaction.user.id)

    status = await overseerr.get_movie_status(parsed.movie_id)
    if status.available:
        await interaction.response.send_message(texts.ALREADY_AVAILABLE, ephemeral=True)
        return
    if status.requested or status.processing:
        await interaction.response.send_message(texts.ALREADY_REQUESTED, ephemeral=True)
        return

    title, _ = movie_from_message(interaction.message, texts)
    await interaction.response.send_modal(
        RequestModal(parsed.movie_id, parsed.user_id, title, source_message=interaction.message)
    )


BUTTON_HANDLERS: dict[str, Handler] = {
    "watched": handle_watched,
    "watchlist": handle_watchlist,
    "watch_party": handle_watch_party,
    "delete": handle_delete,
    "confirm_delete": handle_confirm_delete,
    "cancel_delete": handle_cancel_delete,
    "request": handle_request,
}


async def route_component(bot: "MovieBot", interaction: discord.Interaction) -> None:
    """Dispatches a button click by custom id. Unknown ids are ignored."""
    custom_id = (interaction.data or {}).get("custom_id", "")
    parsed = parse_custom_id(custom_id)
    if parsed is None or parsed.action not in BUTTON_HANDLERS:
        logger.debug("Unknown component interaction: %s", custom_id)
        return

    if parsed.action in TRACKED_ACTIONS:
        subject = parsed.movie_id if parsed.movie_id is not None else parsed.user_id
        strike = bot.bullying.evaluate(interaction.user.id, parsed.action, subject, interaction.user.display_name)
        if strike is not None:
            await interaction.response.send_message(strike)
            return

    await bot.error_handler(BUTTON_HANDLERS[parsed.action], interaction, parsed)
