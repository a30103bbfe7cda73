from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

import discord
from discord import app_commands

from moviebot.bot.embeds import movie_embed, requests_embed, watchlist_embed
from moviebot.bot.keyboards import movie_buttons_view
from moviebot.bot.modals import RequestModal, require_account_link
from moviebot.core.config import settings
from moviebot.core.constants import (
    EMOJI_WANT_TO_WATCH,
    EMOJI_WATCHED,
    MAX_AUTOCOMPLETE_CHOICES,
    MAX_FORUM_TAGS,
    RATING_EMOJIS,
    STATUS_WANT_TO_WATCH,
    STATUS_WATCHED,
)
from moviebot.core.exceptions import ConfigurationError, MovieNotFoundError
from moviebot.core.validation import normalize_search_query, validate_movie_id
from moviebot.db.repositories.account_links import (
    get_account_link,
    link_account,
    list_account_links,
    unlink_account,
)
from moviebot.db.repositories.watchlist import get_user_watchlist
from moviebot.db.utils import get_session
from moviebot.integrations import overseerr
from moviebot.integrations.tmdb import MovieDetails, get_movie_details, search_movies
from moviebot.messages.catalog import get_messages
from moviebot.services.buttons import build_movie_buttons

if TYPE_CHECKING:
    from moviebot.bot.client import MovieBot

logger = logging.getLogger(__name__)

texts = get_messages()


def _bot(interaction: discord.Interaction) -> "MovieBot":
    return cast("MovieBot", interaction.client)


def _is_admin(interaction: discord.Interaction) -> bool:
    # a failed check surfaces as CheckFailure in MovieCommandTree.on_error
    perms = getattr(interaction.user, "guild_permissions", None)
    return perms is not None and perms.administrator


async def movie_title_autocomplete(interaction: discord.Interaction, current: str) -> list[app_commands.Choice[str]]:
    query = normalize_search_query(current)
    if query is None:
        return []
    candidates = await search_movies(query)
    return [
        app_commands.Choice(name=c.choice_label[:100], value=str(c.movie_id))
        for c in candidates[:MAX_AUTOCOMPLETE_CHOICES]
    ]


def _forum_tags(forum: discord.ForumChannel, tag_names: list[str]) -> list[discord.ForumTag]:
    by_name = {t.name: t for t in forum.available_tags}
    tags = [by_name[name] for name in tag_names if name in by_name]
    return tags[:MAX_FORUM_TAGS]


async def _movie_or_raise(movie_id: int) -> MovieDetails:
    movie = await get_movie_details(movie_id)
    if movie is None:
        raise MovieNotFoundError(f"TMDB has no movie {movie_id}", user_message=texts.MOVIE_NOT_FOUND)
    return movie


# -----------------------------
# /movie
# -----------------------------

@app_commands.command(name="movie", description=texts.COMMAND_MOVIE_DESCRIPTION)
@app_commands.describe(title=texts.COMMAND_MOVIE_TITLE_DESCRIPTION)
@app_commands.autocomplete(title=movie_title_autocomplete)
async def movie_command(interaction: discord.Interaction, title: str) -> None:
    await interaction.response.defer(ephemeral=True, thinking=True)
    movie_id = validate_movie_id(title)

    movie = await _movie_or_raise(movie_id)

    forum = None
    if settings.movie_forum_channel_id:
        forum = interaction.client.get_channel(settings.movie_forum_channel_id)
        if forum is None:
            try:
                forum = await interaction.client.fetch_channel(settings.movie_forum_channel_id)
            except discord.HTTPException:
                forum = None
    if not isinstance(forum, discord.ForumChannel):
        raise ConfigurationError(
            f"MOVIE_FORUM_CHANNEL_ID={settings.movie_forum_channel_id} is not a reachable forum channel",
            user_message=texts.MOVIE_CHANNEL_NOT_FOUND,
        )

    availability = await overseerr.get_movie_status(movie_id) if overseerr.is_configured() else None

    async with get_session() as session:
        specs = await build_movie_buttons(
            session,
            movie_id,
            interaction.user.id,
            external_link_url=movie.external_link_url,
            availability=availability,
        )

    name = f"{movie.title} ({movie.year})" if movie.year else movie.title
    created = await forum.create_thread(
        name=name[:100],
        embed=movie_embed(movie, availability, texts),
        view=movie_buttons_view(specs),
        applied_tags=_forum_tags(forum, movie.genre_tags),
    )

    for emoji in (*RATING_EMOJIS, EMOJI_WATCHED, EMOJI_WANT_TO_WATCH):
        try:
            await created.message.add_reaction(emoji)
        except discord.HTTPException as e:
            logger.warning("Could not add reaction %s to %s: %s", emoji, created.thread.id, e)

    await interaction.followup.send(texts.movie_created(movie.title, created.thread.jump_url), ephemeral=True)
    logger.info("Created movie post: %s (%s) by %s", movie.title, movie.year, interaction.user.id)


# -----------------------------
# /mywatchlist
# -----------------------------

@app_commands.command(name="mywatchlist", description=texts.COMMAND_WATCHLIST_DESCRIPTION)
async def mywatchlist_command(interaction: discord.Interaction) -> None:
    async with get_session() as session:
        watched = await get_user_watchlist(session, interaction.user.id, STATUS_WATCHED)
        want = await get_user_watchlist(session, interaction.user.id, STATUS_WANT_TO_WATCH)

    avatar = interaction.user.display_avatar.url if interaction.user.display_avatar else None
    embed = watchlist_embed(interaction.user.display_name, avatar, watched, want, texts)
    await interaction.response.send_message(embed=embed, ephemeral=True)


# -----------------------------
# /request and /myrequests
# -----------------------------

@app_commands.command(name="request", description=texts.COMMAND_REQUEST_DESCRIPTION)
@app_commands.describe(title=texts.COMMAND_REQUEST_TITLE_DESCRIPTION)
@app_commands.autocomplete(title=movie_title_autocomplete)
async def request_command(interaction: discord.Interaction, title: str) -> None:
    if not overseerr.is_configured():
        await interaction.response.send_message(texts.NOT_CONFIGURED, ephemeral=True)
        return

    await require_account_link(interaction.user.id)

    movie_id = validate_movie_id(title)
    movie = await _movie_or_raise(movie_id)

    status = await overseerr.get_movie_status(movie_id)
    if status.available:
        await interaction.response.send_message(texts.ALREADY_AVAILABLE, ephemeral=True)
        return
    if status.requested or status.processing:
        await interaction.response.send_message(texts.ALREADY_REQUESTED, ephemeral=True)
        return

    await interaction.response.send_modal(
        RequestModal(movie_id, interaction.user.id, movie.title, quick=True)
    )


@app_commands.command(name="myrequests", description=texts.COMMAND_MYREQUESTS_DESCRIPTION)
async def myrequests_command(interaction: discord.Interaction) -> None:
    await interaction.response.defer(ephemeral=True, thinking=True)

    link = await require_account_link(interaction.user.id)

    requests = await overseerr.get_user_requests(link.external_user_id)
    if not requests:
        await interaction.followup.send(texts.NO_REQUESTS, ephemeral=True)
        return

    await interaction.followup.send(embed=requests_embed(requests, link, texts), ephemeral=True)


# -----------------------------
# /bully (administrators)
# -----------------------------

class BullyGroup(
    app_commands.Group,
    name="bully",
    description=texts.COMMAND_BULLY_DESCRIPTION,
    guild_only=True,
    default_permissions=discord.Permissions(administrator=True),
):

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        return _is_admin(interaction)

    @app_commands.command(name="set", description="Start bullying a user")
    async def set_target(self, interaction: discord.Interaction, user: discord.User) -> None:
        _bot(interaction).bullying.set_target(user.id)
        await interaction.response.send_message(texts.bully_enabled(str(user), user.id), ephemeral=True)

    @app_commands.command(name="remove", description="Stop bullying")
    async def remove_target(self, interaction: discord.Interaction) -> None:
        bullying = _bot(interaction).bullying
        if bullying.target is None:
            await interaction.response.send_message(texts.BULLY_NO_TARGET, ephemeral=True)
            return
        bullying.set_target(None)
        await interaction.response.send_message(texts.BULLY_DISABLED, ephemeral=True)

    @app_commands.command(name="status", description="Show who is being bullied")
    async def status(self, interaction: discord.Interaction) -> None:
        target = _bot(interaction).bullying.target
        if target is None:
            await interaction.response.send_message(texts.BULLY_STATUS_NONE, ephemeral=True)
        else:
            await interaction.response.send_message(texts.bully_status_active(target), ephemeral=True)

    @app_commands.command(name="cd", description="Show the remaining cooldown")
    async def cooldown(self, interaction: discord.Interaction) -> None:
        bullying = _bot(interaction).bullying
        if bullying.target is None:
            await interaction.response.send_message(texts.BULLY_NO_TARGET, ephemeral=True)
            return
        status = bullying.status_for_target()
        if status is None:
            await interaction.response.send_message(texts.BULLY_NO_COOLDOWN, ephemeral=True)
            return
        await interaction.response.send_message(
            texts.bully_cooldown_status(bullying.target, status.remaining_minutes), ephemeral=True
        )

    @app_commands.command(name="cdreset", description="Reset the cooldown")
    async def cooldown_reset(self, interaction: discord.Interaction) -> None:
        bullying = _bot(interaction).bullying
        target = bullying.target
        if target is None:
            await interaction.response.send_message(texts.BULLY_NO_TARGET, ephemeral=True)
            return
        if bullying.reset_target():
            await interaction.response.send_message(texts.bully_cooldown_reset(target), ephemeral=True)
        else:
            await interaction.response.send_message(texts.bully_no_cooldown_to_reset(target), ephemeral=True)


# -----------------------------
# /overseerr (administrators)
# -----------------------------

class OverseerrGroup(
    app_commands.Group,
    name="overseerr",
    description=texts.COMMAND_OVERSEERR_DESCRIPTION,
    guild_only=True,
    default_permissions=discord.Permissions(administrator=True),
):

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        return _is_admin(interaction)

    @app_commands.command(name="link", description="Link a Discord user to an Overseerr account")
    @app_commands.describe(user="Discord user to link", identifier="Overseerr username or Plex email")
    async def link(self, interaction: discord.Interaction, user: discord.User, identifier: str) -> None:
        await interaction.response.defer(ephemeral=True, thinking=True)
        if not overseerr.is_configured():
            await interaction.followup.send(texts.NOT_CONFIGURED, ephemeral=True)
            return

        overseerr_user = await overseerr.get_user_by_identifier(identifier)
        if overseerr_user is None:
            await interaction.followup.send(texts.user_not_found(identifier), ephemeral=True)
            return

        async with get_session() as session:
            existing = await get_account_link(session, user.id)
            if existing is not None:
                await interaction.followup.send(texts.already_linked(str(user), existing.display_name), ephemeral=True)
                return
            created = await link_account(
                session,
                platform_user_id=user.id,
                external_user_id=overseerr_user.user_id,
                external_username=overseerr_user.display_name,
                plex_username=overseerr_user.plex_username,
                linked_by=interaction.user.id,
            )

        logger.info("Linked %s to Overseerr user %s", user.id, overseerr_user.user_id)
        await interaction.followup.send(texts.link_success(str(user), created.display_name), ephemeral=True)

    @app_commands.command(name="unlink", description="Unlink a Discord user from Overseerr")
    @app_commands.describe(user="Discord user to unlink")
    async def unlink(self, interaction: discord.Interaction, user: discord.User) -> None:
        async with get_session() as session:
            removed = await unlink_account(session, user.id)
        if not removed:
            await interaction.response.send_message(texts.not_linked_user(str(user)), ephemeral=True)
            return
        logger.info("Unlinked %s from Overseerr", user.id)
        await interaction.response.send_message(texts.unlink_success(str(user)), ephemeral=True)

    @app_commands.command(name="status", description="Check the Overseerr connection")
    async def status(self, interaction: discord.Interaction) -> None:
        await interaction.response.defer(ephemeral=True, thinking=True)
        if not overseerr.is_configured():
            await interaction.followup.send(texts.NOT_CONFIGURED, ephemeral=True)
            return
        result = await overseerr.test_connection()
        if result.success:
            await interaction.followup.send(texts.connection_success(result.version or "unknown"), ephemeral=True)
        else:
            await interaction.followup.send(texts.connection_failed(result.error or "unknown error"), ephemeral=True)

    @app_commands.command(name="list", description="List linked accounts")
    async def list_links(self, interaction: discord.Interaction) -> None:
        async with get_session() as session:
            links = await list_account_links(session)
        if not links:
            await interaction.response.send_message(texts.NO_LINKS, ephemeral=True)
            return
        lines = [
            f"{i}. <@{link.platform_user_id}> → **{link.display_name}**"
            for i, link in enumerate(links, start=1)
        ]
        await interaction.response.send_message(
            f"{texts.linked_accounts_list(len(links))}\n\n" + "\n".join(lines), ephemeral=True
        )


def register_commands(tree: app_commands.CommandTree) -> None:
    tree.add_command(movie_command)
    tree.add_command(mywatchlist_command)
    tree.add_command(request_command)
    tree.add_command(myrequests_command)
    tree.add_command(BullyGroup())
    tree.add_command(OverseerrGroup())
    logger.info("Registered %s slash commands", len(tree.get_commands()))
