from __future__ import annotations

import logging
from typing import Optional

import discord

from moviebot.bot.keyboards import extract_external_link, movie_buttons_view
from moviebot.bot.middleware.error_handler import report_error
from moviebot.bot.parsing import make_custom_id
from moviebot.core.constants import MAX_QUALITY_INPUT_LENGTH
from moviebot.core.exceptions import AccountNotLinkedError
from moviebot.core.validation import parse_quality_input
from moviebot.db.models import AccountLink
from moviebot.db.repositories.account_links import get_account_link
from moviebot.db.utils import get_session
from moviebot.integrations import overseerr
from moviebot.integrations.tmdb import get_movie_details
from moviebot.messages.catalog import get_messages
from moviebot.services.buttons import build_movie_buttons

logger = logging.getLogger(__name__)

MODAL_TITLE_MAX = 45


async def require_account_link(user_id: int) -> AccountLink:
    async with get_session() as session:
        link = await get_account_link(session, user_id)
    if link is None:
        raise AccountNotLinkedError(user_id, user_message=get_messages().NOT_LINKED)
    return link


class RequestModal(discord.ui.Modal):
    """
    Quality prompt shown before an Overseerr request.

    quick=True comes from /request and has no post to refresh afterwards.
    """

    def __init__(
        self,
        movie_id: int,
        author_id: int,
        movie_title: Optional[str] = None,
        *,
        quick: bool = False,
        source_message: Optional[discord.Message] = None,
    ) -> None:
        texts = get_messages()
        title = texts.request_modal_title_with_movie(movie_title) if movie_title else texts.REQUEST_MODAL_TITLE
        action = "quick_request_modal" if quick else "request_modal"
        super().__init__(
            title=title[:MODAL_TITLE_MAX],
            custom_id=make_custom_id(action, author_id, movie_id),
            timeout=None,
        )
        self.movie_id = movie_id
        self.author_id = author_id
        self.quick = quick
        self.source_message = source_message
        self.texts = texts

        self.quality: discord.ui.TextInput = discord.ui.TextInput(
            label=texts.REQUEST_QUALITY_LABEL,
            placeholder=texts.REQUEST_QUALITY_PLACEHOLDER,
            custom_id="quality",
            style=discord.TextStyle.short,
            required=False,
            max_length=MAX_QUALITY_INPUT_LENGTH,
        )
        self.add_item(self.quality)

    async def on_submit(self, interaction: discord.Interaction) -> None:
        is_4k = parse_quality_input(self.quality.value)
        await submit_request(
            interaction,
            self.movie_id,
            self.author_id,
            is_4k=is_4k,
            source_message=None if self.quick else self.source_message,
        )

    async def on_error(self, interaction: discord.Interaction, error: Exception) -> None:
        await report_error(interaction, error)


async def submit_request(
    interaction: discord.Interaction,
    movie_id: int,
    author_id: int,
    *,
    is_4k: bool,
    source_message: Optional[discord.Message] = None,
) -> None:
    texts = get_messages()
    await interaction.response.defer(ephemeral=True, thinking=True)

    link = await require_account_link(interaction.user.id)

    # status may have changed while the modal was open
    status = await overseerr.get_movie_status(movie_id)
    if status.available:
        await interaction.followup.send(texts.ALREADY_AVAILABLE, ephemeral=True)
        return
    if status.requested or status.processing:
        await interaction.followup.send(texts.ALREADY_REQUESTED, ephemeral=True)
        return

    result = await overseerr.create_movie_request(movie_id, link.external_user_id, is_4k)
    if not result.success:
        await interaction.followup.send(texts.request_failed(result.error or "unknown error"), ephemeral=True)
        return

    movie = await get_movie_details(movie_id)
    title = movie.title if movie else "Movie"
    logger.info("Request created: %s (%s) by %s%s", title, movie_id, interaction.user.id, " (4K)" if is_4k else "")

    if source_message is not None:
        try:
            updated = await overseerr.get_movie_status(movie_id)
            async with get_session() as session:
                specs = await build_movie_buttons(
                    session,
                    movie_id,
                    author_id,
                    external_link_url=extract_external_link(source_message),
                    availability=updated,
                )
            await source_message.edit(view=movie_buttons_view(specs))
        except discord.HTTPException as e:
            logger.warning("Could not refresh buttons after request for %s: %s", movie_id, e)

    await interaction.followup.send(texts.request_success(title, is_4k), ephemeral=True)
