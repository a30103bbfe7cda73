from __future__ import annotations

from types import ModuleType
from typing import Iterable, Optional

import discord

from moviebot.bot.parsing import make_custom_id
from moviebot.core.constants import CONFIRM_VIEW_TIMEOUT_SECONDS
from moviebot.services.buttons import ButtonRole, ButtonSpec

_STYLES = {
    ButtonRole.WATCHED: discord.ButtonStyle.success,
    ButtonRole.INTEREST: discord.ButtonStyle.primary,
    ButtonRole.DELETE: discord.ButtonStyle.danger,
    ButtonRole.EXTERNAL_LINK: discord.ButtonStyle.link,
    ButtonRole.ORGANIZE_PARTY: discord.ButtonStyle.success,
}


def _style_for(spec: ButtonSpec) -> discord.ButtonStyle:
    if spec.url:
        return discord.ButtonStyle.link
    if spec.role is ButtonRole.REQUEST:
        return discord.ButtonStyle.primary if spec.enabled else discord.ButtonStyle.secondary
    return _STYLES[spec.role]


def movie_buttons_view(specs: Iterable[ButtonSpec]) -> discord.ui.View:
    """
    Renders reconciled specs into one row, in the given order.
    Clicks are routed by custom id in MovieBot.on_interaction.
    """
    view = discord.ui.View(timeout=None)
    for spec in specs:
        if spec.url:
            button = discord.ui.Button(
                style=discord.ButtonStyle.link,
                label=spec.label,
                url=spec.url,
                emoji=spec.emoji,
                row=0,
            )
        else:
            button = discord.ui.Button(
                style=_style_for(spec),
                label=spec.label,
                custom_id=spec.custom_id,
                emoji=spec.emoji,
                disabled=not spec.enabled,
                row=0,
            )
        view.add_item(button)
    return view


def confirm_delete_view(user_id: int, texts: ModuleType) -> discord.ui.View:
    view = discord.ui.View(timeout=CONFIRM_VIEW_TIMEOUT_SECONDS)
    view.add_item(discord.ui.Button(
        style=discord.ButtonStyle.danger,
        label=texts.BUTTON_CONFIRM_DELETE,
        custom_id=make_custom_id("confirm_delete", user_id),
        emoji="✅",
    ))
    view.add_item(discord.ui.Button(
        style=discord.ButtonStyle.secondary,
        label=texts.BUTTON_CANCEL_DELETE,
        custom_id=make_custom_id("cancel_delete", user_id),
        emoji="❌",
    ))
    return view


def extract_external_link(message: Optional[discord.Message]) -> Optional[str]:
    """URL of the first link button on a posted message, if any."""
    if message is None:
        return None
    for row in message.components:
        for component in getattr(row, "children", []):
            url = getattr(component, "url", None)
            if url:
                return url
    return None
