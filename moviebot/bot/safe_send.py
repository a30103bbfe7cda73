from __future__ import annotations

import asyncio
import logging
from typing import Any

import discord

logger = logging.getLogger(__name__)


async def safe_send(channel: discord.abc.Messageable, content: str | None = None, **kwargs: Any) -> discord.Message | None:
    """
    Sends to a channel or thread without taking the handler down.
    - retries Discord 5xx and timeouts a few times
    - logs and gives up on other HTTP errors (missing permissions, deleted thread)
    """
    max_attempts = 3
    delay = 1.0

    for attempt in range(1, max_attempts + 1):
        try:
            return await channel.send(content, **kwargs)
        except (discord.DiscordServerError, asyncio.TimeoutError) as e:
            logger.warning("Discord send failed (attempt %s/%s): %s", attempt, max_attempts, e)
            if attempt == max_attempts:
                return None
            await asyncio.sleep(delay)
            delay *= 2
        except discord.HTTPException as e:
            logger.error("Discord send rejected: status=%s code=%s %s", e.status, e.code, e.text)
            return None
    return None


async def respond(interaction: discord.Interaction, content: str, *, ephemeral: bool = True, **kwargs: Any) -> None:
    """Replies to an interaction whether or not it was already answered."""
    if interaction.response.is_done():
        await interaction.followup.send(content, ephemeral=ephemeral, **kwargs)
    else:
        await interaction.response.send_message(content, ephemeral=ephemeral, **kwargs)
