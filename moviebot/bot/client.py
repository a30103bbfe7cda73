from __future__ import annotations

import logging
from datetime import timedelta

import discord
from discord.ext import commands

from moviebot.bot.buttons import route_component
from moviebot.bot.commands import register_commands
from moviebot.bot.middleware.error_handler import ErrorHandlerMiddleware, MovieCommandTree
from moviebot.core.config import settings
from moviebot.db.utils import init_db
from moviebot.services.bullying import BullyingService

logger = logging.getLogger(__name__)

PRESENCE_TEXT = "Movie Nerd"


class MovieBot(commands.Bot):
    """Discord client owning the bullying tracker for this process."""

    def __init__(self, bullying: BullyingService | None = None) -> None:
        intents = discord.Intents.default()
        intents.guilds = True
        super().__init__(command_prefix=commands.when_mentioned, intents=intents, tree_cls=MovieCommandTree)
        self.bullying = bullying or BullyingService(window=timedelta(minutes=settings.bully_cooldown_minutes))
        self.error_handler = ErrorHandlerMiddleware()

    async def setup_hook(self) -> None:
        await init_db()
        register_commands(self.tree)
        synced = await self.tree.sync()
        logger.info("Synced %s application commands", len(synced))

    async def on_ready(self) -> None:
        logger.info("Logged in as %s (%s)", self.user, self.user.id if self.user else "?")
        await self.change_presence(
            status=discord.Status.online,
            activity=discord.CustomActivity(name=PRESENCE_TEXT),
        )

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        # slash commands and modals are routed by the tree and the Modal itself
        if interaction.type is discord.InteractionType.component:
            await route_component(self, interaction)
