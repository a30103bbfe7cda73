"""Interaction error handling shared by component handlers and slash commands."""

import logging
from typing import Any, Awaitable, Callable

import discord
from discord import app_commands

from moviebot.bot.safe_send import respond
from moviebot.core.exceptions import (
    AccountNotLinkedError,
    MovieBotError,
    MovieNotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from moviebot.messages.catalog import get_messages

logger = logging.getLogger(__name__)

# answered with their user_message, logged at INFO without a traceback
_EXPECTED_ERRORS = (PermissionDeniedError, ValidationError, AccountNotLinkedError, MovieNotFoundError)


async def report_error(interaction: discord.Interaction, error: BaseException) -> None:
    """
    Logs the error and tells the user something readable.

    MovieBotError carries its own user_message; anything else gets the
    generic text.
    """
    texts = get_messages()

    if isinstance(error, _EXPECTED_ERRORS):
        logger.info(f"Rejected interaction from {interaction.user.id}: {error}")
        message = error.user_message
    elif isinstance(error, MovieBotError):
        logger.error(f"Application error: {error}", exc_info=error)
        message = error.user_message or texts.GENERIC_ERROR
    else:
        logger.error(f"Unexpected error: {error}", exc_info=error)
        message = texts.GENERIC_ERROR

    try:
        await respond(interaction, message, ephemeral=True)
    except discord.HTTPException as e:
        # interaction token expired or the channel is gone
        logger.warning(f"Could not deliver error message: {e}")


class ErrorHandlerMiddleware:
    """
    Wraps component handlers.

    Logs all errors and sends user-friendly messages to users.
    """

    async def __call__(
        self,
        handler: Callable[..., Awaitable[Any]],
        interaction: discord.Interaction,
        *args: Any,
    ) -> Any:
        try:
            return await handler(interaction, *args)
        except Exception as e:
            await report_error(interaction, e)
            return None


class MovieCommandTree(app_commands.CommandTree):
    """Command tree whose errors go through report_error."""

    async def on_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError) -> None:
        original = getattr(error, "original", error)
        if isinstance(error, app_commands.CheckFailure) and not isinstance(original, MovieBotError):
            original = PermissionDeniedError(str(error), user_message=get_messages().BULLY_NO_PERMISSION)
        await report_error(interaction, original)
