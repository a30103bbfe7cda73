import asyncio
import logging

from moviebot.bot.client import MovieBot
from moviebot.core.config import settings
from moviebot.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


async def main() -> None:
    logger.info("Starting movie bot (environment=%s, language=%s)...", settings.environment, settings.language)

    bot = MovieBot()
    async with bot:
        await bot.start(settings.discord_token)


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise SystemExit(1) from e


if __name__ == "__main__":
    run()
