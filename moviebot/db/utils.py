"""Database utilities and helpers."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from moviebot.core.exceptions import DatabaseError
from moviebot.db.base import Base
from moviebot.db import models  # noqa: F401  (registers the tables on Base.metadata)
from moviebot.db.session import AsyncSessionLocal, async_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database sessions with automatic error handling.

    Usage:
        async with get_session() as session:
            added = await add_to_watchlist(session, ...)

    Yields:
        AsyncSession: Database session

    Raises:
        DatabaseError: If database operation fails
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except DatabaseError:
            await session.rollback()
            raise
        except Exception as e:
            await session.rollback()
            logger.error(f"Database error: {e}", exc_info=True)
            raise DatabaseError(f"Database operation failed: {e}") from e


def ensure_database_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return
    if not url.database or url.database == ":memory:":
        return

    directory = Path(url.database).parent
    if not directory.exists():
        logger.info("Creating data directory: %s", directory)
        directory.mkdir(parents=True, exist_ok=True)


async def init_db(engine: AsyncEngine = async_engine) -> None:
    """Create missing tables. Schema changes go through Alembic."""
    ensure_database_directory(str(engine.url))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized (%s)", engine.url.render_as_string(hide_password=True))
