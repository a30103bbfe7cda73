from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine, AsyncSession

from moviebot.core.config import settings

async_engine = create_async_engine(
    settings.database_url_async,
    pool_pre_ping=True,  # Verify connections before using them
    echo=False,  # Set to True for SQL query logging during development
)


def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    # WAL lets readers keep going while a button handler writes
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


if async_engine.dialect.name == "sqlite":
    event.listen(async_engine.sync_engine, "connect", _set_sqlite_pragmas)


AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,  # Explicit control over when to flush
)

