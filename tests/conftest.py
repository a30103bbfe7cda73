import os

# Settings are read at import time; give them harmless values before moviebot loads.
os.environ.setdefault("DISCORD_TOKEN", "test-discord-token")
os.environ.setdefault("TMDB_API_KEY", "test-tmdb-key")
os.environ.setdefault("DATABASE_URL_ASYNC", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_URL_SYNC", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LANGUAGE", "en")
os.environ.pop("OVERSEERR_URL", None)
os.environ.pop("OVERSEERR_API_KEY", None)

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from moviebot.core.config import settings  # noqa: E402
from moviebot.db.utils import init_db  # noqa: E402
from moviebot.messages import en  # noqa: E402

import moviebot.integrations.overseerr as overseerr  # patch the module, not "from ... import ..."


@pytest_asyncio.fixture()
async def async_engine(tmp_path):
    # one SQLite file per test: a clean database without savepoint tricks
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def session(async_engine):
    s = AsyncSession(bind=async_engine, expire_on_commit=False)
    try:
        yield s
    finally:
        await s.close()


@pytest_asyncio.fixture()
async def other_session(async_engine):
    """A second, independent session on the same database."""
    s = AsyncSession(bind=async_engine, expire_on_commit=False)
    try:
        yield s
    finally:
        await s.close()


@pytest.fixture()
def texts():
    return en


class FakeClock:
    """Manually advanced clock for the bullying tracker."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def overseerr_enabled(monkeypatch):
    monkeypatch.setattr(settings, "overseerr_url", "http://overseerr.test")
    monkeypatch.setattr(settings, "overseerr_api_key", "test-overseerr-key")
    return overseerr
