from __future__ import annotations

import os
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context
from dotenv import load_dotenv

# load .env so DATABASE_URL_SYNC is available
load_dotenv()

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# import models so they register on Base.metadata
from moviebot.db.base import Base  # noqa: E402
from moviebot.db import models  # noqa: F401,E402
from moviebot.db.utils import ensure_database_directory  # noqa: E402

target_metadata = Base.metadata


def get_sync_database_url() -> str:
    # an explicit sqlalchemy.url (tests set one) wins over the environment
    url = config.get_main_option("sqlalchemy.url") or os.getenv("DATABASE_URL_SYNC")
    if not url:
        from moviebot.core.config import settings
        url = settings.database_url_sync
    return url


def run_migrations_offline() -> None:
    url = get_sync_database_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = get_sync_database_url()
    ensure_database_directory(url)

    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = url

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        future=True,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            # SQLite cannot ALTER most constraints in place
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
