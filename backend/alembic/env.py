"""Alembic environment: migrations for the inventory schema (items, fairs, sales).

Invariants:
    - The database URL comes from artisan.config Settings (DATABASE_URL / .env),
      the same source the API uses; alembic.ini carries no URL
    - target_metadata is artisan's Base.metadata with every model registered

Design Decisions:
    - Async engine for online runs: asyncpg and aiosqlite are the only drivers installed
    - render_as_batch on SQLite: it cannot ALTER constraints in place
    - fileConfig only when run from the CLI with an ini file; programmatic runs
      (tests) keep the caller's logging setup
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from artisan.config import get_settings
from artisan.db.base import Base
import artisan.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _configure(
        url=get_settings().database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(
        get_settings().database_url, poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
