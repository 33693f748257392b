"""Alembic environment for the Loyalize schema.

Online runs reuse the application's async engine so ``DATABASE__URL`` is the
single source of the target database; offline runs render SQL for the
equivalent sync driver.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from loyalize.core.config import get_settings
from loyalize.db import models  # noqa: F401
from loyalize.infrastructure.database.base import Base
from loyalize.infrastructure.database.session import dispose_engine, get_engine

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

target_metadata = Base.metadata
database = get_settings().database


def _configure(**options) -> None:
    # SQLite cannot ALTER most constraints in place; batch mode recreates the table
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=database.is_sqlite,
        **options,
    )


def migrate_offline() -> None:
    _configure(
        url=database.sync_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate_with(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online() -> None:
    try:
        async with get_engine().connect() as connection:
            await connection.run_sync(_migrate_with)
    finally:
        await dispose_engine()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_online())
