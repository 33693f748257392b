"""Process-wide database engine plus the request-scoped session dependency.

The engine is created lazily from :func:`get_settings` the first time it is
needed and torn down by :func:`dispose_engine` when the app shuts down.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from loyalize.core.config import DatabaseSettings, get_settings
from loyalize.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def build_engine(database: DatabaseSettings, *, echo: bool = False) -> AsyncEngine:
    options: dict[str, Any] = {"echo": database.echo or echo}
    if database.is_sqlite:
        options["connect_args"] = {"timeout": database.sqlite_timeout}
    else:
        options.update(
            {
                key: value
                for key, value in (("pool_size", database.pool_size), ("max_overflow", database.max_overflow))
                if value is not None
            }
        )
    engine = create_async_engine(database.url, **options)
    if database.is_sqlite and database.sqlite_foreign_keys:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> AsyncEngine:
    global _engine, _session_factory
    if _engine is None:
        settings = get_settings()
        _engine = build_engine(settings.database, echo=settings.debug)
        # expire_on_commit=False: routers serialize rows after committing
        _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    get_engine()
    assert _session_factory is not None
    return _session_factory


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield one session per request; commit when the handler returns, roll back if it raises."""
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        else:
            await session.commit()


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Create any missing tables. Alembic owns the schema outside development and tests."""
    from loyalize.db import models  # noqa: F401  registers every table on Base.metadata

    engine = engine or get_engine()
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


async def dispose_engine() -> None:
    global _engine, _session_factory
    engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        await engine.dispose()
