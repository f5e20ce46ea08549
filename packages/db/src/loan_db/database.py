# This project was developed with assistance from AI tools.
"""Async engine and session factory.

The engine is built lazily so importing the models never opens a connection
or requires the production driver to be importable.
"""

import logging
from functools import lru_cache
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from .config import db_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    # for every new connection.
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(url: str | None = None, **kwargs: Any) -> AsyncEngine:
    """Create an async engine, enabling SQLite foreign keys when needed."""
    kwargs.setdefault("echo", db_settings.SQL_ECHO)
    engine = create_async_engine(url or db_settings.DATABASE_URL, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragmas)
    return engine


@lru_cache
def get_default_engine() -> AsyncEngine:
    return get_engine()


def get_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine or get_default_engine(),
        expire_on_commit=False,
        autoflush=False,
    )


async def create_all(engine: AsyncEngine | None = None) -> None:
    """Create every table known to the metadata (development and tests)."""
    from . import models  # noqa: F401 -- registers tables on Base.metadata

    engine = engine or get_default_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))
