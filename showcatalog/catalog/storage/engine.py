"""Async engine and session-factory construction.

SQLite does not enforce foreign keys unless every connection opts in, so the
engine factory installs a connect hook for SQLite URLs.

Examples
--------
>>> engine = create_engine("sqlite+aiosqlite:///showcatalog.db")
>>> session_factory = create_session_factory(engine)
"""

from __future__ import annotations

import typing as typ

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

if typ.TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


def _enable_sqlite_foreign_keys(dbapi_connection: typ.Any, _record: object) -> None:  # noqa: ANN401
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str, **engine_options: typ.Any) -> AsyncEngine:  # noqa: ANN401
    """Create an async engine for ``database_url``.

    Parameters
    ----------
    database_url : str
        SQLAlchemy async URL, for example ``sqlite+aiosqlite:///catalog.db``.
    **engine_options : typing.Any
        Extra keyword arguments for ``create_async_engine``, such as
        ``poolclass``.

    Returns
    -------
    AsyncEngine
        Engine with foreign-key enforcement enabled for SQLite.
    """
    engine = create_async_engine(database_url, pool_pre_ping=True, **engine_options)
    if engine.dialect.name == "sqlite":
        sa.event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to ``engine``.

    Sessions keep loaded attributes after commit so DTOs can be built from
    entities once the transaction ends.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
