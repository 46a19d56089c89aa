"""Pytest fixtures for database-backed tests.

Each test gets its own SQLite file under ``tmp_path`` with the Alembic
migrations applied. Engines use ``NullPool`` so Falcon's test client can
open connections from its own event loop.

Examples
--------
Run the database-backed tests:

>>> pytest tests/catalog_storage tests/test_catalog_api.py
"""

from __future__ import annotations

import typing as typ

import pytest
import pytest_asyncio
from sqlalchemy.pool import NullPool

from showcatalog.catalog.storage import create_engine, create_session_factory
from showcatalog.catalog.storage.alembic_helpers import apply_migrations

if typ.TYPE_CHECKING:
    from pathlib import Path

    from falcon import testing
    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path: Path) -> typ.AsyncIterator[AsyncEngine]:
    """Yield an async engine backed by a temporary SQLite file."""
    engine = create_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        poolclass=NullPool,
    )
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def migrated_engine(
    sqlite_engine: AsyncEngine,
) -> typ.AsyncIterator[AsyncEngine]:
    """Yield a SQLite engine with migrations applied."""
    await apply_migrations(sqlite_engine)
    yield sqlite_engine


@pytest.fixture
def session_factory(
    migrated_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Return an async session factory bound to the migrated engine."""
    return create_session_factory(migrated_engine)


@pytest.fixture
def catalog_api_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> testing.TestClient:
    """Build a Falcon test client for the catalogue REST endpoints."""
    from falcon import testing

    from showcatalog.api import create_app
    from showcatalog.catalog.storage import SqlAlchemyUnitOfWork

    app = create_app(lambda: SqlAlchemyUnitOfWork(session_factory))
    return testing.TestClient(app)
