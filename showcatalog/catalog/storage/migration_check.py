"""Schema drift detection between ORM models and Alembic migrations.

The check migrates a throwaway SQLite database and compares it with the
model metadata. A non-zero exit lets CI block model changes that ship
without a migration.

Examples
--------
Run the drift check from the command line:

>>> python -m showcatalog.catalog.storage.migration_check
"""

from __future__ import annotations

import asyncio
import pathlib
import sys
import tempfile
import typing as typ

from alembic.autogenerate import compare_metadata
from alembic.migration import MigrationContext

from showcatalog.catalog.storage.alembic_helpers import apply_migrations
from showcatalog.catalog.storage.engine import create_engine
from showcatalog.catalog.storage.models import Base
from showcatalog.logging import configure_logging, get_logger, log_error, log_info

if typ.TYPE_CHECKING:
    import sqlalchemy as sa
    from sqlalchemy.engine import Connection
    from sqlalchemy.ext.asyncio import AsyncEngine

_logger = get_logger(__name__)


def _compare_schema(
    connection: Connection,
    metadata: sa.MetaData,
) -> list[tuple[object, ...]]:
    """Compare a migrated database against ORM model metadata."""
    ctx = MigrationContext.configure(connection)
    return typ.cast("list[tuple[object, ...]]", compare_metadata(ctx, metadata))


async def detect_schema_drift(engine: AsyncEngine) -> list[tuple[object, ...]]:
    """Detect differences between applied migrations and ORM models.

    Parameters
    ----------
    engine : AsyncEngine
        Engine whose database already has every migration applied.

    Returns
    -------
    list[tuple[object, ...]]
        Alembic autogenerate differences; empty when in sync.
    """
    async with engine.connect() as connection:
        return await connection.run_sync(_compare_schema, Base.metadata)


async def check_migrations_cli() -> int:
    """Run the schema drift check as a CLI entrypoint.

    Returns
    -------
    int
        0 when models and migrations match, 1 when drift is detected.
    """
    configure_logging("INFO")
    with tempfile.TemporaryDirectory(prefix="showcatalog-migration-check-") as tmp:
        db_path = pathlib.Path(tmp) / "check.db"
        engine = create_engine(f"sqlite+aiosqlite:///{db_path}")
        try:
            log_info(_logger, "Applying migrations to ephemeral database.")
            await apply_migrations(engine)
            log_info(_logger, "Checking for schema drift.")
            diffs = await detect_schema_drift(engine)
        finally:
            await engine.dispose()

    if diffs:
        log_error(_logger, "Schema drift detected (%s difference(s)):", len(diffs))
        for diff in diffs:
            log_error(_logger, "  %s", diff)
        return 1

    log_info(_logger, "No schema drift detected.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(check_migrations_cli()))
