"""Alembic entry points for the catalogue schema.

Migrations always run on a connection borrowed from the caller's async
engine; ``alembic/env.py`` picks that connection up from
``Config.attributes`` together with the batch-mode flag decided here. SQLite
cannot ``ALTER`` constraints in place, so its migrations run in batch mode.

Examples
--------
Bring a database to the latest revision and report where it stands:

>>> await apply_migrations(engine)
>>> await current_revision(engine) == head_revision()
True
"""

from __future__ import annotations

import pathlib
import typing as typ

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

if typ.TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.ext.asyncio import AsyncEngine

_PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[3]
_INI_PATH = _PROJECT_ROOT / "alembic.ini"
_SCRIPT_LOCATION = _PROJECT_ROOT / "alembic"

CONNECTION_ATTRIBUTE = "connection"
BATCH_MODE_ATTRIBUTE = "render_as_batch"


def alembic_config(database_url: str, *, batch_mode: bool = False) -> Config:
    """Build the Alembic configuration for the catalogue migrations.

    Parameters
    ----------
    database_url : str
        Database URL written to ``sqlalchemy.url``. ``%`` is escaped for
        ConfigParser.
    batch_mode : bool, optional
        Ask ``env.py`` to render operations in batch mode.

    Returns
    -------
    Config
        Configuration pointing at the project's ``alembic`` directory.
    """
    cfg = Config(str(_INI_PATH))
    cfg.set_main_option("script_location", str(_SCRIPT_LOCATION))
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    cfg.attributes[BATCH_MODE_ATTRIBUTE] = batch_mode
    return cfg


def _config_for(engine: AsyncEngine) -> Config:
    return alembic_config(
        engine.url.render_as_string(hide_password=False),
        batch_mode=engine.dialect.name == "sqlite",
    )


def head_revision() -> str | None:
    """Return the newest revision shipped in ``alembic/versions``."""
    script = ScriptDirectory.from_config(alembic_config(""))
    return script.get_current_head()


def _upgrade(connection: Connection, cfg: Config, revision: str) -> None:
    cfg.attributes[CONNECTION_ATTRIBUTE] = connection
    command.upgrade(cfg, revision)


async def apply_migrations(engine: AsyncEngine, revision: str = "head") -> None:
    """Upgrade the database behind ``engine`` to ``revision``.

    Parameters
    ----------
    engine : AsyncEngine
        Engine whose database is migrated inside one transaction.
    revision : str, optional
        Target revision; defaults to the newest one.
    """
    cfg = _config_for(engine)
    async with engine.begin() as connection:
        await connection.run_sync(_upgrade, cfg, revision)


def _read_revision(connection: Connection) -> str | None:
    return MigrationContext.configure(connection).get_current_revision()


async def current_revision(engine: AsyncEngine) -> str | None:
    """Return the revision stamped in the database, or None when unmigrated."""
    async with engine.connect() as connection:
        return await connection.run_sync(_read_revision)


__all__ = (
    "alembic_config",
    "apply_migrations",
    "current_revision",
    "head_revision",
)
