"""Environment-driven settings for the show catalogue service.

Examples
--------
>>> settings = load_settings()
>>> settings.database_url
'sqlite+aiosqlite:///showcatalog.db'
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DATABASE_URL_ENV = "SHOWCATALOG_DATABASE_URL"
FALLBACK_DATABASE_URL_ENV = "DATABASE_URL"
LOG_LEVEL_ENV = "SHOWCATALOG_LOG_LEVEL"
APPLY_MIGRATIONS_ENV = "SHOWCATALOG_APPLY_MIGRATIONS"

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///showcatalog.db"
_TRUTHY_VALUES = frozenset({"1", "on", "true", "yes"})


@dc.dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings.

    Attributes
    ----------
    database_url : str
        SQLAlchemy async database URL.
    log_level : str | None
        Requested log level; validated by ``configure_logging``.
    apply_migrations : bool
        Whether to run Alembic migrations when the app starts.
    """

    database_url: str = DEFAULT_DATABASE_URL
    log_level: str | None = None
    apply_migrations: bool = False


def _non_empty(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _flag_enabled(raw_value: str | None) -> bool:
    """Return True when an environment toggle is truthy."""
    if raw_value is None:
        return False
    return raw_value.strip().lower() in _TRUTHY_VALUES


def load_settings(environ: cabc.Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    Parameters
    ----------
    environ : collections.abc.Mapping[str, str] | None, optional
        Mapping to read instead of ``os.environ``.

    Returns
    -------
    Settings
        Settings with defaults filled in for unset or blank variables.
    """
    env = os.environ if environ is None else environ
    database_url = (
        _non_empty(env.get(DATABASE_URL_ENV))
        or _non_empty(env.get(FALLBACK_DATABASE_URL_ENV))
        or DEFAULT_DATABASE_URL
    )
    return Settings(
        database_url=database_url,
        log_level=_non_empty(env.get(LOG_LEVEL_ENV)),
        apply_migrations=_flag_enabled(env.get(APPLY_MIGRATIONS_ENV)),
    )


__all__ = ["Settings", "load_settings"]
