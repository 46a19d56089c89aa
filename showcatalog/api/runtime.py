"""Build the catalogue ASGI application from environment settings.

Serve with any ASGI server, for example::

    uvicorn --factory showcatalog.api.runtime:create_app_from_environment
"""

from __future__ import annotations

import typing as typ

from showcatalog.catalog.storage import (
    SqlAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from showcatalog.catalog.storage.alembic_helpers import (
    apply_migrations,
    current_revision,
)
from showcatalog.config import LOG_LEVEL_ENV, load_settings
from showcatalog.logging import configure_logging, get_logger, log_info, log_warning

from .app import create_app

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from falcon import asgi
    from sqlalchemy.ext.asyncio import AsyncEngine

    from showcatalog.config import Settings

logger = get_logger(__name__)


class DatabaseLifespan:
    """Falcon middleware that prepares and releases the database engine."""

    def __init__(self, engine: AsyncEngine, *, apply_migrations: bool) -> None:
        self._engine = engine
        self._apply_migrations = apply_migrations

    async def process_startup(
        self,
        scope: dict[str, typ.Any],
        event: dict[str, typ.Any],
    ) -> None:
        """Apply migrations before the first request when enabled."""
        del scope, event
        if self._apply_migrations:
            log_info(logger, "Applying database migrations.")
            await apply_migrations(self._engine)
            log_info(
                logger,
                "Database schema at revision %s.",
                await current_revision(self._engine),
            )

    async def process_shutdown(
        self,
        scope: dict[str, typ.Any],
        event: dict[str, typ.Any],
    ) -> None:
        """Dispose pooled connections."""
        del scope, event
        await self._engine.dispose()


def create_app_from_environment(
    environ: cabc.Mapping[str, str] | None = None,
) -> asgi.App:
    """Configure logging and storage from the environment and build the app.

    Parameters
    ----------
    environ : collections.abc.Mapping[str, str] | None, optional
        Mapping to read instead of ``os.environ``.

    Returns
    -------
    falcon.asgi.App
        Application wired to a SQLAlchemy-backed unit of work.
    """
    settings: Settings = load_settings(environ)
    level, used_default = configure_logging(settings.log_level)
    if used_default and settings.log_level is not None:
        log_warning(
            logger,
            "Invalid %s value %r; defaulting to %s.",
            LOG_LEVEL_ENV,
            settings.log_level,
            level,
        )

    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    log_info(logger, "Show catalogue API configured at log level %s.", level)
    return create_app(
        lambda: SqlAlchemyUnitOfWork(session_factory),
        middleware=[
            DatabaseLifespan(engine, apply_migrations=settings.apply_migrations),
        ],
    )
