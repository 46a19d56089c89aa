"""Unit-of-work implementation for catalogue persistence.

The unit of work owns one ``AsyncSession`` for its lifetime and hands it to
each repository at construction.

Examples
--------
Commit work in a single unit of work:

>>> async with SqlAlchemyUnitOfWork(session_factory) as uow:
...     await uow.shows.save(show)
...     await uow.commit()
"""

import typing as typ

from showcatalog.catalog.ports import CatalogUnitOfWork
from showcatalog.logging import get_logger, log_debug

from .repositories import (
    SqlAlchemyEpisodeRepository,
    SqlAlchemySeasonRepository,
    SqlAlchemyShowRepository,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork(CatalogUnitOfWork):
    """Async unit of work backed by SQLAlchemy sessions.

    Parameters
    ----------
    session_factory : collections.abc.Callable[[], AsyncSession]
        Factory that produces a new async session for each unit of work.

    Attributes
    ----------
    shows : SqlAlchemyShowRepository
        Repository for show persistence.
    seasons : SqlAlchemySeasonRepository
        Repository for season persistence.
    episodes : SqlAlchemyEpisodeRepository
        Repository for episode persistence.
    """

    def __init__(self, session_factory: cabc.Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        """Open a session and bind the repositories to it."""
        self._session = self._session_factory()
        self.shows = SqlAlchemyShowRepository(self._session)
        self.seasons = SqlAlchemySeasonRepository(self._session)
        self.episodes = SqlAlchemyEpisodeRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Close the session, rolling back first if the block raised.

        Parameters
        ----------
        exc_type : type[BaseException] | None
            Exception type raised within the context, if any.
        exc : BaseException | None
            Exception instance raised within the context, if any.
        traceback : TracebackType | None
            Traceback for the raised exception, if any.
        """
        if self._session is None:
            return
        try:
            if exc is not None:
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None

    def _require_session(self) -> AsyncSession:
        """Return the active session or raise when missing."""
        if self._session is None:
            msg = "Session not initialized for unit of work."
            raise RuntimeError(msg)
        return self._session

    async def commit(self) -> None:
        """Commit the current transaction.

        Raises
        ------
        RuntimeError
            If the unit of work has not been entered.
        """
        await self._require_session().commit()
        log_debug(logger, "Committed catalogue unit of work.")

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self._require_session().rollback()
