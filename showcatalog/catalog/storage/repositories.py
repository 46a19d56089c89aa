"""SQLAlchemy repositories for the show catalogue.

Each repository translates entities to ORM records and runs against the
``AsyncSession`` it was constructed with. Transactions belong to the caller,
normally ``SqlAlchemyUnitOfWork``.

Examples
--------
Save a show with the unit-of-work session:

>>> async with SqlAlchemyUnitOfWork(session_factory) as uow:
...     await uow.shows.save(show)
...     await uow.commit()
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import sqlalchemy as sa

from showcatalog.catalog.errors import NotFoundError
from showcatalog.catalog.ports import (
    EpisodeRepository,
    SeasonRepository,
    ShowRepository,
)
from showcatalog.logging import get_logger, log_debug

from .mappers import (
    _episode_from_record,
    _episode_to_record,
    _season_from_record,
    _season_to_record,
    _show_from_record,
    _show_to_record,
)
from .models import EpisodeRecord, SeasonRecord, ShowRecord

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from sqlalchemy.ext.asyncio import AsyncSession

    from showcatalog.catalog.domain import Episode, Season, Show

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class RecordMapping[DomainT, RecordT]:
    """How one entity type is stored.

    Attributes
    ----------
    record_type : type[RecordT]
        ORM model backing the entity.
    entity_name : str
        Human-readable name used in not-found messages.
    not_found_code : str
        Error code raised when no row matches an identifier.
    from_record : cabc.Callable[[RecordT], DomainT]
        Record-to-entity mapper.
    to_record : cabc.Callable[[DomainT], RecordT]
        Entity-to-record mapper.
    """

    record_type: type[RecordT]
    entity_name: str
    not_found_code: str
    from_record: cabc.Callable[[RecordT], DomainT]
    to_record: cabc.Callable[[DomainT], RecordT]


class _RepositoryBase[DomainT, RecordT]:
    """Shared find/save/delete implementation for catalogue repositories."""

    def __init__(
        self,
        session: AsyncSession,
        mapping: RecordMapping[DomainT, RecordT],
    ) -> None:
        self._session = session
        self._mapping = mapping

    def _not_found(self, entity_id: str) -> NotFoundError:
        msg = f"{self._mapping.entity_name} not found"
        return NotFoundError(
            msg,
            code=self._mapping.not_found_code,
            details={"id": entity_id},
        )

    def _id_column(self) -> typ.Any:  # noqa: ANN401
        return getattr(self._mapping.record_type, "id")  # noqa: B009

    async def _find(self, entity_id: str) -> DomainT:
        """Return the entity with ``entity_id`` or raise ``NotFoundError``."""
        result = await self._session.execute(
            sa.select(self._mapping.record_type).where(self._id_column() == entity_id)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise self._not_found(entity_id)
        return self._mapping.from_record(record)

    async def _find_all(self) -> list[DomainT]:
        """Return every stored entity in identifier order."""
        result = await self._session.execute(
            sa.select(self._mapping.record_type).order_by(self._id_column())
        )
        return [self._mapping.from_record(record) for record in result.scalars()]

    async def _save(self, entity: DomainT) -> None:
        """Insert or overwrite the row for ``entity`` and flush.

        Flushing here makes constraint violations surface from ``save``
        rather than from a later commit.
        """
        await self._session.merge(self._mapping.to_record(entity))
        await self._session.flush()

    async def _delete(self, entity_id: str) -> None:
        """Delete the row for ``entity_id`` or raise ``NotFoundError``."""
        result = await self._session.execute(
            sa.delete(self._mapping.record_type).where(self._id_column() == entity_id)
        )
        if typ.cast("sa.CursorResult[typ.Any]", result).rowcount == 0:
            raise self._not_found(entity_id)
        log_debug(
            logger,
            "Deleted %s row %s.",
            self._mapping.record_type.__tablename__,
            entity_id,
        )


_SHOW_MAPPING = RecordMapping(
    record_type=ShowRecord,
    entity_name="Show",
    not_found_code="SHOW_NOT_FOUND_ERROR",
    from_record=_show_from_record,
    to_record=_show_to_record,
)
_SEASON_MAPPING = RecordMapping(
    record_type=SeasonRecord,
    entity_name="Season",
    not_found_code="SEASON_NOT_FOUND_ERROR",
    from_record=_season_from_record,
    to_record=_season_to_record,
)
_EPISODE_MAPPING = RecordMapping(
    record_type=EpisodeRecord,
    entity_name="Episode",
    not_found_code="EPISODE_NOT_FOUND_ERROR",
    from_record=_episode_from_record,
    to_record=_episode_to_record,
)


class SqlAlchemyShowRepository(_RepositoryBase["Show", ShowRecord], ShowRepository):
    """Persist shows using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, _SHOW_MAPPING)

    async def find(self, show_id: str) -> Show:
        """Fetch a show by identifier."""
        return await self._find(show_id)

    async def find_all(self) -> list[Show]:
        """List all shows."""
        return await self._find_all()

    async def save(self, show: Show) -> None:
        """Insert or overwrite a show.

        Parameters
        ----------
        show : Show
            Show entity to persist.
        """
        await self._save(show)

    async def delete(self, show_id: str) -> None:
        """Delete a show by identifier."""
        await self._delete(show_id)


class SqlAlchemySeasonRepository(
    _RepositoryBase["Season", SeasonRecord],
    SeasonRepository,
):
    """Persist seasons using SQLAlchemy.

    ``(show_id, season_number)`` is unique; a duplicate raises
    ``sqlalchemy.exc.IntegrityError`` from ``save``.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, _SEASON_MAPPING)

    async def find(self, season_id: str) -> Season:
        """Fetch a season by identifier."""
        return await self._find(season_id)

    async def find_all(self) -> list[Season]:
        """List all seasons."""
        return await self._find_all()

    async def save(self, season: Season) -> None:
        """Insert or overwrite a season."""
        await self._save(season)

    async def delete(self, season_id: str) -> None:
        """Delete a season by identifier."""
        await self._delete(season_id)


class SqlAlchemyEpisodeRepository(
    _RepositoryBase["Episode", EpisodeRecord],
    EpisodeRepository,
):
    """Persist episodes using SQLAlchemy.

    ``(show_id, season_id, episode_number)`` is unique; a duplicate raises
    ``sqlalchemy.exc.IntegrityError`` from ``save``.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, _EPISODE_MAPPING)

    async def find(self, episode_id: str) -> Episode:
        """Fetch an episode by identifier."""
        return await self._find(episode_id)

    async def find_all(self) -> list[Episode]:
        """List all episodes."""
        return await self._find_all()

    async def save(self, episode: Episode) -> None:
        """Insert or overwrite an episode."""
        await self._save(episode)

    async def delete(self, episode_id: str) -> None:
        """Delete an episode by identifier."""
        await self._delete(episode_id)
