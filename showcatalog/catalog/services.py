"""Application services for shows, seasons and episodes.

Each service wraps one repository port and exchanges flat transfer records
with its callers; entities never cross the service boundary. Errors from the
domain and the repository propagate unchanged.

Examples
--------
Create a show inside a unit of work:

>>> async with SqlAlchemyUnitOfWork(session_factory) as uow:
...     show = await ShowService(uow.shows).create_show(
...         CreateShowRequest(title="Severance", year=2022)
...     )
...     await uow.commit()
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from showcatalog.logging import get_logger, log_info

from .domain import (
    UNSET,
    Episode,
    EpisodeNumber,
    EpisodeUpdate,
    Patch,
    Season,
    SeasonNumber,
    SeasonUpdate,
    Show,
    ShowUpdate,
)

if typ.TYPE_CHECKING:
    from .ports import EpisodeRepository, SeasonRepository, ShowRepository

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ShowDTO:
    """Transfer record for a show."""

    id: str
    title: str
    year: int | None


@dc.dataclass(frozen=True, slots=True)
class SeasonDTO:
    """Transfer record for a season."""

    id: str
    show_id: str
    season_number: int


@dc.dataclass(frozen=True, slots=True)
class EpisodeDTO:
    """Transfer record for an episode."""

    id: str
    show_id: str
    season_id: str
    episode_number: int


@dc.dataclass(frozen=True, slots=True)
class CreateShowRequest:
    """Input for ``ShowService.create_show``."""

    title: str
    year: int | None = None


@dc.dataclass(frozen=True, slots=True)
class UpdateShowRequest:
    """Partial update for a show.

    Attributes
    ----------
    show_id : str
        Identifier of the show to update.
    title : Patch[str]
        New title, or ``UNSET`` to keep the current one.
    year : Patch[int | None]
        New year, ``None`` to clear it, or ``UNSET`` to keep it.
    """

    show_id: str
    title: Patch[str] = UNSET
    year: Patch[int | None] = UNSET


@dc.dataclass(frozen=True, slots=True)
class CreateSeasonRequest:
    """Input for ``SeasonService.create_season``."""

    show_id: str
    season_number: int


@dc.dataclass(frozen=True, slots=True)
class UpdateSeasonRequest:
    """Partial update for a season; omitted fields stay ``UNSET``."""

    season_id: str
    show_id: Patch[str] = UNSET
    season_number: Patch[int] = UNSET


@dc.dataclass(frozen=True, slots=True)
class CreateEpisodeRequest:
    """Input for ``EpisodeService.create_episode``."""

    show_id: str
    season_id: str
    episode_number: int


@dc.dataclass(frozen=True, slots=True)
class UpdateEpisodeRequest:
    """Partial update for an episode; omitted fields stay ``UNSET``."""

    episode_id: str
    show_id: Patch[str] = UNSET
    season_id: Patch[str] = UNSET
    episode_number: Patch[int] = UNSET


def _show_to_dto(show: Show) -> ShowDTO:
    return ShowDTO(id=show.id, title=show.title, year=show.year)


def _season_to_dto(season: Season) -> SeasonDTO:
    return SeasonDTO(
        id=season.id,
        show_id=season.show_id,
        season_number=season.season_number.number,
    )


def _episode_to_dto(episode: Episode) -> EpisodeDTO:
    return EpisodeDTO(
        id=episode.id,
        show_id=episode.show_id,
        season_id=episode.season_id,
        episode_number=episode.episode_number.number,
    )


class ShowService:
    """Use cases for shows.

    Parameters
    ----------
    repository : ShowRepository
        Port used for every read and write.
    """

    def __init__(self, repository: ShowRepository) -> None:
        self._repository = repository

    async def create_show(self, request: CreateShowRequest) -> ShowDTO:
        """Create and persist a show.

        Parameters
        ----------
        request : CreateShowRequest
            Title and optional year for the new show.

        Returns
        -------
        ShowDTO
            The stored show, including its new identifier.

        Raises
        ------
        DomainValidationError
            If the title is empty.
        """
        show = Show.create(request.title, request.year)
        await self._repository.save(show)
        log_info(logger, "Created show %s.", show.id)
        return _show_to_dto(show)

    async def get_show_by_id(self, show_id: str) -> ShowDTO:
        """Return one show.

        Raises
        ------
        NotFoundError
            If the show does not exist.
        """
        return _show_to_dto(await self._repository.find(show_id))

    async def get_all_shows(self) -> list[ShowDTO]:
        """Return every stored show."""
        return [_show_to_dto(show) for show in await self._repository.find_all()]

    async def update_show(self, request: UpdateShowRequest) -> None:
        """Apply a partial update to a show.

        Only fields that are not ``UNSET`` are written; ``year=None`` clears
        the year.

        Raises
        ------
        NotFoundError
            If the show does not exist.
        DomainValidationError
            If the new title is empty.
        """
        show = await self._repository.find(request.show_id)
        show.apply(ShowUpdate(title=request.title, year=request.year))
        await self._repository.save(show)
        log_info(logger, "Updated show %s.", show.id)

    async def delete_show(self, show_id: str) -> None:
        """Delete a show.

        Raises
        ------
        NotFoundError
            If the show does not exist.
        """
        await self._repository.delete(show_id)
        log_info(logger, "Deleted show %s.", show_id)


class SeasonService:
    """Use cases for seasons.

    Parameters
    ----------
    repository : SeasonRepository
        Port used for every read and write.
    """

    def __init__(self, repository: SeasonRepository) -> None:
        self._repository = repository

    async def create_season(self, request: CreateSeasonRequest) -> SeasonDTO:
        """Create and persist a season.

        Raises
        ------
        DomainValidationError
            If ``season_number`` is negative.
        """
        season = Season.create(request.show_id, SeasonNumber(request.season_number))
        await self._repository.save(season)
        log_info(logger, "Created season %s for show %s.", season.id, season.show_id)
        return _season_to_dto(season)

    async def get_season_by_id(self, season_id: str) -> SeasonDTO:
        """Return one season; raises ``NotFoundError`` when absent."""
        return _season_to_dto(await self._repository.find(season_id))

    async def get_all_seasons(self) -> list[SeasonDTO]:
        """Return every stored season."""
        return [
            _season_to_dto(season) for season in await self._repository.find_all()
        ]

    async def update_season(self, request: UpdateSeasonRequest) -> None:
        """Apply a partial update to a season.

        Raises
        ------
        NotFoundError
            If the season does not exist.
        DomainValidationError
            If the new season number is negative.
        """
        season = await self._repository.find(request.season_id)
        season.apply(
            SeasonUpdate(
                show_id=request.show_id,
                season_number=request.season_number,
            )
        )
        await self._repository.save(season)
        log_info(logger, "Updated season %s.", season.id)

    async def delete_season(self, season_id: str) -> None:
        """Delete a season; raises ``NotFoundError`` when absent."""
        await self._repository.delete(season_id)
        log_info(logger, "Deleted season %s.", season_id)


class EpisodeService:
    """Use cases for episodes.

    Parameters
    ----------
    repository : EpisodeRepository
        Port used for every read and write.
    """

    def __init__(self, repository: EpisodeRepository) -> None:
        self._repository = repository

    async def create_episode(self, request: CreateEpisodeRequest) -> EpisodeDTO:
        """Create and persist an episode.

        Raises
        ------
        DomainValidationError
            If ``episode_number`` is below 1.
        """
        episode = Episode.create(
            request.show_id,
            request.season_id,
            EpisodeNumber(request.episode_number),
        )
        await self._repository.save(episode)
        log_info(
            logger,
            "Created episode %s for season %s.",
            episode.id,
            episode.season_id,
        )
        return _episode_to_dto(episode)

    async def get_episode_by_id(self, episode_id: str) -> EpisodeDTO:
        """Return one episode; raises ``NotFoundError`` when absent."""
        return _episode_to_dto(await self._repository.find(episode_id))

    async def get_all_episodes(self) -> list[EpisodeDTO]:
        """Return every stored episode."""
        return [
            _episode_to_dto(episode) for episode in await self._repository.find_all()
        ]

    async def update_episode(self, request: UpdateEpisodeRequest) -> None:
        """Apply a partial update to an episode.

        Raises
        ------
        NotFoundError
            If the episode does not exist.
        DomainValidationError
            If the new episode number is below 1.
        """
        episode = await self._repository.find(request.episode_id)
        episode.apply(
            EpisodeUpdate(
                show_id=request.show_id,
                season_id=request.season_id,
                episode_number=request.episode_number,
            )
        )
        await self._repository.save(episode)
        log_info(logger, "Updated episode %s.", episode.id)

    async def delete_episode(self, episode_id: str) -> None:
        """Delete an episode; raises ``NotFoundError`` when absent."""
        await self._repository.delete(episode_id)
        log_info(logger, "Deleted episode %s.", episode_id)


__all__ = (
    "CreateEpisodeRequest",
    "CreateSeasonRequest",
    "CreateShowRequest",
    "EpisodeDTO",
    "EpisodeService",
    "SeasonDTO",
    "SeasonService",
    "ShowDTO",
    "ShowService",
    "UpdateEpisodeRequest",
    "UpdateSeasonRequest",
    "UpdateShowRequest",
)
