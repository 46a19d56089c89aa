"""Ports for catalogue persistence.

Services depend only on these protocols, so the SQLAlchemy adapters can be
replaced by another backend or an in-memory double without touching them.

Examples
--------
Implement a repository that satisfies the protocol:

>>> class MemoryShowRepository(ShowRepository):
...     async def find(self, show_id: str) -> Show:
...         return self._items[show_id]
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from types import TracebackType

    from .domain import Episode, Season, Show


class ShowRepository(typ.Protocol):
    """Persistence interface for shows.

    Methods
    -------
    find(show_id)
        Fetch one show.
    find_all()
        List every stored show.
    save(show)
        Insert or overwrite a show.
    delete(show_id)
        Remove a show.
    """

    async def find(self, show_id: str) -> Show:
        """Fetch a show by identifier.

        Parameters
        ----------
        show_id : str
            Identifier of the show.

        Returns
        -------
        Show
            The stored show.

        Raises
        ------
        NotFoundError
            If no show has ``show_id``. Code ``SHOW_NOT_FOUND_ERROR``.
        """
        ...

    async def find_all(self) -> list[Show]:
        """List all shows; empty when none are stored."""
        ...

    async def save(self, show: Show) -> None:
        """Insert the show, or overwrite every field of the stored row.

        Parameters
        ----------
        show : Show
            Show entity to persist.

        Returns
        -------
        None
        """
        ...

    async def delete(self, show_id: str) -> None:
        """Delete a show.

        Raises
        ------
        NotFoundError
            If no row was removed.
        """
        ...


class SeasonRepository(typ.Protocol):
    """Persistence interface for seasons.

    Methods
    -------
    find(season_id)
        Fetch one season.
    find_all()
        List every stored season.
    save(season)
        Insert or overwrite a season.
    delete(season_id)
        Remove a season.
    """

    async def find(self, season_id: str) -> Season:
        """Fetch a season by identifier.

        Raises
        ------
        NotFoundError
            If no season has ``season_id``. Code ``SEASON_NOT_FOUND_ERROR``.
        """
        ...

    async def find_all(self) -> list[Season]:
        """List all seasons; empty when none are stored."""
        ...

    async def save(self, season: Season) -> None:
        """Insert the season, or overwrite every field of the stored row."""
        ...

    async def delete(self, season_id: str) -> None:
        """Delete a season.

        Raises
        ------
        NotFoundError
            If no row was removed.
        """
        ...


class EpisodeRepository(typ.Protocol):
    """Persistence interface for episodes.

    Methods
    -------
    find(episode_id)
        Fetch one episode.
    find_all()
        List every stored episode.
    save(episode)
        Insert or overwrite an episode.
    delete(episode_id)
        Remove an episode.
    """

    async def find(self, episode_id: str) -> Episode:
        """Fetch an episode by identifier.

        Raises
        ------
        NotFoundError
            If no episode has ``episode_id``. Code
            ``EPISODE_NOT_FOUND_ERROR``.
        """
        ...

    async def find_all(self) -> list[Episode]:
        """List all episodes; empty when none are stored."""
        ...

    async def save(self, episode: Episode) -> None:
        """Insert the episode, or overwrite every field of the stored row."""
        ...

    async def delete(self, episode_id: str) -> None:
        """Delete an episode.

        Raises
        ------
        NotFoundError
            If no row was removed.
        """
        ...


class CatalogUnitOfWork(typ.Protocol):
    """Request-scoped transactional boundary over the catalogue repositories.

    Attributes
    ----------
    shows : ShowRepository
        Repository for show persistence.
    seasons : SeasonRepository
        Repository for season persistence.
    episodes : EpisodeRepository
        Repository for episode persistence.
    """

    shows: ShowRepository
    seasons: SeasonRepository
    episodes: EpisodeRepository

    async def __aenter__(self) -> CatalogUnitOfWork:
        """Enter the unit-of-work context."""
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Exit the context, rolling back when the block raised."""
        ...

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        ...
