"""Domain models for the show catalogue.

Value objects validate on construction; entities are mutable records whose
fields change only through ``apply`` so a partial update is validated as a
whole before anything is assigned.
"""

import dataclasses as dc
import enum
import typing as typ
import uuid

from .errors import DomainValidationError


class Unset(enum.Enum):
    """Marker type for fields omitted from a partial update."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: typ.Final = Unset.UNSET

type Patch[T] = T | typ.Literal[Unset.UNSET]


def new_entity_id() -> str:
    """Mint a time-sortable identifier for a new entity."""
    return str(uuid.uuid7())


@dc.dataclass(frozen=True, slots=True)
class EpisodeNumber:
    """Episode position within a season; always at least 1."""

    number: int

    def __post_init__(self) -> None:
        if self.number < 1:
            msg = "Episode number must be greater than 0"
            raise DomainValidationError(
                msg,
                code="EPISODENUMBER_DOMAIN_ERROR",
                details={"episode_number": self.number},
            )


@dc.dataclass(frozen=True, slots=True)
class SeasonNumber:
    """Season position within a show; 0 is allowed for specials."""

    number: int

    def __post_init__(self) -> None:
        if self.number < 0:
            msg = "Season number cannot be negative"
            raise DomainValidationError(
                msg,
                code="SEASONNUMBER_DOMAIN_ERROR",
                details={"season_number": self.number},
            )


def _require_title(title: str) -> str:
    if title == "":
        msg = "Show title cannot be blank"
        raise DomainValidationError(
            msg,
            code="SHOW_DOMAIN_ERROR",
            details={"title": title},
        )
    return title


@dc.dataclass(frozen=True, slots=True)
class ShowUpdate:
    """Fields to change on a show; ``UNSET`` leaves a field as it is."""

    title: Patch[str] = UNSET
    year: Patch[int | None] = UNSET


@dc.dataclass(frozen=True, slots=True)
class SeasonUpdate:
    """Fields to change on a season; ``UNSET`` leaves a field as it is."""

    show_id: Patch[str] = UNSET
    season_number: Patch[int] = UNSET


@dc.dataclass(frozen=True, slots=True)
class EpisodeUpdate:
    """Fields to change on an episode; ``UNSET`` leaves a field as it is."""

    show_id: Patch[str] = UNSET
    season_id: Patch[str] = UNSET
    episode_number: Patch[int] = UNSET


@dc.dataclass(slots=True)
class Show:
    """A television show.

    Attributes
    ----------
    id : str
        UUIDv7 string assigned at creation.
    title : str
        Display title; never empty.
    year : int | None
        Premiere year, when known.
    """

    id: str
    title: str
    year: int | None

    def __post_init__(self) -> None:
        _require_title(self.title)

    @classmethod
    def create(cls, title: str, year: int | None = None) -> typ.Self:
        """Build a new show with a freshly minted identifier."""
        return cls(id=new_entity_id(), title=title, year=year)

    def apply(self, update: ShowUpdate) -> None:
        """Apply the fields present in ``update``.

        Raises
        ------
        DomainValidationError
            If the new title is empty. The show is left unchanged.
        """
        title = self.title if update.title is UNSET else _require_title(update.title)
        year = self.year if update.year is UNSET else update.year
        self.title = title
        self.year = year


@dc.dataclass(slots=True)
class Season:
    """A season of a show, referencing the show by identifier."""

    id: str
    show_id: str
    season_number: SeasonNumber

    @classmethod
    def create(cls, show_id: str, season_number: SeasonNumber) -> typ.Self:
        """Build a new season with a freshly minted identifier."""
        return cls(id=new_entity_id(), show_id=show_id, season_number=season_number)

    def apply(self, update: SeasonUpdate) -> None:
        """Apply the fields present in ``update``.

        Raises
        ------
        DomainValidationError
            If the new season number is negative. The season is left
            unchanged.
        """
        season_number = (
            self.season_number
            if update.season_number is UNSET
            else SeasonNumber(update.season_number)
        )
        show_id = self.show_id if update.show_id is UNSET else update.show_id
        self.show_id = show_id
        self.season_number = season_number


@dc.dataclass(slots=True)
class Episode:
    """An episode, referencing its show and season by identifier."""

    id: str
    show_id: str
    season_id: str
    episode_number: EpisodeNumber

    @classmethod
    def create(
        cls,
        show_id: str,
        season_id: str,
        episode_number: EpisodeNumber,
    ) -> typ.Self:
        """Build a new episode with a freshly minted identifier."""
        return cls(
            id=new_entity_id(),
            show_id=show_id,
            season_id=season_id,
            episode_number=episode_number,
        )

    def apply(self, update: EpisodeUpdate) -> None:
        """Apply the fields present in ``update``.

        Raises
        ------
        DomainValidationError
            If the new episode number is below 1. The episode is left
            unchanged.
        """
        episode_number = (
            self.episode_number
            if update.episode_number is UNSET
            else EpisodeNumber(update.episode_number)
        )
        show_id = self.show_id if update.show_id is UNSET else update.show_id
        season_id = self.season_id if update.season_id is UNSET else update.season_id
        self.show_id = show_id
        self.season_id = season_id
        self.episode_number = episode_number
