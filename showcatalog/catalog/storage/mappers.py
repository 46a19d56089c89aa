"""Record-to-domain mapping helpers for catalogue persistence.

Repositories call these helpers so that conversion between ORM records and
entities lives in one place.

Examples
--------
Convert a record to a domain entity:

>>> show = _show_from_record(record)
"""

from __future__ import annotations

from showcatalog.catalog.domain import (
    Episode,
    EpisodeNumber,
    Season,
    SeasonNumber,
    Show,
)

from .models import EpisodeRecord, SeasonRecord, ShowRecord


def _show_from_record(record: ShowRecord) -> Show:
    """Map a show record to a domain entity."""
    return Show(id=record.id, title=record.title, year=record.year)


def _show_to_record(show: Show) -> ShowRecord:
    """Map a show entity to an ORM record."""
    return ShowRecord(id=show.id, title=show.title, year=show.year)


def _season_from_record(record: SeasonRecord) -> Season:
    """Map a season record to a domain entity."""
    return Season(
        id=record.id,
        show_id=record.show_id,
        season_number=SeasonNumber(record.season_number),
    )


def _season_to_record(season: Season) -> SeasonRecord:
    """Map a season entity to an ORM record."""
    return SeasonRecord(
        id=season.id,
        show_id=season.show_id,
        season_number=season.season_number.number,
    )


def _episode_from_record(record: EpisodeRecord) -> Episode:
    """Map an episode record to a domain entity."""
    return Episode(
        id=record.id,
        show_id=record.show_id,
        season_id=record.season_id,
        episode_number=EpisodeNumber(record.episode_number),
    )


def _episode_to_record(episode: Episode) -> EpisodeRecord:
    """Map an episode entity to an ORM record."""
    return EpisodeRecord(
        id=episode.id,
        show_id=episode.show_id,
        season_id=episode.season_id,
        episode_number=episode.episode_number.number,
    )
