"""SQLAlchemy persistence adapters for the show catalogue.

This package provides the ORM models, repositories, unit of work and engine
helpers behind the catalogue ports.

Examples
--------
Fetch a show through the unit of work:

>>> async with SqlAlchemyUnitOfWork(session_factory) as uow:
...     show = await uow.shows.find(show_id)
"""

from .engine import create_engine, create_session_factory
from .migration_check import detect_schema_drift
from .models import Base, EpisodeRecord, SeasonRecord, ShowRecord
from .repositories import (
    SqlAlchemyEpisodeRepository,
    SqlAlchemySeasonRepository,
    SqlAlchemyShowRepository,
)
from .uow import SqlAlchemyUnitOfWork

__all__ = (
    "Base",
    "EpisodeRecord",
    "SeasonRecord",
    "ShowRecord",
    "SqlAlchemyEpisodeRepository",
    "SqlAlchemySeasonRepository",
    "SqlAlchemyShowRepository",
    "SqlAlchemyUnitOfWork",
    "create_engine",
    "create_session_factory",
    "detect_schema_drift",
)
