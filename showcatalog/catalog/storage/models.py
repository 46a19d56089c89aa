"""SQLAlchemy ORM models for the show catalogue.

The models describe the ``shows``, ``seasons`` and ``episodes`` tables. They
are used by the repositories and compared against the Alembic migrations by
the schema drift check.

Examples
--------
Create the tables directly from metadata:

>>> async with engine.begin() as connection:
...     await connection.run_sync(Base.metadata.create_all)
"""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy import orm

_ID_LENGTH = 36


class Base(orm.DeclarativeBase):
    """Base class for catalogue SQLAlchemy models.

    Notes
    -----
    Alembic and the test fixtures rely on ``Base.metadata``.
    """


class ShowRecord(Base):
    """SQLAlchemy model for shows.

    Attributes
    ----------
    id : str
        UUIDv7 primary key.
    title : str
        Display title.
    year : int | None
        Premiere year, when known.
    """

    __tablename__ = "shows"

    id: orm.Mapped[str] = orm.mapped_column(sa.String(_ID_LENGTH), primary_key=True)
    title: orm.Mapped[str] = orm.mapped_column(sa.Text)
    year: orm.Mapped[int | None] = orm.mapped_column(sa.Integer, nullable=True)


class SeasonRecord(Base):
    """SQLAlchemy model for seasons.

    Attributes
    ----------
    id : str
        UUIDv7 primary key.
    show_id : str
        Foreign key to ``shows.id``.
    season_number : int
        Non-negative season number, unique per show.
    """

    __tablename__ = "seasons"
    __table_args__ = (
        sa.UniqueConstraint(
            "show_id",
            "season_number",
            name="uq_seasons_show_id_season_number",
        ),
    )

    id: orm.Mapped[str] = orm.mapped_column(sa.String(_ID_LENGTH), primary_key=True)
    show_id: orm.Mapped[str] = orm.mapped_column(
        sa.String(_ID_LENGTH),
        sa.ForeignKey("shows.id", name="fk_seasons_show_id_shows"),
        index=True,
    )
    season_number: orm.Mapped[int] = orm.mapped_column(sa.Integer)


class EpisodeRecord(Base):
    """SQLAlchemy model for episodes.

    Attributes
    ----------
    id : str
        UUIDv7 primary key.
    show_id : str
        Foreign key to ``shows.id``.
    season_id : str
        Foreign key to ``seasons.id``.
    episode_number : int
        Positive episode number, unique per show and season.
    """

    __tablename__ = "episodes"
    __table_args__ = (
        sa.UniqueConstraint(
            "show_id",
            "season_id",
            "episode_number",
            name="uq_episodes_show_id_season_id_episode_number",
        ),
    )

    id: orm.Mapped[str] = orm.mapped_column(sa.String(_ID_LENGTH), primary_key=True)
    show_id: orm.Mapped[str] = orm.mapped_column(
        sa.String(_ID_LENGTH),
        sa.ForeignKey("shows.id", name="fk_episodes_show_id_shows"),
        index=True,
    )
    season_id: orm.Mapped[str] = orm.mapped_column(
        sa.String(_ID_LENGTH),
        sa.ForeignKey("seasons.id", name="fk_episodes_season_id_seasons"),
        index=True,
    )
    episode_number: orm.Mapped[int] = orm.mapped_column(sa.Integer)
