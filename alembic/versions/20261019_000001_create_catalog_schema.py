"""Create the show catalogue schema.

This migration defines the ``shows``, ``seasons`` and ``episodes`` tables
with their foreign keys and the per-show uniqueness constraints on season and
episode numbers.

Examples
--------
Apply the migration with Alembic:

>>> alembic upgrade head
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "20261019_000001"
down_revision = None
branch_labels = None
depends_on = None

_ID_LENGTH = 36


def upgrade() -> None:
    """Create the catalogue tables."""
    op.create_table(
        "shows",
        sa.Column("id", sa.String(_ID_LENGTH), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=True),
    )
    op.create_table(
        "seasons",
        sa.Column("id", sa.String(_ID_LENGTH), primary_key=True),
        sa.Column(
            "show_id",
            sa.String(_ID_LENGTH),
            sa.ForeignKey("shows.id", name="fk_seasons_show_id_shows"),
            nullable=False,
        ),
        sa.Column("season_number", sa.Integer(), nullable=False),
        sa.UniqueConstraint(
            "show_id",
            "season_number",
            name="uq_seasons_show_id_season_number",
        ),
    )
    op.create_index("ix_seasons_show_id", "seasons", ["show_id"])
    op.create_table(
        "episodes",
        sa.Column("id", sa.String(_ID_LENGTH), primary_key=True),
        sa.Column(
            "show_id",
            sa.String(_ID_LENGTH),
            sa.ForeignKey("shows.id", name="fk_episodes_show_id_shows"),
            nullable=False,
        ),
        sa.Column(
            "season_id",
            sa.String(_ID_LENGTH),
            sa.ForeignKey("seasons.id", name="fk_episodes_season_id_seasons"),
            nullable=False,
        ),
        sa.Column("episode_number", sa.Integer(), nullable=False),
        sa.UniqueConstraint(
            "show_id",
            "season_id",
            "episode_number",
            name="uq_episodes_show_id_season_id_episode_number",
        ),
    )
    op.create_index("ix_episodes_show_id", "episodes", ["show_id"])
    op.create_index("ix_episodes_season_id", "episodes", ["season_id"])


def downgrade() -> None:
    """Drop the catalogue tables."""
    op.drop_index("ix_episodes_season_id", table_name="episodes")
    op.drop_index("ix_episodes_show_id", table_name="episodes")
    op.drop_table("episodes")
    op.drop_index("ix_seasons_show_id", table_name="seasons")
    op.drop_table("seasons")
    op.drop_table("shows")
