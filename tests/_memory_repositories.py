"""In-memory repository doubles for service tests.

Entities are copied on the way in and out so a test only observes changes
that went through ``save``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from showcatalog.catalog.errors import NotFoundError
from showcatalog.catalog.ports import (
    EpisodeRepository,
    SeasonRepository,
    ShowRepository,
)

if typ.TYPE_CHECKING:
    from showcatalog.catalog.domain import Episode, Season, Show


class _MemoryStore[EntityT: (Show, Season, Episode)]:
    def __init__(self, entity_name: str) -> None:
        self._entity_name = entity_name
        self.items: dict[str, EntityT] = {}

    def _missing(self, entity_id: str) -> NotFoundError:
        return NotFoundError(
            f"{self._entity_name} not found",
            code=f"{self._entity_name.upper()}_NOT_FOUND_ERROR",
            details={"id": entity_id},
        )

    async def find(self, entity_id: str) -> EntityT:
        try:
            return dc.replace(self.items[entity_id])
        except KeyError as exc:
            raise self._missing(entity_id) from exc

    async def find_all(self) -> list[EntityT]:
        return [dc.replace(self.items[key]) for key in sorted(self.items)]

    async def save(self, entity: EntityT) -> None:
        self.items[entity.id] = dc.replace(entity)

    async def delete(self, entity_id: str) -> None:
        if self.items.pop(entity_id, None) is None:
            raise self._missing(entity_id)


class MemoryShowRepository(_MemoryStore["Show"], ShowRepository):
    """Dictionary-backed show repository."""

    def __init__(self) -> None:
        super().__init__("Show")


class MemorySeasonRepository(_MemoryStore["Season"], SeasonRepository):
    """Dictionary-backed season repository."""

    def __init__(self) -> None:
        super().__init__("Season")


class MemoryEpisodeRepository(_MemoryStore["Episode"], EpisodeRepository):
    """Dictionary-backed episode repository."""

    def __init__(self) -> None:
        super().__init__("Episode")
