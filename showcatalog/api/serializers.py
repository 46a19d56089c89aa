"""Response serializers for catalogue transfer records."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from showcatalog.catalog.services import EpisodeDTO, SeasonDTO, ShowDTO

    type CatalogDTO = ShowDTO | SeasonDTO | EpisodeDTO


def serialize_record(record: CatalogDTO) -> dict[str, typ.Any]:
    """Serialize one transfer record to a JSON object."""
    return dc.asdict(record)


def serialize_records(records: cabc.Iterable[CatalogDTO]) -> list[dict[str, typ.Any]]:
    """Serialize transfer records to a JSON array."""
    return [serialize_record(record) for record in records]
