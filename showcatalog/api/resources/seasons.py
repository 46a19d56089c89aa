"""Falcon resources for season endpoints."""

from __future__ import annotations

import typing as typ

from showcatalog.api.helpers import SEASON_CREATE_FIELDS, SEASON_UPDATE_FIELDS
from showcatalog.catalog.services import (
    CreateSeasonRequest,
    SeasonService,
    UpdateSeasonRequest,
)

from .base import _CollectionResourceBase, _ItemResourceBase

if typ.TYPE_CHECKING:
    from showcatalog.api.helpers import BodyField
    from showcatalog.api.types import JsonPayload
    from showcatalog.catalog.ports import CatalogUnitOfWork
    from showcatalog.catalog.services import SeasonDTO


class SeasonsResource(_CollectionResourceBase[SeasonService]):
    """Collection resource for seasons."""

    @staticmethod
    @typ.override
    def _get_service(uow: CatalogUnitOfWork) -> SeasonService:
        return SeasonService(uow.seasons)

    @staticmethod
    @typ.override
    def _get_create_fields() -> tuple[BodyField, ...]:
        return SEASON_CREATE_FIELDS

    @staticmethod
    @typ.override
    async def _list(service: SeasonService) -> list[SeasonDTO]:
        return await service.get_all_seasons()

    @staticmethod
    @typ.override
    async def _create(service: SeasonService, values: JsonPayload) -> SeasonDTO:
        return await service.create_season(CreateSeasonRequest(**values))


class SeasonResource(_ItemResourceBase[SeasonService]):
    """Item resource for one season."""

    @staticmethod
    @typ.override
    def _get_service(uow: CatalogUnitOfWork) -> SeasonService:
        return SeasonService(uow.seasons)

    @staticmethod
    @typ.override
    def _get_entity_id_from_path(**kwargs: str) -> str:
        return kwargs["season_id"]

    @staticmethod
    @typ.override
    def _get_update_fields() -> tuple[BodyField, ...]:
        return SEASON_UPDATE_FIELDS

    @staticmethod
    @typ.override
    async def _get(service: SeasonService, entity_id: str) -> SeasonDTO:
        return await service.get_season_by_id(entity_id)

    @staticmethod
    @typ.override
    async def _update(
        service: SeasonService,
        entity_id: str,
        values: JsonPayload,
    ) -> None:
        await service.update_season(
            UpdateSeasonRequest(season_id=entity_id, **values)
        )

    @staticmethod
    @typ.override
    async def _delete(service: SeasonService, entity_id: str) -> None:
        await service.delete_season(entity_id)
