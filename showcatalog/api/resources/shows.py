"""Falcon resources for show endpoints."""

from __future__ import annotations

import typing as typ

from showcatalog.api.helpers import SHOW_CREATE_FIELDS, SHOW_UPDATE_FIELDS
from showcatalog.catalog.services import (
    CreateShowRequest,
    ShowService,
    UpdateShowRequest,
)

from .base import _CollectionResourceBase, _ItemResourceBase

if typ.TYPE_CHECKING:
    from showcatalog.api.helpers import BodyField
    from showcatalog.api.types import JsonPayload
    from showcatalog.catalog.ports import CatalogUnitOfWork
    from showcatalog.catalog.services import ShowDTO


class ShowsResource(_CollectionResourceBase[ShowService]):
    """Collection resource for shows."""

    @staticmethod
    @typ.override
    def _get_service(uow: CatalogUnitOfWork) -> ShowService:
        return ShowService(uow.shows)

    @staticmethod
    @typ.override
    def _get_create_fields() -> tuple[BodyField, ...]:
        return SHOW_CREATE_FIELDS

    @staticmethod
    @typ.override
    async def _list(service: ShowService) -> list[ShowDTO]:
        return await service.get_all_shows()

    @staticmethod
    @typ.override
    async def _create(service: ShowService, values: JsonPayload) -> ShowDTO:
        return await service.create_show(CreateShowRequest(**values))


class ShowResource(_ItemResourceBase[ShowService]):
    """Item resource for one show."""

    @staticmethod
    @typ.override
    def _get_service(uow: CatalogUnitOfWork) -> ShowService:
        return ShowService(uow.shows)

    @staticmethod
    @typ.override
    def _get_entity_id_from_path(**kwargs: str) -> str:
        return kwargs["show_id"]

    @staticmethod
    @typ.override
    def _get_update_fields() -> tuple[BodyField, ...]:
        return SHOW_UPDATE_FIELDS

    @staticmethod
    @typ.override
    async def _get(service: ShowService, entity_id: str) -> ShowDTO:
        return await service.get_show_by_id(entity_id)

    @staticmethod
    @typ.override
    async def _update(
        service: ShowService,
        entity_id: str,
        values: JsonPayload,
    ) -> None:
        await service.update_show(UpdateShowRequest(show_id=entity_id, **values))

    @staticmethod
    @typ.override
    async def _delete(service: ShowService, entity_id: str) -> None:
        await service.delete_show(entity_id)
