"""Falcon resources for episode endpoints."""

from __future__ import annotations

import typing as typ

from showcatalog.api.helpers import EPISODE_CREATE_FIELDS, EPISODE_UPDATE_FIELDS
from showcatalog.catalog.services import (
    CreateEpisodeRequest,
    EpisodeService,
    UpdateEpisodeRequest,
)

from .base import _CollectionResourceBase, _ItemResourceBase

if typ.TYPE_CHECKING:
    from showcatalog.api.helpers import BodyField
    from showcatalog.api.types import JsonPayload
    from showcatalog.catalog.ports import CatalogUnitOfWork
    from showcatalog.catalog.services import EpisodeDTO


class EpisodesResource(_CollectionResourceBase[EpisodeService]):
    """Collection resource for episodes."""

    @staticmethod
    @typ.override
    def _get_service(uow: CatalogUnitOfWork) -> EpisodeService:
        return EpisodeService(uow.episodes)

    @staticmethod
    @typ.override
    def _get_create_fields() -> tuple[BodyField, ...]:
        return EPISODE_CREATE_FIELDS

    @staticmethod
    @typ.override
    async def _list(service: EpisodeService) -> list[EpisodeDTO]:
        return await service.get_all_episodes()

    @staticmethod
    @typ.override
    async def _create(service: EpisodeService, values: JsonPayload) -> EpisodeDTO:
        return await service.create_episode(CreateEpisodeRequest(**values))


class EpisodeResource(_ItemResourceBase[EpisodeService]):
    """Item resource for one episode."""

    @staticmethod
    @typ.override
    def _get_service(uow: CatalogUnitOfWork) -> EpisodeService:
        return EpisodeService(uow.episodes)

    @staticmethod
    @typ.override
    def _get_entity_id_from_path(**kwargs: str) -> str:
        return kwargs["episode_id"]

    @staticmethod
    @typ.override
    def _get_update_fields() -> tuple[BodyField, ...]:
        return EPISODE_UPDATE_FIELDS

    @staticmethod
    @typ.override
    async def _get(service: EpisodeService, entity_id: str) -> EpisodeDTO:
        return await service.get_episode_by_id(entity_id)

    @staticmethod
    @typ.override
    async def _update(
        service: EpisodeService,
        entity_id: str,
        values: JsonPayload,
    ) -> None:
        await service.update_episode(
            UpdateEpisodeRequest(episode_id=entity_id, **values)
        )

    @staticmethod
    @typ.override
    async def _delete(service: EpisodeService, entity_id: str) -> None:
        await service.delete_episode(entity_id)
