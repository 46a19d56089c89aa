"""Shared base resources for Falcon catalogue API adapters.

Collection resources answer list and create requests; item resources answer
fetch, update and delete requests. Subclasses supply the service binding, the
body rules and the service calls, while the bases handle body parsing, the
unit-of-work lifecycle and response shaping.

Examples
--------
>>> class ShowsResource(_CollectionResourceBase[ShowService]): ...
>>> app.add_route("/shows", ShowsResource(uow_factory))
"""

from __future__ import annotations

import typing as typ
from abc import ABC, abstractmethod

import falcon

from showcatalog.api.handlers import run_in_unit_of_work
from showcatalog.api.helpers import parse_body, read_body
from showcatalog.api.serializers import serialize_record, serialize_records

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from showcatalog.api.helpers import BodyField
    from showcatalog.api.serializers import CatalogDTO
    from showcatalog.api.types import JsonPayload, UowFactory
    from showcatalog.catalog.ports import CatalogUnitOfWork


class _ResourceBase[ServiceT](ABC):
    """Store the unit-of-work factory and bind services to a unit of work."""

    def __init__(self, uow_factory: UowFactory) -> None:
        self._uow_factory = uow_factory

    @staticmethod
    @abstractmethod
    def _get_service(uow: CatalogUnitOfWork) -> ServiceT:
        """Return the service bound to the unit of work's repository."""


class _CollectionResourceBase[ServiceT](_ResourceBase[ServiceT], ABC):
    """Base resource for list and create endpoints."""

    @staticmethod
    @abstractmethod
    def _get_create_fields() -> tuple[BodyField, ...]:
        """Return the body rules for create requests."""

    @staticmethod
    @abstractmethod
    async def _list(service: ServiceT) -> cabc.Sequence[CatalogDTO]:
        """Return every stored entity."""

    @staticmethod
    @abstractmethod
    async def _create(service: ServiceT, values: JsonPayload) -> CatalogDTO:
        """Create one entity from validated body values."""

    async def on_get(self, req: falcon.Request, resp: falcon.Response) -> None:
        """List all entities."""
        del req
        records = await run_in_unit_of_work(
            self._uow_factory,
            lambda uow: self._list(self._get_service(uow)),
        )
        resp.media = serialize_records(records)
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.Request, resp: falcon.Response) -> None:
        """Create one entity and return it."""
        payload = await read_body(req)
        values = parse_body(payload, self._get_create_fields())
        record = await run_in_unit_of_work(
            self._uow_factory,
            lambda uow: self._create(self._get_service(uow), values),
            commit=True,
        )
        resp.media = serialize_record(record)
        resp.status = falcon.HTTP_201


class _ItemResourceBase[ServiceT](_ResourceBase[ServiceT], ABC):
    """Base resource for fetch, update and delete endpoints.

    Updates answer to both PATCH and PUT; both apply partial-update semantics
    and succeed with an empty body.
    """

    @staticmethod
    @abstractmethod
    def _get_entity_id_from_path(**kwargs: str) -> str:
        """Return the path parameter value used as the entity identifier."""

    @staticmethod
    @abstractmethod
    def _get_update_fields() -> tuple[BodyField, ...]:
        """Return the body rules for update requests."""

    @staticmethod
    @abstractmethod
    async def _get(service: ServiceT, entity_id: str) -> CatalogDTO:
        """Fetch one entity."""

    @staticmethod
    @abstractmethod
    async def _update(service: ServiceT, entity_id: str, values: JsonPayload) -> None:
        """Apply validated body values to one entity."""

    @staticmethod
    @abstractmethod
    async def _delete(service: ServiceT, entity_id: str) -> None:
        """Delete one entity."""

    def _bind[ResultT](
        self,
        call: cabc.Callable[[ServiceT], cabc.Awaitable[ResultT]],
    ) -> cabc.Callable[[CatalogUnitOfWork], cabc.Awaitable[ResultT]]:
        return lambda uow: call(self._get_service(uow))

    async def on_get(
        self,
        req: falcon.Request,
        resp: falcon.Response,
        **kwargs: str,
    ) -> None:
        """Fetch one entity by identifier."""
        del req
        entity_id = self._get_entity_id_from_path(**kwargs)
        record = await run_in_unit_of_work(
            self._uow_factory,
            self._bind(lambda service: self._get(service, entity_id)),
        )
        resp.media = serialize_record(record)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.Request,
        resp: falcon.Response,
        **kwargs: str,
    ) -> None:
        """Apply a partial update to one entity."""
        entity_id = self._get_entity_id_from_path(**kwargs)
        payload = await read_body(req)
        values = parse_body(payload, self._get_update_fields())
        await run_in_unit_of_work(
            self._uow_factory,
            self._bind(lambda service: self._update(service, entity_id, values)),
            commit=True,
        )
        resp.status = falcon.HTTP_200

    on_put = on_patch

    async def on_delete(
        self,
        req: falcon.Request,
        resp: falcon.Response,
        **kwargs: str,
    ) -> None:
        """Delete one entity by identifier."""
        del req
        entity_id = self._get_entity_id_from_path(**kwargs)
        await run_in_unit_of_work(
            self._uow_factory,
            self._bind(lambda service: self._delete(service, entity_id)),
            commit=True,
        )
        resp.status = falcon.HTTP_200
