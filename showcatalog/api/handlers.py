"""Shared Falcon handlers for catalogue API resources.

``run_in_unit_of_work`` executes one service operation inside a
request-scoped unit of work and translates catalogue errors to HTTP errors.
``handle_unexpected_error`` is registered on the app for everything else, so
internal details never reach the client.

Examples
--------
>>> dto = await run_in_unit_of_work(
...     factory,
...     lambda uow: ShowService(uow.shows).get_show_by_id(show_id),
... )
"""

from __future__ import annotations

import typing as typ

import falcon

from showcatalog.catalog.errors import DomainValidationError, NotFoundError
from showcatalog.logging import get_logger, log_error

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from showcatalog.catalog.ports import CatalogUnitOfWork

    from .types import UowFactory

logger = get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown server error"


async def run_in_unit_of_work[ResultT](
    uow_factory: UowFactory,
    operation: cabc.Callable[[CatalogUnitOfWork], cabc.Awaitable[ResultT]],
    *,
    commit: bool = False,
) -> ResultT:
    """Run ``operation`` in a fresh unit of work.

    Parameters
    ----------
    uow_factory : UowFactory
        Factory that creates unit-of-work instances.
    operation : cabc.Callable[[CatalogUnitOfWork], cabc.Awaitable[ResultT]]
        Service call to execute.
    commit : bool, optional
        Commit after ``operation`` succeeds. Read-only calls leave this off.

    Returns
    -------
    ResultT
        Whatever ``operation`` returned.

    Raises
    ------
    falcon.HTTPNotFound
        Raised when the operation references a missing entity.
    falcon.HTTPBadRequest
        Raised when the operation violates a domain invariant.
    """
    try:
        async with uow_factory() as uow:
            result = await operation(uow)
            if commit:
                await uow.commit()
    except NotFoundError as exc:
        raise falcon.HTTPNotFound(description=str(exc)) from exc
    except DomainValidationError as exc:
        raise falcon.HTTPBadRequest(description=str(exc)) from exc
    return result


async def handle_unexpected_error(
    req: falcon.Request,
    resp: falcon.Response,
    ex: Exception,
    params: dict[str, typ.Any],
    ws: object | None = None,
) -> None:
    """Answer 500 with a generic message and log the original error."""
    del params, ws
    log_error(
        logger,
        "Unhandled error for %s %s: %s",
        req.method,
        req.path,
        type(ex).__name__,
        exc_info=ex,
    )
    resp.status = falcon.HTTP_500
    resp.media = {
        "title": falcon.HTTP_500,
        "description": UNKNOWN_ERROR_MESSAGE,
    }
