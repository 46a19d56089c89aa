"""Shared types for the Falcon catalogue API adapter.

``UowFactory`` builds a request-scoped unit of work and ``JsonPayload`` is
the dictionary shape of JSON request and response bodies.

Example
-------
>>> factory: UowFactory = (  # doctest: +SKIP
...     lambda: SqlAlchemyUnitOfWork(session_factory)
... )
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

if typ.TYPE_CHECKING:
    from showcatalog.catalog.ports import CatalogUnitOfWork

type UowFactory = cabc.Callable[[], CatalogUnitOfWork]
type JsonPayload = dict[str, typ.Any]
