"""REST API adapters for the show catalogue.

This package exposes the Falcon application factory used by the runtime
entry point and integration tests.

Examples
--------
>>> from showcatalog.api import create_app
>>> app = create_app(uow_factory)  # doctest: +SKIP
"""

from __future__ import annotations

from .app import create_app

__all__ = ["create_app"]
