"""Falcon application factory for the show catalogue API."""

from __future__ import annotations

import typing as typ

from falcon import asgi

from .handlers import handle_unexpected_error
from .resources import (
    EpisodeResource,
    EpisodesResource,
    SeasonResource,
    SeasonsResource,
    ShowResource,
    ShowsResource,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .types import UowFactory


def create_app(
    uow_factory: UowFactory,
    *,
    middleware: cabc.Sequence[object] = (),
) -> asgi.App:
    """Build the Falcon ASGI application for show, season and episode routes.

    Parameters
    ----------
    uow_factory : UowFactory
        Factory that creates one unit of work per request.
    middleware : collections.abc.Sequence[object], optional
        Falcon middleware components, for example lifespan hooks.

    Returns
    -------
    falcon.asgi.App
        Configured application. Uncaught errors answer HTTP 500 with a
        generic message.
    """
    app = asgi.App(middleware=list(middleware))
    app.add_error_handler(Exception, handle_unexpected_error)

    app.add_route("/shows", ShowsResource(uow_factory))
    app.add_route("/shows/{show_id}", ShowResource(uow_factory))

    app.add_route("/seasons", SeasonsResource(uow_factory))
    app.add_route("/seasons/{season_id}", SeasonResource(uow_factory))

    app.add_route("/episodes", EpisodesResource(uow_factory))
    app.add_route("/episodes/{episode_id}", EpisodeResource(uow_factory))

    return app
