"""Falcon resources for show, season and episode endpoints.

Examples
--------
>>> from showcatalog.api.resources import ShowsResource
>>> api.add_route("/shows", ShowsResource(uow_factory))
"""

from .episodes import EpisodeResource, EpisodesResource
from .seasons import SeasonResource, SeasonsResource
from .shows import ShowResource, ShowsResource

__all__ = [
    "EpisodeResource",
    "EpisodesResource",
    "SeasonResource",
    "SeasonsResource",
    "ShowResource",
    "ShowsResource",
]
