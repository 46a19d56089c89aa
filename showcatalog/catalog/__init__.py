"""Catalogue entities, ports and application services.

Examples
--------
>>> service = ShowService(uow.shows)
>>> show = await service.create_show(CreateShowRequest(title="Severance"))
"""

from .domain import (
    UNSET,
    Episode,
    EpisodeNumber,
    EpisodeUpdate,
    Season,
    SeasonNumber,
    SeasonUpdate,
    Show,
    ShowUpdate,
    Unset,
)
from .errors import CatalogError, DomainValidationError, NotFoundError
from .ports import (
    CatalogUnitOfWork,
    EpisodeRepository,
    SeasonRepository,
    ShowRepository,
)
from .services import (
    CreateEpisodeRequest,
    CreateSeasonRequest,
    CreateShowRequest,
    EpisodeDTO,
    EpisodeService,
    SeasonDTO,
    SeasonService,
    ShowDTO,
    ShowService,
    UpdateEpisodeRequest,
    UpdateSeasonRequest,
    UpdateShowRequest,
)

__all__ = (
    "UNSET",
    "CatalogError",
    "CatalogUnitOfWork",
    "CreateEpisodeRequest",
    "CreateSeasonRequest",
    "CreateShowRequest",
    "DomainValidationError",
    "Episode",
    "EpisodeDTO",
    "EpisodeNumber",
    "EpisodeRepository",
    "EpisodeService",
    "EpisodeUpdate",
    "NotFoundError",
    "Season",
    "SeasonDTO",
    "SeasonNumber",
    "SeasonRepository",
    "SeasonService",
    "SeasonUpdate",
    "Show",
    "ShowDTO",
    "ShowRepository",
    "ShowService",
    "ShowUpdate",
    "UpdateEpisodeRequest",
    "UpdateSeasonRequest",
    "UpdateShowRequest",
    "Unset",
)
