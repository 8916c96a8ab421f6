"""
Seasons Router - Endpoints des saisons d'elevage.

Endpoints:
----------
- POST /seasons: Creer une saison (invalide la liste en cache)
- GET /seasons: Lister les saisons (reponse en cache)
- GET /seasons/{id}: Recuperer une saison
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.domain.entities.farm import Season, SeasonStatus
from src.domain.exceptions import SeasonNotFoundError
from src.domain.ports.response_cache import ResponseCache
from src.infrastructure.container import Container
from src.infrastructure.logging import get_logger
from src.presentation.api.caching import cached_response, invalidate_listing
from src.presentation.api.dependencies import get_container, get_response_cache
from src.presentation.api.seasons.schemas import SeasonCreate, SeasonResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/seasons", tags=["Seasons"])


def _season_to_response(season: Season) -> SeasonResponse:
    return SeasonResponse(
        id=season.id,
        name=season.name,
        start_date=season.start_date,
        end_date=season.end_date,
        status=season.status.value,
        created_at=season.created_at,
    )


@router.post(
    "",
    response_model=SeasonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer une saison",
)
def create_season(
    body: SeasonCreate,
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Cree une saison. 409 si le nom existe deja."""
    season = Season(
        name=body.name,
        start_date=body.start_date,
        end_date=body.end_date,
        status=SeasonStatus.from_string(body.status) if body.status else SeasonStatus.PLANNING,
    )
    container.season_repository.save(season)
    logger.info("season_created", season_id=str(season.id))

    invalidate_listing(cache, request.url_for("list_seasons").path)
    return _season_to_response(season)


@router.get(
    "",
    response_model=list[SeasonResponse],
    summary="Lister les saisons",
    description="Saisons triees par date de debut decroissante. Reponse mise en cache.",
)
@cached_response()
def list_seasons(
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    return [_season_to_response(s) for s in container.season_repository.find_all()]


@router.get(
    "/{season_id}",
    response_model=SeasonResponse,
    summary="Recuperer une saison",
)
def get_season(
    season_id: UUID,
    container: Container = Depends(get_container),
):
    season = container.season_repository.get_by_id(season_id)
    if season is None:
        raise SeasonNotFoundError(season_id)
    return _season_to_response(season)
