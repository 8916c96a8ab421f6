"""
Ponds Router - Endpoints des bassins.

Responsabilite unique:
----------------------
Exposer le CRUD des bassins. Les listes sont servies depuis le cache
de reponses; chaque mutation invalide les listes concernees.

Endpoints:
----------
- POST /ponds: Creer un bassin
- GET /ponds: Lister les bassins (en cache)
- GET /ponds/season/{season_id}: Bassins d'une saison (en cache)
- GET /ponds/{id}: Recuperer un bassin
- PUT /ponds/{id}: Mettre a jour un bassin
- DELETE /ponds/{id}: Supprimer un bassin
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.domain.entities.farm import Pond, PondStatus
from src.domain.exceptions import PondNotFoundError, SeasonNotFoundError
from src.domain.ports.response_cache import ResponseCache
from src.infrastructure.container import Container
from src.infrastructure.logging import get_logger
from src.presentation.api.caching import cached_response, invalidate_listing
from src.presentation.api.dependencies import get_container, get_response_cache
from src.presentation.api.ponds.schemas import PondCreate, PondResponse, PondUpdate
from src.presentation.api.schemas import MessageResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/ponds", tags=["Ponds"])


def _pond_to_response(pond: Pond) -> PondResponse:
    """Convertit un Pond en PondResponse."""
    return PondResponse(
        id=pond.id,
        name=pond.name,
        size=pond.size,
        capacity=pond.capacity,
        season_id=pond.season_id,
        status=pond.status.value,
        created_at=pond.created_at,
        updated_at=pond.updated_at,
    )


def _get_pond_or_404(container: Container, pond_id: UUID) -> Pond:
    pond = container.pond_repository.get_by_id(pond_id)
    if pond is None:
        raise PondNotFoundError(pond_id)
    return pond


def _check_season(container: Container, season_id: UUID) -> None:
    if container.season_repository.get_by_id(season_id) is None:
        raise SeasonNotFoundError(season_id)


def _invalidate_pond_listings(request: Request, cache: ResponseCache, *season_ids: UUID) -> None:
    """Invalide la liste globale et les listes par saison."""
    paths = [request.url_for("list_ponds").path]
    paths.extend(
        request.url_for("list_ponds_by_season", season_id=str(season_id)).path
        for season_id in dict.fromkeys(season_ids)
    )
    invalidate_listing(cache, *paths)


@router.post(
    "",
    response_model=PondResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un bassin",
)
def create_pond(
    body: PondCreate,
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Cree un bassin dans une saison existante."""
    _check_season(container, body.season_id)

    pond = Pond(
        name=body.name,
        size=body.size,
        capacity=body.capacity,
        season_id=body.season_id,
        status=PondStatus.from_string(body.status) if body.status else PondStatus.PLANNING,
    )
    container.pond_repository.save(pond)
    logger.info("pond_created", pond_id=str(pond.id), season_id=str(pond.season_id))

    _invalidate_pond_listings(request, cache, pond.season_id)
    return _pond_to_response(pond)


@router.get(
    "",
    response_model=list[PondResponse],
    summary="Lister les bassins",
    description="Reponse mise en cache (TTL 10 min), invalidee a chaque mutation.",
)
@cached_response()
def list_ponds(
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    return [_pond_to_response(p) for p in container.pond_repository.find_all()]


@router.get(
    "/season/{season_id}",
    response_model=list[PondResponse],
    summary="Bassins d'une saison",
)
@cached_response()
def list_ponds_by_season(
    season_id: UUID,
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    return [
        _pond_to_response(p)
        for p in container.pond_repository.find_all(season_id=season_id)
    ]


@router.get(
    "/{pond_id}",
    response_model=PondResponse,
    summary="Recuperer un bassin",
)
def get_pond(
    pond_id: UUID,
    container: Container = Depends(get_container),
):
    return _pond_to_response(_get_pond_or_404(container, pond_id))


@router.put(
    "/{pond_id}",
    response_model=PondResponse,
    summary="Mettre a jour un bassin",
)
def update_pond(
    pond_id: UUID,
    body: PondUpdate,
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Met a jour les champs fournis; invalide l'ancienne et la nouvelle saison."""
    pond = _get_pond_or_404(container, pond_id)
    if body.season_id is not None:
        _check_season(container, body.season_id)

    updated = pond.update(
        name=body.name,
        size=body.size,
        capacity=body.capacity,
        season_id=body.season_id,
        status=PondStatus.from_string(body.status) if body.status else None,
    )
    container.pond_repository.save(updated)
    logger.info("pond_updated", pond_id=str(updated.id))

    _invalidate_pond_listings(request, cache, pond.season_id, updated.season_id)
    return _pond_to_response(updated)


@router.delete(
    "/{pond_id}",
    response_model=MessageResponse,
    summary="Supprimer un bassin",
)
def delete_pond(
    pond_id: UUID,
    request: Request,
    container: Container = Depends(get_container),
    cache: ResponseCache = Depends(get_response_cache),
):
    pond = _get_pond_or_404(container, pond_id)
    container.pond_repository.delete(pond_id)
    logger.info("pond_deleted", pond_id=str(pond_id))

    _invalidate_pond_listings(request, cache, pond.season_id)
    return MessageResponse(message="Pond deleted successfully")
