"""
Admin Router - Maintenance du cache de reponses.

Endpoints:
----------
- GET /admin/cache/stats: Statistiques du cache
- POST /admin/cache/clear: Vider tout le cache
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.domain.ports.response_cache import ResponseCache
from src.infrastructure.logging import get_logger
from src.presentation.api.dependencies import get_response_cache
from src.presentation.api.schemas import CamelModel

logger = get_logger(__name__)

router = APIRouter(prefix="/admin/cache", tags=["Admin"])


class CacheClearResponse(CamelModel):
    """Resultat du vidage du cache."""

    cleared: int


@router.get("/stats", summary="Statistiques du cache")
def get_cache_stats(
    cache: ResponseCache = Depends(get_response_cache),
) -> dict[str, Any]:
    return cache.get_stats()


@router.post(
    "/clear",
    response_model=CacheClearResponse,
    summary="Vider le cache",
)
def clear_cache(
    cache: ResponseCache = Depends(get_response_cache),
):
    cleared = cache.invalidate_all()
    logger.info("cache_cleared", cleared=cleared)
    return CacheClearResponse(cleared=cleared)
