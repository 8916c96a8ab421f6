"""
Feed Inputs Router - Distributions d'aliment.

Responsabilite unique:
----------------------
Enregistrer les distributions d'aliment; chacune genere une sortie
de stock "Usage" dans le journal.

Endpoints:
----------
- POST /feed-inputs: Enregistrer une distribution
- GET /feed-inputs: Lister les distributions (seasonId, pondId optionnels)
- DELETE /feed-inputs/{id}: Supprimer une distribution (correction de stock)
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.record_usage import UsageRecordResult, WriteOutcome
from src.domain.entities.farm import FeedInput
from src.infrastructure.container import Container
from src.infrastructure.logging import get_logger
from src.presentation.api.dependencies import get_container
from src.presentation.api.feed_inputs.schemas import (
    FeedInputCreate,
    FeedInputDeleteResponse,
    FeedInputResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/feed-inputs", tags=["Feed Inputs"])


def _feed_input_to_response(
    feed_input: FeedInput,
    result: Optional[UsageRecordResult] = None,
) -> FeedInputResponse:
    response = FeedInputResponse(
        id=feed_input.id,
        date=feed_input.date,
        time=feed_input.time,
        pond_id=feed_input.pond_id,
        season_id=feed_input.season_id,
        inventory_item_id=feed_input.inventory_item_id,
        quantity=feed_input.quantity,
        created_at=feed_input.created_at,
    )
    if result is not None:
        response.stock_adjusted = result.is_complete
        if result.adjustment_error is not None:
            response.adjustment_error = str(result.adjustment_error)
    return response


@router.post(
    "",
    response_model=FeedInputResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Enregistrer une distribution d'aliment",
)
def create_feed_input(
    body: FeedInputCreate,
    container: Container = Depends(get_container),
):
    """
    Enregistre la distribution puis deduit la quantite du stock.

    Si la saisie echoue, l'erreur est propagee. Si seule la sortie de
    stock echoue, la saisie est renvoyee avec stockAdjusted=false.
    """
    result = container.record_feed_input.execute(
        FeedInput(
            date=body.date,
            time=body.time,
            pond_id=body.pond_id,
            season_id=body.season_id,
            inventory_item_id=body.inventory_item_id,
            quantity=body.quantity,
        )
    )
    if result.outcome == WriteOutcome.FAILED:
        raise result.error

    logger.info(
        "feed_input_recorded",
        feed_input_id=str(result.record.id),
        outcome=result.outcome.value,
    )
    return _feed_input_to_response(result.record, result)


@router.get(
    "",
    response_model=list[FeedInputResponse],
    response_model_exclude_none=True,
    summary="Lister les distributions d'aliment",
)
def list_feed_inputs(
    season_id: Optional[UUID] = Query(None, alias="seasonId"),
    pond_id: Optional[UUID] = Query(None, alias="pondId"),
    container: Container = Depends(get_container),
):
    """Distributions filtrees, les plus recentes d'abord."""
    records = container.feed_input_repository.find(season_id=season_id, pond_id=pond_id)
    return [_feed_input_to_response(r) for r in records]


@router.delete(
    "/{feed_input_id}",
    response_model=FeedInputDeleteResponse,
    response_model_exclude_none=True,
    summary="Supprimer une distribution d'aliment",
)
def delete_feed_input(
    feed_input_id: UUID,
    container: Container = Depends(get_container),
):
    """
    Supprime la distribution et remet la quantite en stock.

    Le journal n'est jamais modifie: une ligne "Correction" compense
    la sortie de stock d'origine.
    """
    result = container.delete_feed_input.execute(feed_input_id)
    if result.outcome == WriteOutcome.FAILED:
        raise result.error

    logger.info(
        "feed_input_deleted",
        feed_input_id=str(feed_input_id),
        outcome=result.outcome.value,
    )
    return FeedInputDeleteResponse(
        message="Feed input deleted successfully",
        stock_adjusted=result.is_complete,
        adjustment_error=str(result.adjustment_error) if result.adjustment_error else None,
    )
