"""
Water Quality Router - Releves de qualite de l'eau.

Endpoints:
----------
- POST /water-quality-inputs: Enregistrer un releve (sortie de stock si traitement)
- GET /water-quality-inputs: Lister les releves (seasonId, pondId optionnels)
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.record_usage import UsageRecordResult, WriteOutcome
from src.domain.entities.farm import WaterQualityInput
from src.infrastructure.container import Container
from src.infrastructure.logging import get_logger
from src.presentation.api.dependencies import get_container
from src.presentation.api.water_quality.schemas import (
    WaterQualityInputCreate,
    WaterQualityInputResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/water-quality-inputs", tags=["Water Quality"])

_READING_FIELDS = (
    "id", "date", "time", "pond_id", "season_id", "ph", "dissolved_oxygen",
    "temperature", "salinity", "ammonia", "nitrite", "alkalinity",
    "inventory_item_id", "quantity_used", "created_at",
)


def _reading_to_response(
    reading: WaterQualityInput,
    result: Optional[UsageRecordResult] = None,
) -> WaterQualityInputResponse:
    response = WaterQualityInputResponse(
        **{name: getattr(reading, name) for name in _READING_FIELDS}
    )
    if result is not None and reading.uses_inventory:
        response.stock_adjusted = result.is_complete
        if result.adjustment_error is not None:
            response.adjustment_error = str(result.adjustment_error)
    return response


@router.post(
    "",
    response_model=WaterQualityInputResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Enregistrer un releve de qualite de l'eau",
)
def create_water_quality_input(
    body: WaterQualityInputCreate,
    container: Container = Depends(get_container),
):
    result = container.record_water_quality.execute(
        WaterQualityInput(**body.model_dump())
    )
    if result.outcome == WriteOutcome.FAILED:
        raise result.error

    logger.info(
        "water_quality_recorded",
        reading_id=str(result.record.id),
        outcome=result.outcome.value,
    )
    return _reading_to_response(result.record, result)


@router.get(
    "",
    response_model=list[WaterQualityInputResponse],
    response_model_exclude_none=True,
    summary="Lister les releves",
)
def list_water_quality_inputs(
    season_id: Optional[UUID] = Query(None, alias="seasonId"),
    pond_id: Optional[UUID] = Query(None, alias="pondId"),
    container: Container = Depends(get_container),
):
    records = container.water_quality_repository.find(season_id=season_id, pond_id=pond_id)
    return [_reading_to_response(r) for r in records]
