"""
Water Quality Schemas - Modeles Pydantic pour les releves d'eau.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from src.presentation.api.schemas import CamelModel


class WaterQualityInputCreate(CamelModel):
    """Saisie d'un releve, avec traitement optionnel."""

    date: date
    time: str
    pond_id: UUID
    season_id: UUID
    ph: float = Field(..., alias="pH")
    dissolved_oxygen: float
    temperature: float
    salinity: float
    ammonia: Optional[float] = None
    nitrite: Optional[float] = None
    alkalinity: Optional[float] = None
    inventory_item_id: Optional[UUID] = None
    quantity_used: Optional[float] = None


class WaterQualityInputResponse(CamelModel):
    """Releve enregistre."""

    id: UUID
    date: date
    time: str
    pond_id: UUID
    season_id: UUID
    ph: float = Field(..., alias="pH")
    dissolved_oxygen: float
    temperature: float
    salinity: float
    ammonia: Optional[float] = None
    nitrite: Optional[float] = None
    alkalinity: Optional[float] = None
    inventory_item_id: Optional[UUID] = None
    quantity_used: Optional[float] = None
    created_at: datetime
    stock_adjusted: Optional[bool] = None
    adjustment_error: Optional[str] = None
