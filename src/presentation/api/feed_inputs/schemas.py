"""
Feed Inputs Schemas - Modeles Pydantic pour les distributions d'aliment.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from src.presentation.api.schemas import CamelModel


class FeedInputCreate(CamelModel):
    """Saisie d'une distribution d'aliment."""

    date: date
    time: str
    pond_id: UUID
    season_id: UUID
    inventory_item_id: UUID
    quantity: float


class FeedInputResponse(CamelModel):
    """
    Distribution d'aliment enregistree.

    stockAdjusted vaut False si la sortie de stock n'a pas pu etre
    enregistree (la saisie est conservee, adjustmentError explique).
    """

    id: UUID
    date: date
    time: str
    pond_id: UUID
    season_id: UUID
    inventory_item_id: UUID
    quantity: float
    created_at: datetime
    stock_adjusted: Optional[bool] = None
    adjustment_error: Optional[str] = None


class FeedInputDeleteResponse(CamelModel):
    """Suppression d'une distribution et correction du stock."""

    message: str
    stock_adjusted: bool
    adjustment_error: Optional[str] = None
