"""
Seasons Schemas - Modeles Pydantic pour les endpoints saisons.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from src.presentation.api.schemas import CamelModel


class SeasonCreate(CamelModel):
    """Creation d'une saison."""

    name: str
    start_date: date
    end_date: date
    status: Optional[str] = None


class SeasonResponse(CamelModel):
    """Representation d'une saison."""

    id: UUID
    name: str
    start_date: date
    end_date: date
    status: str
    created_at: datetime
