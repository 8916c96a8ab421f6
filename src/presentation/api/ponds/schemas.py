"""
Ponds Schemas - Modeles Pydantic pour les endpoints bassins.

Le nom est renvoye tel quel (mapping multilingue): les listes de
bassins sont mises en cache independamment de la langue.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from src.presentation.api.schemas import CamelModel


class PondCreate(CamelModel):
    """Creation d'un bassin."""

    name: dict[str, str]
    size: float
    capacity: float
    season_id: UUID
    status: Optional[str] = None


class PondUpdate(CamelModel):
    """Mise a jour partielle d'un bassin."""

    name: Optional[dict[str, str]] = None
    size: Optional[float] = None
    capacity: Optional[float] = None
    season_id: Optional[UUID] = None
    status: Optional[str] = None


class PondResponse(CamelModel):
    """Representation d'un bassin."""

    id: UUID
    name: dict[str, str]
    size: float
    capacity: float
    season_id: UUID
    status: str
    created_at: datetime
    updated_at: datetime
