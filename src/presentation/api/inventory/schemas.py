"""
Inventory Schemas - Modeles Pydantic pour les endpoints inventaire.

Responsabilite unique:
----------------------
Definir les schemas de requete/reponse des articles, du journal
des ajustements et de la vue agregee.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from src.presentation.api.schemas import CamelModel


# ═══════════════════════════════════════════════════════════════════════════════
# ARTICLES
# ═══════════════════════════════════════════════════════════════════════════════

class InventoryItemCreate(CamelModel):
    """Creation d'un article."""

    item_name: dict[str, str] = Field(..., description='Nom multilingue, ex: {"en": "Fish Feed"}')
    item_type: str = Field(..., description="Feed, Chemical, Probiotic, Other")
    unit: str = Field(..., description="kg, g, litre, ml, bag, bottle")
    cost_per_unit: float
    purchase_date: date
    supplier: Optional[str] = None
    initial_quantity: Optional[float] = None
    low_stock_threshold: Optional[float] = None


class InventoryItemUpdate(CamelModel):
    """Mise a jour partielle d'un article (champs absents ignores)."""

    item_name: Optional[dict[str, str]] = None
    item_type: Optional[str] = None
    unit: Optional[str] = None
    cost_per_unit: Optional[float] = None
    purchase_date: Optional[date] = None
    supplier: Optional[str] = None
    low_stock_threshold: Optional[float] = None


class InventoryItemResponse(CamelModel):
    """Representation d'un article avec son stock courant."""

    id: UUID
    item_name: str
    item_names: dict[str, str]
    item_type: str
    unit: str
    cost_per_unit: float
    purchase_date: date
    supplier: Optional[str] = None
    initial_quantity: Optional[float] = None
    low_stock_threshold: Optional[float] = None
    current_quantity: float
    is_low_stock: bool
    is_active: bool
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# JOURNAL
# ═══════════════════════════════════════════════════════════════════════════════

class AdjustmentCreate(CamelModel):
    """
    Ajout d'une ligne au journal.

    Les champs requis sont optionnels ici: leur absence est rejetee
    par le service avec un message metier.
    """

    inventory_item_id: Optional[UUID] = None
    adjustment_type: Optional[str] = None
    quantity_change: Optional[float] = None
    reason: Optional[str] = None
    related_document: Optional[UUID] = None
    related_document_model: Optional[str] = None


class AdjustmentResponse(CamelModel):
    """Ligne du journal."""

    id: UUID
    inventory_item_id: UUID
    adjustment_type: str
    quantity_change: float
    reason: Optional[str] = None
    related_document: Optional[UUID] = None
    related_document_model: Optional[str] = None
    timestamp: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# VUE AGREGEE
# ═══════════════════════════════════════════════════════════════════════════════

class StockLevelResponse(CamelModel):
    """Stock courant d'un article."""

    inventory_item_id: UUID
    item_name: str
    item_type: str
    unit: str
    cost_per_unit: float
    current_calculated_quantity: float
    low_stock_threshold: Optional[float] = None
    is_low_stock: bool


class UsageSummaryResponse(CamelModel):
    """Consommation d'un article dans un bassin."""

    pond_id: UUID
    inventory_item_id: UUID
    item_name: str
    item_type: str
    total_quantity_used: float
    total_cost_used: float


class AggregatedInventoryResponse(CamelModel):
    """Stock courant et consommation par bassin."""

    current_stock: list[StockLevelResponse]
    usage_summary: list[UsageSummaryResponse]
