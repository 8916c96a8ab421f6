"""
Entites du domaine.

Les entites sont des objets metier avec une identite propre
et un cycle de vie.

Entites principales:
    - InventoryItem: Article du catalogue (soft delete)
    - InventoryAdjustment: Ligne immuable du journal de stock
    - Season, Pond: Structure de l'exploitation
    - FeedInput, WaterQualityInput: Saisies consommant du stock
"""

from src.domain.entities.farm import (
    FeedInput,
    Pond,
    PondStatus,
    Season,
    SeasonStatus,
    WaterQualityInput,
)
from src.domain.entities.inventory_adjustment import (
    AdjustmentType,
    InventoryAdjustment,
    RelatedDocumentModel,
)
from src.domain.entities.inventory_item import InventoryItem, ItemType, Unit

__all__ = [
    "InventoryItem",
    "ItemType",
    "Unit",
    "InventoryAdjustment",
    "AdjustmentType",
    "RelatedDocumentModel",
    "Season",
    "SeasonStatus",
    "Pond",
    "PondStatus",
    "FeedInput",
    "WaterQualityInput",
]
