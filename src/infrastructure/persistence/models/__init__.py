"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- inventory_models: Articles et journal des ajustements
- farm_models: Saisons, bassins et saisies terrain
"""

from src.infrastructure.persistence.models.base import Base

from src.infrastructure.persistence.models.inventory_models import (
    InventoryItemModel,
    InventoryAdjustmentModel,
)

from src.infrastructure.persistence.models.farm_models import (
    SeasonModel,
    PondModel,
    FeedInputModel,
    WaterQualityInputModel,
)

__all__ = [
    "Base",
    "InventoryItemModel",
    "InventoryAdjustmentModel",
    "SeasonModel",
    "PondModel",
    "FeedInputModel",
    "WaterQualityInputModel",
]
