"""
Adapters pour la persistence des donnees.

Ce module expose les repositories SQLAlchemy et le DatabaseManager
pour l'architecture hexagonale.
"""

from src.infrastructure.persistence.database import DEFAULT_DATABASE_URL, DatabaseManager
from src.infrastructure.persistence.models import (
    Base,
    FeedInputModel,
    InventoryAdjustmentModel,
    InventoryItemModel,
    PondModel,
    SeasonModel,
    WaterQualityInputModel,
)
from src.infrastructure.persistence.sqlalchemy_farm_repository import (
    SQLAlchemyFeedInputRepository,
    SQLAlchemyPondRepository,
    SQLAlchemySeasonRepository,
    SQLAlchemyWaterQualityInputRepository,
)
from src.infrastructure.persistence.sqlalchemy_inventory_repository import (
    SQLAlchemyInventoryAdjustmentRepository,
    SQLAlchemyInventoryItemRepository,
)

__all__ = [
    "DatabaseManager",
    "DEFAULT_DATABASE_URL",
    "Base",
    "InventoryItemModel",
    "InventoryAdjustmentModel",
    "SeasonModel",
    "PondModel",
    "FeedInputModel",
    "WaterQualityInputModel",
    "SQLAlchemyInventoryItemRepository",
    "SQLAlchemyInventoryAdjustmentRepository",
    "SQLAlchemySeasonRepository",
    "SQLAlchemyPondRepository",
    "SQLAlchemyFeedInputRepository",
    "SQLAlchemyWaterQualityInputRepository",
]
