"""
Adapters d'infrastructure.

Implementations en memoire des ports du domaine (dev/tests).

Adapters disponibles:
---------------------
- MemoryInventoryItemRepository / MemoryInventoryAdjustmentRepository
- MemorySeasonRepository / MemoryPondRepository
- MemoryFeedInputRepository / MemoryWaterQualityInputRepository
"""

from src.infrastructure.adapters.memory_farm_repository import (
    MemoryFeedInputRepository,
    MemoryPondRepository,
    MemorySeasonRepository,
    MemoryWaterQualityInputRepository,
)
from src.infrastructure.adapters.memory_inventory_repository import (
    MemoryInventoryAdjustmentRepository,
    MemoryInventoryItemRepository,
)

__all__ = [
    "MemoryInventoryItemRepository",
    "MemoryInventoryAdjustmentRepository",
    "MemorySeasonRepository",
    "MemoryPondRepository",
    "MemoryFeedInputRepository",
    "MemoryWaterQualityInputRepository",
]
