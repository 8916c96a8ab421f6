"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- ResponseCache: Cache de reponses cle/valeur avec TTL
- InventoryItemRepository: Catalogue des articles
- InventoryAdjustmentRepository: Journal append-only des ajustements
- SeasonRepository, PondRepository: Structure de l'exploitation
- FeedInputRepository, WaterQualityInputRepository: Saisies terrain

Pattern:
--------
Les Ports sont des ABC implementees par des Adapters dans la
couche Infrastructure (memoire pour dev/tests, SQLAlchemy en production).
"""

from src.domain.ports.farm_repository import (
    FeedInputRepository,
    PondRepository,
    SeasonRepository,
    WaterQualityInputRepository,
)
from src.domain.ports.inventory_repository import (
    InventoryAdjustmentRepository,
    InventoryItemRepository,
)
from src.domain.ports.response_cache import ResponseCache

__all__ = [
    "ResponseCache",
    "InventoryItemRepository",
    "InventoryAdjustmentRepository",
    "SeasonRepository",
    "PondRepository",
    "FeedInputRepository",
    "WaterQualityInputRepository",
]
