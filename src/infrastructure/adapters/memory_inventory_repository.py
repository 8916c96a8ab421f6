"""
Repositories inventaire en memoire.

Responsabilite unique:
----------------------
Stocker articles et journal des ajustements en memoire (dev/tests).
En production, utiliser les repositories SQLAlchemy.
"""

from collections import defaultdict
from threading import Lock
from typing import Iterable, Optional
from uuid import UUID

from src.domain.entities.inventory_adjustment import AdjustmentType, InventoryAdjustment
from src.domain.entities.inventory_item import InventoryItem, ItemType
from src.domain.ports.inventory_repository import (
    InventoryAdjustmentRepository,
    InventoryItemRepository,
)


class MemoryInventoryItemRepository(InventoryItemRepository):
    """
    Implementation in-memory du catalogue d'articles.

    Thread-safe avec verrou.
    """

    def __init__(self):
        self._items: dict[UUID, InventoryItem] = {}
        self._lock = Lock()

    def save(self, item: InventoryItem) -> InventoryItem:
        with self._lock:
            self._items[item.id] = item
            return item

    def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        return self._items.get(item_id)

    def find_all(
        self,
        item_type: Optional[ItemType] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> list[InventoryItem]:
        with self._lock:
            items = list(self._items.values())

        if not include_inactive:
            items = [i for i in items if i.is_active]
        if item_type is not None:
            items = [i for i in items if i.item_type == item_type]
        if search:
            needle = search.lower()
            items = [i for i in items if needle in i.name_in("en").lower()]

        items.sort(key=lambda i: i.name_in("en"))
        return items

    def get_many(self, item_ids: Iterable[UUID]) -> dict[UUID, InventoryItem]:
        with self._lock:
            return {
                item_id: self._items[item_id]
                for item_id in item_ids
                if item_id in self._items
            }


class MemoryInventoryAdjustmentRepository(InventoryAdjustmentRepository):
    """
    Journal des ajustements en memoire (append-only).

    Thread-safe avec verrou: des ajouts concurrents produisent
    chacun leur ligne.
    """

    def __init__(self):
        self._adjustments: list[InventoryAdjustment] = []
        self._lock = Lock()

    def append(self, adjustment: InventoryAdjustment) -> InventoryAdjustment:
        with self._lock:
            self._adjustments.append(adjustment)
            return adjustment

    def find_by_item(self, item_id: UUID) -> list[InventoryAdjustment]:
        with self._lock:
            rows = [a for a in self._adjustments if a.inventory_item_id == item_id]
        # Ordre d'insertion inverse pour departager les timestamps egaux
        return sorted(reversed(rows), key=lambda a: a.timestamp, reverse=True)

    def sum_by_item(self, item_id: UUID) -> float:
        with self._lock:
            return float(sum(
                a.quantity_change for a in self._adjustments
                if a.inventory_item_id == item_id
            ))

    def totals_by_item(self) -> dict[UUID, float]:
        totals: dict[UUID, float] = defaultdict(float)
        with self._lock:
            for adjustment in self._adjustments:
                totals[adjustment.inventory_item_id] += adjustment.quantity_change
        return dict(totals)

    def find_by_type(self, adjustment_type: AdjustmentType) -> list[InventoryAdjustment]:
        with self._lock:
            return [a for a in self._adjustments if a.adjustment_type == adjustment_type]

    def count(self) -> int:
        with self._lock:
            return len(self._adjustments)
