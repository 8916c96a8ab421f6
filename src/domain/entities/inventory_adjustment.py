"""
InventoryAdjustment Entity - Ligne du journal de stock.

Responsabilite unique:
----------------------
Representer une variation signee de stock. Les ajustements sont
ajoutes au journal et ne sont jamais modifies ni supprimes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions import InvalidAdjustmentError


class AdjustmentType(Enum):
    """Types d'ajustement."""

    INITIAL_STOCK = "Initial Stock"
    PURCHASE = "Purchase"
    USAGE = "Usage"
    CORRECTION = "Correction"
    SPOILAGE = "Spoilage"
    INITIAL_ENTRY_ERROR = "Initial Entry Error"

    @classmethod
    def from_string(cls, value: str) -> "AdjustmentType":
        for member in cls:
            if member.value == value:
                return member
        raise InvalidAdjustmentError(
            f"Invalid adjustment type '{value}'. "
            f"Valid types: {', '.join(m.value for m in cls)}",
            field="adjustmentType",
        )


class RelatedDocumentModel(Enum):
    """Documents metier pouvant generer un ajustement."""

    FEED_INPUT = "FeedInput"
    WATER_QUALITY_INPUT = "WaterQualityInput"

    @classmethod
    def from_string(cls, value: str) -> "RelatedDocumentModel":
        for member in cls:
            if member.value == value:
                return member
        raise InvalidAdjustmentError(
            f"Invalid related document model '{value}'",
            field="relatedDocumentModel",
        )


@dataclass(frozen=True)
class InventoryAdjustment:
    """
    Entite InventoryAdjustment (immuable).

    Attributes:
        inventory_item_id: Article concerne.
        adjustment_type: Type d'ajustement.
        quantity_change: Variation signee (negatif = sortie de stock).
        reason: Texte libre.
        related_document: Document a l'origine de l'ajustement.
        related_document_model: Type du document lie.
        timestamp: Date d'enregistrement.
    """

    inventory_item_id: UUID
    adjustment_type: AdjustmentType
    quantity_change: float
    reason: Optional[str] = None
    related_document: Optional[UUID] = None
    related_document_model: Optional[RelatedDocumentModel] = None
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_usage(self) -> bool:
        return self.adjustment_type == AdjustmentType.USAGE

    @property
    def quantity_used(self) -> float:
        """Quantite consommee (positive) pour un ajustement de type Usage."""
        return abs(self.quantity_change) if self.is_usage else 0.0

    @classmethod
    def initial_stock(cls, inventory_item_id: UUID, quantity: float) -> "InventoryAdjustment":
        """Ligne de stock initial enregistree a la creation d'un article."""
        return cls(
            inventory_item_id=inventory_item_id,
            adjustment_type=AdjustmentType.INITIAL_STOCK,
            quantity_change=quantity,
            reason="Initial stock",
        )

