"""
InventoryItem Entity - Article d'inventaire (aliment, produit chimique...).

Responsabilite unique:
----------------------
Representer un article du catalogue et son cycle de vie
(Actif -> Inactif par soft delete, sans retour).

La quantite en stock n'est PAS stockee ici: elle est derivee
du journal des ajustements (voir InventoryLedger).
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions import InvalidInventoryItemError
from src.domain.value_objects.localized_text import localize, validate_multilingual

_UPDATABLE_FIELDS = (
    "item_name", "item_type", "unit", "cost_per_unit",
    "purchase_date", "supplier", "low_stock_threshold",
)


class ItemType(Enum):
    """Categories d'articles."""

    FEED = "Feed"
    CHEMICAL = "Chemical"
    PROBIOTIC = "Probiotic"
    OTHER = "Other"

    @classmethod
    def from_string(cls, value: str) -> "ItemType":
        for member in cls:
            if member.value == value:
                return member
        raise InvalidInventoryItemError(
            f"Invalid item type '{value}'. "
            f"Valid types: {', '.join(m.value for m in cls)}",
            field="itemType",
        )


class Unit(Enum):
    """Unites de mesure."""

    KG = "kg"
    G = "g"
    LITRE = "litre"
    ML = "ml"
    BAG = "bag"
    BOTTLE = "bottle"

    @classmethod
    def from_string(cls, value: str) -> "Unit":
        for member in cls:
            if member.value == value:
                return member
        raise InvalidInventoryItemError(
            f"Invalid unit '{value}'. "
            f"Valid units: {', '.join(m.value for m in cls)}",
            field="unit",
        )


@dataclass
class InventoryItem:
    """
    Entite InventoryItem.

    Attributes:
        item_name: Nom multilingue {langue: texte}.
        item_type: Categorie.
        unit: Unite de mesure.
        cost_per_unit: Cout unitaire (>= 0).
        purchase_date: Date d'achat.
        supplier: Fournisseur.
        initial_quantity: Stock initial declare a la creation (informatif).
        low_stock_threshold: Seuil d'alerte de stock bas.
        is_active: False apres soft delete.
        deleted_at: Date du soft delete.
    """

    item_name: dict[str, str]
    item_type: ItemType
    unit: Unit
    cost_per_unit: float
    purchase_date: date
    id: UUID = field(default_factory=uuid4)
    supplier: Optional[str] = None
    initial_quantity: Optional[float] = None
    low_stock_threshold: Optional[float] = None
    is_active: bool = True
    deleted_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not validate_multilingual(self.item_name):
            raise InvalidInventoryItemError(
                'Item name must be an object with language keys (e.g., { "en": "Item A" })',
                field="itemName",
            )
        if self.cost_per_unit is None or self.cost_per_unit < 0:
            raise InvalidInventoryItemError(
                "Cost per unit must be a number >= 0", field="costPerUnit"
            )
        if self.low_stock_threshold is not None and self.low_stock_threshold < 0:
            raise InvalidInventoryItemError(
                "Low stock threshold must be >= 0", field="lowStockThreshold"
            )
        if self.initial_quantity is not None and self.initial_quantity < 0:
            raise InvalidInventoryItemError(
                "Initial quantity must be >= 0", field="initialQuantity"
            )

    def name_in(self, language: str) -> str:
        """Nom de l'article dans la langue demandee (repli anglais)."""
        return localize(self.item_name, language)

    def soft_delete(self) -> None:
        """Desactive l'article. Les ajustements existants restent valides."""
        if self.is_active:
            self.is_active = False
            self.deleted_at = datetime.now()
            self.updated_at = self.deleted_at

    def is_low_stock(self, quantity: float) -> bool:
        """True si la quantite est sous le seuil d'alerte."""
        if self.low_stock_threshold is None:
            return False
        return quantity <= self.low_stock_threshold

    def update(self, **changes) -> None:
        """
        Applique une mise a jour partielle.

        Les champs absents (None) sont ignores. L'etat actif/inactif
        ne peut pas etre modifie ici. La validation se fait sur une
        copie, l'entite reste intacte si elle echoue.
        """
        values = {
            name: value for name, value in changes.items()
            if name in _UPDATABLE_FIELDS and value is not None
        }
        replace(self, **values)

        for name, value in values.items():
            setattr(self, name, value)
        self.updated_at = datetime.now()
