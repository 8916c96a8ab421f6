"""
Modeles SQLAlchemy pour l'inventaire.

Tables:
-------
- inventory_items: Catalogue des articles (soft delete)
- inventory_adjustments: Journal append-only des variations de stock

Le stock courant n'est pas une colonne: il est calcule comme
SUM(quantity_change) sur inventory_adjustments.
"""
from datetime import datetime
import uuid

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Float, ForeignKey, Index, String, Text, Uuid

from src.infrastructure.persistence.models.base import Base


class InventoryItemModel(Base):
    """
    Table inventory_items - Articles en stock.

    Colonnes:
        id: UUID unique
        item_name: Nom multilingue {"en": ..., "hi": ..., "ta": ...}
        item_type: Feed, Chemical, Probiotic, Other
        unit: kg, g, litre, ml, bag, bottle
        cost_per_unit: Coût unitaire (>= 0)
        is_active: False après soft delete
        deleted_at: Date du soft delete
    """
    __tablename__ = "inventory_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    item_name = Column(JSON, nullable=False)
    item_type = Column(String(20), nullable=False)
    unit = Column(String(10), nullable=False)
    cost_per_unit = Column(Float, nullable=False, default=0)
    purchase_date = Column(Date, nullable=False)
    supplier = Column(String(255), nullable=True)
    initial_quantity = Column(Float, nullable=True)
    low_stock_threshold = Column(Float, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    deleted_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        Index('idx_inventory_items_active', 'is_active'),
        Index('idx_inventory_items_type', 'item_type'),
    )


class InventoryAdjustmentModel(Base):
    """
    Table inventory_adjustments - Journal des ajustements.

    Aucune ligne n'est jamais modifiée ni supprimée.

    Colonnes:
        inventory_item_id: Article concerné
        adjustment_type: Initial Stock, Purchase, Usage, Correction...
        quantity_change: Variation signee
        related_document: ID de la saisie d'origine (optionnel)
        related_document_model: FeedInput ou WaterQualityInput
    """
    __tablename__ = "inventory_adjustments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    inventory_item_id = Column(Uuid, ForeignKey("inventory_items.id"), nullable=False)
    adjustment_type = Column(String(30), nullable=False)
    quantity_change = Column(Float, nullable=False)
    reason = Column(Text, nullable=True)
    related_document = Column(Uuid, nullable=True)
    related_document_model = Column(String(30), nullable=True)
    timestamp = Column(DateTime, default=datetime.now, nullable=False)

    __table_args__ = (
        Index('idx_adjustments_item', 'inventory_item_id'),
        Index('idx_adjustments_type', 'adjustment_type'),
        Index('idx_adjustments_document', 'related_document'),
    )
