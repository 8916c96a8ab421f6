"""
Adapters SQLAlchemy pour l'inventaire.

Implemente InventoryItemRepository et InventoryAdjustmentRepository
via DatabaseManager. Les erreurs SQLAlchemy sont converties en
StorageError (500).
"""

from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from src.domain.entities.inventory_adjustment import (
    AdjustmentType,
    InventoryAdjustment,
    RelatedDocumentModel,
)
from src.domain.entities.inventory_item import InventoryItem, ItemType, Unit
from src.domain.exceptions import StorageError
from src.domain.ports.inventory_repository import (
    InventoryAdjustmentRepository,
    InventoryItemRepository,
)
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.models import (
    InventoryAdjustmentModel,
    InventoryItemModel,
)


class SQLAlchemyInventoryItemRepository(InventoryItemRepository):
    """
    Catalogue d'articles persiste en base.

    Example:
        >>> repo = SQLAlchemyInventoryItemRepository(DatabaseManager("sqlite://"))
        >>> repo.save(item)
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def save(self, item: InventoryItem) -> InventoryItem:
        try:
            with self._db.get_session() as session:
                session.merge(self._entity_to_model(item))
        except SQLAlchemyError as e:
            raise StorageError("save inventory item", str(e)) from e
        return item

    def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        try:
            with self._db.get_session() as session:
                model = session.get(InventoryItemModel, item_id)
                return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise StorageError("get inventory item", str(e)) from e

    def find_all(
        self,
        item_type: Optional[ItemType] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> list[InventoryItem]:
        try:
            with self._db.get_session() as session:
                query = session.query(InventoryItemModel)
                if not include_inactive:
                    query = query.filter(InventoryItemModel.is_active.is_(True))
                if item_type is not None:
                    query = query.filter(InventoryItemModel.item_type == item_type.value)
                items = [self._model_to_entity(m) for m in query.all()]
        except SQLAlchemyError as e:
            raise StorageError("list inventory items", str(e)) from e

        # Le nom est un document JSON: recherche et tri cote Python
        if search:
            needle = search.lower()
            items = [i for i in items if needle in i.name_in("en").lower()]
        items.sort(key=lambda i: i.name_in("en"))
        return items

    def get_many(self, item_ids: Iterable[UUID]) -> dict[UUID, InventoryItem]:
        ids = list(item_ids)
        if not ids:
            return {}
        try:
            with self._db.get_session() as session:
                models = session.query(InventoryItemModel).filter(
                    InventoryItemModel.id.in_(ids)
                ).all()
                return {m.id: self._model_to_entity(m) for m in models}
        except SQLAlchemyError as e:
            raise StorageError("get inventory items", str(e)) from e

    @staticmethod
    def _entity_to_model(item: InventoryItem) -> InventoryItemModel:
        return InventoryItemModel(
            id=item.id,
            item_name=dict(item.item_name),
            item_type=item.item_type.value,
            unit=item.unit.value,
            cost_per_unit=item.cost_per_unit,
            purchase_date=item.purchase_date,
            supplier=item.supplier,
            initial_quantity=item.initial_quantity,
            low_stock_threshold=item.low_stock_threshold,
            is_active=item.is_active,
            deleted_at=item.deleted_at,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )

    @staticmethod
    def _model_to_entity(model: InventoryItemModel) -> InventoryItem:
        return InventoryItem(
            id=model.id,
            item_name=dict(model.item_name),
            item_type=ItemType(model.item_type),
            unit=Unit(model.unit),
            cost_per_unit=model.cost_per_unit,
            purchase_date=model.purchase_date,
            supplier=model.supplier,
            initial_quantity=model.initial_quantity,
            low_stock_threshold=model.low_stock_threshold,
            is_active=model.is_active,
            deleted_at=model.deleted_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SQLAlchemyInventoryAdjustmentRepository(InventoryAdjustmentRepository):
    """
    Journal des ajustements persiste en base.

    Chaque append() est un INSERT dans sa propre transaction;
    les sommes sont calculees par la base (SUM).
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def append(self, adjustment: InventoryAdjustment) -> InventoryAdjustment:
        model = InventoryAdjustmentModel(
            id=adjustment.id,
            inventory_item_id=adjustment.inventory_item_id,
            adjustment_type=adjustment.adjustment_type.value,
            quantity_change=adjustment.quantity_change,
            reason=adjustment.reason,
            related_document=adjustment.related_document,
            related_document_model=(
                adjustment.related_document_model.value
                if adjustment.related_document_model else None
            ),
            timestamp=adjustment.timestamp,
        )
        try:
            with self._db.get_session() as session:
                session.add(model)
        except SQLAlchemyError as e:
            raise StorageError("append inventory adjustment", str(e)) from e
        return adjustment

    def find_by_item(self, item_id: UUID) -> list[InventoryAdjustment]:
        try:
            with self._db.get_session() as session:
                models = session.query(InventoryAdjustmentModel).filter(
                    InventoryAdjustmentModel.inventory_item_id == item_id
                ).order_by(InventoryAdjustmentModel.timestamp.desc()).all()
                return [self._model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            raise StorageError("list inventory adjustments", str(e)) from e

    def sum_by_item(self, item_id: UUID) -> float:
        try:
            with self._db.get_session() as session:
                total = session.query(
                    func.coalesce(func.sum(InventoryAdjustmentModel.quantity_change), 0)
                ).filter(
                    InventoryAdjustmentModel.inventory_item_id == item_id
                ).scalar()
                return float(total)
        except SQLAlchemyError as e:
            raise StorageError("sum inventory adjustments", str(e)) from e

    def totals_by_item(self) -> dict[UUID, float]:
        try:
            with self._db.get_session() as session:
                rows = session.query(
                    InventoryAdjustmentModel.inventory_item_id,
                    func.sum(InventoryAdjustmentModel.quantity_change),
                ).group_by(InventoryAdjustmentModel.inventory_item_id).all()
                return {item_id: float(total) for item_id, total in rows}
        except SQLAlchemyError as e:
            raise StorageError("sum inventory adjustments", str(e)) from e

    def find_by_type(self, adjustment_type: AdjustmentType) -> list[InventoryAdjustment]:
        try:
            with self._db.get_session() as session:
                models = session.query(InventoryAdjustmentModel).filter(
                    InventoryAdjustmentModel.adjustment_type == adjustment_type.value
                ).all()
                return [self._model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            raise StorageError("list inventory adjustments", str(e)) from e

    @staticmethod
    def _model_to_entity(model: InventoryAdjustmentModel) -> InventoryAdjustment:
        return InventoryAdjustment(
            id=model.id,
            inventory_item_id=model.inventory_item_id,
            adjustment_type=AdjustmentType(model.adjustment_type),
            quantity_change=model.quantity_change,
            reason=model.reason,
            related_document=model.related_document,
            related_document_model=(
                RelatedDocumentModel(model.related_document_model)
                if model.related_document_model else None
            ),
            timestamp=model.timestamp,
        )
