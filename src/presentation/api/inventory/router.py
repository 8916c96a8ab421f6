"""
Inventory Router - Endpoints du stock.

Responsabilite unique:
----------------------
Exposer le catalogue d'articles, le journal des ajustements et la
vue agregee. Delegue la logique metier a InventoryLedger.

Endpoints:
----------
- POST /inventory: Creer un article
- GET /inventory: Lister les articles (avec stock courant)
- GET /inventory/aggregate: Stock courant + consommation par bassin
- GET /inventory/{id}: Recuperer un article
- PUT /inventory/{id}: Mettre a jour un article
- DELETE /inventory/{id}: Desactiver un article (soft delete)
- POST /inventory/adjustments: Ajouter une ligne au journal
- GET /inventory/{id}/adjustments: Historique d'un article
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.domain.entities.inventory_adjustment import InventoryAdjustment
from src.domain.entities.inventory_item import InventoryItem, ItemType, Unit
from src.domain.services.inventory_ledger import InventoryLedger, StockLevel, UsageSummary
from src.infrastructure.logging import get_logger
from src.presentation.api.dependencies import get_language, get_ledger
from src.presentation.api.inventory.schemas import (
    AdjustmentCreate,
    AdjustmentResponse,
    AggregatedInventoryResponse,
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
    StockLevelResponse,
    UsageSummaryResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/inventory", tags=["Inventory"])


def _item_to_response(item: InventoryItem, quantity: float, language: str) -> InventoryItemResponse:
    """Convertit un InventoryItem en InventoryItemResponse."""
    return InventoryItemResponse(
        id=item.id,
        item_name=item.name_in(language),
        item_names=item.item_name,
        item_type=item.item_type.value,
        unit=item.unit.value,
        cost_per_unit=item.cost_per_unit,
        purchase_date=item.purchase_date,
        supplier=item.supplier,
        initial_quantity=item.initial_quantity,
        low_stock_threshold=item.low_stock_threshold,
        current_quantity=quantity,
        is_low_stock=item.is_low_stock(quantity),
        is_active=item.is_active,
        deleted_at=item.deleted_at,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def _adjustment_to_response(adjustment: InventoryAdjustment) -> AdjustmentResponse:
    return AdjustmentResponse(
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


def _stock_to_response(level: StockLevel, language: str) -> StockLevelResponse:
    return StockLevelResponse(
        inventory_item_id=level.item.id,
        item_name=level.item.name_in(language),
        item_type=level.item.item_type.value,
        unit=level.item.unit.value,
        cost_per_unit=level.item.cost_per_unit,
        current_calculated_quantity=level.current_quantity,
        low_stock_threshold=level.item.low_stock_threshold,
        is_low_stock=level.is_low_stock,
    )


def _usage_to_response(summary: UsageSummary) -> UsageSummaryResponse:
    return UsageSummaryResponse(
        pond_id=summary.pond_id,
        inventory_item_id=summary.item.id,
        item_name=summary.item_name,
        item_type=summary.item_type.value,
        total_quantity_used=summary.total_quantity_used,
        total_cost_used=summary.total_cost_used,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ARTICLES
# ═══════════════════════════════════════════════════════════════════════════════

@router.post(
    "",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un article",
)
def create_inventory_item(
    body: InventoryItemCreate,
    ledger: InventoryLedger = Depends(get_ledger),
    language: str = Depends(get_language),
):
    """
    Cree un article. Si initialQuantity est fourni, une ligne
    "Initial Stock" est ajoutee au journal.
    """
    item = ledger.create_item(
        InventoryItem(
            item_name=body.item_name,
            item_type=ItemType.from_string(body.item_type),
            unit=Unit.from_string(body.unit),
            cost_per_unit=body.cost_per_unit,
            purchase_date=body.purchase_date,
            supplier=body.supplier,
            initial_quantity=body.initial_quantity,
            low_stock_threshold=body.low_stock_threshold,
        )
    )
    logger.info("inventory_item_created", item_id=str(item.id), item_type=item.item_type.value)
    return _item_to_response(item, ledger.current_quantity(item.id), language)


@router.get(
    "",
    response_model=list[InventoryItemResponse],
    summary="Lister les articles",
)
def list_inventory_items(
    item_type: Optional[str] = Query(None, alias="itemType"),
    search: Optional[str] = Query(None, description="Recherche sur le nom anglais"),
    include_inactive: bool = Query(False, alias="includeInactive"),
    ledger: InventoryLedger = Depends(get_ledger),
    language: str = Depends(get_language),
):
    """Liste les articles avec leur stock courant, tries par nom."""
    levels = ledger.list_items(
        item_type=ItemType.from_string(item_type) if item_type else None,
        search=search,
        include_inactive=include_inactive,
    )
    return [_item_to_response(level.item, level.current_quantity, language) for level in levels]


@router.get(
    "/aggregate",
    response_model=AggregatedInventoryResponse,
    summary="Vue agregee du stock",
    description="Stock courant par article et consommation par bassin et article.",
)
def get_aggregated_inventory(
    season_id: Optional[UUID] = Query(None, alias="seasonId"),
    pond_id: Optional[UUID] = Query(None, alias="pondId"),
    item_type: Optional[str] = Query(None, alias="itemType"),
    item_name: Optional[str] = Query(None, alias="itemName"),
    ledger: InventoryLedger = Depends(get_ledger),
    language: str = Depends(get_language),
):
    """Recalcule stock et consommation a chaque appel."""
    usage = ledger.aggregate_usage(
        season_id=season_id,
        pond_id=pond_id,
        item_type=ItemType.from_string(item_type) if item_type else None,
        item_name=item_name,
        language=language,
    )
    return AggregatedInventoryResponse(
        current_stock=[_stock_to_response(level, language) for level in ledger.current_stock()],
        usage_summary=[_usage_to_response(u) for u in usage],
    )


@router.post(
    "/adjustments",
    response_model=AdjustmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Ajouter un ajustement",
)
def create_adjustment(
    body: AdjustmentCreate,
    ledger: InventoryLedger = Depends(get_ledger),
):
    """
    Ajoute une ligne au journal.

    404 si l'article est absent ou inactif, 400 si quantityChange
    ou adjustmentType manque.
    """
    adjustment = ledger.record_adjustment(
        body.inventory_item_id,
        body.adjustment_type,
        body.quantity_change,
        reason=body.reason,
        related_document=body.related_document,
        related_document_model=body.related_document_model,
    )
    logger.info(
        "inventory_adjustment_recorded",
        item_id=str(adjustment.inventory_item_id),
        adjustment_type=adjustment.adjustment_type.value,
        quantity_change=adjustment.quantity_change,
    )
    return _adjustment_to_response(adjustment)


@router.get(
    "/{item_id}",
    response_model=InventoryItemResponse,
    summary="Recuperer un article",
)
def get_inventory_item(
    item_id: UUID,
    ledger: InventoryLedger = Depends(get_ledger),
    language: str = Depends(get_language),
):
    item = ledger.get_item(item_id)
    return _item_to_response(item, ledger.current_quantity(item.id), language)


@router.put(
    "/{item_id}",
    response_model=InventoryItemResponse,
    summary="Mettre a jour un article",
)
def update_inventory_item(
    item_id: UUID,
    body: InventoryItemUpdate,
    ledger: InventoryLedger = Depends(get_ledger),
    language: str = Depends(get_language),
):
    """Met a jour les champs fournis; le stock n'est pas modifiable ici."""
    item = ledger.update_item(
        item_id,
        item_name=body.item_name,
        item_type=ItemType.from_string(body.item_type) if body.item_type else None,
        unit=Unit.from_string(body.unit) if body.unit else None,
        cost_per_unit=body.cost_per_unit,
        purchase_date=body.purchase_date,
        supplier=body.supplier,
        low_stock_threshold=body.low_stock_threshold,
    )
    return _item_to_response(item, ledger.current_quantity(item.id), language)


@router.delete(
    "/{item_id}",
    response_model=InventoryItemResponse,
    summary="Desactiver un article",
    description="Soft delete: l'article reste en base et son historique est conserve.",
)
def delete_inventory_item(
    item_id: UUID,
    ledger: InventoryLedger = Depends(get_ledger),
    language: str = Depends(get_language),
):
    item = ledger.soft_delete_item(item_id)
    logger.info("inventory_item_soft_deleted", item_id=str(item.id))
    return _item_to_response(item, ledger.current_quantity(item.id), language)


@router.get(
    "/{item_id}/adjustments",
    response_model=list[AdjustmentResponse],
    summary="Historique des ajustements",
)
def list_item_adjustments(
    item_id: UUID,
    ledger: InventoryLedger = Depends(get_ledger),
):
    """Ajustements de l'article, du plus recent au plus ancien."""
    return [_adjustment_to_response(a) for a in ledger.list_adjustments(item_id)]
