"""
Service du journal de stock (ledger).

Le stock courant d'un article n'est jamais stocke: il est recalcule
a chaque lecture comme la somme des ajustements du journal.

Convention stock initial:
-------------------------
Un article cree avec initial_quantity recoit une ligne "Initial Stock".
La quantite courante est TOUJOURS la somme des lignes du journal;
le champ initial_quantity n'est jamais ajoute en plus.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Optional, Union
from uuid import UUID

from src.domain.entities.inventory_adjustment import (
    AdjustmentType,
    InventoryAdjustment,
    RelatedDocumentModel,
)
from src.domain.entities.inventory_item import InventoryItem, ItemType
from src.domain.exceptions import InvalidAdjustmentError, InventoryItemNotFoundError
from src.domain.ports.farm_repository import (
    FeedInputRepository,
    WaterQualityInputRepository,
)
from src.domain.ports.inventory_repository import (
    InventoryAdjustmentRepository,
    InventoryItemRepository,
)
from src.domain.value_objects.localized_text import DEFAULT_LANGUAGE


@dataclass
class StockLevel:
    """
    Stock courant d'un article.

    Attributes:
        item: Article.
        current_quantity: Somme des ajustements.
    """

    item: InventoryItem
    current_quantity: float

    @property
    def is_low_stock(self) -> bool:
        return self.item.is_low_stock(self.current_quantity)

    @property
    def stock_value(self) -> float:
        return self.current_quantity * self.item.cost_per_unit


@dataclass
class UsageSummary:
    """
    Consommation agregee d'un article dans un bassin.

    Attributes:
        pond_id: Bassin.
        item: Article consomme.
        item_name: Nom localise.
        total_quantity_used: Quantite totale consommee (positive).
        total_cost_used: total_quantity_used * cout unitaire.
    """

    pond_id: UUID
    item: InventoryItem
    item_name: str
    total_quantity_used: float
    total_cost_used: float

    @property
    def item_type(self) -> ItemType:
        return self.item.item_type


class InventoryLedger:
    """
    Service metier du stock.

    Gere le catalogue (creation, mise a jour, soft delete) et le journal
    append-only des ajustements, et derive les vues de stock et de
    consommation a la demande.

    Example:
        >>> ledger = InventoryLedger(item_repo, adjustment_repo)
        >>> ledger.record_adjustment(item.id, "Purchase", 500)
        >>> ledger.record_adjustment(item.id, "Usage", -120)
        >>> ledger.current_quantity(item.id)
        380.0
    """

    def __init__(
        self,
        item_repository: InventoryItemRepository,
        adjustment_repository: InventoryAdjustmentRepository,
        feed_input_repository: Optional[FeedInputRepository] = None,
        water_quality_repository: Optional[WaterQualityInputRepository] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            item_repository: Catalogue des articles.
            adjustment_repository: Journal des ajustements.
            feed_input_repository: Saisies d'aliment (pour l'agregation).
            water_quality_repository: Releves d'eau (pour l'agregation).
        """
        self._items = item_repository
        self._adjustments = adjustment_repository
        self._feed_inputs = feed_input_repository
        self._water_quality = water_quality_repository

    # ═══════════════════════════════════════════════════════════════════════════
    # CATALOGUE
    # ═══════════════════════════════════════════════════════════════════════════

    def create_item(self, item: InventoryItem) -> InventoryItem:
        """
        Enregistre un nouvel article.

        Si initial_quantity est renseigne, une ligne "Initial Stock"
        est ajoutee au journal.
        """
        saved = self._items.save(item)
        if saved.initial_quantity:
            self._adjustments.append(
                InventoryAdjustment.initial_stock(saved.id, saved.initial_quantity)
            )
        return saved

    def get_item(self, item_id: UUID) -> InventoryItem:
        """Recupere un article (actif ou non), NotFound sinon."""
        item = self._items.get_by_id(item_id)
        if item is None:
            raise InventoryItemNotFoundError(item_id)
        return item

    def get_active_item(self, item_id: UUID) -> InventoryItem:
        """Recupere un article actif, NotFound s'il est absent ou inactif."""
        item = self._items.get_by_id(item_id)
        if item is None:
            raise InventoryItemNotFoundError(item_id)
        if not item.is_active:
            raise InventoryItemNotFoundError(item_id, inactive=True)
        return item

    def list_items(
        self,
        item_type: Optional[ItemType] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> list[StockLevel]:
        """Articles avec leur stock courant."""
        items = self._items.find_all(
            item_type=item_type,
            search=search,
            include_inactive=include_inactive,
        )
        totals = self._adjustments.totals_by_item()
        return [StockLevel(item, totals.get(item.id, 0.0)) for item in items]

    def update_item(self, item_id: UUID, **changes) -> InventoryItem:
        """Met a jour les champs descriptifs d'un article."""
        item = self.get_item(item_id)
        item.update(**changes)
        return self._items.save(item)

    def soft_delete_item(self, item_id: UUID) -> InventoryItem:
        """
        Desactive un article (irreversible).

        Les ajustements deja enregistres restent comptes dans le stock.
        """
        item = self.get_item(item_id)
        item.soft_delete()
        return self._items.save(item)

    # ═══════════════════════════════════════════════════════════════════════════
    # JOURNAL
    # ═══════════════════════════════════════════════════════════════════════════

    def record_adjustment(
        self,
        item_id: Optional[UUID],
        adjustment_type: Union[AdjustmentType, str, None],
        quantity_change: Optional[float],
        reason: Optional[str] = None,
        related_document: Optional[UUID] = None,
        related_document_model: Union[RelatedDocumentModel, str, None] = None,
    ) -> InventoryAdjustment:
        """
        Ajoute une ligne au journal.

        Args:
            item_id: Article concerne (doit exister et etre actif).
            adjustment_type: Type (enum ou libelle).
            quantity_change: Variation signee.
            reason: Texte libre.
            related_document: Document a l'origine de l'ajustement.
            related_document_model: Type du document lie.

        Returns:
            L'ajustement enregistre.

        Raises:
            InvalidAdjustmentError: Champ requis manquant ou invalide.
            InventoryItemNotFoundError: Article absent ou inactif.
        """
        if item_id is None:
            raise InvalidAdjustmentError(
                "Inventory item ID is required", field="inventoryItemId"
            )
        if adjustment_type is None or adjustment_type == "":
            raise InvalidAdjustmentError(
                "Adjustment type is required", field="adjustmentType"
            )
        if quantity_change is None:
            raise InvalidAdjustmentError(
                "Quantity change is required", field="quantityChange"
            )

        if isinstance(adjustment_type, str):
            adjustment_type = AdjustmentType.from_string(adjustment_type)
        if isinstance(related_document_model, str):
            related_document_model = RelatedDocumentModel.from_string(related_document_model)

        self.get_active_item(item_id)

        return self._adjustments.append(
            InventoryAdjustment(
                inventory_item_id=item_id,
                adjustment_type=adjustment_type,
                quantity_change=float(quantity_change),
                reason=reason,
                related_document=related_document,
                related_document_model=related_document_model,
            )
        )

    def list_adjustments(self, item_id: UUID) -> list[InventoryAdjustment]:
        """Historique d'un article (plus recent d'abord)."""
        self.get_item(item_id)
        return self._adjustments.find_by_item(item_id)

    def current_quantity(self, item_id: UUID) -> float:
        """Stock courant = somme des ajustements de l'article."""
        return self._adjustments.sum_by_item(item_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # PROJECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def current_stock(self) -> list[StockLevel]:
        """Stock courant de chaque article actif."""
        return self.list_items()

    def aggregate_usage(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
        item_type: Optional[ItemType] = None,
        item_name: Optional[str] = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> list[UsageSummary]:
        """
        Consommation par bassin et par article.

        Les lignes "Usage" liees a une saisie d'aliment ou a un releve
        d'eau sont groupees par (bassin, article). Les filtres saison et
        bassin s'appliquent aux saisies d'origine; les filtres type et
        nom s'appliquent apres localisation.

        Args:
            season_id: Saison des saisies.
            pond_id: Bassin des saisies.
            item_type: Categorie d'article.
            item_name: Nom localise exact.
            language: Langue des noms retournes.

        Returns:
            Resume de consommation, recalcule a chaque appel.
        """
        pond_by_document = self._usage_documents(season_id, pond_id)

        quantities: dict[tuple[UUID, UUID], float] = defaultdict(float)
        for adjustment in self._adjustments.find_by_type(AdjustmentType.USAGE):
            document_pond = pond_by_document.get(adjustment.related_document)
            if document_pond is None:
                continue
            quantities[(document_pond, adjustment.inventory_item_id)] += adjustment.quantity_used

        items = self._items.get_many({item_id for _, item_id in quantities})

        summaries = []
        for (document_pond, item_id), quantity in quantities.items():
            item = items.get(item_id)
            if item is None:
                continue
            summary = UsageSummary(
                pond_id=document_pond,
                item=item,
                item_name=item.name_in(language),
                total_quantity_used=quantity,
                total_cost_used=quantity * item.cost_per_unit,
            )
            if item_type is not None and summary.item_type != item_type:
                continue
            if item_name and summary.item_name != item_name:
                continue
            summaries.append(summary)

        summaries.sort(key=lambda s: (str(s.pond_id), s.item_name))
        return summaries

    def _usage_documents(
        self,
        season_id: Optional[UUID],
        pond_id: Optional[UUID],
    ) -> dict[UUID, UUID]:
        """Index {id de saisie: bassin} des saisies pouvant consommer du stock."""
        documents: dict[UUID, UUID] = {}
        if self._feed_inputs is not None:
            for feed_input in self._feed_inputs.find(season_id=season_id, pond_id=pond_id):
                documents[feed_input.id] = feed_input.pond_id
        if self._water_quality is not None:
            for reading in self._water_quality.find(season_id=season_id, pond_id=pond_id):
                if reading.uses_inventory:
                    documents[reading.id] = reading.pond_id
        return documents
