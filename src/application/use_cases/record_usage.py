"""
Use Cases: Saisies terrain consommant du stock.

Une distribution d'aliment ou un traitement de l'eau est enregistre
puis genere une sortie de stock ("Usage") dans le journal.

Politique d'effet de bord:
--------------------------
La saisie est ecrite en premier. Si l'ecriture du journal echoue
ensuite (article desactive, stockage indisponible...), la saisie reste
enregistree et le resultat est PARTIAL (l'erreur est conservee et
journalisee). Si la saisie elle-meme echoue, rien n'est ecrit dans le
journal et le resultat est FAILED.

La suppression d'une distribution suit la meme politique avec une ligne
"Correction" compensatoire.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from uuid import UUID

import structlog

from src.domain.entities.farm import FeedInput, WaterQualityInput
from src.domain.entities.inventory_adjustment import (
    AdjustmentType,
    InventoryAdjustment,
    RelatedDocumentModel,
)
from src.domain.entities.inventory_item import ItemType
from src.domain.exceptions import (
    DomainException,
    FeedInputNotFoundError,
    InvalidFarmRecordError,
    PondNotFoundError,
    SeasonNotFoundError,
)
from src.domain.ports.farm_repository import (
    FeedInputRepository,
    PondRepository,
    SeasonRepository,
    WaterQualityInputRepository,
)
from src.domain.services.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


class WriteOutcome(Enum):
    """Issue d'une saisie avec effet de bord sur le stock."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass
class UsageRecordResult:
    """
    Resultat d'une saisie terrain.

    Attributes:
        outcome: COMPLETE, PARTIAL ou FAILED.
        record: Saisie enregistree (None si FAILED).
        adjustment: Ligne du journal creee (None si non requise ou en echec).
        adjustment_error: Erreur du journal (PARTIAL).
        error: Erreur de la saisie principale (FAILED).
    """

    outcome: WriteOutcome
    record: Optional[Union[FeedInput, WaterQualityInput]] = None
    adjustment: Optional[InventoryAdjustment] = None
    adjustment_error: Optional[Exception] = None
    error: Optional[Exception] = None

    @property
    def is_complete(self) -> bool:
        return self.outcome == WriteOutcome.COMPLETE

    @property
    def is_partial(self) -> bool:
        return self.outcome == WriteOutcome.PARTIAL


class _RecordUsageBase:
    """Validation et ecriture communes aux saisies consommant du stock."""

    related_model: RelatedDocumentModel

    def __init__(
        self,
        ledger: InventoryLedger,
        pond_repository: PondRepository,
        season_repository: SeasonRepository,
    ) -> None:
        self._ledger = ledger
        self._ponds = pond_repository
        self._seasons = season_repository

    def _check_location(self, pond_id: UUID, season_id: UUID) -> str:
        """Verifie bassin et saison, retourne le nom anglais du bassin."""
        pond = self._ponds.get_by_id(pond_id)
        if pond is None:
            raise PondNotFoundError(pond_id)
        if self._seasons.get_by_id(season_id) is None:
            raise SeasonNotFoundError(season_id)
        return pond.name_in("en")

    def _write(self, save, record, item_id: Optional[UUID], quantity, reason: str) -> UsageRecordResult:
        try:
            saved = save(record)
        except DomainException as e:
            logger.error(
                "usage_record_failed",
                model=self.related_model.value,
                error=str(e),
            )
            return UsageRecordResult(outcome=WriteOutcome.FAILED, error=e)

        if item_id is None:
            return UsageRecordResult(outcome=WriteOutcome.COMPLETE, record=saved)

        return _adjust_stock(
            self._ledger,
            saved,
            item_id,
            AdjustmentType.USAGE,
            -abs(quantity),
            reason,
            self.related_model,
        )


def _adjust_stock(
    ledger: InventoryLedger,
    record: Union[FeedInput, WaterQualityInput],
    item_id: UUID,
    adjustment_type: AdjustmentType,
    quantity_change: float,
    reason: str,
    related_model: RelatedDocumentModel,
) -> UsageRecordResult:
    """Ecrit l'ajustement lie a une saisie deja persistee."""
    try:
        adjustment = ledger.record_adjustment(
            item_id,
            adjustment_type,
            quantity_change,
            reason=reason,
            related_document=record.id,
            related_document_model=related_model,
        )
    except DomainException as e:
        logger.warning(
            "usage_adjustment_failed",
            model=related_model.value,
            adjustment_type=adjustment_type.value,
            record_id=str(record.id),
            inventory_item_id=str(item_id),
            error=str(e),
        )
        return UsageRecordResult(
            outcome=WriteOutcome.PARTIAL,
            record=record,
            adjustment_error=e,
        )

    return UsageRecordResult(
        outcome=WriteOutcome.COMPLETE,
        record=record,
        adjustment=adjustment,
    )


class RecordFeedInputUseCase(_RecordUsageBase):
    """
    Use Case: Enregistrer une distribution d'aliment.

    L'article doit exister et etre un aliment; la quantite distribuee
    est deduite du stock. Un article desactive n'empeche pas la saisie,
    seule la sortie de stock echoue (PARTIAL).

    Example:
        >>> use_case = RecordFeedInputUseCase(ledger, feed_repo, pond_repo, season_repo)
        >>> result = use_case.execute(feed_input)
        >>> result.outcome
        <WriteOutcome.COMPLETE: 'complete'>
    """

    related_model = RelatedDocumentModel.FEED_INPUT

    def __init__(
        self,
        ledger: InventoryLedger,
        feed_input_repository: FeedInputRepository,
        pond_repository: PondRepository,
        season_repository: SeasonRepository,
    ) -> None:
        super().__init__(ledger, pond_repository, season_repository)
        self._feed_inputs = feed_input_repository

    def execute(self, feed_input: FeedInput) -> UsageRecordResult:
        """
        Enregistre la saisie puis la sortie de stock.

        Raises:
            PondNotFoundError, SeasonNotFoundError: Reference inconnue.
            InventoryItemNotFoundError: Article inexistant.
            InvalidFarmRecordError: L'article n'est pas un aliment.
        """
        pond_name = self._check_location(feed_input.pond_id, feed_input.season_id)

        item = self._ledger.get_item(feed_input.inventory_item_id)
        if item.item_type != ItemType.FEED:
            raise InvalidFarmRecordError(
                "Inventory item must be of type Feed",
                field="inventoryItemId",
            )

        return self._write(
            self._feed_inputs.save,
            feed_input,
            feed_input.inventory_item_id,
            feed_input.quantity,
            reason=f"Feed usage for pond {pond_name}",
        )


class DeleteFeedInputUseCase:
    """
    Use Case: Supprimer une distribution d'aliment.

    Le journal est append-only: la sortie de stock d'origine reste en
    place et une ligne "Correction" de +quantite la compense.
    """

    def __init__(
        self,
        ledger: InventoryLedger,
        feed_input_repository: FeedInputRepository,
    ) -> None:
        self._ledger = ledger
        self._feed_inputs = feed_input_repository

    def execute(self, feed_input_id: UUID) -> UsageRecordResult:
        """
        Supprime la saisie puis ajoute la correction de stock.

        Returns:
            COMPLETE, PARTIAL (correction en echec) ou FAILED (suppression
            en echec). record contient la saisie supprimee.

        Raises:
            FeedInputNotFoundError: Saisie inconnue.
        """
        feed_input = self._feed_inputs.get_by_id(feed_input_id)
        if feed_input is None:
            raise FeedInputNotFoundError(feed_input_id)

        try:
            self._feed_inputs.delete(feed_input_id)
        except DomainException as e:
            logger.error("feed_input_delete_failed", feed_input_id=str(feed_input_id), error=str(e))
            return UsageRecordResult(outcome=WriteOutcome.FAILED, error=e)

        return _adjust_stock(
            self._ledger,
            feed_input,
            feed_input.inventory_item_id,
            AdjustmentType.CORRECTION,
            abs(feed_input.quantity),
            f"Reversal of feed usage due to deletion of feed input {feed_input.id}",
            RelatedDocumentModel.FEED_INPUT,
        )


class RecordWaterQualityUseCase(_RecordUsageBase):
    """
    Use Case: Enregistrer un releve de qualite de l'eau.

    Si un produit de traitement est indique, la quantite utilisee
    est deduite du stock. Un produit absent ou inactif n'empeche
    pas l'enregistrement du releve (PARTIAL).
    """

    related_model = RelatedDocumentModel.WATER_QUALITY_INPUT

    def __init__(
        self,
        ledger: InventoryLedger,
        water_quality_repository: WaterQualityInputRepository,
        pond_repository: PondRepository,
        season_repository: SeasonRepository,
    ) -> None:
        super().__init__(ledger, pond_repository, season_repository)
        self._readings = water_quality_repository

    def execute(self, reading: WaterQualityInput) -> UsageRecordResult:
        """Enregistre le releve puis, si besoin, la sortie de stock."""
        pond_name = self._check_location(reading.pond_id, reading.season_id)

        return self._write(
            self._readings.save,
            reading,
            reading.inventory_item_id,
            reading.quantity_used,
            reason=f"Water treatment for pond {pond_name}",
        )
