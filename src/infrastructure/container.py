"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte
tous les composants de l'architecture hexagonale.

Le conteneur est construit une fois par application (create_app)
et expose via app.state.container; il n'y a pas d'instance globale.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.use_cases.record_usage import (
    DeleteFeedInputUseCase,
    RecordFeedInputUseCase,
    RecordWaterQualityUseCase,
)
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
from src.domain.services.inventory_ledger import InventoryLedger
from src.infrastructure.adapters import (
    MemoryFeedInputRepository,
    MemoryInventoryAdjustmentRepository,
    MemoryInventoryItemRepository,
    MemoryPondRepository,
    MemorySeasonRepository,
    MemoryWaterQualityInputRepository,
)
from src.infrastructure.cache import DEFAULT_TTL_SECONDS, MemoryResponseCache
from src.infrastructure.persistence import (
    DatabaseManager,
    SQLAlchemyFeedInputRepository,
    SQLAlchemyInventoryAdjustmentRepository,
    SQLAlchemyInventoryItemRepository,
    SQLAlchemyPondRepository,
    SQLAlchemySeasonRepository,
    SQLAlchemyWaterQualityInputRepository,
)


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create_in_memory()
        >>> container.ledger.record_adjustment(item_id, "Purchase", 500)
    """

    # Cache
    response_cache: ResponseCache

    # Repositories
    item_repository: InventoryItemRepository
    adjustment_repository: InventoryAdjustmentRepository
    season_repository: SeasonRepository
    pond_repository: PondRepository
    feed_input_repository: FeedInputRepository
    water_quality_repository: WaterQualityInputRepository

    # Services / Use Cases
    ledger: InventoryLedger
    record_feed_input: RecordFeedInputUseCase
    delete_feed_input: DeleteFeedInputUseCase
    record_water_quality: RecordWaterQualityUseCase

    # Base de donnees (None en memoire)
    db_manager: Optional[DatabaseManager] = None

    @classmethod
    def create(
        cls,
        item_repository: InventoryItemRepository,
        adjustment_repository: InventoryAdjustmentRepository,
        season_repository: SeasonRepository,
        pond_repository: PondRepository,
        feed_input_repository: FeedInputRepository,
        water_quality_repository: WaterQualityInputRepository,
        response_cache: Optional[ResponseCache] = None,
        db_manager: Optional[DatabaseManager] = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            item_repository: Catalogue des articles.
            adjustment_repository: Journal des ajustements.
            season_repository: Saisons.
            pond_repository: Bassins.
            feed_input_repository: Distributions d'aliment.
            water_quality_repository: Releves d'eau.
            response_cache: Cache de reponses (defaut: memoire, TTL 600s).
            db_manager: DatabaseManager si persistance SQL.

        Returns:
            Container configure avec tous les composants.
        """
        if response_cache is None:
            response_cache = MemoryResponseCache(default_ttl=DEFAULT_TTL_SECONDS)

        ledger = InventoryLedger(
            item_repository,
            adjustment_repository,
            feed_input_repository=feed_input_repository,
            water_quality_repository=water_quality_repository,
        )

        return cls(
            response_cache=response_cache,
            item_repository=item_repository,
            adjustment_repository=adjustment_repository,
            season_repository=season_repository,
            pond_repository=pond_repository,
            feed_input_repository=feed_input_repository,
            water_quality_repository=water_quality_repository,
            ledger=ledger,
            record_feed_input=RecordFeedInputUseCase(
                ledger, feed_input_repository, pond_repository, season_repository
            ),
            delete_feed_input=DeleteFeedInputUseCase(ledger, feed_input_repository),
            record_water_quality=RecordWaterQualityUseCase(
                ledger, water_quality_repository, pond_repository, season_repository
            ),
            db_manager=db_manager,
        )

    @classmethod
    def create_in_memory(cls, response_cache: Optional[ResponseCache] = None) -> "Container":
        """Conteneur entierement en memoire (dev/tests)."""
        return cls.create(
            item_repository=MemoryInventoryItemRepository(),
            adjustment_repository=MemoryInventoryAdjustmentRepository(),
            season_repository=MemorySeasonRepository(),
            pond_repository=MemoryPondRepository(),
            feed_input_repository=MemoryFeedInputRepository(),
            water_quality_repository=MemoryWaterQualityInputRepository(),
            response_cache=response_cache,
        )

    @classmethod
    def create_from_database_url(
        cls,
        database_url: str,
        response_cache: Optional[ResponseCache] = None,
    ) -> "Container":
        """
        Cree un conteneur depuis une URL de base de donnees.

        Les tables sont creees si elles n'existent pas.

        Args:
            database_url: URL SQLAlchemy (sqlite, postgresql...).
            response_cache: Cache de reponses.

        Returns:
            Container configure.
        """
        db_manager = DatabaseManager(database_url)
        db_manager.create_tables()
        return cls.create(
            item_repository=SQLAlchemyInventoryItemRepository(db_manager),
            adjustment_repository=SQLAlchemyInventoryAdjustmentRepository(db_manager),
            season_repository=SQLAlchemySeasonRepository(db_manager),
            pond_repository=SQLAlchemyPondRepository(db_manager),
            feed_input_repository=SQLAlchemyFeedInputRepository(db_manager),
            water_quality_repository=SQLAlchemyWaterQualityInputRepository(db_manager),
            response_cache=response_cache,
            db_manager=db_manager,
        )
