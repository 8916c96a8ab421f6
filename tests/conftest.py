"""
Configuration et fixtures pytest.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from src.domain.entities.farm import Pond, Season
from src.domain.entities.inventory_item import InventoryItem, ItemType, Unit
from src.domain.services.inventory_ledger import InventoryLedger
from src.infrastructure.adapters import (
    MemoryFeedInputRepository,
    MemoryInventoryAdjustmentRepository,
    MemoryInventoryItemRepository,
    MemoryPondRepository,
    MemorySeasonRepository,
    MemoryWaterQualityInputRepository,
)
from src.infrastructure.cache import MemoryResponseCache
from src.infrastructure.container import Container
from src.presentation.api.config import APISettings
from src.presentation.api.main import create_app


class FakeClock:
    """Horloge controlable pour les tests de TTL."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITIES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fish_feed() -> InventoryItem:
    """Article aliment pour les tests."""
    return InventoryItem(
        item_name={"en": "Fish Feed", "ta": "மீன் தீவனம்"},
        item_type=ItemType.FEED,
        unit=Unit.KG,
        cost_per_unit=2.5,
        purchase_date=date(2024, 1, 10),
        supplier="Aqua Supplies",
        low_stock_threshold=50,
    )


@pytest.fixture
def lime() -> InventoryItem:
    """Article produit chimique pour les tests."""
    return InventoryItem(
        item_name={"en": "Lime", "hi": "चूना"},
        item_type=ItemType.CHEMICAL,
        unit=Unit.KG,
        cost_per_unit=1.0,
        purchase_date=date(2024, 1, 10),
    )


@pytest.fixture
def season() -> Season:
    """Saison pour les tests."""
    return Season(
        name="Summer 2024",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 9, 30),
    )


@pytest.fixture
def pond(season: Season) -> Pond:
    """Bassin pour les tests."""
    return Pond(
        name={"en": "Pond A", "ta": "குளம் A"},
        size=1200,
        capacity=5000,
        season_id=season.id,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - REPOSITORIES & SERVICES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def item_repo() -> MemoryInventoryItemRepository:
    return MemoryInventoryItemRepository()


@pytest.fixture
def adjustment_repo() -> MemoryInventoryAdjustmentRepository:
    return MemoryInventoryAdjustmentRepository()


@pytest.fixture
def season_repo(season: Season) -> MemorySeasonRepository:
    """Repository de saisons contenant la saison de test."""
    repo = MemorySeasonRepository()
    repo.save(season)
    return repo


@pytest.fixture
def pond_repo(pond: Pond) -> MemoryPondRepository:
    """Repository de bassins contenant le bassin de test."""
    repo = MemoryPondRepository()
    repo.save(pond)
    return repo


@pytest.fixture
def feed_repo() -> MemoryFeedInputRepository:
    return MemoryFeedInputRepository()


@pytest.fixture
def water_repo() -> MemoryWaterQualityInputRepository:
    return MemoryWaterQualityInputRepository()


@pytest.fixture
def ledger(item_repo, adjustment_repo, feed_repo, water_repo) -> InventoryLedger:
    """InventoryLedger sur repositories en memoire."""
    return InventoryLedger(
        item_repo,
        adjustment_repo,
        feed_input_repository=feed_repo,
        water_quality_repository=water_repo,
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - API
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def api_settings() -> APISettings:
    """Configuration de test (base SQLite en memoire, logs console)."""
    return APISettings(database_url="sqlite://", json_logs=False, log_level="WARNING")


@pytest.fixture
def response_cache(fake_clock) -> MemoryResponseCache:
    return MemoryResponseCache(default_ttl=600, clock=fake_clock)


@pytest.fixture
def container(response_cache) -> Container:
    """Container en memoire avec un cache a horloge controlable."""
    return Container.create_in_memory(response_cache=response_cache)


@pytest.fixture
def client(api_settings, container) -> TestClient:
    """Client HTTP de test sur une application neuve."""
    app = create_app(settings=api_settings, container=container)
    return TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════════
# MARKERS
# ═══════════════════════════════════════════════════════════════════════════════

def pytest_configure(config):
    """Configure les markers personnalises."""
    config.addinivalue_line("markers", "unit: Tests unitaires rapides")
    config.addinivalue_line("markers", "integration: Tests d'integration")
    config.addinivalue_line("markers", "slow: Tests lents (>1s)")
