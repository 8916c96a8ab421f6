"""
Tests unitaires pour les repositories en memoire et le Container.
"""

import threading
from datetime import date
from uuid import uuid4

import pytest

from src.domain.entities.farm import FeedInput, Pond, Season
from src.domain.entities.inventory_adjustment import AdjustmentType, InventoryAdjustment
from src.domain.entities.inventory_item import ItemType
from src.domain.exceptions import ConflictError
from src.infrastructure.cache import MemoryResponseCache
from src.infrastructure.container import Container


class TestMemoryInventoryItemRepository:
    """Tests du catalogue en memoire."""

    def test_find_all_sorted_by_english_name(self, item_repo, fish_feed, lime):
        item_repo.save(lime)
        item_repo.save(fish_feed)

        assert [i.id for i in item_repo.find_all()] == [fish_feed.id, lime.id]

    def test_find_all_filters(self, item_repo, fish_feed, lime):
        item_repo.save(fish_feed)
        item_repo.save(lime)
        lime.soft_delete()

        assert [i.id for i in item_repo.find_all()] == [fish_feed.id]
        assert [i.id for i in item_repo.find_all(item_type=ItemType.CHEMICAL, include_inactive=True)] == [lime.id]
        assert [i.id for i in item_repo.find_all(search="FISH")] == [fish_feed.id]

    def test_get_many(self, item_repo, fish_feed):
        item_repo.save(fish_feed)
        missing = uuid4()

        assert item_repo.get_many([fish_feed.id, missing]) == {fish_feed.id: fish_feed}


class TestMemoryInventoryAdjustmentRepository:
    """Tests du journal en memoire."""

    def test_sum_and_totals(self, adjustment_repo):
        item_a, item_b = uuid4(), uuid4()
        adjustment_repo.append(InventoryAdjustment(item_a, AdjustmentType.PURCHASE, 500))
        adjustment_repo.append(InventoryAdjustment(item_a, AdjustmentType.USAGE, -120))
        adjustment_repo.append(InventoryAdjustment(item_b, AdjustmentType.PURCHASE, 3))

        assert adjustment_repo.sum_by_item(item_a) == 380.0
        assert adjustment_repo.sum_by_item(uuid4()) == 0.0
        assert adjustment_repo.totals_by_item() == {item_a: 380.0, item_b: 3.0}

    def test_find_by_type(self, adjustment_repo):
        item = uuid4()
        usage = adjustment_repo.append(InventoryAdjustment(item, AdjustmentType.USAGE, -1))
        adjustment_repo.append(InventoryAdjustment(item, AdjustmentType.PURCHASE, 1))

        assert adjustment_repo.find_by_type(AdjustmentType.USAGE) == [usage]

    def test_concurrent_appends(self, adjustment_repo):
        """Chaque ajout concurrent produit sa propre ligne."""
        item = uuid4()

        def worker(change):
            for _ in range(50):
                adjustment_repo.append(InventoryAdjustment(item, AdjustmentType.CORRECTION, change))

        threads = [threading.Thread(target=worker, args=(c,)) for c in (10, -3, 10, -3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert adjustment_repo.count() == 200
        assert adjustment_repo.sum_by_item(item) == 700.0


class TestMemoryFarmRepositories:
    """Tests des saisons, bassins et saisies en memoire."""

    def test_season_name_unique(self, season_repo, season):
        """Deux saisons ne peuvent pas partager un nom."""
        duplicate = Season(name=season.name, start_date=date(2025, 1, 1), end_date=date(2025, 6, 1))

        with pytest.raises(ConflictError):
            season_repo.save(duplicate)
        season_repo.save(season)

    def test_seasons_newest_first(self, season_repo, season):
        older = season_repo.save(Season("Winter 2023", date(2023, 11, 1), date(2024, 2, 1)))
        assert [s.id for s in season_repo.find_all()] == [season.id, older.id]

    def test_ponds_by_season_and_delete(self, pond_repo, pond):
        other = pond_repo.save(Pond({"en": "Pond B"}, 100, 200, uuid4()))

        assert pond_repo.find_all(season_id=pond.season_id) == [pond]
        assert len(pond_repo.find_all()) == 2
        assert pond_repo.delete(other.id) is True
        assert pond_repo.delete(other.id) is False

    def test_feed_inputs_filtered_newest_first(self, feed_repo, pond, fish_feed):
        early = feed_repo.save(FeedInput(date(2024, 4, 1), "08:00", pond.id, pond.season_id, fish_feed.id, 5))
        late = feed_repo.save(FeedInput(date(2024, 4, 1), "17:00", pond.id, pond.season_id, fish_feed.id, 5))
        feed_repo.save(FeedInput(date(2024, 4, 2), "08:00", uuid4(), pond.season_id, fish_feed.id, 5))

        assert feed_repo.find(pond_id=pond.id) == [late, early]
        assert len(feed_repo.find(season_id=pond.season_id)) == 3
        assert feed_repo.find(season_id=uuid4()) == []

    def test_feed_input_get_and_delete(self, feed_repo, pond, fish_feed):
        record = feed_repo.save(FeedInput(date(2024, 4, 1), "08:00", pond.id, pond.season_id, fish_feed.id, 5))

        assert feed_repo.get_by_id(record.id) is record
        assert feed_repo.delete(record.id) is True
        assert feed_repo.delete(record.id) is False
        assert feed_repo.get_by_id(record.id) is None


class TestContainer:
    """Tests du Container."""

    def test_create_in_memory(self):
        container = Container.create_in_memory()

        assert isinstance(container.response_cache, MemoryResponseCache)
        assert container.response_cache.default_ttl == 600
        assert container.db_manager is None

    def test_containers_are_isolated(self, fish_feed):
        """Chaque conteneur a ses propres donnees et son propre cache."""
        first = Container.create_in_memory()
        second = Container.create_in_memory()

        first.ledger.create_item(fish_feed)
        first.response_cache.set("/api/ponds", [])

        assert second.item_repository.get_by_id(fish_feed.id) is None
        assert second.response_cache.get("/api/ponds") is None

    def test_use_cases_share_ledger(self, season, pond, fish_feed):
        """Les use cases ecrivent dans le journal du conteneur."""
        container = Container.create_in_memory()
        container.season_repository.save(season)
        container.pond_repository.save(pond)
        container.ledger.create_item(fish_feed)

        container.record_feed_input.execute(
            FeedInput(date(2024, 4, 1), "08:00", pond.id, season.id, fish_feed.id, 12)
        )

        assert container.ledger.current_quantity(fish_feed.id) == -12.0

    def test_create_from_database_url(self):
        container = Container.create_from_database_url("sqlite://")

        assert container.db_manager is not None
        assert container.season_repository.find_all() == []
