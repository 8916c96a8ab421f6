"""
Tests unitaires pour l'API REST.

Teste les endpoints inventaire, saisies terrain, administration du cache
et le format des erreurs.
"""

import threading
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from src.domain.exceptions import StorageError
from src.infrastructure.adapters import (
    MemoryFeedInputRepository,
    MemoryInventoryAdjustmentRepository,
    MemoryInventoryItemRepository,
    MemoryPondRepository,
    MemorySeasonRepository,
    MemoryWaterQualityInputRepository,
)
from src.infrastructure.container import Container
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.main import create_app


class UnavailableJournal(MemoryInventoryAdjustmentRepository):
    """Journal dont l'ecriture echoue."""

    def append(self, adjustment):
        raise StorageError("append adjustment", "database unavailable")


# ============================================================
# Fixtures
# ============================================================

@pytest.fixture
def season_id(client) -> str:
    response = client.post(
        "/api/seasons",
        json={"name": "Summer 2024", "startDate": "2024-03-01", "endDate": "2024-09-30"},
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def pond_id(client, season_id) -> str:
    response = client.post(
        "/api/ponds",
        json={
            "name": {"en": "Pond A", "ta": "குளம் A"},
            "size": 1200,
            "capacity": 5000,
            "seasonId": season_id,
        },
    )
    assert response.status_code == 201
    return response.json()["id"]


def _create_item(client, name=None, item_type="Feed", **extra) -> dict:
    body = {
        "itemName": name or {"en": "Fish Feed", "ta": "மீன் தீவனம்"},
        "itemType": item_type,
        "unit": "kg",
        "costPerUnit": 2.5,
        "purchaseDate": "2024-01-10",
        **extra,
    }
    response = client.post("/api/inventory", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def _feed_body(pond_id, season_id, item_id, quantity=120) -> dict:
    return {
        "date": "2024-04-02",
        "time": "07:30",
        "pondId": pond_id,
        "seasonId": season_id,
        "inventoryItemId": item_id,
        "quantity": quantity,
    }


def _treatment_body(pond_id, season_id, item_id, quantity_used=2) -> dict:
    return {
        "date": "2024-04-02",
        "time": "06:00",
        "pondId": pond_id,
        "seasonId": season_id,
        "pH": 7.4,
        "dissolvedOxygen": 5.0,
        "temperature": 28,
        "salinity": 12,
        "inventoryItemId": item_id,
        "quantityUsed": quantity_used,
    }


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Application
# ═══════════════════════════════════════════════════════════════════════════════

class TestApplication:
    """Tests de la factory et des endpoints transverses."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}

    def test_request_id_header(self, client):
        """Le request_id est renvoye, genere ou repris de la requete."""
        generated = client.get("/health")
        forwarded = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert generated.headers["x-request-id"]
        assert forwarded.headers["x-request-id"] == "abc-123"

    def test_settings_defaults(self):
        settings = APISettings()

        assert settings.api_prefix == "/api"
        assert settings.cache_ttl_seconds == 600
        assert settings.supported_languages == ["en", "hi", "ta"]

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_apps_do_not_share_cache(self, api_settings):
        """Chaque application a son propre conteneur et son propre cache."""
        first = TestClient(create_app(settings=api_settings, container=Container.create_in_memory()))
        second = TestClient(create_app(settings=api_settings, container=Container.create_in_memory()))

        first.get("/api/ponds")

        assert first.get("/api/admin/cache/stats").json()["size"] == 1
        assert second.get("/api/admin/cache/stats").json()["size"] == 0


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Erreurs
# ═══════════════════════════════════════════════════════════════════════════════

class TestErrorFormat:
    """Tests du format normalise des erreurs."""

    def test_not_found_body(self, client):
        response = client.get(f"/api/inventory/{uuid4()}")
        body = response.json()

        assert response.status_code == 404
        assert body["status"] == "fail"
        assert body["errorCode"] == "INVENTORY_ITEM_NOT_FOUND"
        assert body["message"].startswith("Inventory item not found")
        assert "timestamp" in body
        assert "field" not in body

    def test_request_validation_is_400(self, client):
        """Les erreurs de validation FastAPI sont rendues en 400."""
        response = client.get("/api/inventory/not-a-uuid")
        body = response.json()

        assert response.status_code == 400
        assert body["errorCode"] == "VALIDATION_ERROR"
        assert body["field"] == "item_id"

    def test_domain_validation_has_field(self, client):
        response = client.post(
            "/api/inventory",
            json={
                "itemName": {"en": "Feed"},
                "itemType": "Fuel",
                "unit": "kg",
                "costPerUnit": 1,
                "purchaseDate": "2024-01-01",
            },
        )

        assert response.status_code == 400
        assert response.json()["field"] == "itemType"

    def test_duplicate_season_conflict(self, client, season_id):
        response = client.post(
            "/api/seasons",
            json={"name": "Summer 2024", "startDate": "2025-03-01", "endDate": "2025-09-30"},
        )

        assert response.status_code == 409
        assert response.json()["errorCode"] == "CONFLICT"


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Inventaire
# ═══════════════════════════════════════════════════════════════════════════════

class TestInventoryEndpoints:
    """Tests des endpoints /api/inventory."""

    def test_create_item_with_initial_quantity(self, client):
        """Le stock initial est visible via le journal."""
        item = _create_item(client, initialQuantity=500)

        assert item["currentQuantity"] == 500
        assert item["itemNames"]["ta"] == "மீன் தீவனம்"

        history = client.get(f"/api/inventory/{item['id']}/adjustments").json()
        assert [a["adjustmentType"] for a in history] == ["Initial Stock"]

    def test_item_name_localized(self, client):
        item = _create_item(client)

        tamil = client.get(f"/api/inventory/{item['id']}", headers={"Accept-Language": "ta-IN,ta;q=0.9"})
        hindi = client.get(f"/api/inventory/{item['id']}", headers={"Accept-Language": "hi"})

        assert tamil.json()["itemName"] == "மீன் தீவனம்"
        assert hindi.json()["itemName"] == "Fish Feed"

    def test_purchase_and_usage(self, client):
        """500 achetes puis 120 consommes: 380 en stock."""
        item_id = _create_item(client)["id"]

        purchase = client.post(
            "/api/inventory/adjustments",
            json={"inventoryItemId": item_id, "adjustmentType": "Purchase", "quantityChange": 500},
        )
        usage = client.post(
            "/api/inventory/adjustments",
            json={
                "inventoryItemId": item_id,
                "adjustmentType": "Usage",
                "quantityChange": -120,
                "reason": "Manual feeding",
            },
        )

        assert purchase.status_code == 201
        assert usage.status_code == 201
        assert usage.json()["quantityChange"] == -120
        assert client.get(f"/api/inventory/{item_id}").json()["currentQuantity"] == 380

    def test_adjustment_unknown_item(self, client):
        response = client.post(
            "/api/inventory/adjustments",
            json={"inventoryItemId": str(uuid4()), "adjustmentType": "Purchase", "quantityChange": 5},
        )
        assert response.status_code == 404

    def test_adjustment_inactive_item(self, client):
        """Aucun ajustement sur un article desactive."""
        item_id = _create_item(client)["id"]
        deleted = client.delete(f"/api/inventory/{item_id}")
        assert deleted.json()["isActive"] is False

        response = client.post(
            "/api/inventory/adjustments",
            json={"inventoryItemId": item_id, "adjustmentType": "Purchase", "quantityChange": 5},
        )

        assert response.status_code == 404
        assert response.json()["errorCode"] == "INVENTORY_ITEM_NOT_FOUND"
        assert client.get(f"/api/inventory/{item_id}/adjustments").json() == []

    def test_adjustment_missing_quantity(self, client):
        item_id = _create_item(client)["id"]

        response = client.post(
            "/api/inventory/adjustments",
            json={"inventoryItemId": item_id, "adjustmentType": "Purchase"},
        )

        assert response.status_code == 400
        assert response.json()["field"] == "quantityChange"
        assert response.json()["status"] == "fail"

    def test_list_items(self, client):
        _create_item(client, name={"en": "Lime"}, item_type="Chemical")
        _create_item(client)
        deleted = _create_item(client, name={"en": "Old Probiotic"}, item_type="Probiotic")
        client.delete(f"/api/inventory/{deleted['id']}")

        names = [i["itemName"] for i in client.get("/api/inventory").json()]
        chemicals = client.get("/api/inventory", params={"itemType": "Chemical"}).json()
        everything = client.get("/api/inventory", params={"includeInactive": "true"}).json()

        assert names == ["Fish Feed", "Lime"]
        assert [i["itemName"] for i in chemicals] == ["Lime"]
        assert len(everything) == 3

    def test_update_item(self, client):
        item_id = _create_item(client)["id"]

        response = client.put(f"/api/inventory/{item_id}", json={"costPerUnit": 3.0, "supplier": "Farm Co"})

        assert response.status_code == 200
        assert response.json()["costPerUnit"] == 3.0
        assert response.json()["supplier"] == "Farm Co"
        assert response.json()["unit"] == "kg"

    def test_concurrent_adjustments(self, client, container):
        """Des ajouts concurrents produisent chacun leur ligne."""
        item_id = _create_item(client)["id"]

        def worker(change):
            for _ in range(20):
                container.ledger.record_adjustment(UUID(item_id), "Correction", change)

        threads = [threading.Thread(target=worker, args=(c,)) for c in (10, -3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert client.get(f"/api/inventory/{item_id}").json()["currentQuantity"] == 140
        assert len(client.get(f"/api/inventory/{item_id}/adjustments").json()) == 40


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Saisies terrain et vue agregee
# ═══════════════════════════════════════════════════════════════════════════════

class TestFarmRecordEndpoints:
    """Tests des saisies consommant du stock."""

    def test_feed_input_reduces_stock(self, client, season_id, pond_id):
        item_id = _create_item(client, initialQuantity=500)["id"]

        response = client.post(
            "/api/feed-inputs",
            json={
                "date": "2024-04-02",
                "time": "07:30",
                "pondId": pond_id,
                "seasonId": season_id,
                "inventoryItemId": item_id,
                "quantity": 120,
            },
        )

        assert response.status_code == 201
        assert response.json()["stockAdjusted"] is True
        assert "adjustmentError" not in response.json()
        assert client.get(f"/api/inventory/{item_id}").json()["currentQuantity"] == 380

        history = client.get(f"/api/inventory/{item_id}/adjustments").json()
        assert history[0]["relatedDocument"] == response.json()["id"]
        assert history[0]["relatedDocumentModel"] == "FeedInput"
        assert history[0]["reason"] == "Feed usage for pond Pond A"

    def test_feed_input_rejects_non_feed(self, client, season_id, pond_id):
        item_id = _create_item(client, name={"en": "Lime"}, item_type="Chemical")["id"]

        response = client.post(
            "/api/feed-inputs",
            json={
                "date": "2024-04-02",
                "time": "07:30",
                "pondId": pond_id,
                "seasonId": season_id,
                "inventoryItemId": item_id,
                "quantity": 5,
            },
        )

        assert response.status_code == 400
        assert response.json()["field"] == "inventoryItemId"
        assert client.get("/api/feed-inputs").json() == []

    def test_feed_input_unknown_pond(self, client, season_id):
        item_id = _create_item(client)["id"]

        response = client.post(
            "/api/feed-inputs",
            json={
                "date": "2024-04-02",
                "time": "07:30",
                "pondId": str(uuid4()),
                "seasonId": season_id,
                "inventoryItemId": item_id,
                "quantity": 5,
            },
        )

        assert response.status_code == 404
        assert response.json()["errorCode"] == "POND_NOT_FOUND"

    def test_water_quality_with_treatment(self, client, season_id, pond_id):
        item_id = _create_item(client, name={"en": "Lime"}, item_type="Chemical", initialQuantity=30)["id"]

        response = client.post(
            "/api/water-quality-inputs",
            json={
                "date": "2024-04-02",
                "time": "06:00",
                "pondId": pond_id,
                "seasonId": season_id,
                "pH": 7.6,
                "dissolvedOxygen": 5.2,
                "temperature": 28.5,
                "salinity": 12,
                "inventoryItemId": item_id,
                "quantityUsed": 4,
            },
        )

        assert response.status_code == 201
        assert response.json()["pH"] == 7.6
        assert response.json()["stockAdjusted"] is True
        assert client.get(f"/api/inventory/{item_id}").json()["currentQuantity"] == 26

        listed = client.get("/api/water-quality-inputs", params={"pondId": pond_id}).json()
        assert [r["id"] for r in listed] == [response.json()["id"]]
        assert "stockAdjusted" not in listed[0]

    def test_water_quality_ph_out_of_range(self, client, season_id, pond_id):
        response = client.post(
            "/api/water-quality-inputs",
            json={
                "date": "2024-04-02",
                "time": "06:00",
                "pondId": pond_id,
                "seasonId": season_id,
                "pH": 15,
                "dissolvedOxygen": 5.2,
                "temperature": 28.5,
                "salinity": 12,
            },
        )

        assert response.status_code == 400
        assert response.json()["field"] == "pH"

    def test_aggregate(self, client, season_id, pond_id):
        """Stock courant et consommation par bassin."""
        item_id = _create_item(client, initialQuantity=500)["id"]
        for quantity in (100, 20):
            client.post(
                "/api/feed-inputs",
                json={
                    "date": "2024-04-02",
                    "time": "07:30",
                    "pondId": pond_id,
                    "seasonId": season_id,
                    "inventoryItemId": item_id,
                    "quantity": quantity,
                },
            )

        body = client.get("/api/inventory/aggregate", params={"pondId": pond_id}).json()

        assert body["currentStock"][0]["currentCalculatedQuantity"] == 380
        [usage] = body["usageSummary"]
        assert usage["pondId"] == pond_id
        assert usage["inventoryItemId"] == item_id
        assert usage["totalQuantityUsed"] == 120
        assert usage["totalCostUsed"] == 300

        other_pond = client.get("/api/inventory/aggregate", params={"pondId": str(uuid4())}).json()
        assert other_pond["usageSummary"] == []

    def test_aggregate_filters_after_localization(self, client, season_id, pond_id):
        item_id = _create_item(client, initialQuantity=50)["id"]
        client.post(
            "/api/feed-inputs",
            json={
                "date": "2024-04-02",
                "time": "07:30",
                "pondId": pond_id,
                "seasonId": season_id,
                "inventoryItemId": item_id,
                "quantity": 10,
            },
        )

        tamil = client.get(
            "/api/inventory/aggregate",
            params={"itemName": "மீன் தீவனம்"},
            headers={"Accept-Language": "ta"},
        ).json()
        chemicals = client.get("/api/inventory/aggregate", params={"itemType": "Chemical"}).json()

        assert len(tamil["usageSummary"]) == 1
        assert chemicals["usageSummary"] == []

    def test_delete_feed_input_restores_stock(self, client, season_id, pond_id):
        """La suppression remet la quantite en stock via une correction."""
        item_id = _create_item(client, initialQuantity=500)["id"]
        feed_input_id = client.post("/api/feed-inputs", json=_feed_body(pond_id, season_id, item_id)).json()["id"]
        assert client.get(f"/api/inventory/{item_id}").json()["currentQuantity"] == 380

        response = client.delete(f"/api/feed-inputs/{feed_input_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Feed input deleted successfully", "stockAdjusted": True}
        assert client.get(f"/api/inventory/{item_id}").json()["currentQuantity"] == 500
        assert client.get("/api/feed-inputs").json() == []

        history = client.get(f"/api/inventory/{item_id}/adjustments").json()
        correction = next(a for a in history if a["adjustmentType"] == "Correction")
        assert correction["quantityChange"] == 120
        assert correction["relatedDocument"] == feed_input_id
        assert correction["relatedDocumentModel"] == "FeedInput"

        usage = client.get("/api/inventory/aggregate", params={"pondId": pond_id}).json()["usageSummary"]
        assert usage == []

    def test_delete_unknown_feed_input(self, client):
        response = client.delete(f"/api/feed-inputs/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["errorCode"] == "FEED_INPUT_NOT_FOUND"


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Sortie de stock en echec
# ═══════════════════════════════════════════════════════════════════════════════

class TestStockAdjustmentFailure:
    """La saisie est conservee quand la sortie de stock echoue."""

    def test_feed_input_with_inactive_item(self, client, season_id, pond_id):
        item_id = _create_item(client, initialQuantity=500)["id"]
        client.delete(f"/api/inventory/{item_id}")

        response = client.post("/api/feed-inputs", json=_feed_body(pond_id, season_id, item_id))
        body = response.json()

        assert response.status_code == 201
        assert body["stockAdjusted"] is False
        assert "inactive" in body["adjustmentError"]
        assert [r["id"] for r in client.get("/api/feed-inputs").json()] == [body["id"]]
        assert len(client.get(f"/api/inventory/{item_id}/adjustments").json()) == 1

    def test_feed_input_unknown_item_rejected(self, client, season_id, pond_id):
        """Un aliment inexistant reste une erreur de saisie."""
        response = client.post("/api/feed-inputs", json=_feed_body(pond_id, season_id, str(uuid4())))

        assert response.status_code == 404
        assert client.get("/api/feed-inputs").json() == []

    def test_water_quality_with_inactive_treatment(self, client, season_id, pond_id):
        item_id = _create_item(client, name={"en": "Lime"}, item_type="Chemical")["id"]
        client.delete(f"/api/inventory/{item_id}")

        response = client.post("/api/water-quality-inputs", json=_treatment_body(pond_id, season_id, item_id))
        body = response.json()

        assert response.status_code == 201
        assert body["stockAdjusted"] is False
        assert "inactive" in body["adjustmentError"]
        assert len(client.get("/api/water-quality-inputs").json()) == 1

    def test_water_quality_with_unknown_treatment(self, client, season_id, pond_id):
        response = client.post(
            "/api/water-quality-inputs",
            json=_treatment_body(pond_id, season_id, str(uuid4())),
        )

        assert response.status_code == 201
        assert response.json()["stockAdjusted"] is False
        assert response.json()["adjustmentError"].startswith("[INVENTORY_ITEM_NOT_FOUND]")
        assert len(client.get("/api/water-quality-inputs").json()) == 1

    @pytest.fixture
    def journal_down_client(self, api_settings) -> TestClient:
        """Application dont le journal de stock est indisponible."""
        container = Container.create(
            item_repository=MemoryInventoryItemRepository(),
            adjustment_repository=UnavailableJournal(),
            season_repository=MemorySeasonRepository(),
            pond_repository=MemoryPondRepository(),
            feed_input_repository=MemoryFeedInputRepository(),
            water_quality_repository=MemoryWaterQualityInputRepository(),
        )
        return TestClient(create_app(settings=api_settings, container=container))

    def _location(self, client) -> tuple[str, str]:
        season = client.post(
            "/api/seasons",
            json={"name": "Summer 2024", "startDate": "2024-03-01", "endDate": "2024-09-30"},
        ).json()["id"]
        pond = client.post(
            "/api/ponds",
            json={"name": {"en": "Pond A"}, "size": 1200, "capacity": 5000, "seasonId": season},
        ).json()["id"]
        return season, pond

    def test_feed_input_when_journal_down(self, journal_down_client):
        season, pond = self._location(journal_down_client)
        item_id = _create_item(journal_down_client)["id"]

        response = journal_down_client.post("/api/feed-inputs", json=_feed_body(pond, season, item_id))

        assert response.status_code == 201
        assert response.json()["stockAdjusted"] is False
        assert "STORAGE_ERROR" in response.json()["adjustmentError"]
        assert len(journal_down_client.get("/api/feed-inputs").json()) == 1

    def test_water_quality_when_journal_down(self, journal_down_client):
        season, pond = self._location(journal_down_client)
        item_id = _create_item(journal_down_client, name={"en": "Lime"}, item_type="Chemical")["id"]

        response = journal_down_client.post(
            "/api/water-quality-inputs",
            json=_treatment_body(pond, season, item_id),
        )

        assert response.status_code == 201
        assert response.json()["stockAdjusted"] is False
        assert "STORAGE_ERROR" in response.json()["adjustmentError"]

    def test_delete_feed_input_when_journal_down(self, journal_down_client):
        """La distribution est supprimee, la correction est signalee en echec."""
        season, pond = self._location(journal_down_client)
        item_id = _create_item(journal_down_client)["id"]
        feed_input_id = journal_down_client.post(
            "/api/feed-inputs", json=_feed_body(pond, season, item_id)
        ).json()["id"]

        response = journal_down_client.delete(f"/api/feed-inputs/{feed_input_id}")

        assert response.status_code == 200
        assert response.json()["stockAdjusted"] is False
        assert "STORAGE_ERROR" in response.json()["adjustmentError"]
        assert journal_down_client.get("/api/feed-inputs").json() == []


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Administration du cache
# ═══════════════════════════════════════════════════════════════════════════════

class TestAdminEndpoints:
    """Tests des endpoints /api/admin/cache."""

    def test_stats_and_clear(self, client):
        client.get("/api/ponds")
        client.get("/api/seasons")

        stats = client.get("/api/admin/cache/stats").json()
        assert stats["size"] == 2
        assert stats["default_ttl"] == 600

        cleared = client.post("/api/admin/cache/clear").json()
        assert cleared == {"cleared": 2}
        assert client.get("/api/admin/cache/stats").json()["size"] == 0
