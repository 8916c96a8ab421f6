"""
Tests unitaires pour le cache des reponses GET.

Teste la cle de cache, le decorateur et l'invalidation des listes
de bassins et de saisons.
"""

import pytest
from fastapi.testclient import TestClient

from src.infrastructure.cache import MemoryResponseCache
from src.infrastructure.container import Container
from src.presentation.api.caching import build_cache_key, invalidate_listing
from src.presentation.api.main import create_app


class BrokenCache(MemoryResponseCache):
    """Cache dont toutes les operations echouent."""

    def get(self, key):
        raise RuntimeError("cache backend down")

    def set(self, key, value, ttl_seconds=None):
        raise RuntimeError("cache backend down")

    def invalidate(self, key):
        raise RuntimeError("cache backend down")


@pytest.fixture
def season_id(client) -> str:
    response = client.post(
        "/api/seasons",
        json={"name": "Summer 2024", "startDate": "2024-03-01", "endDate": "2024-09-30"},
    )
    return response.json()["id"]


def _pond_body(season_id: str, name: str = "Pond A") -> dict:
    return {"name": {"en": name}, "size": 1000, "capacity": 4000, "seasonId": season_id}


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Cle de cache
# ═══════════════════════════════════════════════════════════════════════════════

class TestBuildCacheKey:
    """Tests de la normalisation des cles."""

    def test_trailing_slash_removed(self):
        assert build_cache_key("/api/ponds/") == "/api/ponds"

    def test_root_path(self):
        assert build_cache_key("/") == "/"

    def test_query_params_sorted(self):
        """L'ordre des parametres ne change pas la cle."""
        first = build_cache_key("/api/ponds", [("b", "2"), ("a", "1")])
        second = build_cache_key("/api/ponds/", [("a", "1"), ("b", "2")])

        assert first == second == "/api/ponds?a=1&b=2"

    def test_invalidate_listing_removes_variants(self):
        cache = MemoryResponseCache()
        cache.set("/api/ponds", [])
        cache.set("/api/ponds?page=2", [])
        cache.set("/api/ponds/season/x", [])

        assert invalidate_listing(cache, "/api/ponds/") == 2
        assert cache.get("/api/ponds/season/x") == []


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Listes de bassins en cache
# ═══════════════════════════════════════════════════════════════════════════════

class TestPondListingCache:
    """Scenario de mise en cache et d'invalidation de GET /api/ponds."""

    def test_listing_served_from_cache(self, client, container, season_id, pond):
        """Une ecriture hors API n'est pas visible tant que l'entree est valide."""
        assert client.get("/api/ponds").json() == []

        container.pond_repository.save(pond)

        assert client.get("/api/ponds").json() == []
        assert container.response_cache.get_stats()["hits"] >= 1

    def test_listing_refreshed_after_ttl(self, client, container, fake_clock, season_id, pond):
        client.get("/api/ponds")
        container.pond_repository.save(pond)

        fake_clock.advance(600)

        assert len(client.get("/api/ponds").json()) == 1

    def test_create_invalidates_listing(self, client, season_id):
        """POST /api/ponds puis GET: le nouveau bassin est visible."""
        client.post("/api/ponds", json=_pond_body(season_id, "Pond A"))
        assert len(client.get("/api/ponds").json()) == 1

        response = client.post("/api/ponds", json=_pond_body(season_id, "Pond B"))
        assert response.status_code == 201

        names = [p["name"]["en"] for p in client.get("/api/ponds").json()]
        assert names == ["Pond A", "Pond B"]

    def test_update_invalidates_old_and_new_season(self, client, season_id):
        """Deplacer un bassin invalide les listes des deux saisons."""
        other_season = client.post(
            "/api/seasons",
            json={"name": "Winter 2024", "startDate": "2024-10-01", "endDate": "2025-02-28"},
        ).json()["id"]
        pond_id = client.post("/api/ponds", json=_pond_body(season_id)).json()["id"]

        assert len(client.get(f"/api/ponds/season/{season_id}").json()) == 1
        assert client.get(f"/api/ponds/season/{other_season}").json() == []

        response = client.put(f"/api/ponds/{pond_id}", json={"seasonId": other_season})
        assert response.status_code == 200

        assert client.get(f"/api/ponds/season/{season_id}").json() == []
        assert [p["id"] for p in client.get(f"/api/ponds/season/{other_season}").json()] == [pond_id]

    def test_delete_invalidates_listing(self, client, season_id):
        pond_id = client.post("/api/ponds", json=_pond_body(season_id)).json()["id"]
        assert len(client.get("/api/ponds").json()) == 1

        response = client.delete(f"/api/ponds/{pond_id}")

        assert response.json() == {"message": "Pond deleted successfully"}
        assert client.get("/api/ponds").json() == []

    def test_trailing_slash_shares_entry(self, client, container, season_id):
        """/api/ponds et /api/ponds/ partagent la meme entree."""
        client.get("/api/ponds")
        client.get("/api/ponds/")

        assert container.response_cache.get_stats()["size"] == 1

    def test_no_cache_header(self, client, season_id):
        """Aucun en-tete X-Cache n'est expose."""
        first = client.get("/api/ponds")
        second = client.get("/api/ponds")

        assert "x-cache" not in first.headers
        assert "x-cache" not in second.headers

    def test_season_listing_invalidated(self, client, season_id):
        assert len(client.get("/api/seasons").json()) == 1

        client.post(
            "/api/seasons",
            json={"name": "Winter 2024", "startDate": "2024-10-01", "endDate": "2025-02-28"},
        )

        assert [s["name"] for s in client.get("/api/seasons").json()] == ["Winter 2024", "Summer 2024"]


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Panne du cache
# ═══════════════════════════════════════════════════════════════════════════════

class TestCacheFailure:
    """Une panne du cache ne fait jamais echouer la requete."""

    @pytest.fixture
    def broken_client(self, api_settings) -> TestClient:
        container = Container.create_in_memory(response_cache=BrokenCache())
        return TestClient(create_app(settings=api_settings, container=container))

    def test_get_falls_back_to_handler(self, broken_client):
        response = broken_client.get("/api/ponds")

        assert response.status_code == 200
        assert response.json() == []

    def test_mutations_succeed(self, broken_client):
        season = broken_client.post(
            "/api/seasons",
            json={"name": "Summer 2024", "startDate": "2024-03-01", "endDate": "2024-09-30"},
        )
        assert season.status_code == 201

        pond = broken_client.post("/api/ponds", json=_pond_body(season.json()["id"]))
        assert pond.status_code == 201
        assert len(broken_client.get("/api/ponds").json()) == 1
