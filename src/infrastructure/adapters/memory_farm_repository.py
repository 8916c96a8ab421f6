"""
Repositories de l'exploitation en memoire (saisons, bassins, saisies).

Utiles pour dev/tests, remplacer par SQLAlchemy en production.
"""

from threading import Lock
from typing import Optional
from uuid import UUID

from src.domain.entities.farm import FeedInput, Pond, Season, WaterQualityInput
from src.domain.exceptions import ConflictError
from src.domain.ports.farm_repository import (
    FeedInputRepository,
    PondRepository,
    SeasonRepository,
    WaterQualityInputRepository,
)


def _newest_first(records: list) -> list:
    return sorted(records, key=lambda r: (r.date, r.time, r.created_at), reverse=True)


class MemorySeasonRepository(SeasonRepository):
    """Saisons en memoire, nom unique."""

    def __init__(self):
        self._seasons: dict[UUID, Season] = {}
        self._lock = Lock()

    def save(self, season: Season) -> Season:
        with self._lock:
            for existing in self._seasons.values():
                if existing.name == season.name and existing.id != season.id:
                    raise ConflictError(f"Season '{season.name}' already exists")
            self._seasons[season.id] = season
            return season

    def get_by_id(self, season_id: UUID) -> Optional[Season]:
        return self._seasons.get(season_id)

    def find_all(self) -> list[Season]:
        with self._lock:
            seasons = list(self._seasons.values())
        return sorted(seasons, key=lambda s: s.start_date, reverse=True)


class MemoryPondRepository(PondRepository):
    """Bassins en memoire."""

    def __init__(self):
        self._ponds: dict[UUID, Pond] = {}
        self._lock = Lock()

    def save(self, pond: Pond) -> Pond:
        with self._lock:
            self._ponds[pond.id] = pond
            return pond

    def get_by_id(self, pond_id: UUID) -> Optional[Pond]:
        return self._ponds.get(pond_id)

    def find_all(self, season_id: Optional[UUID] = None) -> list[Pond]:
        with self._lock:
            ponds = list(self._ponds.values())
        if season_id is not None:
            ponds = [p for p in ponds if p.season_id == season_id]
        return sorted(ponds, key=lambda p: p.created_at)

    def delete(self, pond_id: UUID) -> bool:
        with self._lock:
            return self._ponds.pop(pond_id, None) is not None


class MemoryFeedInputRepository(FeedInputRepository):
    """Distributions d'aliment en memoire."""

    def __init__(self):
        self._records: dict[UUID, FeedInput] = {}
        self._lock = Lock()

    def save(self, feed_input: FeedInput) -> FeedInput:
        with self._lock:
            self._records[feed_input.id] = feed_input
            return feed_input

    def get_by_id(self, feed_input_id: UUID) -> Optional[FeedInput]:
        return self._records.get(feed_input_id)

    def delete(self, feed_input_id: UUID) -> bool:
        with self._lock:
            return self._records.pop(feed_input_id, None) is not None

    def find(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
    ) -> list[FeedInput]:
        with self._lock:
            records = list(self._records.values())
        if season_id is not None:
            records = [r for r in records if r.season_id == season_id]
        if pond_id is not None:
            records = [r for r in records if r.pond_id == pond_id]
        return _newest_first(records)


class MemoryWaterQualityInputRepository(WaterQualityInputRepository):
    """Releves de qualite de l'eau en memoire."""

    def __init__(self):
        self._records: dict[UUID, WaterQualityInput] = {}
        self._lock = Lock()

    def save(self, reading: WaterQualityInput) -> WaterQualityInput:
        with self._lock:
            self._records[reading.id] = reading
            return reading

    def find(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
    ) -> list[WaterQualityInput]:
        with self._lock:
            records = list(self._records.values())
        if season_id is not None:
            records = [r for r in records if r.season_id == season_id]
        if pond_id is not None:
            records = [r for r in records if r.pond_id == pond_id]
        return _newest_first(records)
