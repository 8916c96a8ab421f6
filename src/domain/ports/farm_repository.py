"""
Ports de persistance de l'exploitation (saisons, bassins, saisies).
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities.farm import FeedInput, Pond, Season, WaterQualityInput


class SeasonRepository(ABC):
    """Interface pour la persistance des saisons."""

    @abstractmethod
    def save(self, season: Season) -> Season:
        """Cree une saison (nom unique, ConflictError sinon)."""
        pass

    @abstractmethod
    def get_by_id(self, season_id: UUID) -> Optional[Season]:
        pass

    @abstractmethod
    def find_all(self) -> list[Season]:
        """Saisons triees par date de debut decroissante."""
        pass


class PondRepository(ABC):
    """Interface pour la persistance des bassins."""

    @abstractmethod
    def save(self, pond: Pond) -> Pond:
        pass

    @abstractmethod
    def get_by_id(self, pond_id: UUID) -> Optional[Pond]:
        pass

    @abstractmethod
    def find_all(self, season_id: Optional[UUID] = None) -> list[Pond]:
        """
        Liste les bassins.

        Args:
            season_id: Restreindre a une saison.
        """
        pass

    @abstractmethod
    def delete(self, pond_id: UUID) -> bool:
        """
        Supprime un bassin.

        Returns:
            True si supprime, False si inexistant.
        """
        pass


class FeedInputRepository(ABC):
    """Interface pour la persistance des distributions d'aliment."""

    @abstractmethod
    def save(self, feed_input: FeedInput) -> FeedInput:
        pass

    @abstractmethod
    def get_by_id(self, feed_input_id: UUID) -> Optional[FeedInput]:
        pass

    @abstractmethod
    def delete(self, feed_input_id: UUID) -> bool:
        """
        Supprime une distribution.

        Returns:
            True si supprimee, False si inexistante.
        """
        pass

    @abstractmethod
    def find(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
    ) -> list[FeedInput]:
        """Saisies filtrees, les plus recentes d'abord."""
        pass


class WaterQualityInputRepository(ABC):
    """Interface pour la persistance des releves de qualite de l'eau."""

    @abstractmethod
    def save(self, reading: WaterQualityInput) -> WaterQualityInput:
        pass

    @abstractmethod
    def find(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
    ) -> list[WaterQualityInput]:
        """Releves filtres, les plus recents d'abord."""
        pass
