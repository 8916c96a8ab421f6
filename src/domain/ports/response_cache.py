"""
ResponseCache Port - Interface du cache de reponses.

Responsabilite unique:
----------------------
Definir le contrat du cache cle/valeur avec TTL utilise pour
memoriser les reponses JSON des requetes GET.

Usage:
------
Une instance par processus, construite par le Container et injectee.
En dev/tests, MemoryResponseCache.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ResponseCache(ABC):
    """
    Interface du cache de reponses.

    Les cles sont des URLs normalisees; le cache ignore la nature
    des donnees stockees.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur.

        Args:
            key: Cle a recuperer.

        Returns:
            Valeur si presente et non expiree, None sinon.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """
        Stocke (ou remplace) une valeur avec une expiration recalculee.

        Args:
            key: Cle unique.
            value: Payload JSON-serialisable.
            ttl_seconds: Duree de vie (defaut: TTL du cache).
        """
        pass

    @abstractmethod
    def invalidate(self, key: str) -> bool:
        """
        Supprime une entree.

        Args:
            key: Cle a supprimer.

        Returns:
            True si une entree existait, False sinon.
        """
        pass

    @abstractmethod
    def invalidate_prefix(self, prefix: str) -> int:
        """
        Supprime toutes les entrees dont la cle commence par prefix.

        Returns:
            Nombre d'entrees supprimees.
        """
        pass

    @abstractmethod
    def invalidate_all(self) -> int:
        """
        Vide le cache (maintenance uniquement).

        Returns:
            Nombre d'entrees supprimees.
        """
        pass

    @abstractmethod
    def get_stats(self) -> dict:
        """Statistiques d'utilisation (taille, hits, misses...)."""
        pass
