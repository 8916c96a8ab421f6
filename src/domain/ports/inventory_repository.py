"""
Ports de persistance de l'inventaire.

Responsabilite unique:
----------------------
Definir le contrat du catalogue d'articles et du journal
des ajustements (append-only).
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from src.domain.entities.inventory_adjustment import AdjustmentType, InventoryAdjustment
from src.domain.entities.inventory_item import InventoryItem, ItemType


class InventoryItemRepository(ABC):
    """
    Interface pour la persistance des articles.

    Aucune suppression physique: le soft delete passe par save().
    """

    @abstractmethod
    def save(self, item: InventoryItem) -> InventoryItem:
        """
        Cree ou met a jour un article.

        Args:
            item: Article a sauvegarder.

        Returns:
            Article sauvegarde.
        """
        pass

    @abstractmethod
    def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        """
        Recupere un article (actif ou non).

        Args:
            item_id: ID de l'article.

        Returns:
            Article si trouve, None sinon.
        """
        pass

    @abstractmethod
    def find_all(
        self,
        item_type: Optional[ItemType] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> list[InventoryItem]:
        """
        Liste les articles.

        Args:
            item_type: Filtre par categorie.
            search: Recherche insensible a la casse sur le nom anglais.
            include_inactive: Inclure les articles desactives.

        Returns:
            Articles tries par nom anglais.
        """
        pass

    @abstractmethod
    def get_many(self, item_ids: Iterable[UUID]) -> dict[UUID, InventoryItem]:
        """Recupere plusieurs articles indexes par ID."""
        pass


class InventoryAdjustmentRepository(ABC):
    """
    Interface du journal des ajustements.

    Le journal est append-only: aucune methode de mise a jour
    ni de suppression.
    """

    @abstractmethod
    def append(self, adjustment: InventoryAdjustment) -> InventoryAdjustment:
        """
        Ajoute une ligne au journal.

        Args:
            adjustment: Ajustement a enregistrer.

        Returns:
            Ajustement enregistre.
        """
        pass

    @abstractmethod
    def find_by_item(self, item_id: UUID) -> list[InventoryAdjustment]:
        """
        Ajustements d'un article, du plus recent au plus ancien.

        Args:
            item_id: ID de l'article.
        """
        pass

    @abstractmethod
    def sum_by_item(self, item_id: UUID) -> float:
        """Somme des quantity_change d'un article (0 si aucun)."""
        pass

    @abstractmethod
    def totals_by_item(self) -> dict[UUID, float]:
        """Somme des quantity_change groupee par article."""
        pass

    @abstractmethod
    def find_by_type(self, adjustment_type: AdjustmentType) -> list[InventoryAdjustment]:
        """Ajustements d'un type donne (ex: Usage)."""
        pass
