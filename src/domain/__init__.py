"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites du domaine (InventoryItem, InventoryAdjustment, Pond...)
    - value_objects/: Textes multilingues et resolution de langue
    - ports/: Interfaces (repositories, cache de reponses)
    - services/: Services metier purs (journal de stock)
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Logique metier pure
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    DomainException,
    InventoryItemNotFoundError,
    NotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "InventoryItemNotFoundError",
    "StorageError",
]
