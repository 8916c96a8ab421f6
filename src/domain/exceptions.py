"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure. La couche presentation
les traduit en reponses HTTP (4xx pour les erreurs client, 5xx sinon).
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    status_code: int = 500

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ═══════════════════════════════════════════════════════════════════════════════
# ERREURS CLIENT
# ═══════════════════════════════════════════════════════════════════════════════

class ValidationError(DomainException):
    """Champ manquant ou invalide dans une requete."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        field: str | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.field = field


class InvalidAdjustmentError(ValidationError):
    """Leve quand un ajustement de stock est incomplet ou invalide."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="INVALID_ADJUSTMENT", field=field)


class InvalidInventoryItemError(ValidationError):
    """Leve quand un article d'inventaire est invalide."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="INVALID_INVENTORY_ITEM", field=field)


class InvalidFarmRecordError(ValidationError):
    """Leve quand une saisie terrain (bassin, saison, aliment, eau) est invalide."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="INVALID_FARM_RECORD", field=field)


class NotFoundError(DomainException):
    """Leve quand une entite referencee n'existe pas."""

    status_code = 404

    def __init__(self, resource: str, identifier: Any, code: str = "NOT_FOUND") -> None:
        super().__init__(f"{resource} not found: '{identifier}'", code=code)
        self.resource = resource
        self.identifier = identifier


class InventoryItemNotFoundError(NotFoundError):
    """Leve quand un article est absent ou inactif (soft delete)."""

    def __init__(self, item_id: Any, inactive: bool = False) -> None:
        resource = "Inventory item (inactive)" if inactive else "Inventory item"
        super().__init__(resource, item_id, code="INVENTORY_ITEM_NOT_FOUND")
        self.item_id = item_id
        self.inactive = inactive


class PondNotFoundError(NotFoundError):
    """Leve quand un bassin n'est pas trouve."""

    def __init__(self, pond_id: Any) -> None:
        super().__init__("Pond", pond_id, code="POND_NOT_FOUND")
        self.pond_id = pond_id


class SeasonNotFoundError(NotFoundError):
    """Leve quand une saison n'est pas trouvee."""

    def __init__(self, season_id: Any) -> None:
        super().__init__("Season", season_id, code="SEASON_NOT_FOUND")
        self.season_id = season_id


class FeedInputNotFoundError(NotFoundError):
    """Leve quand une distribution d'aliment n'est pas trouvee."""

    def __init__(self, feed_input_id: Any) -> None:
        super().__init__("Feed input", feed_input_id, code="FEED_INPUT_NOT_FOUND")
        self.feed_input_id = feed_input_id


class ConflictError(DomainException):
    """Leve quand une contrainte d'unicite est violee."""

    status_code = 409

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFLICT")


# ═══════════════════════════════════════════════════════════════════════════════
# ERREURS SERVEUR
# ═══════════════════════════════════════════════════════════════════════════════

class StorageError(DomainException):
    """Leve quand une lecture/ecriture du stockage echoue de facon inattendue."""

    status_code = 500

    def __init__(self, operation: str, reason: str | None = None) -> None:
        message = f"Storage operation failed: {operation}."
        if reason:
            message += f" Reason: {reason}"
        super().__init__(message, code="STORAGE_ERROR")
        self.operation = operation
        self.reason = reason
