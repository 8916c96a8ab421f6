"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir les dependances (conteneur, cache, services) aux endpoints.
Tout provient du Container attache a l'application (app.state).

Usage:
------
    @router.get("/{item_id}")
    def get_item(item_id: UUID, ledger: InventoryLedger = Depends(get_ledger)):
        return ledger.get_item(item_id)
"""

from fastapi import Depends, Request

from src.domain.ports.response_cache import ResponseCache
from src.domain.services.inventory_ledger import InventoryLedger
from src.domain.value_objects.localized_text import resolve_language
from src.infrastructure.container import Container
from src.presentation.api.config import APISettings


def get_app_settings(request: Request) -> APISettings:
    """Retourne la configuration de l'application courante."""
    return request.app.state.settings


def get_container(request: Request) -> Container:
    """Retourne le Container de l'application courante."""
    return request.app.state.container


def get_response_cache(container: Container = Depends(get_container)) -> ResponseCache:
    """Retourne le cache de reponses."""
    return container.response_cache


def get_ledger(container: Container = Depends(get_container)) -> InventoryLedger:
    """Retourne le service du journal de stock."""
    return container.ledger


def get_language(
    request: Request,
    settings: APISettings = Depends(get_app_settings),
) -> str:
    """
    Langue des reponses localisees.

    Resolue depuis le header Accept-Language parmi les langues
    supportees, langue par defaut sinon.
    """
    return resolve_language(
        request.headers.get("accept-language"),
        settings.supported_languages,
        settings.default_language,
    )
