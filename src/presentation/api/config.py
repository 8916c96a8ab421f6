"""
Configuration API - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration API depuis les variables d'env
(ou un fichier .env).

Variables principales:
----------------------
- DATABASE_URL: URL SQLAlchemy (defaut: sqlite:///./aquafarm.db)
- CACHE_TTL_SECONDS: Duree de vie des reponses en cache (defaut: 600)
- DEFAULT_LANGUAGE: Langue des reponses localisees (defaut: en)
- JSON_LOGS: Logs JSON (production)
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """
    Configuration de l'API REST.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_title: str = "Aquaculture Farm Management API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"

    # CORS
    cors_origins: list[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./aquafarm.db"

    # Response cache
    cache_ttl_seconds: int = 600
    cache_max_size: int = 1000

    # Localisation
    supported_languages: list[str] = ["en", "hi", "ta"]
    default_language: str = "en"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


@lru_cache
def get_settings() -> APISettings:
    """Retourne la configuration (cached)."""
    return APISettings()
