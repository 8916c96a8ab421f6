"""
Module de cache en mémoire avec TTL.

Fournit le cache des réponses GET (listes de bassins, saisons...).
"""

from src.infrastructure.cache.ttl_cache import (
    DEFAULT_TTL_SECONDS,
    CacheEntry,
    MemoryResponseCache,
)

__all__ = [
    "MemoryResponseCache",
    "CacheEntry",
    "DEFAULT_TTL_SECONDS",
]
