"""
Cache de réponses en mémoire avec TTL (Time To Live).

Responsabilité unique:
----------------------
Stocker les payloads JSON des endpoints GET, indexés par clé
(chemin normalisé + query), jusqu'à expiration ou invalidation.

Features:
---------
- TTL configurable par entree (defaut 600s)
- Thread-safe (threading.Lock)
- Nettoyage des entrées expirées à la lecture et à l'insertion
- Taille bornée (les 25% les plus anciens sont évincés)
- Statistiques d'utilisation
"""

import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, Optional

from src.domain.ports.response_cache import ResponseCache

DEFAULT_TTL_SECONDS = 600


@dataclass
class CacheEntry:
    """Entrée de cache avec timestamp d'expiration."""

    value: Any
    expires_at: float


class MemoryResponseCache(ResponseCache):
    """
    Cache de réponses en mémoire (process local).

    Example:
        >>> cache = MemoryResponseCache(default_ttl=600)
        >>> cache.set("/api/ponds", [{"id": "..."}])
        >>> cache.get("/api/ponds")
        [{'id': '...'}]
    """

    def __init__(
        self,
        default_ttl: int = DEFAULT_TTL_SECONDS,
        max_size: int = 1000,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """
        Args:
            default_ttl: TTL par défaut en secondes.
            max_size: Nombre maximum d'entrées.
            clock: Horloge (secondes), time.monotonic par défaut.
        """
        self.default_ttl = default_ttl
        self.max_size = max_size
        self._clock = clock or time.monotonic
        self._cache: Dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None

            if self._clock() >= entry.expires_at:
                del self._cache[key]
                self._misses += 1
                return None

            self._hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self.default_ttl

        with self._lock:
            if key not in self._cache and len(self._cache) >= self.max_size:
                self._cleanup_expired()

                if len(self._cache) >= self.max_size:
                    oldest_keys = sorted(
                        self._cache.keys(),
                        key=lambda k: self._cache[k].expires_at,
                    )[: max(1, len(self._cache) // 4)]
                    for k in oldest_keys:
                        del self._cache[k]

            self._cache[key] = CacheEntry(
                value=value,
                expires_at=self._clock() + ttl,
            )

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._cache.pop(key, None) is not None

    def invalidate_prefix(self, prefix: str) -> int:
        with self._lock:
            keys_to_delete = [k for k in self._cache if k.startswith(prefix)]
            for key in keys_to_delete:
                del self._cache[key]
            return len(keys_to_delete)

    def invalidate_all(self) -> int:
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            return count

    def _cleanup_expired(self) -> None:
        """Supprime les entrées expirées (appelé avec le lock)."""
        now = self._clock()
        expired_keys = [k for k, v in self._cache.items() if now >= v.expires_at]
        for key in expired_keys:
            del self._cache[key]

    def get_stats(self) -> Dict:
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0

            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
                "default_ttl": self.default_ttl,
            }
