"""
Caching - Cache des reponses GET.

Responsabilite unique:
----------------------
Intercepter les endpoints de lecture pour servir une reponse deja
calculee, et invalider les listes apres une mutation.

Usage:
------
    @router.get("", response_model=list[PondResponse])
    @cached_response()
    def list_ponds(
        request: Request,
        cache: ResponseCache = Depends(get_response_cache),
    ):
        ...

Cle de cache:
-------------
Chemin sans slash final + parametres de requete tries:
    /api/ponds/?b=2&a=1  ->  /api/ponds?a=1&b=2

Pannes:
-------
Une erreur du cache n'echoue jamais la requete: elle est journalisee
(response_cache_unavailable) et le handler est appele sans cache.
"""

from functools import wraps
from typing import Any, Callable, Iterable, Optional
from urllib.parse import urlencode

from fastapi import Request
from fastapi.encoders import jsonable_encoder

from src.domain.ports.response_cache import ResponseCache
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


def build_cache_key(path: str, query_params: Iterable[tuple[str, str]] = ()) -> str:
    """
    Construit la cle de cache d'une requete.

    Args:
        path: Chemin de la requete.
        query_params: Paires (nom, valeur).

    Returns:
        Cle normalisee.
    """
    normalized = path.rstrip("/") or "/"
    params = sorted(query_params)
    if not params:
        return normalized
    return f"{normalized}?{urlencode(params)}"


def _find_argument(values: Iterable[Any], kind: type) -> Optional[Any]:
    for value in values:
        if isinstance(value, kind):
            return value
    return None


def cached_response(ttl_seconds: Optional[int] = None) -> Callable:
    """
    Decorateur de mise en cache d'un endpoint GET.

    L'endpoint doit declarer un parametre Request et un parametre
    ResponseCache (injecte par Depends). En cas de hit, le payload
    stocke est renvoye sans appeler l'endpoint.

    Args:
        ttl_seconds: TTL specifique (defaut: TTL du cache).
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            request = _find_argument(kwargs.values(), Request)
            cache = _find_argument(kwargs.values(), ResponseCache)
            if request is None or cache is None:
                return func(*args, **kwargs)

            key = build_cache_key(request.url.path, request.query_params.multi_items())

            try:
                cached = cache.get(key)
            except Exception as e:
                logger.warning("response_cache_unavailable", operation="get", key=key, error=str(e))
                return func(*args, **kwargs)

            if cached is not None:
                return cached

            result = func(*args, **kwargs)

            try:
                cache.set(key, jsonable_encoder(result), ttl_seconds)
            except Exception as e:
                logger.warning("response_cache_unavailable", operation="set", key=key, error=str(e))

            return result

        return wrapper

    return decorator


def invalidate_listing(cache: ResponseCache, *paths: str) -> int:
    """
    Invalide des listes en cache et leurs variantes filtrees.

    Pour chaque chemin, supprime la cle exacte et toutes les cles
    "chemin?..." (memes listes avec parametres de requete).

    Args:
        cache: Cache de reponses.
        paths: Chemins des listes (ex: "/api/ponds").

    Returns:
        Nombre d'entrees supprimees.
    """
    removed = 0
    for path in paths:
        key = build_cache_key(path)
        try:
            count = int(cache.invalidate(key)) + cache.invalidate_prefix(f"{key}?")
        except Exception as e:
            logger.warning("response_cache_unavailable", operation="invalidate", key=key, error=str(e))
            continue
        removed += count
        logger.info("cache_invalidated", key=key, removed=count)
    return removed
