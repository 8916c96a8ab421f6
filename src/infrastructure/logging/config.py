"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog pour l'API (console en dev, JSON en production).

Modes:
------
- Development: Pretty print, couleurs
- Production: JSON, timestamp ISO

Usage:
------
    from src.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True, log_level="INFO")
    logger = get_logger(__name__)
    logger.info("inventory_adjustment_recorded", item_id="...", quantity_change=-120)
"""

import logging
import sys
import time
import uuid
from typing import Optional

import structlog


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Peut etre appele plusieurs fois (une application par test):
    la derniere configuration l'emporte.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Args:
        name: Nom du logger (module name).

    Returns:
        Logger structlog.
    """
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging pour FastAPI.

    Lie au contexte structlog un request_id (en-tete X-Request-ID ou
    genere), la methode et le chemin, puis log chaque requete avec
    son statut et sa duree. Le request_id est renvoye dans la reponse.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        """
        Initialise le middleware.

        Args:
            logger: Logger a utiliser (defaut: "api.requests").
        """
        self._logger = logger or get_logger("api.requests")

    async def __call__(self, request, call_next):
        """Log la requete et la reponse."""
        start_time = time.perf_counter()
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=self._elapsed_ms(start_time),
            )
            raise

        log = self._logger.warning if response.status_code >= 500 else self._logger.info
        log(
            "request_completed",
            status_code=response.status_code,
            duration_ms=self._elapsed_ms(start_time),
        )
        response.headers["X-Request-ID"] = request_id
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)
