"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging structure (JSON en production).

Usage:
------
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("pond_created", pond_id="...", season_id="...")
"""

from src.infrastructure.logging.config import RequestLogger, configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "RequestLogger"]
