"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI: logging, conteneur de
dependances, middlewares, handlers d'erreurs et routers.

Usage:
------
    # Development
    python3 run.py --reload

    # Production
    JSON_LOGS=true DATABASE_URL=postgresql://... \\
        uvicorn --factory src.presentation.api.main:create_app --host 0.0.0.0 --port 8000
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.cache import MemoryResponseCache
from src.infrastructure.container import Container
from src.infrastructure.logging import RequestLogger, configure_logging, get_logger
from src.presentation.api.admin.router import router as admin_router
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.errors import register_exception_handlers
from src.presentation.api.feed_inputs.router import router as feed_inputs_router
from src.presentation.api.inventory.router import router as inventory_router
from src.presentation.api.ponds.router import router as ponds_router
from src.presentation.api.seasons.router import router as seasons_router
from src.presentation.api.water_quality.router import router as water_quality_router


def create_app(
    settings: Optional[APISettings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration (defaut: get_settings()).
        container: Conteneur de dependances (defaut: construit depuis
            settings.database_url, avec un cache memoire neuf).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    logger = get_logger("api")

    if container is None:
        container = Container.create_from_database_url(
            settings.database_url,
            response_cache=MemoryResponseCache(
                default_ttl=settings.cache_ttl_seconds,
                max_size=settings.cache_max_size,
            ),
        )

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.container = container

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check
    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy", "version": settings.api_version}

    # Routers
    app.include_router(seasons_router, prefix=settings.api_prefix)
    app.include_router(ponds_router, prefix=settings.api_prefix)
    app.include_router(inventory_router, prefix=settings.api_prefix)
    app.include_router(feed_inputs_router, prefix=settings.api_prefix)
    app.include_router(water_quality_router, prefix=settings.api_prefix)
    app.include_router(admin_router, prefix=settings.api_prefix)

    logger.info(
        "app_started",
        version=settings.api_version,
        persistence="sql" if container.db_manager else "memory",
    )

    return app
