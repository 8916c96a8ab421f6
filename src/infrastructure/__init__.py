"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans le domaine. Elle gere:
- Base de donnees (SQLAlchemy: SQLite, PostgreSQL)
- Repositories en memoire (dev/tests)
- Cache de reponses en memoire
- Logging structure (structlog)
"""

from src.infrastructure.container import Container

__all__ = [
    "Container",
]
