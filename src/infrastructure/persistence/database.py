"""
Gestion de la connexion a la base de donnees.

Ce module fournit DatabaseManager, point d'entree de l'acces aux donnees
pour les repositories SQLAlchemy.

Architecture Hexagonale:
------------------------
Ce module fait partie de la couche Infrastructure (Adapters) et implemente
les ports de persistence definis par le domaine.

    src/infrastructure/persistence/
    ├── database.py                          <- CE FICHIER
    ├── models/                              <- Modeles SQLAlchemy (ORM)
    │   ├── base.py                          Base declarative
    │   ├── inventory_models.py              Articles, journal
    │   └── farm_models.py                   Saisons, bassins, saisies
    ├── sqlalchemy_inventory_repository.py
    └── sqlalchemy_farm_repository.py

Connection Pooling:
-------------------
Pour PostgreSQL, DatabaseManager utilise un pool de connexions:
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation

SQLite (defaut local, tests) n'utilise pas ces options; une base
":memory:" partage une seule connexion (StaticPool).
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.infrastructure.persistence.models import Base

DEFAULT_DATABASE_URL = "sqlite:///./aquafarm.db"


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base de donnees.

    Cette classe encapsule la configuration SQLAlchemy et fournit un
    context manager pour les sessions avec gestion automatique des
    transactions (commit/rollback).

    Attributes:
        engine: Moteur SQLAlchemy
        SessionLocal: Factory de sessions configuree

    Example:
        >>> db = DatabaseManager("sqlite://")
        >>> db.create_tables()
        >>> with db.get_session() as session:
        ...     items = session.query(InventoryItemModel).all()
        # Commit automatique si pas d'exception
        # Rollback automatique en cas d'erreur
    """

    def __init__(self, database_url: str = DEFAULT_DATABASE_URL):
        self.database_url = database_url

        if database_url.startswith("sqlite"):
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs = {
                "pool_pre_ping": True,
                "pool_size": 5,
                "max_overflow": 10,
                "pool_timeout": 30,
                "pool_recycle": 1800,
            }

        self.engine = create_engine(database_url, echo=False, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_tables(self):
        """Cree toutes les tables si elles n'existent pas."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
