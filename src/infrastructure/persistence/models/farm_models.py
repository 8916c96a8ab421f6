"""
Modeles SQLAlchemy de l'exploitation.

Tables:
-------
- seasons: Saisons d'élevage (nom unique)
- ponds: Bassins
- feed_inputs: Distributions d'aliment
- water_quality_inputs: Relevés de qualité de l'eau
"""
from datetime import datetime
import uuid

from sqlalchemy import JSON, Column, Date, DateTime, Float, ForeignKey, Index, String, Uuid

from src.infrastructure.persistence.models.base import Base


class SeasonModel(Base):
    """Table seasons - Saisons d'élevage."""
    __tablename__ = "seasons"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="Planning")
    created_at = Column(DateTime, default=datetime.now)


class PondModel(Base):
    """
    Table ponds - Bassins.

    Colonnes:
        name: Nom multilingue
        size: Surface
        capacity: Capacité
        season_id: Saison courante
    """
    __tablename__ = "ponds"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(JSON, nullable=False)
    size = Column(Float, nullable=False)
    capacity = Column(Float, nullable=False)
    season_id = Column(Uuid, ForeignKey("seasons.id"), nullable=False)
    status = Column(String(20), nullable=False, default="Planning")
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        Index('idx_ponds_season', 'season_id'),
    )


class FeedInputModel(Base):
    """Table feed_inputs - Distributions d'aliment."""
    __tablename__ = "feed_inputs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)
    pond_id = Column(Uuid, nullable=False)
    season_id = Column(Uuid, nullable=False)
    inventory_item_id = Column(Uuid, nullable=False)
    quantity = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    __table_args__ = (
        Index('idx_feed_inputs_season_pond', 'season_id', 'pond_id'),
    )


class WaterQualityInputModel(Base):
    """Table water_quality_inputs - Relevés de qualité de l'eau."""
    __tablename__ = "water_quality_inputs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)
    pond_id = Column(Uuid, nullable=False)
    season_id = Column(Uuid, nullable=False)
    ph = Column(Float, nullable=False)
    dissolved_oxygen = Column(Float, nullable=False)
    temperature = Column(Float, nullable=False)
    salinity = Column(Float, nullable=False)
    ammonia = Column(Float, nullable=True)
    nitrite = Column(Float, nullable=True)
    alkalinity = Column(Float, nullable=True)
    inventory_item_id = Column(Uuid, nullable=True)
    quantity_used = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.now)

    __table_args__ = (
        Index('idx_water_quality_season_pond', 'season_id', 'pond_id'),
    )
