"""
Adapters SQLAlchemy pour l'exploitation (saisons, bassins, saisies).
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.domain.entities.farm import (
    FeedInput,
    Pond,
    PondStatus,
    Season,
    SeasonStatus,
    WaterQualityInput,
)
from src.domain.exceptions import ConflictError, StorageError
from src.domain.ports.farm_repository import (
    FeedInputRepository,
    PondRepository,
    SeasonRepository,
    WaterQualityInputRepository,
)
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.models import (
    FeedInputModel,
    PondModel,
    SeasonModel,
    WaterQualityInputModel,
)


class SQLAlchemySeasonRepository(SeasonRepository):
    """Saisons persistees en base (contrainte d'unicite sur le nom)."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def save(self, season: Season) -> Season:
        try:
            with self._db.get_session() as session:
                session.merge(SeasonModel(
                    id=season.id,
                    name=season.name,
                    start_date=season.start_date,
                    end_date=season.end_date,
                    status=season.status.value,
                    created_at=season.created_at,
                ))
        except IntegrityError as e:
            raise ConflictError(f"Season '{season.name}' already exists") from e
        except SQLAlchemyError as e:
            raise StorageError("save season", str(e)) from e
        return season

    def get_by_id(self, season_id: UUID) -> Optional[Season]:
        try:
            with self._db.get_session() as session:
                model = session.get(SeasonModel, season_id)
                return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise StorageError("get season", str(e)) from e

    def find_all(self) -> list[Season]:
        try:
            with self._db.get_session() as session:
                models = session.query(SeasonModel).order_by(
                    SeasonModel.start_date.desc()
                ).all()
                return [self._model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            raise StorageError("list seasons", str(e)) from e

    @staticmethod
    def _model_to_entity(model: SeasonModel) -> Season:
        return Season(
            id=model.id,
            name=model.name,
            start_date=model.start_date,
            end_date=model.end_date,
            status=SeasonStatus(model.status),
            created_at=model.created_at,
        )


class SQLAlchemyPondRepository(PondRepository):
    """Bassins persistes en base."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def save(self, pond: Pond) -> Pond:
        try:
            with self._db.get_session() as session:
                session.merge(PondModel(
                    id=pond.id,
                    name=dict(pond.name),
                    size=pond.size,
                    capacity=pond.capacity,
                    season_id=pond.season_id,
                    status=pond.status.value,
                    created_at=pond.created_at,
                    updated_at=pond.updated_at,
                ))
        except SQLAlchemyError as e:
            raise StorageError("save pond", str(e)) from e
        return pond

    def get_by_id(self, pond_id: UUID) -> Optional[Pond]:
        try:
            with self._db.get_session() as session:
                model = session.get(PondModel, pond_id)
                return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise StorageError("get pond", str(e)) from e

    def find_all(self, season_id: Optional[UUID] = None) -> list[Pond]:
        try:
            with self._db.get_session() as session:
                query = session.query(PondModel)
                if season_id is not None:
                    query = query.filter(PondModel.season_id == season_id)
                models = query.order_by(PondModel.created_at).all()
                return [self._model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            raise StorageError("list ponds", str(e)) from e

    def delete(self, pond_id: UUID) -> bool:
        try:
            with self._db.get_session() as session:
                deleted = session.query(PondModel).filter(
                    PondModel.id == pond_id
                ).delete()
                return deleted > 0
        except SQLAlchemyError as e:
            raise StorageError("delete pond", str(e)) from e

    @staticmethod
    def _model_to_entity(model: PondModel) -> Pond:
        return Pond(
            id=model.id,
            name=dict(model.name),
            size=model.size,
            capacity=model.capacity,
            season_id=model.season_id,
            status=PondStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SQLAlchemyFeedInputRepository(FeedInputRepository):
    """Distributions d'aliment persistees en base."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def save(self, feed_input: FeedInput) -> FeedInput:
        try:
            with self._db.get_session() as session:
                session.merge(FeedInputModel(
                    id=feed_input.id,
                    date=feed_input.date,
                    time=feed_input.time,
                    pond_id=feed_input.pond_id,
                    season_id=feed_input.season_id,
                    inventory_item_id=feed_input.inventory_item_id,
                    quantity=feed_input.quantity,
                    created_at=feed_input.created_at,
                ))
        except SQLAlchemyError as e:
            raise StorageError("save feed input", str(e)) from e
        return feed_input

    def get_by_id(self, feed_input_id: UUID) -> Optional[FeedInput]:
        try:
            with self._db.get_session() as session:
                model = session.get(FeedInputModel, feed_input_id)
                return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise StorageError("get feed input", str(e)) from e

    def delete(self, feed_input_id: UUID) -> bool:
        try:
            with self._db.get_session() as session:
                deleted = session.query(FeedInputModel).filter(
                    FeedInputModel.id == feed_input_id
                ).delete()
                return deleted > 0
        except SQLAlchemyError as e:
            raise StorageError("delete feed input", str(e)) from e

    def find(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
    ) -> list[FeedInput]:
        try:
            with self._db.get_session() as session:
                query = session.query(FeedInputModel)
                if season_id is not None:
                    query = query.filter(FeedInputModel.season_id == season_id)
                if pond_id is not None:
                    query = query.filter(FeedInputModel.pond_id == pond_id)
                models = query.order_by(
                    FeedInputModel.date.desc(),
                    FeedInputModel.time.desc(),
                    FeedInputModel.created_at.desc(),
                ).all()
                return [self._model_to_entity(m) for m in models]
        except SQLAlchemyError as e:
            raise StorageError("list feed inputs", str(e)) from e

    @staticmethod
    def _model_to_entity(model: FeedInputModel) -> FeedInput:
        return FeedInput(
            id=model.id,
            date=model.date,
            time=model.time,
            pond_id=model.pond_id,
            season_id=model.season_id,
            inventory_item_id=model.inventory_item_id,
            quantity=model.quantity,
            created_at=model.created_at,
        )


class SQLAlchemyWaterQualityInputRepository(WaterQualityInputRepository):
    """Releves de qualite de l'eau persistes en base."""

    _FIELDS = (
        "id", "date", "time", "pond_id", "season_id", "ph", "dissolved_oxygen",
        "temperature", "salinity", "ammonia", "nitrite", "alkalinity",
        "inventory_item_id", "quantity_used", "created_at",
    )

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def save(self, reading: WaterQualityInput) -> WaterQualityInput:
        values = {name: getattr(reading, name) for name in self._FIELDS}
        try:
            with self._db.get_session() as session:
                session.merge(WaterQualityInputModel(**values))
        except SQLAlchemyError as e:
            raise StorageError("save water quality input", str(e)) from e
        return reading

    def find(
        self,
        season_id: Optional[UUID] = None,
        pond_id: Optional[UUID] = None,
    ) -> list[WaterQualityInput]:
        try:
            with self._db.get_session() as session:
                query = session.query(WaterQualityInputModel)
                if season_id is not None:
                    query = query.filter(WaterQualityInputModel.season_id == season_id)
                if pond_id is not None:
                    query = query.filter(WaterQualityInputModel.pond_id == pond_id)
                models = query.order_by(
                    WaterQualityInputModel.date.desc(),
                    WaterQualityInputModel.time.desc(),
                    WaterQualityInputModel.created_at.desc(),
                ).all()
                return [
                    WaterQualityInput(**{name: getattr(m, name) for name in self._FIELDS})
                    for m in models
                ]
        except SQLAlchemyError as e:
            raise StorageError("list water quality inputs", str(e)) from e
