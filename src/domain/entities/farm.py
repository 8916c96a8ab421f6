"""
Entites de l'exploitation: saisons, bassins et saisies terrain.

Les saisies (aliment, qualite de l'eau) peuvent consommer du stock;
elles sont alors referencees par les ajustements du journal.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from src.domain.exceptions import InvalidFarmRecordError
from src.domain.value_objects.localized_text import localize, validate_multilingual

_TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")


def _check_time(value: str) -> None:
    if not value or not _TIME_PATTERN.match(value):
        raise InvalidFarmRecordError(
            "Time must be in HH:MM format (24-hour)", field="time"
        )


def _status_from_string(enum_cls, value: str):
    for member in enum_cls:
        if member.value == value:
            return member
    raise InvalidFarmRecordError(
        f"Invalid status '{value}'. "
        f"Valid statuses: {', '.join(m.value for m in enum_cls)}",
        field="status",
    )


class SeasonStatus(Enum):
    PLANNING = "Planning"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @classmethod
    def from_string(cls, value: str) -> "SeasonStatus":
        return _status_from_string(cls, value)


class PondStatus(Enum):
    PLANNING = "Planning"
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    COMPLETED = "Completed"

    @classmethod
    def from_string(cls, value: str) -> "PondStatus":
        return _status_from_string(cls, value)


@dataclass
class Season:
    """
    Saison d'elevage.

    Attributes:
        name: Nom unique de la saison.
        start_date: Debut.
        end_date: Fin (strictement apres le debut).
        status: Etat de la saison.
    """

    name: str
    start_date: date
    end_date: date
    id: UUID = field(default_factory=uuid4)
    status: SeasonStatus = SeasonStatus.PLANNING
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidFarmRecordError("Season name is required", field="name")
        self.name = self.name.strip()
        if self.end_date <= self.start_date:
            raise InvalidFarmRecordError(
                "End date must be after start date", field="endDate"
            )


@dataclass
class Pond:
    """
    Bassin d'elevage rattache a une saison.

    Attributes:
        name: Nom multilingue.
        size: Surface.
        capacity: Capacite (volume ou nombre d'individus).
        season_id: Saison courante.
        status: Etat du bassin.
    """

    name: dict[str, str]
    size: float
    capacity: float
    season_id: UUID
    id: UUID = field(default_factory=uuid4)
    status: PondStatus = PondStatus.PLANNING
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not validate_multilingual(self.name):
            raise InvalidFarmRecordError(
                "Pond name must be an object with language keys", field="name"
            )
        if self.size is None or self.size <= 0:
            raise InvalidFarmRecordError("Pond size must be > 0", field="size")
        if self.capacity is None or self.capacity <= 0:
            raise InvalidFarmRecordError("Pond capacity must be > 0", field="capacity")

    def name_in(self, language: str) -> str:
        return localize(self.name, language)

    def update(self, **changes) -> "Pond":
        """
        Retourne une copie mise a jour et revalidee.

        Les valeurs None sont ignorees.
        """
        values = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **values, updated_at=datetime.now())


@dataclass
class FeedInput:
    """Distribution d'aliment dans un bassin."""

    date: date
    time: str
    pond_id: UUID
    season_id: UUID
    inventory_item_id: UUID
    quantity: float
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        _check_time(self.time)
        if self.quantity is None or self.quantity <= 0:
            raise InvalidFarmRecordError(
                "Feed quantity must be greater than 0", field="quantity"
            )


@dataclass
class WaterQualityInput:
    """
    Releve de qualite de l'eau.

    Un traitement (produit chimique, probiotique) peut etre
    associe: il genere alors une sortie de stock.
    """

    date: date
    time: str
    pond_id: UUID
    season_id: UUID
    ph: float
    dissolved_oxygen: float
    temperature: float
    salinity: float
    id: UUID = field(default_factory=uuid4)
    ammonia: Optional[float] = None
    nitrite: Optional[float] = None
    alkalinity: Optional[float] = None
    inventory_item_id: Optional[UUID] = None
    quantity_used: Optional[float] = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        _check_time(self.time)
        if not 0 <= self.ph <= 14:
            raise InvalidFarmRecordError("pH must be between 0 and 14", field="pH")
        if self.dissolved_oxygen < 0:
            raise InvalidFarmRecordError(
                "Dissolved oxygen cannot be negative", field="dissolvedOxygen"
            )
        if self.salinity < 0:
            raise InvalidFarmRecordError("Salinity cannot be negative", field="salinity")
        if self.inventory_item_id is not None and (
            self.quantity_used is None or self.quantity_used <= 0
        ):
            raise InvalidFarmRecordError(
                "Quantity used must be a positive number if an inventory item is provided",
                field="quantityUsed",
            )

    @property
    def uses_inventory(self) -> bool:
        return self.inventory_item_id is not None
