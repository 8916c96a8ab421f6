"""
Schemas communs - Modeles Pydantic partages par les routers.

Responsabilite unique:
----------------------
Fixer la convention du format d'echange: les champs sont en
snake_case cote Python et en camelCase sur le fil.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base des schemas: alias camelCase, noms Python acceptes en entree."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(CamelModel):
    """Corps des reponses d'erreur."""

    status: str
    message: str
    error_code: str
    timestamp: datetime
    field: Optional[str] = None


class MessageResponse(CamelModel):
    """Reponse simple avec message."""

    message: str
