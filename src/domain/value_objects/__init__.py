"""
Value Objects du domaine.
"""

from src.domain.value_objects.localized_text import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    localize,
    resolve_language,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "localize",
    "resolve_language",
]
