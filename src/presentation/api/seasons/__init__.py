"""
Seasons API - Saisons d'elevage.
"""

from src.presentation.api.seasons.router import router

__all__ = ["router"]
