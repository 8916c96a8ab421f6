"""
Water Quality API - Releves de qualite de l'eau.
"""

from src.presentation.api.water_quality.router import router

__all__ = ["router"]
