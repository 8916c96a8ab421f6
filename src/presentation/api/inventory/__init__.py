"""
Inventory API - Articles, journal des ajustements et vue agregee.
"""

from src.presentation.api.inventory.router import router

__all__ = ["router"]
