"""
Ponds API - Bassins d'elevage (listes en cache).
"""

from src.presentation.api.ponds.router import router

__all__ = ["router"]
