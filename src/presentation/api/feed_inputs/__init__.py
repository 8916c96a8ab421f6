"""
Feed Inputs API - Distributions d'aliment (sortie de stock automatique).
"""

from src.presentation.api.feed_inputs.router import router

__all__ = ["router"]
