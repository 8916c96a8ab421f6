"""
API REST - FastAPI.

Presentation layer pour les clients (application web, mobile).

Routers disponibles:
--------------------
- seasons: Saisons d'elevage
- ponds: Bassins (listes en cache)
- inventory: Articles, journal des ajustements, vue agregee
- feed_inputs: Distributions d'aliment
- water_quality: Releves de qualite de l'eau
- admin: Maintenance du cache

Usage:
------
    uvicorn --factory src.presentation.api.main:create_app --reload
"""

from src.presentation.api.main import create_app

__all__ = ["create_app"]
