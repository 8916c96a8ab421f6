"""
Admin API - Maintenance du cache.
"""

from src.presentation.api.admin.router import router

__all__ = ["router"]
