"""
Services du domaine.

Services metier purs, sans dependance d'infrastructure:
    - InventoryLedger: Journal de stock et projections (stock, consommation)
"""

from src.domain.services.inventory_ledger import (
    InventoryLedger,
    StockLevel,
    UsageSummary,
)

__all__ = [
    "InventoryLedger",
    "StockLevel",
    "UsageSummary",
]
