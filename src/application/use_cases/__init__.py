"""
Use Cases de l'application.

Les Use Cases orchestrent les entites du domaine et les services
pour realiser les fonctionnalites de l'application.

Chaque Use Case:
    - A une seule responsabilite
    - Utilise les ports (interfaces) pour les dependances
    - Ne connait pas les details d'implementation
"""

from src.application.use_cases.record_usage import (
    DeleteFeedInputUseCase,
    RecordFeedInputUseCase,
    RecordWaterQualityUseCase,
    UsageRecordResult,
    WriteOutcome,
)

__all__ = [
    "DeleteFeedInputUseCase",
    "RecordFeedInputUseCase",
    "RecordWaterQualityUseCase",
    "UsageRecordResult",
    "WriteOutcome",
]
