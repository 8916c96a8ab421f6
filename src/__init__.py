"""
Aquaculture Farm Management - Architecture Hexagonale

Structure:
    - domain/: Coeur metier (entites, journal de stock, ports)
    - application/: Use cases (saisies terrain avec sortie de stock)
    - infrastructure/: Adapters (SQLAlchemy, memoire, cache, logging)
    - presentation/: API REST (FastAPI)
"""

__version__ = "1.0.0"
