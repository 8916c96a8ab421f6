"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - use_cases/: Cas d'utilisation de l'application (saisies terrain
      avec sortie de stock)

Principes:
    - Depend uniquement du domaine
    - Orchestre les entites et services du domaine via les use cases
"""

__all__ = []
