"""
Presentation Layer - API REST.

Cette couche expose les services du domaine et les use cases
de l'application via FastAPI.
"""
