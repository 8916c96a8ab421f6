#!/usr/bin/env python3
"""
Point d'entree principal pour lancer l'API de gestion de l'exploitation.

Usage:
------
    python3 run.py
    python3 run.py --host 0.0.0.0 --port 8000
    python3 run.py --reload

La configuration (base de donnees, TTL du cache, logs JSON...) est lue
depuis les variables d'environnement ou le fichier .env.

Erreurs courantes:
------------------
- "No module named uvicorn" : pip install -e .
"""
import argparse

import uvicorn


def main():
    """Lance l'API avec uvicorn."""
    parser = argparse.ArgumentParser(description="Aquaculture farm management API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Rechargement auto (dev)")
    args = parser.parse_args()

    uvicorn.run(
        "src.presentation.api.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
