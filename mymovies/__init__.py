"""
MyMovies - Catalogue de films auto-hébergé.

Ce package fournit une API REST CRUD sur la ressource films, un client
de synchronisation HTTP et une vue liste pilotée depuis la CLI.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entité, ports, erreurs)
- infrastructure/ : Persistance SQLModel
- adapters/ : Client API et CLI
- web/ : API FastAPI
"""

__version__ = "0.1.0"
