"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IMovieRepository : Stockage des films

Ports client API : Contrats pour l'accès réseau à l'API
- IMovieAPIClient : Client de synchronisation du frontend
"""

from mymovies.core.ports.repositories import IMovieRepository
from mymovies.core.ports.api_clients import IMovieAPIClient

__all__ = [
    "IMovieRepository",
    "IMovieAPIClient",
]
