"""
Interface port pour le client de l'API films.

Le client de synchronisation est le seul composant autorisé à appeler
l'API REST pour le compte du frontend. Toutes les opérations sont
asynchrones et ne sont jamais relancées automatiquement.
"""

from abc import ABC, abstractmethod

from mymovies.core.entities.movie import Movie


class IMovieAPIClient(ABC):
    """
    Interface du client de l'API films.

    Une erreur réseau ou serveur se traduit par une exception levée
    lors de l'attente du résultat.
    """

    @abstractmethod
    async def fetch_all(self) -> list[Movie]:
        """Récupère la collection complète."""
        ...

    @abstractmethod
    async def fetch_one(self, movie_id: int) -> Movie:
        """
        Récupère un film.

        Raises:
            NotFoundError: Si l'API répond 404
        """
        ...

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        """Crée un film (l'ID est ignoré) et retourne l'enregistrement créé."""
        ...

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        """
        Supprime un film.

        Raises:
            NotFoundError: Si l'API répond 404
        """
        ...
