"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant le contrat de persistance des films.
Les implémentations (adaptateurs) fournissent le mécanisme de stockage concret
(SQL via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional

from mymovies.core.entities.movie import Movie


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Le store est le seul propriétaire des enregistrements persistés et
    attribue les identifiants.
    """

    @abstractmethod
    def insert(self, movie: Movie) -> Movie:
        """
        Insère un film et retourne l'enregistrement avec son ID attribué.

        Tout ID présent sur l'entité fournie est ignoré.

        Raises:
            StorageError: Si la persistance est inaccessible
        """
        ...

    @abstractmethod
    def find(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID. Retourne None si absent."""
        ...

    @abstractmethod
    def list(self) -> list[Movie]:
        """Liste tous les films (aucun ordre garanti)."""
        ...

    @abstractmethod
    def replace(self, movie_id: int, movie: Movie) -> Movie:
        """
        Remplace tous les champs non-clés d'un film existant.

        Raises:
            NotFoundError: Si l'ID n'existe pas
            ConcurrentUpdateError: Si l'enregistrement a disparu pendant l'écriture
        """
        ...

    @abstractmethod
    def delete(self, movie_id: int) -> None:
        """
        Supprime définitivement un film.

        Raises:
            NotFoundError: Si l'ID n'existe pas
        """
        ...
