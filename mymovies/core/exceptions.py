"""
Erreurs du domaine.

Taxonomie partagée par le store, l'API et le client de synchronisation :
- NotFoundError : l'identifiant demandé n'existe pas
- ValidationError : entrée mal formée ou incohérente (ex: id du chemin != id du corps)
- StorageError : la persistance est inaccessible ou a échoué
- ConcurrentUpdateError : l'enregistrement a changé pendant une mise à jour

Aucune de ces erreurs n'est relancée automatiquement : elles remontent à l'appelant.
"""

from typing import Optional


class MyMoviesError(Exception):
    """Classe de base des erreurs MyMovies."""


class NotFoundError(MyMoviesError):
    """
    Levee quand un film demande n'existe pas.

    Attributes:
        movie_id: Identifiant recherche
    """

    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(f"Film introuvable: {movie_id}")


class ValidationError(MyMoviesError):
    """Levee quand une entree est mal formee ou incoherente."""


class StorageError(MyMoviesError):
    """
    Levee quand la persistance echoue pour une raison d'infrastructure.

    Attributes:
        cause: Exception d'origine (SQLAlchemy, systeme de fichiers...), si connue
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class ConcurrentUpdateError(StorageError):
    """
    Levee quand une mise a jour n'a touche aucune ligne.

    Arrive si l'enregistrement a ete supprime par une autre requete entre
    la lecture et l'ecriture. L'appelant doit reverifier l'existence.
    """

    def __init__(self, movie_id: int, cause: Optional[BaseException] = None) -> None:
        self.movie_id = movie_id
        super().__init__(f"Conflit de mise a jour sur le film {movie_id}", cause)
