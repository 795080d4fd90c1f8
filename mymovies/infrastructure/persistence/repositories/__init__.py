"""
Implementations SQLModel des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection explicite
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from mymovies.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)

__all__ = [
    "SQLModelMovieRepository",
]
