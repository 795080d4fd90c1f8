"""
Vue liste des films.

Maintient une copie locale (cache jetable) de la collection, synchronisee
avec l'API via le client mais jamais consideree comme source de verite.
Les mutations du cache n'ont lieu qu'apres confirmation du serveur ;
en cas d'echec l'exception remonte et le cache reste inchange.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from loguru import logger

from mymovies.core.entities.movie import Movie
from mymovies.core.ports.api_clients import IMovieAPIClient


def _current_year() -> int:
    return date.today().year


@dataclass
class MovieForm:
    """Valeurs du formulaire d'ajout en cours de saisie."""

    title: str = ""
    genre: str = ""
    year: int = field(default_factory=_current_year)
    rating: Decimal = Decimal("0")

    def to_movie(self) -> Movie:
        """Construit le film a creer (sans ID)."""
        return Movie(
            title=self.title,
            genre=self.genre,
            year=self.year,
            rating=self.rating,
        )


class MovieListView:
    """
    Cache local de la collection et mediation des intentions utilisateur.

    Attributes:
        movies: Copie locale de la collection
        form: Formulaire d'ajout en cours
    """

    def __init__(self, client: IMovieAPIClient) -> None:
        self._client = client
        self.movies: list[Movie] = []
        self.form = MovieForm()

    async def load(self) -> list[Movie]:
        """Recharge la collection (remplacement complet du cache)."""
        movies = await self._client.fetch_all()
        self.movies = list(movies)
        logger.debug("Collection chargee", count=len(self.movies))
        return self.movies

    async def add(self) -> Movie:
        """
        Cree le film decrit par le formulaire.

        Apres confirmation, le film (avec son ID serveur) est ajoute au
        cache et le formulaire est reinitialise.
        """
        created = await self._client.create(self.form.to_movie())
        self.movies.append(created)
        self.form = MovieForm()
        return created

    async def remove(self, movie_id: int) -> None:
        """Supprime un film puis retire du cache toute entree de meme ID."""
        await self._client.delete(movie_id)
        self.movies = [m for m in self.movies if m.id != movie_id]

    async def detail(self, movie_id: int) -> Movie:
        """Recupere un film depuis l'API sans toucher au cache."""
        return await self._client.fetch_one(movie_id)
