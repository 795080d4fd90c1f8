"""
Client HTTP de l'API films (service de synchronisation du frontend).

Implemente l'interface IMovieAPIClient au-dessus de httpx.AsyncClient.
Aucune requete n'est relancee automatiquement : une erreur reseau ou
serveur remonte telle quelle a l'appelant.

Usage:
    client = MovieAPIClient(base_url="http://localhost:5277/api/movies")
    movies = await client.fetch_all()
    created = await client.create(Movie(title="Inception", genre="Sci-Fi", year=2010))
    await client.close()
"""

from decimal import Decimal
from typing import Any, Optional

import httpx
from loguru import logger

from mymovies.core.entities.movie import Movie
from mymovies.core.exceptions import NotFoundError
from mymovies.core.ports.api_clients import IMovieAPIClient


def decode_movie(data: dict[str, Any]) -> Movie:
    """
    Convertit un objet JSON de l'API en entite Movie.

    La note est reconstruite via str() pour ne pas heriter des
    imprecisions du flottant JSON.
    """
    return Movie(
        id=data.get("id"),
        title=data.get("title", ""),
        genre=data.get("genre", ""),
        year=data.get("year", 0),
        rating=Decimal(str(data.get("rating", 0))),
    )


def encode_movie(movie: Movie) -> dict[str, Any]:
    """Convertit une entite Movie en corps JSON de creation (sans id)."""
    return {
        "title": movie.title,
        "genre": movie.genre,
        "year": movie.year,
        "rating": float(movie.rating),
    }


class MovieAPIClient(IMovieAPIClient):
    """
    Client de l'API REST /api/movies.

    Le client httpx est cree a la premiere requete. Les coroutines sont
    paresseuses : rien n'est envoye tant qu'elles ne sont pas attendues.

    Example:
        async with MovieAPIClient("http://localhost:5277/api/movies") as client:
            for movie in await client.fetch_all():
                print(movie.title)
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de la collection (ex: http://localhost:5277/api/movies)
            timeout: Delai maximum par requete en secondes (defaut httpx si None)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {"headers": {"Accept": "application/json"}}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    def _item_url(self, movie_id: int) -> str:
        return f"{self._base_url}/{movie_id}"

    async def _request(
        self,
        method: str,
        url: str,
        movie_id: Optional[int] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Execute une requete et convertit les 404 en NotFoundError.

        Raises:
            NotFoundError: Si l'API repond 404 pour un film identifie
            httpx.HTTPStatusError: Pour les autres erreurs HTTP
            httpx.TransportError: Si l'API est injoignable
        """
        response = await self._get_client().request(method, url, **kwargs)
        logger.debug("Requete API", method=method, url=url, status=response.status_code)
        if response.status_code == 404 and movie_id is not None:
            raise NotFoundError(movie_id)
        response.raise_for_status()
        return response

    async def fetch_all(self) -> list[Movie]:
        """Recupere la collection complete."""
        response = await self._request("GET", self._base_url)
        return [decode_movie(item) for item in response.json()]

    async def fetch_one(self, movie_id: int) -> Movie:
        """Recupere un film par son ID."""
        response = await self._request("GET", self._item_url(movie_id), movie_id=movie_id)
        return decode_movie(response.json())

    async def create(self, movie: Movie) -> Movie:
        """Cree un film et retourne l'enregistrement avec son ID attribue."""
        response = await self._request("POST", self._base_url, json=encode_movie(movie))
        return decode_movie(response.json())

    async def delete(self, movie_id: int) -> None:
        """Supprime un film."""
        await self._request("DELETE", self._item_url(movie_id), movie_id=movie_id)

    async def close(self) -> None:
        """Ferme le client HTTP s'il est ouvert."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "MovieAPIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
