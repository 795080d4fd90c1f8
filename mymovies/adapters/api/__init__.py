"""
Client HTTP de l'API films.

- MovieAPIClient : implementation httpx de IMovieAPIClient
- decode_movie / encode_movie : conversion entre JSON et entite Movie
"""

from mymovies.adapters.api.movie_client import MovieAPIClient, decode_movie, encode_movie

__all__ = [
    "MovieAPIClient",
    "decode_movie",
    "encode_movie",
]
