"""
Module de persistance pour MyMovies.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy) :

- database.py : Creation de l'engine, session factory, initialisation
- models.py : Modele SQLModel de la table movies
- repositories/ : Implementation du port IMovieRepository

Usage:
    from mymovies.infrastructure.persistence import create_db_engine, get_session, init_db

    engine = create_db_engine("sqlite:///data/mymovies.db")
    init_db(engine)
    for session in get_session(engine):
        repo = SQLModelMovieRepository(session)
"""

from mymovies.infrastructure.persistence.database import (
    create_db_engine,
    get_session,
    init_db,
)
from mymovies.infrastructure.persistence.models import MovieModel

__all__ = [
    "create_db_engine",
    "get_session",
    "init_db",
    "MovieModel",
]
