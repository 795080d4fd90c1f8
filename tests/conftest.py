"""
Fixtures pytest partagees pour les tests MyMovies.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base SQLite temporaire
- Engine / session / repository sur base en memoire
- Client HTTP de test sur l'application FastAPI
- Mock du port IMovieAPIClient
"""

from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlmodel import Session

from mymovies.config import Settings
from mymovies.core.entities.movie import Movie
from mymovies.core.ports.api_clients import IMovieAPIClient
from mymovies.infrastructure.persistence.database import create_db_engine, init_db
from mymovies.infrastructure.persistence.repositories import SQLModelMovieRepository
from mymovies.web.app import create_app


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    La base SQLite est un fichier dans tmp_path pour rester isolee
    d'un test a l'autre.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'db' / 'mymovies.db'}",
        cors_origins=["http://localhost:4200"],
        api_url="http://api.test/api/movies",
        log_file=tmp_path / "logs" / "mymovies.log",
    )


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec la table movies creee."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def movie_repository(session: Session) -> SQLModelMovieRepository:
    """Repository films sur la base en memoire."""
    return SQLModelMovieRepository(session)


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """
    Client HTTP sur l'application complete.

    Le context manager declenche le lifespan (creation des tables).
    """
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def inception() -> Movie:
    """Film de reference pour les scenarios."""
    return Movie(title="Inception", genre="Sci-Fi", year=2010, rating=Decimal("8.8"))


@pytest.fixture
def mock_api_client() -> AsyncMock:
    """
    Mock de IMovieAPIClient pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = AsyncMock(spec=IMovieAPIClient)
    mock.fetch_all.return_value = []
    return mock
