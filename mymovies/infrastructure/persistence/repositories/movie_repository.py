"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
via SQLModel. Chaque operation d'ecriture est validee (commit) avant
de rendre la main : une reponse implique la durabilite de l'operation.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select

from mymovies.core.entities.movie import Movie
from mymovies.core.exceptions import ConcurrentUpdateError, NotFoundError, StorageError
from mymovies.core.ports.repositories import IMovieRepository
from mymovies.infrastructure.persistence.models import MovieModel


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    Les erreurs SQLAlchemy sont converties en StorageError.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Convertit un modele DB en entite domaine."""
        return Movie(
            id=model.id,
            title=model.title,
            genre=model.genre,
            year=model.year,
            rating=model.rating,
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        """Convertit une entite domaine en modele DB (sans ID : la base l'attribue)."""
        return MovieModel(
            title=entity.title,
            genre=entity.genre,
            year=entity.year,
            rating=entity.rating,
        )

    def _fail(self, action: str, error: SQLAlchemyError) -> StorageError:
        """Annule la transaction en cours et construit la StorageError associee."""
        self._session.rollback()
        logger.error("Echec de la persistance", action=action, error=str(error))
        return StorageError(f"Echec de l'operation '{action}' sur movies", error)

    def insert(self, movie: Movie) -> Movie:
        """Insere un film ; l'ID eventuel de l'entite est ignore."""
        model = self._to_model(movie)
        try:
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            raise self._fail("insert", e) from e
        logger.info("Film cree", movie_id=model.id, title=model.title)
        return self._to_entity(model)

    def find(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID."""
        try:
            model = self._session.get(MovieModel, movie_id)
        except SQLAlchemyError as e:
            raise self._fail("find", e) from e
        if model:
            return self._to_entity(model)
        return None

    def list(self) -> list[Movie]:
        """Liste tous les films (tries par ID, sans garantie contractuelle)."""
        statement = select(MovieModel).order_by(MovieModel.id)
        try:
            models = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            raise self._fail("list", e) from e
        return [self._to_entity(model) for model in models]

    def replace(self, movie_id: int, movie: Movie) -> Movie:
        """
        Remplace les champs non-cles d'un film existant.

        Si la ligne a disparu entre la lecture et le flush (suppression
        concurrente), SQLAlchemy leve StaleDataError, convertie en
        ConcurrentUpdateError.
        """
        try:
            existing = self._session.get(MovieModel, movie_id)
        except SQLAlchemyError as e:
            raise self._fail("replace", e) from e
        if existing is None:
            raise NotFoundError(movie_id)

        existing.title = movie.title
        existing.genre = movie.genre
        existing.year = movie.year
        existing.rating = movie.rating
        try:
            self._session.add(existing)
            self._session.commit()
            self._session.refresh(existing)
        except StaleDataError as e:
            self._session.rollback()
            logger.warning("Conflit de mise a jour", movie_id=movie_id)
            raise ConcurrentUpdateError(movie_id, e) from e
        except SQLAlchemyError as e:
            raise self._fail("replace", e) from e
        logger.info("Film mis a jour", movie_id=movie_id)
        return self._to_entity(existing)

    def delete(self, movie_id: int) -> None:
        """Supprime definitivement un film."""
        try:
            existing = self._session.get(MovieModel, movie_id)
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        if existing is None:
            raise NotFoundError(movie_id)

        try:
            self._session.delete(existing)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        logger.info("Film supprime", movie_id=movie_id)
