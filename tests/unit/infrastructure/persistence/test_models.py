"""
Tests pour le modele SQLModel de persistance et l'initialisation de la base.
"""

from decimal import Decimal
from pathlib import Path

from sqlalchemy import Numeric, inspect

from mymovies.infrastructure.persistence.database import create_db_engine, init_db
from mymovies.infrastructure.persistence.models import MovieModel


class TestMovieModel:
    """Tests pour MovieModel."""

    def test_table_name(self):
        assert MovieModel.__tablename__ == "movies"

    def test_defaults(self):
        model = MovieModel()
        assert model.id is None
        assert model.title == ""
        assert model.genre == ""
        assert model.rating == Decimal("0")

    def test_rating_column_is_numeric_18_2(self):
        column = MovieModel.__table__.c.rating
        assert isinstance(column.type, Numeric)
        assert column.type.precision == 18
        assert column.type.scale == 2

    def test_id_is_autoincrement_primary_key(self):
        column = MovieModel.__table__.c.id
        assert column.primary_key
        assert MovieModel.__table__.dialect_kwargs["sqlite_autoincrement"] is True


class TestInitDb:
    """Tests de create_db_engine / init_db."""

    def test_creates_parent_directory_and_table(self, tmp_path: Path):
        db_file = tmp_path / "nested" / "dir" / "mymovies.db"
        engine = create_db_engine(f"sqlite:///{db_file}")

        init_db(engine)

        assert db_file.parent.is_dir()
        columns = {c["name"] for c in inspect(engine).get_columns("movies")}
        assert columns == {"id", "title", "genre", "year", "rating"}
        engine.dispose()

    def test_init_is_idempotent(self):
        engine = create_db_engine("sqlite://")
        init_db(engine)
        init_db(engine)
        assert inspect(engine).has_table("movies")
        engine.dispose()
