"""
Modeles SQLModel pour la base de donnees MyMovies.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films du catalogue
"""

from decimal import Decimal

from sqlmodel import Field, SQLModel


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    L'ID est une cle primaire auto-incrementee attribuee par la base.
    La note est stockee en NUMERIC(18, 2).
    """

    __tablename__ = "movies"
    # Un ID supprime ne doit jamais etre reattribue
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(default="")
    genre: str = Field(default="")
    year: int = Field(default=0)
    rating: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=2)
