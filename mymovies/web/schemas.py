"""
Schemas Pydantic du format d'echange JSON de l'API.

Le decodage du corps des requetes est explicite : les champs absents ou
mal types sont rejetes avant toute construction d'entite. Les cles JSON
sont en lower camel case (alias generes).
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from mymovies.core.entities.movie import Movie

# Bornes des colonnes : BIGINT pour l'ID, INT pour l'annee, NUMERIC(18,2) pour la note
MAX_MOVIE_ID = 2**63 - 1
MIN_YEAR = -(2**31)
MAX_YEAR = 2**31 - 1

MovieId = Annotated[int, Field(ge=1, le=MAX_MOVIE_ID)]
Year = Annotated[int, Field(ge=MIN_YEAR, le=MAX_YEAR)]

# La note circule en nombre JSON, pas en chaine (defaut Pydantic pour Decimal)
_AsJsonNumber = PlainSerializer(float, return_type=float, when_used="json")

RatingOut = Annotated[Decimal, _AsJsonNumber]
Rating = Annotated[Decimal, Field(max_digits=18, decimal_places=2), _AsJsonNumber]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class MovieCreate(_WireModel):
    """Corps d'une creation. Un eventuel `id` fourni par le client est ignore."""

    title: str
    genre: str
    year: Year
    rating: Rating

    def to_entity(self) -> Movie:
        return Movie(
            title=self.title,
            genre=self.genre,
            year=self.year,
            rating=self.rating,
        )


class MovieUpdate(MovieCreate):
    """Corps d'une mise a jour : l'ID est obligatoire et doit egaler celui du chemin."""

    id: MovieId

    def to_entity(self) -> Movie:
        movie = super().to_entity()
        movie.id = self.id
        return movie


class MovieRead(_WireModel):
    """Representation d'un film dans les reponses."""

    id: int
    title: str
    genre: str
    year: int
    rating: RatingOut

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieRead":
        return cls(
            id=movie.id,
            title=movie.title,
            genre=movie.genre,
            year=movie.year,
            rating=movie.rating,
        )
