"""
Entité film.

Seule ressource du catalogue. L'identifiant est attribué par le store
à la création et ne change plus ensuite.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Movie:
    """
    Un film du catalogue.

    Attributs :
        id : Identifiant attribué par le store (None tant que non persisté)
        title : Titre
        genre : Genre libre (ex: "Sci-Fi")
        year : Année de sortie
        rating : Note décimale (deux décimales en base)
    """

    id: Optional[int] = None
    title: str = ""
    genre: str = ""
    year: int = 0
    rating: Decimal = Decimal("0")
