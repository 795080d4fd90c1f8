"""
Entités métier du domaine.

Exports:
- Movie: un film du catalogue
"""

from mymovies.core.entities.movie import Movie

__all__ = ["Movie"]
