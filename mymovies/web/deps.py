"""
Dépendances partagées de l'application web.

Fournit le repository films aux routes : une session par requête,
ouverte sur l'engine créé au démarrage et fermée après la réponse.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request

from ..container import Container
from ..core.ports.repositories import IMovieRepository
from ..infrastructure.persistence.database import get_session


def get_container(request: Request) -> Container:
    """Retourne le Container attaché à l'application au démarrage."""
    return request.app.state.container


def get_movie_repository(
    container: Annotated[Container, Depends(get_container)],
) -> Generator[IMovieRepository, None, None]:
    """Fournit un repository lié à une session fraîche pour la requête."""
    session = next(get_session(container.engine()))
    try:
        yield container.movie_repository(session=session)
    finally:
        session.close()


MovieRepositoryDep = Annotated[IMovieRepository, Depends(get_movie_repository)]
