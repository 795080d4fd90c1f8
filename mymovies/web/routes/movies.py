"""
Routes REST de la ressource films.

Façade HTTP sans état au-dessus du repository : chaque requête est
indépendante et chaque écriture est validée avant l'envoi de la réponse.
Les erreurs du domaine sont converties en codes HTTP par les handlers
déclarés dans web/app.py.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status
from loguru import logger

from ...core.exceptions import ConcurrentUpdateError, NotFoundError, ValidationError
from ..deps import MovieRepositoryDep
from ..schemas import MAX_MOVIE_ID, MovieCreate, MovieRead, MovieUpdate

router = APIRouter(prefix="/api/movies", tags=["movies"])

# Hors de ces bornes : 400, sans atteindre le store
MovieIdPath = Annotated[int, Path(ge=1, le=MAX_MOVIE_ID)]


@router.get("", response_model=list[MovieRead])
def list_movies(repo: MovieRepositoryDep) -> list[MovieRead]:
    """Liste tous les films."""
    return [MovieRead.from_entity(movie) for movie in repo.list()]


@router.get("/{movie_id}", response_model=MovieRead, name="get_movie")
def get_movie(movie_id: MovieIdPath, repo: MovieRepositoryDep) -> MovieRead:
    """Retourne un film, 404 s'il n'existe pas."""
    movie = repo.find(movie_id)
    if movie is None:
        raise NotFoundError(movie_id)
    return MovieRead.from_entity(movie)


@router.post("", response_model=MovieRead, status_code=status.HTTP_201_CREATED)
def create_movie(
    payload: MovieCreate,
    request: Request,
    response: Response,
    repo: MovieRepositoryDep,
) -> MovieRead:
    """Crée un film ; l'ID est attribué par le store."""
    created = repo.insert(payload.to_entity())
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=created.id))
    return MovieRead.from_entity(created)


@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_movie(
    movie_id: MovieIdPath, payload: MovieUpdate, repo: MovieRepositoryDep
) -> Response:
    """
    Remplace un film existant.

    L'ID du corps doit être celui du chemin (vérifié avant tout accès au store).
    En cas de conflit de mise à jour, l'existence est revérifiée : absent
    donne 404, sinon le conflit remonte tel quel (500).
    """
    if payload.id != movie_id:
        raise ValidationError(
            f"L'ID du corps ({payload.id}) ne correspond pas à celui du chemin ({movie_id})"
        )

    try:
        repo.replace(movie_id, payload.to_entity())
    except ConcurrentUpdateError:
        if repo.find(movie_id) is None:
            raise NotFoundError(movie_id)
        logger.error("Conflit de mise à jour non résolu", movie_id=movie_id)
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: MovieIdPath, repo: MovieRepositoryDep) -> Response:
    """Supprime définitivement un film."""
    repo.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
