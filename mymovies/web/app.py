"""
Application FastAPI de MyMovies.

Initialise l'application web avec le Container DI, configure CORS pour
l'origine du frontend, déclare la conversion des erreurs du domaine en
réponses HTTP et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import providers
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger

from ..config import Settings
from ..container import Container
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from .routes.movies import router as movies_router

_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]


async def _not_found_handler(request: Request, exc: NotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Corps mal formé ou ID de chemin non entier : 400 plutôt que le 422 de FastAPI
    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Requête invalide", "fields": fields},
    )


async def _storage_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(
        "Erreur de persistance",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erreur de stockage"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        settings: Configuration explicite ; si None, chargée depuis
            l'environnement (MYMOVIES_*) une seule fois.

    Returns:
        Application prête à être servie par uvicorn
    """
    settings = settings or Settings()

    container = Container()
    container.config.override(providers.Object(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Crée les tables au démarrage et libère l'engine à l'arrêt."""
        container.database.init()
        logger.info("API MyMovies démarrée", origins=settings.cors_origins)
        yield
        container.engine().dispose()

    app = FastAPI(title="MyMovies", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=_ALLOWED_METHODS,
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(ValidationError, _validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StorageError, _storage_handler)

    app.include_router(movies_router)
    return app
