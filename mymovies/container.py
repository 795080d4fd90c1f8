"""
Container d'injection de dependances via dependency-injector.

Racine de composition unique pour la CLI et l'application web : la
configuration est lue une fois, puis l'engine, le client API et les
repositories sont construits a partir d'elle.
"""

from dependency_injector import containers, providers

from .adapters.api.movie_client import MovieAPIClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelMovieRepository


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.config.override(providers.Object(Settings(...)))  # optionnel
        container.database.init()  # Cree les tables une fois
        repo = container.movie_repository(session=session)
        client = container.movie_api_client()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - un seul pool de connexions par processus
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Repository - Factory, la session est fournie par l'appelant (une par requete)
    movie_repository = providers.Factory(SQLModelMovieRepository)

    # Client de synchronisation - Factory, chaque commande CLI ferme le sien
    movie_api_client = providers.Factory(
        MovieAPIClient,
        base_url=config.provided.api_url,
        timeout=config.provided.api_timeout,
    )
