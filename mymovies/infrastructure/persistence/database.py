"""
Configuration de la base de donnees pour MyMovies.

Ce module fournit :
- Creation de l'engine a partir de l'URL configuree (MYMOVIES_DATABASE_URL)
- Session factory sous forme de generateur
- Fonction d'initialisation des tables

L'engine est cree une fois au demarrage et transmis explicitement ;
aucun engine global n'est conserve ici.
"""

from collections.abc import Generator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

_SQLITE_PREFIX = "sqlite:///"
_SQLITE_MEMORY = "sqlite://"


def _is_memory_url(database_url: str) -> bool:
    return database_url in (_SQLITE_MEMORY, f"{_SQLITE_PREFIX}:memory:")


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Pour SQLite :
    - le repertoire parent du fichier est cree si necessaire
    - check_same_thread est desactive (requetes servies sur plusieurs threads)
    - une base en memoire partage une connexion unique (StaticPool)

    Args:
        database_url: URL SQLAlchemy (ex: sqlite:///data/mymovies.db, mysql+pymysql://...)

    Returns:
        Engine pret a l'emploi
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False, pool_pre_ping=True)

    if _is_memory_url(database_url):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    db_path = Path(database_url[len(_SQLITE_PREFIX):])
    db_path.parent.mkdir(exist_ok=True, parents=True)
    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation :
        for session in get_session(engine):
            repo = SQLModelMovieRepository(session)

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(engine) as session:
        yield session


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant la table movies si absente.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import du modele pour enregistrer ses metadonnees
    from mymovies.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Base de donnees initialisee", url=engine.url.render_as_string())
