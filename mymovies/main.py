"""
Point d'entrée CLI de MyMovies.

Configure le logging et fournit les commandes CLI (serveur API et
gestion du catalogue via l'API).
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import movies_app
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="mymovies",
    help="Catalogue de films auto-hébergé",
)
container = Container()

# Monter movies_app comme sous-commande
app.add_typer(movies_app, name="movies")


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Écoute : {config.host}:{config.port}")
    typer.echo(f"Origines CORS : {', '.join(config.cors_origins)}")
    typer.echo(f"URL de l'API : {config.api_url}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MyMovies v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API MyMovies."""
    import uvicorn

    config = container.config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run(
        "mymovies.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Démarrage de MyMovies", version=__version__)

    app()


if __name__ == "__main__":
    main()
