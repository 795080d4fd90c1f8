"""
Utilitaires partages pour les commandes CLI de MyMovies.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_list_view : decorateur injectant une vue liste connectee a l'API
- report_errors : context manager affichant les echecs et terminant la commande
"""

from contextlib import contextmanager
from functools import wraps

import httpx
import typer
from loguru import logger as loguru_logger
from rich.console import Console

from mymovies.adapters.cli.list_view import MovieListView
from mymovies.container import Container
from mymovies.core.exceptions import NotFoundError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("mymovies")
    try:
        yield
    finally:
        loguru_logger.enable("mymovies")


def with_list_view(func):
    """
    Decorateur qui injecte une MovieListView en premier argument.

    Le client HTTP sous-jacent est ferme a la fin de la commande.

    Usage:
        @with_list_view
        async def my_command(view, ...):
            await view.load()
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        client = container.movie_api_client()
        try:
            return await func(MovieListView(client), *args, **kwargs)
        finally:
            await client.close()
    return wrapper


@contextmanager
def report_errors():
    """
    Affiche les erreurs de l'API et termine la commande avec le code 1.

    Le cache local n'est pas modifie par une operation en echec ;
    aucune nouvelle tentative n'est faite.
    """
    try:
        yield
    except NotFoundError as e:
        console.print(f"[red]Film introuvable:[/red] {e.movie_id}")
        raise typer.Exit(code=1) from e
    except httpx.HTTPStatusError as e:
        console.print(
            f"[red]Erreur API:[/red] {e.response.status_code} "
            f"{e.request.method} {e.request.url}"
        )
        raise typer.Exit(code=1) from e
    except httpx.TransportError as e:
        console.print(f"[red]API injoignable:[/red] {e}")
        raise typer.Exit(code=1) from e
