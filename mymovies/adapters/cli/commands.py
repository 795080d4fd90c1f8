"""
Commandes CLI du catalogue (list, show, add, remove).

Chaque commande passe par la vue liste, qui passe elle-meme par le
client de synchronisation : la CLI n'accede jamais a la base.
"""

import asyncio
from decimal import Decimal
from typing import Annotated, Optional

import typer
from rich.table import Table

from mymovies.adapters.cli.helpers import (
    console,
    report_errors,
    suppress_loguru,
    with_list_view,
)
from mymovies.adapters.cli.list_view import MovieListView
from mymovies.core.entities.movie import Movie


# Application Typer pour les commandes du catalogue
movies_app = typer.Typer(
    name="movies",
    help="Gestion du catalogue de films via l'API",
    rich_markup_mode="rich",
)


def render_movies_table(movies: list[Movie]) -> Table:
    """Construit le tableau Rich de la collection."""
    table = Table(title=f"Films ({len(movies)})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Genre")
    table.add_column("Annee", justify="right")
    table.add_column("Note", justify="right", style="green")
    for movie in movies:
        table.add_row(
            str(movie.id),
            movie.title,
            movie.genre,
            str(movie.year),
            f"{movie.rating:.1f}",
        )
    return table


@movies_app.command("list")
def movies_list() -> None:
    """Affiche la collection complete."""
    asyncio.run(_movies_list_async())


@with_list_view
async def _movies_list_async(view: MovieListView) -> None:
    """Implementation async de la commande movies list."""
    with suppress_loguru(), report_errors():
        movies = await view.load()
    if not movies:
        console.print("[yellow]Aucun film dans le catalogue.[/yellow]")
        return
    console.print(render_movies_table(movies))


@movies_app.command("show")
def movies_show(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
) -> None:
    """Affiche un film."""
    asyncio.run(_movies_show_async(movie_id))


@with_list_view
async def _movies_show_async(view: MovieListView, movie_id: int) -> None:
    """Implementation async de la commande movies show."""
    with suppress_loguru(), report_errors():
        movie = await view.detail(movie_id)
    console.print(render_movies_table([movie]))


@movies_app.command("add")
def movies_add(
    title: Annotated[str, typer.Option("--title", "-t", help="Titre du film")],
    genre: Annotated[str, typer.Option("--genre", "-g", help="Genre")] = "",
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="Annee de sortie (defaut: annee courante)"),
    ] = None,
    rating: Annotated[
        float,
        typer.Option("--rating", "-r", min=0, help="Note"),
    ] = 0.0,
) -> None:
    """Ajoute un film au catalogue."""
    asyncio.run(_movies_add_async(title, genre, year, rating))


@with_list_view
async def _movies_add_async(
    view: MovieListView,
    title: str,
    genre: str,
    year: Optional[int],
    rating: float,
) -> None:
    """Implementation async de la commande movies add."""
    view.form.title = title
    view.form.genre = genre
    if year is not None:
        view.form.year = year
    view.form.rating = Decimal(str(rating))

    with suppress_loguru(), report_errors():
        created = await view.add()
    console.print(f"[green]Film ajoute:[/green] #{created.id} {created.title}")


@movies_app.command("remove")
def movies_remove(
    movie_id: Annotated[int, typer.Argument(help="ID du film a supprimer")],
) -> None:
    """Supprime un film du catalogue."""
    asyncio.run(_movies_remove_async(movie_id))


@with_list_view
async def _movies_remove_async(view: MovieListView, movie_id: int) -> None:
    """Implementation async de la commande movies remove."""
    with suppress_loguru(), report_errors():
        await view.remove(movie_id)
    console.print(f"[red]Film supprime:[/red] #{movie_id}")
