"""
Adaptateur CLI : vue liste et commandes Typer du catalogue.

- list_view : MovieListView, cache local synchronise avec l'API
- commands : sous-application Typer "movies"
- helpers : console Rich et decorateurs partages
"""
