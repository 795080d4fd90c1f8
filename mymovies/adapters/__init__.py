"""
Couche adaptateurs.

- api/ : client HTTP de l'API films (service de synchronisation)
- cli/ : vue liste et commandes Typer
"""
