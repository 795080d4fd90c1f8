"""
Couche domaine (core).

Contient l'entité métier, les ports (interfaces abstraites) et les erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Movie)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- exceptions : Taxonomie d'erreurs (NotFoundError, ValidationError, StorageError)
"""
