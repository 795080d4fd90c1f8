"""
Adaptateur web : API REST FastAPI de la ressource films.

- app : fabrique create_app(settings), CORS et handlers d'erreurs
- routes/ : routes /api/movies
- schemas : format JSON d'échange
- deps : dépendances FastAPI (repository par requête)
"""
