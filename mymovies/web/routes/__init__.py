"""Routes HTTP de l'API."""
