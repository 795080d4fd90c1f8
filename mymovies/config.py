"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MYMOVIES_,
et peut optionnellement être fournie via un fichier .env.

Elle est lue une seule fois au démarrage puis transmise explicitement
(application web, container, commandes CLI).
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de mymovies/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MYMOVIES_.
    Exemple : MYMOVIES_DATABASE_URL=sqlite:///tmp/films.db

    Les listes (cors_origins) se fournissent en JSON :
    MYMOVIES_CORS_ORIGINS='["http://localhost:4200"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="MYMOVIES_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///data/mymovies.db")

    # Serveur API
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5277, ge=1, le=65535)
    cors_origins: list[str] = Field(default=["http://localhost:4200"])

    # Client de synchronisation (utilisé par la CLI)
    api_url: str = Field(default="http://localhost:5277/api/movies")
    api_timeout: float = Field(default=5.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mymovies.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise l'URL de l'API (sans slash final)."""
        return v.rstrip("/")
