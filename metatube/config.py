"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe METATUBE_,
et peut optionnellement etre fournie via un fichier .env.

Le jeton est optionnel : sans jeton, les requetes partent sans header Authorization.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from metatube.core.value_objects import ServerConfig

# Trouver le fichier .env a la racine du projet (parent de metatube/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe METATUBE_.
    Exemple : METATUBE_SERVER=http://127.0.0.1:8080
    """

    model_config = SettingsConfigDict(
        env_prefix="METATUBE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Serveur MetaTube
    server: str = Field(default="")
    token: Optional[str] = Field(default=None)

    # Images
    default_image_quality: int = Field(default=90, ge=0, le=100)
    primary_image_ratio: float = Field(default=-1)

    # Transport (pool partage)
    connect_timeout: float = Field(default=30.0, gt=0)
    keepalive_expiry: float = Field(default=90.0, gt=0)
    max_connections: int = Field(default=100, ge=1)
    max_keepalive_connections: int = Field(default=20, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/metatube.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("server", mode="before")
    @classmethod
    def strip_server(cls, v: Optional[str]) -> str:
        """Supprime les espaces autour de l'adresse du serveur."""
        return (v or "").strip()

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def token_configured(self) -> bool:
        """Verifie si un jeton non vide est configure."""
        return bool(self.token and self.token.strip())

    def server_config(self) -> ServerConfig:
        """
        Instantane immutable de la configuration serveur.

        Sert de ConfigProvider pour MetaTubeClient : appele a chaque requete.
        """
        return ServerConfig(
            server=self.server,
            token=self.token,
            default_image_quality=self.default_image_quality,
            primary_image_ratio=self.primary_image_ratio,
        )
