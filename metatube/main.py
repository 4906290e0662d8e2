"""
Point d'entree CLI de MetaTube.

Configure le logging et expose les commandes d'interrogation du serveur.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.api.http import default_user_agent
from .adapters.cli.commands import (
    actor,
    image_url,
    movie,
    search_actor,
    search_movie,
    translate,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="metatube",
    help="Client de l'API de metadonnees MetaTube",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Afficher les logs DEBUG (requetes API)"),
    ] = False,
) -> None:
    """MetaTube - Interrogation d'un serveur de metadonnees."""
    settings = get_config()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(actor)
app.command()(movie)
app.command(name="search-actor")(search_actor)
app.command(name="search-movie")(search_movie)
app.command(name="image-url")(image_url)
app.command()(translate)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


def _mask(token: str) -> str:
    token = token.strip()
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}...{token[-4:]}"


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MetaTube")
    typer.echo(f"Serveur : {config.server or '(non configure)'}")
    typer.echo(f"Jeton : {_mask(config.token) if config.token_configured else '(aucun)'}")
    typer.echo(f"Qualite image : {config.default_image_quality}")
    typer.echo(f"Ratio image primaire : {config.primary_image_ratio}")
    typer.echo(f"User-Agent : {default_user_agent()}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MetaTube v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
