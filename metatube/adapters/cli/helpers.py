"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- with_client : decorateur injectant un MetaTubeClient et fermant le transport
- print_json : affichage colore d'un payload JSON
- parse_key_values : conversion des options "cle=valeur"
"""

from functools import wraps
from typing import Any

import typer
from rich.console import Console

from metatube.container import Container
from metatube.core.errors import MetaTubeError

console = Console()
err_console = Console(stderr=True)


def with_client(func):
    """
    Decorateur qui injecte le client API en premier argument.

    Le transport est ferme a la sortie. Une MetaTubeError est affichee en
    rouge et la commande se termine avec le code 1.

    Usage:
        @with_client
        async def my_command(client, ...):
            data = await client.get_actor_info(...)
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        client = container.api_client()
        try:
            return await func(client, *args, **kwargs)
        except MetaTubeError as e:
            err_console.print(f"[bold red]Erreur :[/bold red] {e}")
            raise typer.Exit(code=1) from e
        finally:
            await client.close()
    return wrapper


def print_json(data: Any) -> None:
    """Affiche un payload decode en JSON indente et colore."""
    console.print_json(data=data)


def parse_key_values(values: list[str]) -> dict[str, str]:
    """
    Convertit ["api-key=xxx", "model=yyy"] en dictionnaire ordonne.

    Raises:
        typer.BadParameter: Si un element ne contient pas "="
    """
    params: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Format attendu cle=valeur : {item!r}")
        params[key.strip()] = value
    return params
