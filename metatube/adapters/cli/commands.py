"""
Commandes CLI d'interrogation d'un serveur MetaTube.

Chaque commande sync delegue a une implementation async decoree par
with_client, qui fournit le client et ferme le transport a la sortie.
"""

import asyncio
from enum import Enum
from typing import Annotated, Optional

import typer

from metatube.adapters.cli.helpers import console, parse_key_values, print_json, with_client


class ImageKind(str, Enum):
    """Type d'image MetaTube."""

    PRIMARY = "primary"
    THUMB = "thumb"
    BACKDROP = "backdrop"


def actor(
    provider: Annotated[str, typer.Argument(help="Provider (ex: javbus)")],
    id: Annotated[str, typer.Argument(help="Identifiant de l'acteur chez le provider")],
    full: Annotated[
        bool, typer.Option("--full", help="Recherche complete (lazy=false)")
    ] = False,
) -> None:
    """Affiche la fiche d'un acteur."""
    asyncio.run(_actor_async(provider, id, not full))


@with_client
async def _actor_async(client, provider: str, id: str, lazy: bool) -> None:
    print_json(await client.get_actor_info(provider, id, lazy=lazy))


def movie(
    provider: Annotated[str, typer.Argument(help="Provider (ex: javbus)")],
    id: Annotated[str, typer.Argument(help="Identifiant du film chez le provider")],
    full: Annotated[
        bool, typer.Option("--full", help="Recherche complete (lazy=false)")
    ] = False,
) -> None:
    """Affiche la fiche d'un film."""
    asyncio.run(_movie_async(provider, id, not full))


@with_client
async def _movie_async(client, provider: str, id: str, lazy: bool) -> None:
    print_json(await client.get_movie_info(provider, id, lazy=lazy))


def search_actor(
    q: Annotated[str, typer.Argument(help="Texte recherche")],
    provider: Annotated[
        str, typer.Option("--provider", "-p", help="Provider cible")
    ] = "",
    no_fallback: Annotated[
        bool, typer.Option("--no-fallback", help="Ne pas interroger d'autres providers")
    ] = False,
) -> None:
    """Recherche des acteurs."""
    asyncio.run(_search_actor_async(q, provider, not no_fallback))


@with_client
async def _search_actor_async(client, q: str, provider: str, fallback: bool) -> None:
    results = await client.search_actor(q, provider=provider, fallback=fallback)
    console.print(f"[bold cyan]{len(results)} resultat(s)[/bold cyan]")
    print_json(results)


def search_movie(
    q: Annotated[str, typer.Argument(help="Texte recherche (titre ou numero)")],
    provider: Annotated[
        str, typer.Option("--provider", "-p", help="Provider cible")
    ] = "",
    no_fallback: Annotated[
        bool, typer.Option("--no-fallback", help="Ne pas interroger d'autres providers")
    ] = False,
) -> None:
    """Recherche des films."""
    asyncio.run(_search_movie_async(q, provider, not no_fallback))


@with_client
async def _search_movie_async(client, q: str, provider: str, fallback: bool) -> None:
    results = await client.search_movie(q, provider=provider, fallback=fallback)
    console.print(f"[bold cyan]{len(results)} resultat(s)[/bold cyan]")
    print_json(results)


def image_url(
    kind: Annotated[ImageKind, typer.Argument(help="Type d'image")],
    provider: Annotated[str, typer.Argument(help="Provider (ex: javbus)")],
    id: Annotated[str, typer.Argument(help="Identifiant chez le provider")],
    url: Annotated[
        Optional[str], typer.Option("--url", help="URL source a transformer")
    ] = None,
    position: Annotated[
        float, typer.Option("--position", help="Position de recadrage (0-1, -1 = defaut)")
    ] = -1,
    auto: Annotated[
        bool, typer.Option("--auto", help="Recadrage automatique")
    ] = False,
    badge: Annotated[
        Optional[str], typer.Option("--badge", help="Badge (images primaires uniquement)")
    ] = None,
) -> None:
    """Affiche l'URL d'une image MetaTube (aucun appel reseau)."""
    asyncio.run(_image_url_async(kind, provider, id, url, position, auto, badge))


@with_client
async def _image_url_async(
    client,
    kind: ImageKind,
    provider: str,
    id: str,
    url: Optional[str],
    position: float,
    auto: bool,
    badge: Optional[str],
) -> None:
    if kind is ImageKind.PRIMARY:
        result = client.get_primary_image_url(
            provider, id, url=url, position=position, auto=auto, badge=badge
        )
    elif kind is ImageKind.THUMB:
        result = client.get_thumb_image_url(provider, id, url=url, position=position, auto=auto)
    else:
        result = client.get_backdrop_image_url(provider, id, url=url, position=position, auto=auto)
    typer.echo(result)


def translate(
    q: Annotated[str, typer.Argument(help="Texte a traduire")],
    to_lang: Annotated[str, typer.Option("--to", help="Langue cible")],
    engine: Annotated[str, typer.Option("--engine", "-e", help="Moteur de traduction")],
    from_lang: Annotated[str, typer.Option("--from", help="Langue source")] = "auto",
    param: Annotated[
        Optional[list[str]],
        typer.Option("--param", help="Parametre du moteur, format cle=valeur (repetable)"),
    ] = None,
) -> None:
    """Traduit un texte via le serveur MetaTube."""
    params = parse_key_values(param or [])
    asyncio.run(_translate_async(q, from_lang, to_lang, engine, params))


@with_client
async def _translate_async(
    client, q: str, from_lang: str, to_lang: str, engine: str, params: dict[str, str]
) -> None:
    result = await client.translate(q, from_lang, to_lang, engine, params)
    print_json(result)
