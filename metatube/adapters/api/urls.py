"""
Composition des URLs de l'API MetaTube.

Fonctions pures : aucune requete, aucune validation hors configuration
serveur. Chaque parametre declare est ajoute a la query string, meme quand
sa valeur est la sentinelle "non defini" (ratio=-1, pos=-1, url vide) ;
c'est le serveur qui interprete ces sentinelles.

Usage:
    url = compose_image_api_url(
        config, PRIMARY_IMAGE_API, "javbus", "ABP-123", ratio=0.7, position=0.3
    )
    # http://server/v1/images/primary/javbus/ABP-123?url=&ratio=0.7&pos=0.3&auto=false&badge=&quality=90
"""

import math
from collections.abc import Iterable, Mapping
from typing import Optional, Union
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from metatube.core.errors import ConfigurationError
from metatube.core.value_objects import ServerConfig

ACTOR_INFO_API = "/v1/actors"
MOVIE_INFO_API = "/v1/movies"
ACTOR_SEARCH_API = "/v1/actors/search"
MOVIE_SEARCH_API = "/v1/movies/search"
PRIMARY_IMAGE_API = "/v1/images/primary"
THUMB_IMAGE_API = "/v1/images/thumb"
BACKDROP_IMAGE_API = "/v1/images/backdrop"
TRANSLATE_API = "/v1/translate"

QueryValue = Union[str, int, float, bool, None]


def format_number(value: float) -> str:
    """
    Serialise un nombre sous forme decimale sans perte.

    Les valeurs entieres sont ecrites sans partie fractionnaire ("-1", "2"),
    les autres avec la plus courte representation qui se relit a l'identique
    (repr Python), ex: 1.78 -> "1.78".

    Raises:
        ValueError: Si la valeur est NaN ou infinie
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot serialize non-finite number: {value!r}")
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _format_value(value: QueryValue) -> str:
    if value is None:
        return ""
    # bool avant int : bool est une sous-classe de int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def _join_path(base: str, *segments: str) -> str:
    encoded = [quote(str(segment), safe="") for segment in segments]
    return "/".join([base.rstrip("/"), *encoded])


def compose_url(
    server: str,
    path: str,
    params: Union[Mapping[str, QueryValue], Iterable[tuple[str, QueryValue]]],
) -> str:
    """
    Construit l'URL complete d'un appel API.

    Conserve le schema, l'hote et le port du serveur configure, remplace
    son chemin par `path` et ajoute les parametres dans l'ordre fourni.

    Args:
        server: URL de base du serveur MetaTube
        path: Chemin de l'API, ex: "/v1/movies/javbus/ABP-123"
        params: Parametres de requete (None devient une valeur vide)

    Returns:
        URL complete avec query string

    Raises:
        ConfigurationError: Si l'adresse du serveur est absente ou invalide
    """
    if not server or not server.strip():
        raise ConfigurationError("MetaTube server address is not configured")

    parts = urlsplit(server.strip())
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"Invalid MetaTube server address: {server!r}")

    items = params.items() if isinstance(params, Mapping) else params
    query = urlencode([(key, _format_value(value)) for key, value in items])

    return urlunsplit((parts.scheme, parts.netloc, path, query, ""))


def compose_image_api_url(
    config: ServerConfig,
    path: str,
    provider: str,
    id: str,
    url: Optional[str] = None,
    ratio: float = -1,
    position: float = -1,
    auto: bool = False,
    badge: Optional[str] = None,
) -> str:
    """
    Construit l'URL d'un endpoint image (primary, thumb, backdrop).

    La qualite est toujours celle configuree (default_image_quality).

    Args:
        config: Configuration serveur courante
        path: Endpoint image, ex: PRIMARY_IMAGE_API
        provider: Nom du provider, ex: "javbus"
        id: Identifiant du contenu chez le provider
        url: URL source optionnelle a recuperer/transformer par le serveur
        ratio: Ratio largeur/hauteur, -1 pour le ratio par defaut
        position: Position de recadrage (0-1), -1 pour la position par defaut
        auto: Recadrage automatique
        badge: Badge optionnel a incruster sur l'image
    """
    return compose_url(
        config.server,
        _join_path(path, provider, id),
        [
            ("url", url),
            ("ratio", ratio),
            ("pos", position),
            ("auto", auto),
            ("badge", badge),
            ("quality", config.default_image_quality),
        ],
    )


def compose_info_api_url(
    config: ServerConfig,
    path: str,
    provider: str,
    id: str,
    lazy: bool,
) -> str:
    """Construit l'URL d'un endpoint de fiche (acteur ou film)."""
    return compose_url(
        config.server,
        _join_path(path, provider, id),
        [("lazy", lazy)],
    )


def compose_search_api_url(
    config: ServerConfig,
    path: str,
    q: str,
    provider: str,
    fallback: bool,
) -> str:
    """Construit l'URL d'un endpoint de recherche (acteur ou film)."""
    return compose_url(
        config.server,
        path,
        [("q", q), ("provider", provider), ("fallback", fallback)],
    )


def compose_translate_api_url(
    config: ServerConfig,
    path: str,
    q: str,
    from_lang: str,
    to_lang: str,
    engine: str,
    params: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Construit l'URL de traduction.

    Les parametres propres au moteur (api-key, app-id, model...) sont ajoutes
    apres les parametres standards, dans l'ordre de l'appelant.
    """
    query: list[tuple[str, QueryValue]] = [
        ("q", q),
        ("from", from_lang),
        ("to", to_lang),
        ("engine", engine),
    ]
    if params:
        query.extend(params.items())
    return compose_url(config.server, path, query)
