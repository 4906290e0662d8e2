"""
Transport HTTP partage par tous les appels MetaTube.

Un seul httpx.AsyncClient est cree pour la duree du processus (via le
container DI) et injecte dans MetaTubeClient. httpx gere son propre
verrouillage interne : le client peut etre utilise par des coroutines
concurrentes sans synchronisation.

Politique :
- Timeout de connexion borne (30s par defaut)
- Pas de timeout de lecture/ecriture/pool : la latence d'une requete
  n'est bornee que par le signal d'annulation de l'appelant
- Keep-alive actif, connexions inactives du pool expirees apres 90s
"""

import httpx

from metatube import PROVIDER_NAME, __version__
from metatube.config import Settings


def default_user_agent() -> str:
    """User-Agent envoye a chaque requete : "MetaTube/<version>"."""
    return f"{PROVIDER_NAME}/{__version__}"


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Cree le client httpx partage.

    Les headers (Accept, User-Agent, Authorization) sont poses par requete
    par MetaTubeClient : la configuration peut changer entre deux appels.

    Args:
        settings: Parametres de l'application (timeouts, taille du pool)

    Returns:
        httpx.AsyncClient configure pour un processus de longue duree
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(None, connect=settings.connect_timeout),
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
            keepalive_expiry=settings.keepalive_expiry,
        ),
        follow_redirects=True,
    )
