"""
Container d'injection de dependances via dependency-injector.

Le transport httpx est un Singleton : un seul pool de connexions pour tout
le processus, partage par reference avec le client API.
"""

from dependency_injector import containers, providers

from .adapters.api.http import build_http_client, default_user_agent
from .adapters.api.metatube_client import MetaTubeClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.api_client()
        info = await client.get_actor_info("javbus", "abc")
        await client.close()

    Un hote (plugin) peut remplacer la configuration :
        container.config.override(providers.Object(host_settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Transport partage - cree une fois pour la duree du processus
    http_client = providers.Singleton(
        build_http_client,
        settings=config,
    )

    # Client API - la configuration est relue a chaque appel via server_config
    api_client = providers.Singleton(
        MetaTubeClient,
        http_client=http_client,
        config_provider=config.provided.server_config,
        user_agent=providers.Callable(default_user_agent),
    )
