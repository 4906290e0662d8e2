"""
Client de l'API MetaTube.

Ce module fournit l'adaptateur HTTP du port IMetadataAPIClient:
- MetaTubeClient: Appels info/recherche/traduction, URLs d'images, passthrough image
- build_http_client: Transport httpx partage (pool de connexions, keep-alive)
- urls: Composition pure des URLs de l'API
"""

from metatube.adapters.api.http import build_http_client, default_user_agent
from metatube.adapters.api.metatube_client import MetaTubeClient

__all__ = [
    "MetaTubeClient",
    "build_http_client",
    "default_user_agent",
]
