"""
Interface port pour le client de l'API de metadonnees.

Le plugin hote depend de cette interface ; l'adaptateur httpx
(MetaTubeClient) en fournit l'implementation concrete.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from metatube.core.entities import (
    ActorInfo,
    ActorSearchResult,
    MovieInfo,
    MovieSearchResult,
    TranslationInfo,
)
from metatube.core.value_objects import ImageResponse


class IMetadataAPIClient(ABC):
    """
    Contrat du client MetaTube.

    Les constructeurs d'URL d'image sont synchrones et n'emettent aucune
    requete. Les appels info/recherche/traduction emettent une seule requete
    GET, sans retry, et acceptent un signal d'annulation optionnel.
    """

    # URLs d'images (pas d'appel reseau)

    @abstractmethod
    def get_primary_image_url(
        self,
        provider: str,
        id: str,
        url: Optional[str] = None,
        position: float = -1,
        auto: bool = False,
        badge: Optional[str] = None,
    ) -> str:
        ...

    @abstractmethod
    def get_thumb_image_url(
        self,
        provider: str,
        id: str,
        url: Optional[str] = None,
        position: float = -1,
        auto: bool = False,
    ) -> str:
        ...

    @abstractmethod
    def get_backdrop_image_url(
        self,
        provider: str,
        id: str,
        url: Optional[str] = None,
        position: float = -1,
        auto: bool = False,
    ) -> str:
        ...

    # Appels reseau

    @abstractmethod
    async def get_image_response(
        self,
        url: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ImageResponse:
        ...

    @abstractmethod
    async def get_actor_info(
        self,
        provider: str,
        id: str,
        lazy: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ActorInfo:
        ...

    @abstractmethod
    async def get_movie_info(
        self,
        provider: str,
        id: str,
        lazy: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> MovieInfo:
        ...

    @abstractmethod
    async def search_actor(
        self,
        q: str,
        provider: str = "",
        fallback: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[ActorSearchResult]:
        ...

    @abstractmethod
    async def search_movie(
        self,
        q: str,
        provider: str = "",
        fallback: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[MovieSearchResult]:
        ...

    @abstractmethod
    async def translate(
        self,
        q: str,
        from_lang: str,
        to_lang: str,
        engine: str,
        params: Optional[Mapping[str, str]] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> TranslationInfo:
        ...
