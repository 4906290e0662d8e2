"""
Client de l'API MetaTube.

Implemente IMetadataAPIClient au-dessus d'un httpx.AsyncClient partage.
Toutes les reponses JSON passent par une routine unique (_get_data) qui
pose les headers, decode l'enveloppe `{data, error}` et traduit les erreurs.

Pas de cache ni de retry : une tentative par appel, les echecs remontent
a l'appelant qui decide du repli (ex: provider suivant).

Usage:
    client = MetaTubeClient(
        http_client=build_http_client(settings),
        config_provider=settings.server_config,
    )
    movie = await client.get_movie_info("javbus", "ABP-123")
    poster = client.get_primary_image_url("javbus", "ABP-123", position=0.8)
    await client.close()
"""

import asyncio
from typing import Any, Awaitable, Mapping, Optional, TypeVar
from urllib.parse import urlsplit

import httpx
from loguru import logger

from metatube.adapters.api.http import default_user_agent
from metatube.adapters.api.urls import (
    ACTOR_INFO_API,
    ACTOR_SEARCH_API,
    BACKDROP_IMAGE_API,
    MOVIE_INFO_API,
    MOVIE_SEARCH_API,
    PRIMARY_IMAGE_API,
    THUMB_IMAGE_API,
    TRANSLATE_API,
    compose_image_api_url,
    compose_info_api_url,
    compose_search_api_url,
    compose_translate_api_url,
)
from metatube.core.entities import (
    ActorInfo,
    ActorSearchResult,
    MovieInfo,
    MovieSearchResult,
    TranslationInfo,
)
from metatube.core.errors import (
    EmptyResponseError,
    InvalidResponseError,
    RemoteAPIError,
    RequestCancelledError,
)
from metatube.core.ports.api_client import IMetadataAPIClient
from metatube.core.value_objects import (
    ConfigProvider,
    ImageResponse,
    ResponseEnvelope,
    ServerConfig,
)

T = TypeVar("T")


class MetaTubeClient(IMetadataAPIClient):
    """
    Client API MetaTube.

    Fournit:
    - Les URLs d'images primary/thumb/backdrop (sans appel reseau)
    - Les fiches acteur/film et la recherche (authentifiees)
    - La traduction (non authentifiee)
    - Le passthrough brut d'une image (sans decodage JSON)

    La configuration est relue via config_provider a chaque appel ; le
    client ne conserve aucun etat mutable hormis le transport partage.

    Example:
        results = await client.search_movie("ABP-123", provider="javbus")
        if results:
            info = await client.get_movie_info(results[0]["provider"], results[0]["id"])
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        config_provider: ConfigProvider,
        user_agent: Optional[str] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            http_client: Transport httpx partage (pool de connexions)
            config_provider: Accesseur de la configuration serveur courante
            user_agent: User-Agent a annoncer (defaut: "MetaTube/<version>")
        """
        self._http_client = http_client
        self._config_provider = config_provider
        self._user_agent = user_agent or default_user_agent()

    @property
    def user_agent(self) -> str:
        return self._user_agent

    # URLs d'images

    def get_primary_image_url(
        self,
        provider: str,
        id: str,
        url: Optional[str] = None,
        position: float = -1,
        auto: bool = False,
        badge: Optional[str] = None,
    ) -> str:
        """
        URL de l'image primaire (poster).

        Sans `url`, pointe vers l'image deja connue du serveur pour ce
        provider/id. Avec `url`, demande au serveur de recuperer et
        transformer l'image source. Le ratio vient de primary_image_ratio.
        """
        config = self._config_provider()
        return compose_image_api_url(
            config,
            PRIMARY_IMAGE_API,
            provider,
            id,
            url=url,
            ratio=config.primary_image_ratio,
            position=position,
            auto=auto,
            badge=badge,
        )

    def get_thumb_image_url(
        self,
        provider: str,
        id: str,
        url: Optional[str] = None,
        position: float = -1,
        auto: bool = False,
    ) -> str:
        """URL de la vignette. Pas de ratio par defaut (-1)."""
        return compose_image_api_url(
            self._config_provider(),
            THUMB_IMAGE_API,
            provider,
            id,
            url=url,
            position=position,
            auto=auto,
        )

    def get_backdrop_image_url(
        self,
        provider: str,
        id: str,
        url: Optional[str] = None,
        position: float = -1,
        auto: bool = False,
    ) -> str:
        """URL de l'image de fond. Pas de ratio par defaut (-1)."""
        return compose_image_api_url(
            self._config_provider(),
            BACKDROP_IMAGE_API,
            provider,
            id,
            url=url,
            position=position,
            auto=auto,
        )

    # Passthrough image

    async def get_image_response(
        self,
        url: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ImageResponse:
        """
        Recupere une image sans la decoder.

        Seul le User-Agent est pose (ni Accept JSON, ni Authorization).
        Le statut HTTP n'est pas verifie : l'appelant relaie la reponse.

        Args:
            url: URL de l'image (typiquement une URL d'images MetaTube)
            cancel_event: Signal d'annulation optionnel

        Returns:
            ImageResponse a consommer en streaming puis fermer

        Raises:
            RequestCancelledError: Si l'annulation est demandee
            httpx.HTTPError: Erreurs de transport
        """
        self._raise_if_cancelled(url, cancel_event)

        request = self._http_client.build_request(
            "GET", url, headers={"User-Agent": self._user_agent}
        )
        logger.debug("Requete image MetaTube", path=urlsplit(url).path)
        response = await self._run_cancellable(
            self._http_client.send(request, stream=True), url, cancel_event
        )
        logger.debug(
            "Reponse image MetaTube",
            path=urlsplit(url).path,
            status=response.status_code,
        )

        content_length = response.headers.get("Content-Length")
        return ImageResponse(
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            content_length=int(content_length) if content_length and content_length.isdigit() else None,
            headers={
                key: ", ".join(response.headers.get_list(key))
                for key in response.headers.keys()
            },
            _stream=response.aiter_raw,
            _close=response.aclose,
        )

    # Fiches

    async def get_actor_info(
        self,
        provider: str,
        id: str,
        lazy: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ActorInfo:
        """Fiche d'un acteur chez un provider."""
        config = self._config_provider()
        url = compose_info_api_url(config, ACTOR_INFO_API, provider, id, lazy)
        return await self._get_data(url, config, True, cancel_event)

    async def get_movie_info(
        self,
        provider: str,
        id: str,
        lazy: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> MovieInfo:
        """Fiche d'un film chez un provider."""
        config = self._config_provider()
        url = compose_info_api_url(config, MOVIE_INFO_API, provider, id, lazy)
        return await self._get_data(url, config, True, cancel_event)

    # Recherche

    async def search_actor(
        self,
        q: str,
        provider: str = "",
        fallback: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[ActorSearchResult]:
        """
        Recherche d'acteurs.

        Args:
            q: Texte recherche
            provider: Provider cible, vide pour laisser le serveur choisir
            fallback: Autorise le serveur a interroger d'autres providers
            cancel_event: Signal d'annulation optionnel
        """
        config = self._config_provider()
        url = compose_search_api_url(config, ACTOR_SEARCH_API, q, provider, fallback)
        return await self._get_data(url, config, True, cancel_event)

    async def search_movie(
        self,
        q: str,
        provider: str = "",
        fallback: bool = True,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[MovieSearchResult]:
        """Recherche de films (memes parametres que search_actor)."""
        config = self._config_provider()
        url = compose_search_api_url(config, MOVIE_SEARCH_API, q, provider, fallback)
        return await self._get_data(url, config, True, cancel_event)

    # Traduction

    async def translate(
        self,
        q: str,
        from_lang: str,
        to_lang: str,
        engine: str,
        params: Optional[Mapping[str, str]] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> TranslationInfo:
        """
        Traduit un texte via le moteur choisi.

        L'endpoint de traduction n'exige pas d'authentification.

        Args:
            q: Texte a traduire
            from_lang: Langue source (ex: "ja", "auto")
            to_lang: Langue cible (ex: "fr")
            engine: Moteur de traduction (ex: "google", "baidu", "deepl")
            params: Parametres propres au moteur (api-key, app-id, ...)
            cancel_event: Signal d'annulation optionnel
        """
        config = self._config_provider()
        url = compose_translate_api_url(
            config, TRANSLATE_API, q, from_lang, to_lang, engine, params
        )
        return await self._get_data(url, config, False, cancel_event)

    # Routine commune

    async def _get_data(
        self,
        url: str,
        config: ServerConfig,
        require_auth: bool,
        cancel_event: Optional[asyncio.Event],
    ) -> Any:
        """
        Emet un GET, decode l'enveloppe et renvoie le champ data.

        Ordre de traitement des erreurs (la premiere qui s'applique gagne):
        1. Annulation deja demandee -> RequestCancelledError, aucune requete
        2. Statut HTTP en echec ET error non null -> RemoteAPIError
        3. data null -> EmptyResponseError
        4. Sinon -> data tel quel

        Raises:
            RequestCancelledError: Annulation avant ou pendant l'echange
            RemoteAPIError: Erreur structuree du serveur
            EmptyResponseError: Reponse sans donnees
            InvalidResponseError: Corps qui n'est pas une enveloppe JSON
            httpx.HTTPError: Erreurs de transport, propagees sans changement
        """
        self._raise_if_cancelled(url, cancel_event)

        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }
        if require_auth and config.has_token:
            headers["Authorization"] = f"Bearer {config.token}"

        path = urlsplit(url).path
        logger.debug(
            "Requete MetaTube",
            path=path,
            authenticated="Authorization" in headers,
        )
        response = await self._run_cancellable(
            self._http_client.get(url, headers=headers), url, cancel_event
        )
        logger.debug("Reponse MetaTube", path=path, status=response.status_code)

        # Pas de raise_for_status : en cas d'echec le corps porte le detail de l'erreur
        envelope = self._decode_envelope(response)

        if not response.is_success and envelope.error is not None:
            raise RemoteAPIError(
                envelope.error.code,
                envelope.error.message,
                response.status_code,
            )

        if envelope.data is None:
            raise EmptyResponseError(response.status_code)

        return envelope.data

    @staticmethod
    def _decode_envelope(response: httpx.Response) -> ResponseEnvelope[Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise InvalidResponseError(response.status_code, "body is not valid JSON") from e

        try:
            return ResponseEnvelope.from_json(payload)
        except ValueError as e:
            raise InvalidResponseError(response.status_code, str(e)) from e

    @staticmethod
    def _raise_if_cancelled(url: str, cancel_event: Optional[asyncio.Event]) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError(url)

    @staticmethod
    async def _run_cancellable(
        operation: Awaitable[T],
        url: str,
        cancel_event: Optional[asyncio.Event],
    ) -> T:
        """
        Execute l'operation reseau en la mettant en concurrence avec le signal.

        Si le signal est declenche avant la fin, l'operation en cours est
        annulee (httpx ferme la connexion) et RequestCancelledError est levee.
        Une annulation native de la tache appelante est propagee telle quelle.
        """
        if cancel_event is None:
            return await operation

        request_task = asyncio.ensure_future(operation)
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            request_task.cancel()
            raise
        finally:
            cancel_task.cancel()

        if request_task.done():
            return request_task.result()

        request_task.cancel()
        # Attend la fin de l'annulation pour liberer la connexion
        await asyncio.gather(request_task, return_exceptions=True)
        raise RequestCancelledError(url)

    async def close(self) -> None:
        """
        Ferme le transport HTTP partage.

        A appeler une seule fois, a l'arret du processus.
        """
        if not self._http_client.is_closed:
            await self._http_client.aclose()
