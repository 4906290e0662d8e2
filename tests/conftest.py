"""
Fixtures pytest partagees pour les tests MetaTube.

Ce module contient les fixtures communes utilisees dans les tests:
- ServerConfig de test et ConfigProvider mutable
- Client httpx et MetaTubeClient (les appels sont interceptes par respx)
- Settings de test avec fichier de log temporaire
"""

from pathlib import Path

import httpx
import pytest

from metatube.adapters.api.metatube_client import MetaTubeClient
from metatube.config import Settings
from metatube.core.value_objects import ServerConfig
from tests.fixtures.metatube_responses import SERVER, TOKEN, USER_AGENT


class MutableConfigProvider:
    """
    ConfigProvider dont la configuration peut etre remplacee entre deux appels.

    Simule l'hote qui modifie la configuration du plugin a chaud.
    """

    def __init__(self, config: ServerConfig) -> None:
        self.config = config
        self.calls = 0

    def __call__(self) -> ServerConfig:
        self.calls += 1
        return self.config


@pytest.fixture
def server_config() -> ServerConfig:
    """Configuration serveur type : jeton present, qualite 90, pas de ratio."""
    return ServerConfig(
        server=SERVER,
        token=TOKEN,
        default_image_quality=90,
        primary_image_ratio=-1,
    )


@pytest.fixture
def config_provider(server_config: ServerConfig) -> MutableConfigProvider:
    return MutableConfigProvider(server_config)


@pytest.fixture
def http_client() -> httpx.AsyncClient:
    """Client httpx reel ; les tests l'interceptent avec respx."""
    return httpx.AsyncClient()


@pytest.fixture
def api_client(
    http_client: httpx.AsyncClient, config_provider: MutableConfigProvider
) -> MetaTubeClient:
    """MetaTubeClient branche sur le transport et la configuration de test."""
    return MetaTubeClient(
        http_client=http_client,
        config_provider=config_provider,
        user_agent=USER_AGENT,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test, isoles de l'environnement.

    Utilise tmp_path de pytest pour le fichier de log.
    """
    return Settings(
        _env_file=None,
        server=SERVER,
        token=TOKEN,
        default_image_quality=85,
        primary_image_ratio=0.7,
        log_file=tmp_path / "test.log",
    )
