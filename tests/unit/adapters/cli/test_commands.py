"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- actor / movie : affichage des fiches
- search-actor / search-movie : options provider et fallback
- image-url : choix du constructeur d'URL
- translate : parametres du moteur
- info / version
- Affichage des erreurs MetaTube (code de sortie 1)
"""

from unittest.mock import MagicMock, patch

import pytest
from dependency_injector import providers
from typer.testing import CliRunner

from metatube.adapters.api.metatube_client import MetaTubeClient
from metatube.core.errors import ConfigurationError, RemoteAPIError
from metatube.main import app, container
from tests.fixtures.metatube_responses import (
    ACTOR_INFO,
    ACTOR_SEARCH_RESPONSE,
    MOVIE_INFO,
    MOVIE_SEARCH_RESPONSE,
)

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def cli_settings(monkeypatch, test_settings):
    """Isole la CLI : settings de test, logging desactive."""
    monkeypatch.setattr("metatube.main.configure_logging", lambda **kwargs: None)
    container.config.override(providers.Object(test_settings))
    yield test_settings
    container.config.reset_override()


@pytest.fixture
def mock_client():
    """Mock le Container de helpers.py, la ou with_client l'instancie."""
    with patch("metatube.adapters.cli.helpers.Container") as mock_cls:
        client = MagicMock(spec=MetaTubeClient)
        mock_cls.return_value.api_client.return_value = client
        yield client


# ============================================================================
# Tests
# ============================================================================


class TestInfoCommands:
    """Tests pour les commandes actor et movie."""

    def test_actor_prints_payload(self, mock_client):
        mock_client.get_actor_info.return_value = ACTOR_INFO

        result = runner.invoke(app, ["actor", "javbus", "okp"])

        assert result.exit_code == 0, result.output
        assert "Yua Mikami" in result.output
        mock_client.get_actor_info.assert_awaited_once_with("javbus", "okp", lazy=True)
        mock_client.close.assert_awaited_once()

    def test_movie_full_disables_lazy(self, mock_client):
        mock_client.get_movie_info.return_value = MOVIE_INFO

        result = runner.invoke(app, ["movie", "javbus", "ABP-123", "--full"])

        assert result.exit_code == 0, result.output
        mock_client.get_movie_info.assert_awaited_once_with("javbus", "ABP-123", lazy=False)

    def test_remote_error_exits_with_code_1(self, mock_client):
        mock_client.get_actor_info.side_effect = RemoteAPIError("not_found", "x", 404)

        result = runner.invoke(app, ["actor", "javbus", "missing"])

        assert result.exit_code == 1
        assert "not_found" in result.output
        mock_client.close.assert_awaited_once()


class TestSearchCommands:
    """Tests pour search-actor et search-movie."""

    def test_search_actor_defaults(self, mock_client):
        mock_client.search_actor.return_value = ACTOR_SEARCH_RESPONSE["data"]

        result = runner.invoke(app, ["search-actor", "Yua Mikami"])

        assert result.exit_code == 0, result.output
        assert "2 resultat(s)" in result.output
        mock_client.search_actor.assert_awaited_once_with(
            "Yua Mikami", provider="", fallback=True
        )

    def test_search_movie_with_options(self, mock_client):
        mock_client.search_movie.return_value = MOVIE_SEARCH_RESPONSE["data"]

        result = runner.invoke(
            app, ["search-movie", "ABP-123", "--provider", "javbus", "--no-fallback"]
        )

        assert result.exit_code == 0, result.output
        mock_client.search_movie.assert_awaited_once_with(
            "ABP-123", provider="javbus", fallback=False
        )


class TestImageUrlCommand:
    """Tests pour image-url."""

    def test_primary(self, mock_client):
        mock_client.get_primary_image_url.return_value = "http://server/v1/images/primary/p/i"

        result = runner.invoke(
            app, ["image-url", "primary", "p", "i", "--position", "0.5", "--badge", "b.png"]
        )

        assert result.exit_code == 0, result.output
        assert "http://server/v1/images/primary/p/i" in result.output
        mock_client.get_primary_image_url.assert_called_once_with(
            "p", "i", url=None, position=0.5, auto=False, badge="b.png"
        )

    def test_backdrop_with_source_url(self, mock_client):
        mock_client.get_backdrop_image_url.return_value = "http://server/b"

        result = runner.invoke(
            app, ["image-url", "backdrop", "p", "i", "--url", "http://img/b.jpg", "--auto"]
        )

        assert result.exit_code == 0, result.output
        mock_client.get_backdrop_image_url.assert_called_once_with(
            "p", "i", url="http://img/b.jpg", position=-1, auto=True
        )
        mock_client.get_thumb_image_url.assert_not_called()

    def test_missing_server_is_reported(self, mock_client):
        mock_client.get_thumb_image_url.side_effect = ConfigurationError(
            "MetaTube server address is not configured"
        )

        result = runner.invoke(app, ["image-url", "thumb", "p", "i"])

        assert result.exit_code == 1
        assert "not configured" in result.output


class TestTranslateCommand:
    """Tests pour translate."""

    def test_translate_with_params(self, mock_client):
        mock_client.translate.return_value = {"translated_text": "Bonjour"}

        result = runner.invoke(
            app,
            ["translate", "Hello", "--to", "fr", "--engine", "deepl", "--param", "deepl-api-key=k"],
        )

        assert result.exit_code == 0, result.output
        assert "Bonjour" in result.output
        mock_client.translate.assert_awaited_once_with(
            "Hello", "auto", "fr", "deepl", {"deepl-api-key": "k"}
        )

    def test_translate_rejects_malformed_param(self, mock_client):
        result = runner.invoke(
            app, ["translate", "Hello", "--to", "fr", "--engine", "deepl", "--param", "novalue"]
        )

        assert result.exit_code == 2
        mock_client.translate.assert_not_called()


class TestInfoAndVersion:
    """Tests pour info et version."""

    def test_info_masks_token(self, cli_settings):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0, result.output
        assert cli_settings.server in result.output
        assert cli_settings.token not in result.output
        assert "secr...oken" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "MetaTube v" in result.output
