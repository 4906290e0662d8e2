"""
Tests pour le transport httpx partage.
"""

import httpx
import pytest

from metatube import PROVIDER_NAME, __version__
from metatube.adapters.api.http import build_http_client, default_user_agent


def test_default_user_agent():
    assert default_user_agent() == f"{PROVIDER_NAME}/{__version__}"


@pytest.mark.asyncio
async def test_build_http_client_timeouts(test_settings):
    client = build_http_client(test_settings)
    try:
        assert isinstance(client, httpx.AsyncClient)
        assert client.timeout.connect == 30.0
        assert client.timeout.read is None
        assert client.timeout.write is None
        assert client.timeout.pool is None
        assert client.follow_redirects is True
    finally:
        await client.aclose()
