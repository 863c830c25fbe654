"""Shared pytest fixtures for twitch-helix tests.

Fixture summary
---------------
settings        - Settings with a Client ID, no token and no .env lookup.
client          - HelixClient built from ``settings``.
helix_api       - respx router mocking every request sent through httpx.
streams_route   - Mocked ``GET /helix/streams`` returning one page.

All tests run without network access: ``helix_api`` rejects any request
that no route matches.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import httpx
import pytest
import respx

from tests.factories.helix import HELIX_HOST, TEST_CLIENT_ID, StreamFactory, helix_page
from twitch_helix.client import HelixClient
from twitch_helix.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop ``TWITCH_*`` variables so a developer's shell cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith("TWITCH_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, client_id=TEST_CLIENT_ID)


@pytest.fixture
def client(settings: Settings) -> Iterator[HelixClient]:
    with HelixClient(settings=settings) as helix:
        yield helix


@pytest.fixture
def helix_api() -> Iterator[respx.MockRouter]:
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def streams_route(helix_api: respx.MockRouter) -> respx.Route:
    return helix_api.get(host=HELIX_HOST, path="/helix/streams").mock(
        return_value=httpx.Response(
            200,
            json=helix_page([StreamFactory.build(id="1")], cursor="cursor-page-2"),
        )
    )
