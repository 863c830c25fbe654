"""Client settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.
Credentials given to :class:`~twitch_helix.client.HelixClient` explicitly
always win over the values read here.

Usage::

    from twitch_helix.config.settings import get_settings

    settings = get_settings()
    client_id = settings.client_id
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from twitch_helix import __version__

DEFAULT_BASE_URI: str = "https://api.twitch.tv/helix/"
"""Base URL for the Twitch Helix REST API.  The trailing slash matters:
resource paths are appended to it verbatim."""


class Settings(BaseSettings):
    """Client configuration backed by ``TWITCH_*`` environment variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TWITCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    client_id: Optional[str] = None
    """Twitch application Client ID sent as the ``Client-ID`` header."""

    token: Optional[str] = None
    """OAuth access token sent as ``Authorization: Bearer <token>``.  Leave
    unset for endpoints that accept unauthenticated calls."""

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    base_uri: str = Field(default=DEFAULT_BASE_URI, min_length=8)

    timeout_seconds: float = Field(default=30.0, gt=0)
    """Per-request timeout handed to ``httpx``."""

    user_agent: str = Field(default=f"twitch-helix/{__version__}", min_length=1)

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    log_level: str = "INFO"
    """Logging verbosity.  One of: DEBUG, INFO, WARNING, ERROR, CRITICAL."""


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    Pydantic Settings reads the environment and .env file exactly once per
    process lifetime.  In tests, call ``get_settings.cache_clear()`` after
    patching environment variables.
    """
    return Settings()
