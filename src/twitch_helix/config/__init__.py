"""Configuration package for twitch-helix.

Re-exports the settings symbols so that callers can write::

    from twitch_helix.config import get_settings
"""

from __future__ import annotations

from twitch_helix.config.settings import DEFAULT_BASE_URI, Settings, get_settings

__all__ = [
    "DEFAULT_BASE_URI",
    "Settings",
    "get_settings",
]
