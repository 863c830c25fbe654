"""Client library for the Twitch Helix REST API.

Typical usage::

    from twitch_helix import HelixClient

    client = HelixClient(client_id="abc123")
    result = client.get("users", {"login": ["shroud", "pokimane"]})
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from twitch_helix.client import HelixClient  # noqa: E402
from twitch_helix.core.exceptions import (  # noqa: E402
    CredentialError,
    MissingAuthenticationError,
    MissingClientIdError,
    TwitchHelixError,
)
from twitch_helix.credentials import Credentials  # noqa: E402
from twitch_helix.paginator import Paginator  # noqa: E402
from twitch_helix.result import Result  # noqa: E402
from twitch_helix.url import build_url  # noqa: E402

__all__ = [
    "__version__",
    "HelixClient",
    "Credentials",
    "Paginator",
    "Result",
    "build_url",
    "TwitchHelixError",
    "CredentialError",
    "MissingClientIdError",
    "MissingAuthenticationError",
]
