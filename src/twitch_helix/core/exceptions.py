"""Exception hierarchy for twitch-helix.

All custom exceptions subclass ``TwitchHelixError``.  Only credential
failures are raised to callers; transport failures never are, they come back
as a failed :class:`~twitch_helix.result.Result`.

Hierarchy::

    TwitchHelixError
    └── CredentialError
        ├── MissingClientIdError
        └── MissingAuthenticationError
"""

from __future__ import annotations


class TwitchHelixError(Exception):
    """Base class for all twitch-helix exceptions."""


# ---------------------------------------------------------------------------
# Credential exceptions
# ---------------------------------------------------------------------------


class CredentialError(TwitchHelixError):
    """Raised when a request cannot be authenticated as configured.

    These are misconfiguration errors.  They are raised before any network
    I/O takes place.
    """


class MissingClientIdError(CredentialError):
    """Raised when no Client ID is available for a request.

    Every Helix request carries a ``Client-ID`` header, so this is raised for
    any query on a client that has neither a stored nor a configured Client ID.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Request requires a Client ID; pass client_id or set TWITCH_CLIENT_ID"
        )


class MissingAuthenticationError(CredentialError):
    """Raised when a request demands an OAuth token and none is available."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Request requires authentication; pass a token or call set_token()"
        )
