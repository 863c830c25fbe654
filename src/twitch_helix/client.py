"""Synchronous Twitch Helix client.

:class:`HelixClient` owns the credentials and the ``httpx.Client`` transport
and runs every request through one pipeline:

    parameters (+ paginator cursor) → URL → ``Client-ID`` / ``Authorization``
    headers → ``httpx`` → :class:`~twitch_helix.result.Result`

Credential problems are raised immediately as
:class:`~twitch_helix.core.exceptions.CredentialError` subclasses, before any
network I/O.  Transport problems (connection errors, timeouts, non-2xx
statuses) are never raised; they come back as a failed ``Result``.

Example::

    from twitch_helix import HelixClient, Paginator

    with HelixClient(client_id="abc123") as client:
        paginator = Paginator()
        result = client.get("streams", {"game_id": ["33214", "21779"]}, paginator)
        if result.success:
            for stream in result.data:
                ...

A client is not thread-safe: ``set_token`` / ``set_client_id`` rebind state
shared by every call on the instance.  Use one client per logical session.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from twitch_helix.config.settings import Settings, get_settings
from twitch_helix.core.exceptions import MissingAuthenticationError, MissingClientIdError
from twitch_helix.credentials import Credentials
from twitch_helix.paginator import Paginator
from twitch_helix.result import Result
from twitch_helix.url import ParamValue, build_url

# Plain stdlib logger: records stay silent until the host application installs
# handlers, e.g. via ``configure_logging()``.
logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT"]


class HelixClient:
    """Entry point for Helix requests.

    Args:
        token: OAuth access token.  Falls back to ``TWITCH_TOKEN``.
        client_id: Twitch application Client ID.  Falls back to
            ``TWITCH_CLIENT_ID``.
        settings: Settings to use instead of :func:`get_settings`.
        http_client: Optional injected :class:`httpx.Client`.  An injected
            client is owned by the caller and is not closed by :meth:`close`.
    """

    def __init__(
        self,
        token: str | None = None,
        client_id: str | None = None,
        *,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._credentials = Credentials(
            client_id=client_id if client_id is not None else self._settings.client_id,
            token=token if token is not None else self._settings.token,
        )
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(
            timeout=httpx.Timeout(self._settings.timeout_seconds),
            headers={"User-Agent": self._settings.user_agent},
            follow_redirects=True,
        )

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    @property
    def base_uri(self) -> str:
        return self._settings.base_uri

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def set_client_id(self, client_id: str | None) -> None:
        self._credentials = self._credentials.replace(client_id=client_id)

    def set_token(self, token: str | None) -> None:
        self._credentials = self._credentials.replace(token=token)

    def with_token(self, token: str) -> HelixClient:
        """Return a client authenticated with *token*, for call chaining.

        The returned client shares this client's transport and Client ID but
        carries its own credentials; this client is left unchanged.  Closing
        this client closes the shared transport.
        """
        clone = HelixClient(settings=self._settings, http_client=self._http_client)
        clone._credentials = self._credentials.replace(token=token)
        return clone

    def get_client_id(self, client_id: str | None = None) -> str:
        """Return *client_id* if given, else the stored Client ID.

        Raises:
            MissingClientIdError: If neither is available.
        """
        if client_id is not None:
            return client_id
        if not self._credentials.client_id:
            raise MissingClientIdError()
        return self._credentials.client_id

    def get_token(self, token: str | None = None) -> str:
        """Return *token* if given, else the stored OAuth token.

        Endpoints that only work for an authenticated user call this to fail
        fast when no token is configured.

        Raises:
            MissingAuthenticationError: If neither is available.
        """
        if token is not None:
            return token
        if not self._credentials.token:
            raise MissingAuthenticationError()
        return self._credentials.token

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def get(
        self,
        path: str = "",
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
        token: str | None = None,
    ) -> Result:
        if token:
            self.set_token(token)
        return self.query("GET", path, parameters, paginator)

    def post(
        self,
        path: str = "",
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
        token: str | None = None,
    ) -> Result:
        if token:
            self.set_token(token)
        return self.query("POST", path, parameters, paginator)

    def put(
        self,
        path: str = "",
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
        token: str | None = None,
    ) -> Result:
        if token:
            self.set_token(token)
        return self.query("PUT", path, parameters, paginator)

    def query(
        self,
        method: Method = "GET",
        path: str = "",
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
        token: str | None = None,
    ) -> Result:
        """Execute one Helix request and wrap its outcome.

        Args:
            method: HTTP method.
            path: Resource path relative to the base URI, e.g. ``"streams"``.
            parameters: Query parameters; sequences become repeated keys.
                The mapping is copied, never modified.
            paginator: Paginator whose cursor is sent as its ``action``
                parameter.  It is handed to the returned ``Result``, which
                stores the next cursor in it.
            token: Per-call OAuth token overriding the stored one.  Unlike
                :meth:`get` / :meth:`post` / :meth:`put` this does not change
                the client's credentials.

        Redirects are followed by the owned transport; an injected
        ``http_client`` keeps its own redirect policy, and an unfollowed 3xx
        comes back as a failure.

        Returns:
            A successful ``Result`` wrapping the response, or a failed one
            wrapping the ``httpx.HTTPError``.

        Raises:
            MissingClientIdError: If no Client ID is available.  No request
                is sent.
        """
        params: dict[str, Any] = dict(parameters or {})
        if paginator is not None and paginator.cursor() is not None:
            params[paginator.action] = paginator.cursor()

        uri = build_url(self.base_uri + path, params)

        headers = {"Client-ID": self.get_client_id()}
        bearer = token or self._credentials.token
        if bearer:
            headers["Authorization"] = f"Bearer {self.get_token(bearer)}"

        logger.debug(
            "helix.request",
            extra={
                "method": method,
                "path": path,
                "paginated": paginator is not None,
                "authenticated": "Authorization" in headers,
            },
        )

        try:
            request = self._http_client.build_request(method, uri, headers=headers)
            response = self._http_client.send(request)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            status = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
            logger.warning(
                "helix.request_failed",
                extra={"method": method, "path": path, "status": status, "error": str(exc)},
            )
            return Result(error=exc, paginator=paginator)

        return Result(response=response, paginator=paginator)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> HelixClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HelixClient(base_uri={self.base_uri!r}, credentials={self._credentials!r})"
