"""Uniform outcome of a Helix request.

A :class:`Result` is either a success wrapping the ``httpx.Response`` or a
failure wrapping the ``httpx.HTTPError`` raised while sending it.  There is no
third state.  Both cases carry the :class:`~twitch_helix.paginator.Paginator`
the request was made with, so callers can inspect failures without
``try``/``except`` and keep paging with the same object on success.

Body layout of a Helix list response::

    {
        "data": [...],
        "total": 1234,                 # only on some endpoints
        "pagination": {"cursor": "eyJiIjpudWxsLCJhIjp7Ik..."}
    }
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from twitch_helix.paginator import Paginator

logger = logging.getLogger(__name__)

STATUS_WITHOUT_RESPONSE: int = 500
"""Status reported for failures that never produced an HTTP response
(connection errors, timeouts)."""


class Result:
    """Outcome of a single :meth:`~twitch_helix.client.HelixClient.query` call.

    Exactly one of *response* and *error* must be given.  On a success the
    JSON body is parsed once; when a paginator was supplied it is updated in
    place with the response's cursor, otherwise one is built from the
    response's pagination block (if any).

    Args:
        response: Response of a successful exchange.
        error: Transport error of a failed exchange.
        paginator: Paginator the request was made with, if any.

    Raises:
        ValueError: If both or neither of *response* and *error* are given.
    """

    def __init__(
        self,
        response: httpx.Response | None = None,
        error: httpx.HTTPError | None = None,
        paginator: Paginator | None = None,
    ) -> None:
        if (response is None) == (error is None):
            raise ValueError("Result requires exactly one of 'response' or 'error'")

        self._response = response
        self._error = error
        self._paginator = paginator

        self._data: list[Any] = []
        self._total: int | None = None
        self._pagination: dict[str, Any] | None = None

        if response is not None:
            body = _parse_json(response)
            if isinstance(body, dict):
                data = body.get("data")
                self._data = data if isinstance(data, list) else []
                self._total = body.get("total")
                pagination = body.get("pagination")
                self._pagination = pagination if isinstance(pagination, dict) else None

            if self._paginator is not None:
                self._paginator.update(self.cursor())
            elif self._pagination is not None:
                self._paginator = Paginator.from_result(self)

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    @property
    def success(self) -> bool:
        return self._error is None

    @property
    def response(self) -> httpx.Response | None:
        """The wrapped response, unchanged; ``None`` on failure."""
        return self._response

    @property
    def error(self) -> httpx.HTTPError | None:
        """The wrapped transport error; ``None`` on success."""
        return self._error

    @property
    def paginator(self) -> Paginator | None:
        return self._paginator

    @property
    def status(self) -> int:
        """HTTP status of the exchange.

        For an ``httpx.HTTPStatusError`` this is the status of the rejected
        response; failures without any response report ``500``.
        """
        if self._response is not None:
            return self._response.status_code
        if isinstance(self._error, httpx.HTTPStatusError):
            return self._error.response.status_code
        return STATUS_WITHOUT_RESPONSE

    def error_message(self) -> str | None:
        """Return a human-readable failure description, or ``None`` on success.

        Prefers the ``message`` field Helix puts in error bodies over the
        transport's own exception text.
        """
        if self._error is None:
            return None
        if isinstance(self._error, httpx.HTTPStatusError):
            body = _parse_json(self._error.response)
            if isinstance(body, dict) and body.get("message"):
                return str(body["message"])
        return str(self._error)

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    @property
    def data(self) -> list[Any]:
        return self._data

    @property
    def total(self) -> int | None:
        return self._total

    @property
    def pagination(self) -> dict[str, Any] | None:
        return self._pagination

    def count(self) -> int:
        return len(self._data)

    def shift(self) -> Any:
        """Return the first element of ``data``, or ``None`` when empty."""
        return self._data[0] if self._data else None

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def cursor(self) -> str | None:
        """Return the response's pagination cursor, or ``None`` on the last page."""
        if not self._pagination:
            return None
        return self._pagination.get("cursor") or None

    def next(self) -> Paginator | None:
        """Return a paginator for the page after this one, or ``None``."""
        cursor = self.cursor()
        return Paginator("after", cursor) if cursor else None

    def back(self) -> Paginator | None:
        """Return a paginator for the page before this one, or ``None``."""
        cursor = self.cursor()
        return Paginator("before", cursor) if cursor else None

    def __repr__(self) -> str:
        outcome = "success" if self.success else "failure"
        return f"Result({outcome}, status={self.status}, count={self.count()})"


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        logger.debug("helix: response body is not JSON (status=%d)", response.status_code)
        return None
