"""Cursor-based pagination state for Helix list endpoints.

Helix pages forward with ``after=<cursor>`` and backward with
``before=<cursor>``.  A :class:`Paginator` is created by the caller, passed to
every page request, and updated in place with the cursor each response
returns::

    paginator = Paginator()
    while True:
        result = client.get("streams", {"first": 100}, paginator)
        if not result.success or not paginator.cursor():
            break
        handle(result.data)

There is no "exhausted" flag: an empty or absent cursor in the response means
there are no more pages, and the caller is the one who checks for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from twitch_helix.result import Result

Action = Literal["after", "before"]

AFTER: Action = "after"
BEFORE: Action = "before"


class Paginator:
    """Direction plus cursor of a paginated Helix request.

    Args:
        action: Query parameter that receives the cursor, ``"after"`` (next
            page) or ``"before"`` (previous page).  Fixed for the lifetime of
            the paginator.
        cursor: Starting cursor.  ``None`` requests the first page.

    Raises:
        ValueError: If *action* is neither ``"after"`` nor ``"before"``.
    """

    def __init__(self, action: Action = AFTER, cursor: str | None = None) -> None:
        if action not in (AFTER, BEFORE):
            raise ValueError(
                f"Unknown pagination action '{action}'. Valid actions: {[AFTER, BEFORE]}"
            )
        self._action: Action = action
        self._cursor = cursor or None

    @property
    def action(self) -> Action:
        return self._action

    def cursor(self) -> str | None:
        """Return the stored cursor, or ``None`` before the first page."""
        return self._cursor

    def update(self, cursor: str | None) -> None:
        """Store the cursor returned by the latest page.

        Empty strings are stored as ``None`` so that ``cursor()`` has a single
        "no more pages" value.
        """
        self._cursor = cursor or None

    def next(self) -> Paginator:
        """Return a paginator requesting the page after the current cursor."""
        return Paginator(AFTER, self._cursor)

    def back(self) -> Paginator:
        """Return a paginator requesting the page before the current cursor."""
        return Paginator(BEFORE, self._cursor)

    @classmethod
    def from_result(cls, result: Result, action: Action = AFTER) -> Paginator:
        """Build a paginator positioned at *result*'s pagination cursor."""
        return cls(action, result.cursor())

    def __repr__(self) -> str:
        return f"Paginator(action={self._action!r}, cursor={self._cursor!r})"
