"""Base class for the per-resource Helix helpers.

Each helper is a thin service object over a
:class:`~twitch_helix.client.HelixClient`: it supplies the path and
parameters of one endpoint and returns the client's
:class:`~twitch_helix.result.Result` unchanged.

Example usage::

    from twitch_helix.resources.base import Resource

    class Teams(Resource):
        path = "teams"

        def get_team(self, name):
            return self._client.get(self.path, {"name": name})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from twitch_helix.client import HelixClient
    from twitch_helix.url import ParamValue


class Resource:
    """Shared plumbing for resource helpers.

    Class Attributes:
        path: Helix path of the resource, relative to the base URI.
    """

    path: str = ""

    def __init__(self, client: HelixClient) -> None:
        self._client = client

    @staticmethod
    def _merge(
        parameters: Mapping[str, ParamValue] | None,
        **extra: Any,
    ) -> dict[str, Any]:
        """Return *parameters* plus the non-``None`` entries of *extra*."""
        merged: dict[str, Any] = dict(parameters or {})
        merged.update({key: value for key, value in extra.items() if value is not None})
        return merged
