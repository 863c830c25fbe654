"""Helix ``/clips`` endpoints."""

from __future__ import annotations

from twitch_helix.resources.base import Resource
from twitch_helix.result import Result


class Clips(Resource):
    path = "clips"

    def get_clip(self, clip_id: str) -> Result:
        return self._client.get(self.path, {"id": clip_id})

    def create_clip(self, broadcaster_id: int | str, token: str | None = None) -> Result:
        """Create a clip of *broadcaster_id*'s live stream.

        Requires a user token with the ``clips:edit`` scope.

        Raises:
            MissingAuthenticationError: If no token is available.
        """
        return self._client.post(
            self.path,
            {"broadcaster_id": broadcaster_id},
            token=self._client.get_token(token),
        )
