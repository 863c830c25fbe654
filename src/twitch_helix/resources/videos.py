"""Helix ``/videos`` endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from twitch_helix.paginator import Paginator
from twitch_helix.resources.base import Resource
from twitch_helix.result import Result
from twitch_helix.url import ParamValue


class Videos(Resource):
    path = "videos"

    def get_videos(
        self,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        """List videos.  Exactly one of ``id``, ``user_id`` or ``game_id`` is expected."""
        return self._client.get(self.path, parameters, paginator)

    def get_videos_by_id(
        self,
        video_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
    ) -> Result:
        return self.get_videos(self._merge(parameters, id=video_id))

    def get_videos_by_ids(
        self,
        video_ids: Sequence[int | str],
        parameters: Mapping[str, ParamValue] | None = None,
    ) -> Result:
        return self.get_videos(self._merge(parameters, id=list(video_ids)))

    def get_videos_by_user(
        self,
        user_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_videos(self._merge(parameters, user_id=user_id), paginator)

    def get_videos_by_game(
        self,
        game_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_videos(self._merge(parameters, game_id=game_id), paginator)
