"""Helix ``/streams`` endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from twitch_helix.paginator import Paginator
from twitch_helix.resources.base import Resource
from twitch_helix.result import Result
from twitch_helix.url import ParamValue


class Streams(Resource):
    path = "streams"

    def get_streams(
        self,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        """List live streams, most viewers first.

        Filters (``user_id``, ``user_login``, ``game_id``, ``community_id``,
        ``language``) accept up to 100 values each and are sent as repeated
        keys.
        """
        return self._client.get(self.path, parameters, paginator)

    def get_streams_by_user_id(
        self,
        user_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(self._merge(parameters, user_id=user_id), paginator)

    def get_streams_by_user_ids(
        self,
        user_ids: Sequence[int | str],
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(self._merge(parameters, user_id=list(user_ids)), paginator)

    def get_streams_by_user_name(
        self,
        user_login: str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(self._merge(parameters, user_login=user_login), paginator)

    def get_streams_by_user_names(
        self,
        user_logins: Sequence[str],
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(
            self._merge(parameters, user_login=list(user_logins)), paginator
        )

    def get_streams_by_game(
        self,
        game_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(self._merge(parameters, game_id=game_id), paginator)

    def get_streams_by_games(
        self,
        game_ids: Sequence[int | str],
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(self._merge(parameters, game_id=list(game_ids)), paginator)

    def get_streams_by_community(
        self,
        community_id: str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(self._merge(parameters, community_id=community_id), paginator)

    def get_streams_by_communities(
        self,
        community_ids: Sequence[str],
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_streams(
            self._merge(parameters, community_id=list(community_ids)), paginator
        )

    def get_streams_metadata(
        self,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        """List game-specific metadata (Overwatch, Hearthstone) of live streams."""
        return self._client.get(f"{self.path}/metadata", parameters, paginator)
