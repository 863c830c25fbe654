"""Helix ``/games`` endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from twitch_helix.paginator import Paginator
from twitch_helix.resources.base import Resource
from twitch_helix.result import Result
from twitch_helix.url import ParamValue


class Games(Resource):
    path = "games"

    def get_games(self, parameters: Mapping[str, ParamValue] | None = None) -> Result:
        return self._client.get(self.path, parameters)

    def get_game_by_id(self, game_id: int | str) -> Result:
        return self.get_games({"id": game_id})

    def get_game_by_name(self, name: str) -> Result:
        return self.get_games({"name": name})

    def get_games_by_ids(self, game_ids: Sequence[int | str]) -> Result:
        return self.get_games({"id": list(game_ids)})

    def get_games_by_names(self, names: Sequence[str]) -> Result:
        return self.get_games({"name": list(names)})

    def get_top_games(
        self,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        """List games sorted by current viewer count."""
        return self._client.get(f"{self.path}/top", parameters, paginator)
