"""Helix ``/users/follows`` endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from twitch_helix.paginator import Paginator
from twitch_helix.resources.base import Resource
from twitch_helix.result import Result
from twitch_helix.url import ParamValue


class Follows(Resource):
    path = "users/follows"

    def get_follows(
        self,
        from_id: int | str | None = None,
        to_id: int | str | None = None,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        """List follow relationships.

        At least one of *from_id* (the following user) and *to_id* (the
        followed user) is expected by Helix; both may be combined to check a
        single relationship.
        """
        return self._client.get(
            self.path,
            self._merge(parameters, from_id=from_id, to_id=to_id),
            paginator,
        )

    def get_follows_from(
        self,
        from_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_follows(from_id=from_id, parameters=parameters, paginator=paginator)

    def get_follows_to(
        self,
        to_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
        paginator: Paginator | None = None,
    ) -> Result:
        return self.get_follows(to_id=to_id, parameters=parameters, paginator=paginator)
