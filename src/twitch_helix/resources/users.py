"""Helix ``/users`` endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from twitch_helix.resources.base import Resource
from twitch_helix.result import Result
from twitch_helix.url import ParamValue


class Users(Resource):
    path = "users"

    def get_authed_user(self, token: str | None = None) -> Result:
        """Return the user the OAuth token belongs to.

        Helix answers ``GET /users`` without ``id``/``login`` filters with the
        token's owner, so a token is mandatory here.

        Raises:
            MissingAuthenticationError: If no token is available.
        """
        return self._client.get(self.path, token=self._client.get_token(token))

    def get_users(self, parameters: Mapping[str, ParamValue] | None = None) -> Result:
        return self._client.get(self.path, parameters)

    def get_user_by_id(
        self,
        user_id: int | str,
        parameters: Mapping[str, ParamValue] | None = None,
    ) -> Result:
        return self.get_users(self._merge(parameters, id=user_id))

    def get_user_by_name(
        self,
        login: str,
        parameters: Mapping[str, ParamValue] | None = None,
    ) -> Result:
        return self.get_users(self._merge(parameters, login=login))

    def update_user(self, description: str, token: str | None = None) -> Result:
        """Set the channel description of the token's owner.

        Requires a user token with the ``user:edit`` scope.  *description* is
        sent unencoded, so pre-encode reserved characters.

        Raises:
            MissingAuthenticationError: If no token is available.
        """
        return self._client.put(
            self.path,
            {"description": description},
            token=self._client.get_token(token),
        )
