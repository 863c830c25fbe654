"""Immutable credential pair carried by a :class:`~twitch_helix.client.HelixClient`."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Client ID and optional OAuth token for Helix requests.

    Instances are frozen.  Changing a credential produces a new value via
    :meth:`replace`; the client rebinds it rather than mutating shared state.
    Empty strings are treated as unset by the client.
    """

    model_config = ConfigDict(frozen=True)

    client_id: Optional[str] = None
    token: Optional[str] = Field(default=None, repr=False)

    def replace(self, **changes: Optional[str]) -> Credentials:
        return self.model_copy(update=changes)
