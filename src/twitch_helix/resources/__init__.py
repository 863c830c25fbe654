"""Per-resource helpers built on :class:`~twitch_helix.client.HelixClient`.

Each helper takes a client and returns its :class:`~twitch_helix.result.Result`::

    from twitch_helix import HelixClient
    from twitch_helix.resources import Streams

    streams = Streams(HelixClient(client_id="abc123"))
    result = streams.get_streams_by_games(["33214", "21779"])
"""

from __future__ import annotations

from twitch_helix.resources.base import Resource
from twitch_helix.resources.clips import Clips
from twitch_helix.resources.follows import Follows
from twitch_helix.resources.games import Games
from twitch_helix.resources.streams import Streams
from twitch_helix.resources.users import Users
from twitch_helix.resources.videos import Videos

__all__ = [
    "Resource",
    "Clips",
    "Follows",
    "Games",
    "Streams",
    "Users",
    "Videos",
]
