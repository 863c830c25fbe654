"""Factory Boy factories for Helix test payloads.

Available factories
-------------------
StreamFactory       - ``GET /streams`` item dict
HelixUserFactory    - ``GET /users`` item dict
helix_page          - list response body with optional pagination cursor
"""

from __future__ import annotations

from tests.factories.helix import (
    HELIX_HOST,
    TEST_CLIENT_ID,
    TEST_TOKEN,
    HelixUserFactory,
    StreamFactory,
    helix_page,
)

__all__ = [
    "HELIX_HOST",
    "TEST_CLIENT_ID",
    "TEST_TOKEN",
    "HelixUserFactory",
    "StreamFactory",
    "helix_page",
]
