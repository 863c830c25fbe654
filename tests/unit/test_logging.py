"""Unit tests for the structured logging configuration.

Verifies that ``configure_logging()`` produces well-formed JSON, redacts
secrets, and that the client's request events flow through it.
"""

from __future__ import annotations

import json
import logging
from io import StringIO
from typing import Any

import httpx
import pytest
import respx
import structlog

from tests.factories.helix import HELIX_HOST, TEST_TOKEN
from twitch_helix.client import HelixClient
from twitch_helix.config.settings import Settings
from twitch_helix.core.logging_config import configure_logging

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _capture(log_level: str, emit: Any) -> list[dict[str, Any]]:
    """Configure logging, run *emit*, and return the JSON records written.

    The root handler's stream is swapped for a ``StringIO`` buffer for the
    duration of *emit*.
    """
    configure_logging(log_level)

    buffer = StringIO()
    root = logging.getLogger()
    original_streams = []
    for handler in root.handlers:
        if hasattr(handler, "stream"):
            original_streams.append((handler, handler.stream))
            handler.stream = buffer

    try:
        emit()
    finally:
        for handler, stream in original_streams:
            handler.flush()
            handler.stream = stream

    lines = [line for line in buffer.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


def _find(records: list[dict[str, Any]], event: str) -> dict[str, Any]:
    target = next((r for r in records if r.get("event") == event), None)
    assert target is not None, f"No record with event={event!r} in {records!r}"
    return target


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestConfigureLoggingJson:
    """Verify INFO-level (production) JSON output."""

    def test_stdlib_record_rendered_as_json(self) -> None:
        records = _capture("INFO", lambda: logging.getLogger("test.logging").info("hello_world"))

        target = _find(records, "hello_world")
        assert target["level"] == "info"
        assert target["logger"] == "test.logging"
        assert "timestamp" in target

    def test_structlog_record_rendered_as_json(self) -> None:
        records = _capture(
            "INFO",
            lambda: structlog.get_logger("test.structlog").info("bound_event", path="streams"),
        )

        assert _find(records, "bound_event")["path"] == "streams"

    def test_debug_records_filtered_at_info(self) -> None:
        records = _capture("INFO", lambda: logging.getLogger("test.logging").debug("hidden"))

        assert all(r.get("event") != "hidden" for r in records)


class TestRedaction:
    def test_secret_keys_redacted(self) -> None:
        records = _capture(
            "INFO",
            lambda: structlog.get_logger("test.redact").info(
                "secret_event", token=TEST_TOKEN, client_id="public-id"
            ),
        )

        target = _find(records, "secret_event")
        assert target["token"] == "[REDACTED]"
        assert target["client_id"] == "public-id"

    def test_nested_header_dict_redacted(self) -> None:
        headers = {"Authorization": f"Bearer {TEST_TOKEN}", "Client-ID": "public-id"}
        records = _capture(
            "INFO",
            lambda: structlog.get_logger("test.redact").info("headers_event", headers=headers),
        )

        target = _find(records, "headers_event")
        assert target["headers"]["Authorization"] == "[REDACTED]"
        assert target["headers"]["Client-ID"] == "public-id"
        assert headers["Authorization"] == f"Bearer {TEST_TOKEN}"


class TestClientLogging:
    @respx.mock
    def test_failed_request_logged_as_warning(self) -> None:
        respx.get(host=HELIX_HOST, path="/helix/streams").mock(
            return_value=httpx.Response(503, json={"message": "unavailable"})
        )
        helix = HelixClient(settings=Settings(_env_file=None, client_id="cid"))

        records = _capture("INFO", lambda: helix.get("streams", token=TEST_TOKEN))

        target = _find(records, "helix.request_failed")
        assert target["level"] == "warning"
        assert target["status"] == 503
        assert target["path"] == "streams"
        assert TEST_TOKEN not in json.dumps(records)


class TestUnconfiguredHost:
    """Without ``configure_logging()`` the client writes nothing anywhere."""

    @respx.mock
    def test_queries_print_nothing(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        structlog.reset_defaults()
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        previous_level = root.level
        root.setLevel(logging.WARNING)
        respx.get(host=HELIX_HOST, path="/helix/streams").mock(
            return_value=httpx.Response(200, json={"data": []})
        )
        respx.get(host=HELIX_HOST, path="/helix/users").mock(
            return_value=httpx.Response(503, json={"message": "unavailable"})
        )
        helix = HelixClient(settings=Settings(_env_file=None, client_id="cid"))

        try:
            assert helix.get("streams").success is True
            assert helix.get("users").success is False
        finally:
            root.setLevel(previous_level)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestLogLevelFromSettings:
    def test_level_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWITCH_LOG_LEVEL", "warning")

        configure_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_explicit_level_wins_over_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWITCH_LOG_LEVEL", "ERROR")

        configure_logging("INFO")

        assert logging.getLogger().level == logging.INFO


class TestConfigureLoggingIdempotent:
    def test_calling_twice_does_not_duplicate_handlers(self) -> None:
        configure_logging("INFO")
        configure_logging("INFO")

        assert len(logging.getLogger().handlers) == 1

    def test_transport_loggers_silenced_outside_debug(self) -> None:
        configure_logging("INFO")

        assert logging.getLogger("httpx").level == logging.WARNING
