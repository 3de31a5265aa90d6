"""Unit tests for ConsoleAdapter with real structlog.

Fresh ConsoleAdapter instances per test (bypass the container singleton).
"""

import json
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from webinar_planner.infrastructure.logging.console_adapter import ConsoleAdapter


def _lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.strip().splitlines()]


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_mode_produces_valid_json(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.info("webinar_organized", webinar_id="w-1", seats=100)

        log_data = _lines(captured_output.getvalue())[0]
        assert log_data["event"] == "webinar_organized"
        assert log_data["webinar_id"] == "w-1"
        assert log_data["seats"] == 100
        assert log_data["level"] == "info"
        assert "timestamp" in log_data

    def test_level_filtering(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True, level="WARNING")
            adapter.debug("debug_event")
            adapter.info("info_event")
            adapter.warning("warning_event")
            adapter.critical("critical_event")

        events = [line["event"] for line in _lines(captured_output.getvalue())]
        assert events == ["warning_event", "critical_event"]

    def test_error_includes_exception_details(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.error("webinar_storage_failed", error=ValueError("disk full"))

        log_data = _lines(captured_output.getvalue())[0]
        assert log_data["error_type"] == "ValueError"
        assert log_data["error_message"] == "disk full"

    def test_bind_adds_context_without_changing_original(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            bound = adapter.bind(trace_id="t-1")
            bound.info("bound_event")
            adapter.info("plain_event")

        first, second = _lines(captured_output.getvalue())
        assert first["trace_id"] == "t-1"
        assert "trace_id" not in second

    def test_console_mode_is_human_readable(self):
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=False)
            adapter.info("readable_event", webinar_id="w-1")

        output = captured_output.getvalue()
        assert "readable_event" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output)
