"""Unit tests for the structured logging configuration.

Verifies that ``configure_logging()`` produces well-formed output and that
the ``run_id_var`` context variable is merged into records.
"""

from __future__ import annotations

import json
import logging
from io import StringIO

import structlog

from selector_scraper.core.logging_config import configure_logging, run_id_var


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _capture(log_level: str, emit) -> str:
    """Configure logging, run *emit*, and return what the root handler wrote."""
    configure_logging(log_level)

    buffer = StringIO()
    root = logging.getLogger()
    original_streams = []
    for handler in root.handlers:
        if hasattr(handler, "stream"):
            original_streams.append((handler, handler.stream))
            handler.stream = buffer

    emit()

    for handler, stream in original_streams:
        handler.flush()
        handler.stream = stream

    return buffer.getvalue()


def _records(output: str) -> list[dict]:
    return [json.loads(line) for line in output.strip().splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestConfigureLoggingJson:
    def test_stdlib_record_is_json(self) -> None:
        output = _capture("INFO", lambda: logging.getLogger("test.stdlib").info("hello_stdlib"))
        records = _records(output)
        assert records[0]["event"] == "hello_stdlib"
        assert records[0]["level"] == "info"
        assert records[0]["logger"] == "test.stdlib"
        assert "timestamp" in records[0]

    def test_structlog_record_keeps_fields(self) -> None:
        output = _capture(
            "INFO",
            lambda: structlog.get_logger("test.structlog").info("hello_struct", records=3),
        )
        record = _records(output)[0]
        assert record["event"] == "hello_struct"
        assert record["records"] == 3

    def test_non_ascii_not_escaped(self) -> None:
        output = _capture("INFO", lambda: logging.getLogger("test.utf8").info("設定ファイル"))
        assert "設定ファイル" in output

    def test_level_filtering(self) -> None:
        output = _capture("WARNING", lambda: logging.getLogger("test.level").info("hidden"))
        assert output == ""

    def test_httpx_quietened(self) -> None:
        output = _capture("INFO", lambda: logging.getLogger("httpx").info("HTTP Request"))
        assert output == ""

    def test_idempotent_handlers(self) -> None:
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logging.getLogger().handlers) == 1


class TestRunId:
    def test_run_id_injected(self) -> None:
        def emit() -> None:
            token = run_id_var.set("abc123")
            try:
                logging.getLogger("test.run").info("inside_run")
            finally:
                run_id_var.reset(token)

        record = _records(_capture("INFO", emit))[0]
        assert record["run_id"] == "abc123"

    def test_run_id_absent_outside_run(self) -> None:
        output = _capture("INFO", lambda: logging.getLogger("test.run").info("outside_run"))
        assert "run_id" not in _records(output)[0]


class TestConsoleRenderer:
    def test_debug_is_not_json(self) -> None:
        output = _capture("DEBUG", lambda: logging.getLogger("test.dev").debug("dev_message"))
        assert "dev_message" in output
        first = output.strip().splitlines()[0]
        assert not first.startswith("{")
