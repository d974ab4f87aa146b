"""Tests for logging formatters, context injection and configuration."""
from __future__ import annotations

import json
import sys
import logging

import pytest

from content_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    configure_logging,
    get_log_context,
    set_log_context,
    shutdown,
)


def make_record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="content_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    shutdown()
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


class TestJSONFormatter:
    def test_standard_fields(self):
        output = json.loads(JSONFormatter().format(make_record("Resolved node")))

        assert output["level"] == "INFO"
        assert output["logger"] == "content_service.test"
        assert output["message"] == "Resolved node"
        assert output["timestamp"].endswith("Z")

    def test_static_and_extra_fields(self):
        formatter = JSONFormatter(static={"service": "content-service"})

        output = json.loads(formatter.format(make_record(kind="Post", local_id="42")))

        assert output["service"] == "content-service"
        assert output["kind"] == "Post"
        assert output["local_id"] == "42"
        assert "msg" not in output
        assert "lineno" not in output

    def test_exception_on_one_line(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        line = JSONFormatter().format(record)

        assert "\n" not in line
        assert "ValueError: bad" in json.loads(line)["exception"]

    def test_unserializable_values_use_str(self):
        output = json.loads(JSONFormatter().format(make_record(obj=object())))

        assert output["obj"].startswith("<object object")


class TestLogContext:
    def test_set_and_get(self):
        set_log_context(correlation_id="abc")
        set_log_context(operation="viewer")

        assert get_log_context() == {"correlation_id": "abc", "operation": "viewer"}

    def test_clear(self):
        set_log_context(correlation_id="abc")
        clear_log_context()

        assert get_log_context() == {}

    def test_filter_injects_context(self):
        set_log_context(correlation_id="abc")
        record = make_record()

        assert ContextInjectingFilter().filter(record) is True
        assert record.correlation_id == "abc"

    def test_filter_keeps_existing_attributes(self):
        set_log_context(correlation_id="abc")
        record = make_record(correlation_id="explicit")

        ContextInjectingFilter().filter(record)

        assert record.correlation_id == "explicit"


class TestConfigureLogging:
    def test_json_file_output(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "app.jsonl"
        configure_logging(
            log_level="debug",
            file_path=log_file,
            json_logs=True,
            console_enabled=False,
            service_name="content-service",
        )
        set_log_context(correlation_id="req-1")

        logging.getLogger("content_service.test").info("Node resolved", extra={"kind": "Page"})
        shutdown()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        record = next(line for line in lines if line["message"] == "Node resolved")
        assert record["service"] == "content-service"
        assert record["kind"] == "Page"
        assert record["correlation_id"] == "req-1"
        assert logging.getLogger().level == logging.DEBUG

    def test_text_file_output(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "app.log"
        configure_logging(file_path=log_file, json_logs=False, console_enabled=False)

        logging.getLogger("content_service.test").warning("Plain text")
        shutdown()

        assert "WARNING - content_service.test - Plain text" in log_file.read_text()

    def test_shutdown_is_idempotent(self):
        shutdown()
        shutdown()
