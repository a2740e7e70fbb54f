from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest

from solar_telemetry.logging_setup import JsonFormatter, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.makeLogRecord(
        {
            "name": "solar_telemetry.feed",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "Telemetry feed started.",
            "event": "telemetry.feed_started",
            "interval_s": 2.0,
        }
    )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Telemetry feed started."
    assert payload["level"] == "INFO"
    assert payload["logger"] == "solar_telemetry.feed"
    assert payload["event"] == "telemetry.feed_started"
    assert payload["interval_s"] == 2.0
    assert "msg" not in payload


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_json_stream() -> None:
    stream = io.StringIO()
    setup_logging("debug", json_output=True, stream=stream)

    logging.getLogger("solar_telemetry.test").debug("hello", extra={"event": "test.hello"})

    line = stream.getvalue().strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "test.hello"
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_plain_replaces_handlers() -> None:
    stream = io.StringIO()
    handler = setup_logging(logging.WARNING, stream=stream)

    logging.getLogger("solar_telemetry.test").warning("careful")

    assert logging.getLogger().handlers == [handler]
    assert "WARNING solar_telemetry.test: careful" in stream.getvalue()
