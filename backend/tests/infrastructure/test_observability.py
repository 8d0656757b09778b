"""Structured Logging — JSONFormatter output shape."""

import json
import logging

from chirpy.infrastructure.observability import JSONFormatter


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "chirpy.test", logging.WARNING, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record("hello")))
    assert log["level"] == "WARNING"
    assert log["logger"] == "chirpy.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record("x", error_code="CHIRP_TOO_LONG", status_code=400, unrelated="no"),
    ))
    assert log["error_code"] == "CHIRP_TOO_LONG"
    assert log["status_code"] == 400
    assert "unrelated" not in log
