"""Structured Logging: JSON formatter fields and extras."""

import json
import logging

from usersvc.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "usersvc.test", logging.WARNING, __file__, 1, "user %s missing", ("abc",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))

    assert log["level"] == "WARNING"
    assert log["logger"] == "usersvc.test"
    assert log["message"] == "user abc missing"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(user_id="abc", error_code="RESOURCE_NOT_FOUND", skipped=2, secret="x"),
    ))

    assert log["user_id"] == "abc"
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["skipped"] == 2
    assert "secret" not in log


def test_json_formatter_drops_none_extras():
    log = json.loads(JSONFormatter().format(_record(user_id=None)))

    assert "user_id" not in log
