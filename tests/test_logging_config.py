"""JSON log formatting."""

import json
import logging

from prophet.logging_config import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("prophet.test", logging.INFO, __file__, 1, "scored %d", (78,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_single_line_json():
    line = JSONFormatter().format(_record())
    entry = json.loads(line)
    assert entry["level"] == "INFO"
    assert entry["logger"] == "prophet.test"
    assert entry["message"] == "scored 78"
    assert "\n" not in line


def test_structured_extras_lifted():
    entry = json.loads(JSONFormatter().format(_record(overall_score=78, latency_ms=12.5, ignored="x")))
    assert entry["overall_score"] == 78
    assert entry["latency_ms"] == 12.5
    assert "ignored" not in entry
