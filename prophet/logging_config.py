"""Structured JSON logging configuration."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Extra record attributes copied into the JSON line when present
STRUCTURED_FIELDS = (
    "latency_ms",
    "model",
    "mime_type",
    "size_bytes",
    "overall_score",
    "ats_score",
    "impact_score",
)


class JSONFormatter(logging.Formatter):
    """Outputs log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        for key in STRUCTURED_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        return json.dumps(log_entry)


def setup_logging(level: str | None = None) -> None:
    """Configure root logger with JSON formatter."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
