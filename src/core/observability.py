"""Structured Logging — JSON formatter and setup for ledger diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (asset, amount, error_code, epoch, sender) surfaced when present
    - JSON format for collectors, human-readable for local runs

The value primitive itself never configures logging; the embedding
process calls setup_logging once on startup.
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("asset", "amount", "error_code", "epoch", "sender")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging; returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
