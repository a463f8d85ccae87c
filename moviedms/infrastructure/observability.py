"""Structured Logging — JSON formatter and setup for the CLI process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (movie_id, line_number, error_code, field_name, path, error)
      surfaced when present; "error" carries a MovieDMSError.to_dict() envelope
    - Logs go to stderr so they never interleave with menu output on stdout

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control
    - setup_logging called once from main(); repeated calls replace the handler
"""

import logging
import json
import sys
from datetime import datetime, timezone

_EXTRA_KEYS: tuple[str, ...] = (
    "movie_id", "line_number", "error_code", "field_name", "path", "error",
)

_HANDLER_NAME = "moviedms"


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
