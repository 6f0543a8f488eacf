"""Logging setup: plain text for development, JSON lines for production."""

import json
import logging
from datetime import datetime, timezone

# extra= fields copied into JSON log lines when present
EXTRA_FIELDS = (
    "path", "method", "page", "status_code", "reason", "url",
    "item_count", "kind", "error_type",
)


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger.

    Safe to call more than once: the handler installed by a previous call is
    replaced rather than duplicated.
    """
    handler = logging.StreamHandler()
    handler.set_name("nad-balance")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == handler.get_name():
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
