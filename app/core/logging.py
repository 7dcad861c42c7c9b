#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Logging setup — called once from the application lifespan.

``text`` is the human-readable development format; ``json`` emits one object
per line for log shippers.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone


_EXTRA_FIELDS = ("path", "elapsed_ms", "version", "language")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


# -----------------------------------------------------------------------------

class JSONFormatter(logging.Formatter):
    """Format records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level":     record.levelname,
            "logger":    record.name,
            "message":   record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                entry[key] = val
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


# -----------------------------------------------------------------------------

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Install the root handler.  Repeated calls replace the previous one."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


# -----------------------------------------------------------------------------
