"""Logging setup for the ``sprig`` logger tree.

Modules log through ``logging.getLogger("sprig.<area>")`` and attach an
``event`` name plus structured fields via ``extra``.  ``configure_logging``
installs a single handler on the ``sprig`` logger that renders those
records either as one JSON object per line or as plain text.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

from sprig.errors import ConfigurationError

LOG_FORMATS = ("json", "text")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)

_HANDLER_NAME = "sprig"


class JSONFormatter(logging.Formatter):
    """Render a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "time": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def level_number(level: str) -> int | None:
    """Numeric value of a level name like ``"info"``, or None if unknown."""
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else None


def configure_logging(
    level: str = "info",
    fmt: str = "json",
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install the sprig handler on the ``sprig`` logger.

    Idempotent: a handler installed by an earlier call is replaced, so
    calling this twice never duplicates output.
    """
    if fmt not in LOG_FORMATS:
        msg = f"Unknown log format {fmt!r}; expected one of {', '.join(LOG_FORMATS)}"
        raise ConfigurationError(msg)

    numeric = level_number(level)
    if numeric is None:
        msg = f"Unknown log level {level!r}"
        raise ConfigurationError(msg)

    logger = logging.getLogger("sprig")
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
