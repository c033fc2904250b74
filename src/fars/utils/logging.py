"""Centralized JSON formatter and handler setup for structured logging."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Union

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload, so calls such as
    ``logger.warning("invalid year: 2012", extra={"year": 2012})`` can be
    filtered by year downstream.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects (Paths, numpy ints)
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
) -> logging.Logger:
    """Attach a single stderr handler to the ``fars`` package logger.

    Library modules only ever call ``logging.getLogger(__name__)``; this
    helper is for notebooks and scripts that want the warnings and notices
    emitted by the toolkit to be visible.  Calling it again replaces the
    previously installed handler rather than stacking a second one.

    Args:
        level: Logging level name or number.
        json_format: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    pkg_logger = logging.getLogger("fars")
    pkg_logger.setLevel(level)

    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_fars_handler", False):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT)
    )
    handler._fars_handler = True
    pkg_logger.addHandler(handler)
    return pkg_logger
