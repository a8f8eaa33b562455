"""Logging setup for the FARS package and its command-line interface."""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional, Union

# LogRecord attributes that are not caller-supplied ``extra=`` fields.
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed through ``extra=`` (``year``, ``state``, ``path`` …) are
    merged into the payload so warnings about a particular year or state
    can be filtered downstream.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> logging.Handler:
    """Attach one stream handler to the ``fars`` package logger.

    Calling it again replaces the handler installed by the previous call,
    so the CLI can be invoked repeatedly in one process (tests).

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of plain text.
        stream: Target stream; ``sys.stderr`` when ``None``.

    Returns:
        The installed handler.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._fars_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
