"""Structured JSON logging for Lambda invocations.

One JSON object is written per log line so CloudWatch Logs Insights can
query fields directly. Callers attach fields through ``extra``:
``correlation_id`` is emitted as is and the ``context`` dict is merged
into the top level.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from lambda_api.config import settings


class JSONFormatter(logging.Formatter):
    """Render a log record as a single-line JSON object.

    Always present: ``timestamp`` (UTC, ISO 8601), ``level``, ``logger``
    and ``message``. Exception tracebacks go under ``exception``. DEBUG
    records also carry ``file``, ``line`` and ``function``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id is not None:
            payload["correlation_id"] = correlation_id

        payload.update(getattr(record, "context", None) or {})

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        if record.levelno == logging.DEBUG:
            payload.update(
                file=record.pathname,
                line=record.lineno,
                function=record.funcName,
            )

        # Raw events and handler values can hold anything
        return json.dumps(payload, default=str)


def configure_logging() -> None:
    """
    Route all logging through a single JSON handler on stdout.

    The Lambda runtime installs its own root handler; it is replaced so
    each record is written once. The level comes from ``LOG_LEVEL``.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    stream = logging.StreamHandler(sys.stdout)
    stream.setLevel(log_level)
    stream.setFormatter(JSONFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(stream)
    root_logger.setLevel(log_level)

    root_logger.debug(
        "Logging configured",
        extra={"context": {"log_level": settings.log_level}},
    )


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)
