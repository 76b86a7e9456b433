"""
Central logging configuration.

Every record carries the request id set by the middleware plus the service
name and environment, so lines from several deployments can share one sink.
Structured fields passed through ``extra=`` (story_id, contact_id, status...)
are rendered as JSON keys in production and as trailing ``key=value`` pairs
in development.

Usage:
    from athlete_minds.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Story approved", extra={"story_id": story.id})
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional, Tuple

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

SERVICE_NAME = "athlete-minds"

# Stamped onto every record by the filters below
_CONTEXT_ATTRS = ("request_id", "service", "env")

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"} | set(_CONTEXT_ATTRS)

_QUIET_LOGGERS = ("uvicorn.access",)


def get_request_id() -> Optional[str]:
    """Get the current request ID from context, if set."""
    return request_id_var.get()


class RequestIdFilter(logging.Filter):
    """Stamp each record with the request id from context ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"  # type: ignore[attr-defined]
        return True


class ServiceContextFilter(logging.Filter):
    """Stamp each record with the service name and deployment environment."""

    def __init__(self, service: str = SERVICE_NAME, environment: str = "development"):
        super().__init__()
        self.service = service
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service  # type: ignore[attr-defined]
        record.env = self.environment  # type: ignore[attr-defined]
        return True


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    """Fields a caller attached with ``extra=``, in insertion order."""
    for key, value in record.__dict__.items():
        if key not in _RESERVED_ATTRS and value is not None:
            yield key, value


class JsonFormatter(logging.Formatter):
    """One JSON document per line for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in _CONTEXT_ATTRS:
            value = getattr(record, attr, None)
            if value and value != "-":
                entry[attr] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in _extra_fields(record):
            try:
                json.dumps(value)
                entry[key] = value
            except (TypeError, ValueError):
                entry[key] = str(value)

        return json.dumps(entry)


class DevFormatter(logging.Formatter):
    """Compact single line with structured fields appended as key=value."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)-5s [%(name)s] req=%(request_id)s %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "request_id"):
            record.request_id = "-"  # type: ignore[attr-defined]
        line = super().format(record)
        fields = " ".join(f"{key}={value}" for key, value in _extra_fields(record))
        if not fields:
            return line
        # Keep a traceback below the fields rather than in front of them
        head, sep, tail = line.partition("\n")
        return f"{head} | {fields}{sep}{tail}"


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
    service: str = SERVICE_NAME,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        environment: 'production' switches to JSON output; also stamped as ``env``
        debug: Force DEBUG level regardless of log_level
        service: Name stamped on every record
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers so reloads do not duplicate output
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(ServiceContextFilter(service, environment))
    handler.setFormatter(JsonFormatter() if environment == "production" else DevFormatter())
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; records pick up the request id automatically."""
    return logging.getLogger(name)
