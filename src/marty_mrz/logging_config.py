"""
Logging configuration for applications embedding the MRZ parser.

Parse failures are logged at DEBUG with the error code, field and position of
the raised ``MRZException`` attached to the record; the JSON formatter emits
them as an ``mrz_error`` object.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from opentelemetry import trace

from marty_mrz.exceptions import MRZException

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(service_name)s] - [%(name)s] - %(message)s"

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

DEFAULT_LOG_LEVEL = "INFO"
LOG_OFF_LEVEL = "OFF"

# LogRecord attributes set by MRZParser.parse on failure
MRZ_RECORD_FIELDS = {
    "mrz_error_code": "error_code",
    "mrz_field": "field_name",
    "mrz_position": "position",
}


def mrz_error_details(record: logging.LogRecord) -> dict[str, Any] | None:
    """
    Extract MRZ failure details from a log record.

    Attributes attached by the parser take precedence; otherwise an
    ``MRZException`` in ``exc_info`` (``logger.exception`` in the caller) is used.
    """
    if hasattr(record, "mrz_error_code"):
        return {key: getattr(record, attr, None) for attr, key in MRZ_RECORD_FIELDS.items()}

    exc = record.exc_info[1] if record.exc_info else None
    if isinstance(exc, MRZException):
        return {
            "error_code": exc.error_code.value,
            "field_name": exc.field_name,
            "position": exc.position,
        }
    return None


class ServiceNameFilter(logging.Filter):
    """Filter to inject service name into log records."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name
        return True


class TraceContextFilter(logging.Filter):
    """Filter to inject the active OpenTelemetry trace context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            record.trace_id = format(span_context.trace_id, "032x")
            record.span_id = format(span_context.span_id, "016x")
        else:
            record.trace_id = None
            record.span_id = None
        return True


class MRZJSONFormatter(logging.Formatter):
    """JSON formatter with trace correlation and MRZ failure details."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": getattr(record, "service_name", "unknown"),
            "logger": record.name,
            "message": record.getMessage(),
        }

        if getattr(record, "trace_id", None):
            log_entry["trace_id"] = record.trace_id
            log_entry["span_id"] = record.span_id

        details = mrz_error_details(record)
        if details is not None:
            log_entry["mrz_error"] = details

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def _resolve_level(level_name: str) -> int:
    if level_name == LOG_OFF_LEVEL:
        return logging.CRITICAL + 1
    return LOG_LEVELS.get(level_name, logging.INFO)


def setup_logging(
    service_name: str = "marty-mrz",
    log_level_env_var: str = "LOG_LEVEL",
    log_format_env_var: str = "LOG_FORMAT",
    stream: TextIO | None = None,
) -> logging.Handler | None:
    """
    Configure root logging for an application using the parser.

    Args:
        service_name: Name of the service for log identification
        log_level_env_var: Environment variable to read the log level from
        log_format_env_var: Environment variable to read the log format from
            ("json" selects the JSON formatter)
        stream: Output stream, stdout by default

    Returns:
        The installed handler, or None when logging is turned off
    """
    level_name = os.environ.get(log_level_env_var, DEFAULT_LOG_LEVEL).upper()
    log_format = os.environ.get(log_format_env_var, DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(_resolve_level(level_name))

    if level_name == LOG_OFF_LEVEL:
        return None

    handler = logging.StreamHandler(stream or sys.stdout)
    if log_format.lower() == "json":
        handler.setFormatter(MRZJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(log_format))
    handler.addFilter(ServiceNameFilter(service_name))
    handler.addFilter(TraceContextFilter())
    root_logger.addHandler(handler)
    return handler
