"""
AgencyHQ Logging Configuration

Every logger writes one line per event to stdout, either as JSON (default,
for log shippers) or as coloured text for local work. Context is passed as
keyword arguments:

    db_logger.error("Error loading calendar data", error=e, screen="calendar")
"""
import json
import logging
import os
import sys
import time
import traceback
from datetime import datetime, timezone
from functools import wraps
from typing import Dict, Optional

LOG_LEVEL = os.environ.get("AGENCYHQ_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("AGENCYHQ_LOG_FORMAT", "json")  # json or text

_loggers: Dict[str, "StructuredLogger"] = {}


class StructuredLogger:
    """Thin wrapper over a stdlib logger that carries keyword context."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(StructuredFormatter() if LOG_FORMAT == "json" else TextFormatter())
            self.logger.addHandler(handler)

    def _log(self, level: int, message: str, context: dict):
        self.logger.log(level, message, extra={"context": context})

    def debug(self, message: str, **context):
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context):
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context):
        self._log(logging.WARNING, message, context)

    def error(self, message: str, error: Optional[Exception] = None, **context):
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
            context.setdefault("traceback", traceback.format_exc())
        self._log(logging.ERROR, message, context)


class StructuredFormatter(logging.Formatter):
    """One JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "context", {}))
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Short coloured lines for a terminal"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    DIM = "\033[90m"
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        clock = time.strftime("%H:%M:%S", time.localtime(record.created))
        line = f"{color}{clock} {record.levelname:<7}{self.RESET} {record.name}: {record.getMessage()}"

        context = {k: v for k, v in getattr(record, "context", {}).items() if k != "traceback"}
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            line = f"{line} {self.DIM}{pairs}{self.RESET}"
        return line


def timed(logger: StructuredLogger):
    """Log how long a view builder took (debug) or that it raised (error)."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{func.__qualname__} failed",
                    error=e,
                    view=func.__qualname__,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                raise
            logger.debug(
                f"{func.__qualname__} built",
                view=func.__qualname__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return result
        return wrapper

    return decorator


def get_logger(name: str) -> StructuredLogger:
    """Logger named ``agencyhq.<name>``, created once per process."""
    full_name = f"agencyhq.{name}"
    if full_name not in _loggers:
        _loggers[full_name] = StructuredLogger(full_name)
    return _loggers[full_name]


api_logger = get_logger("api")
db_logger = get_logger("db")
views_logger = get_logger("views")
request_logger = get_logger("requests")
