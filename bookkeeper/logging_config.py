"""
Logging configuration.

Two output formats are supported:
- console: human-readable lines, the default in development
- json: one JSON object per line, for log aggregation

Both are selected through Settings.LOG_FORMAT and LOG_LEVEL.
"""

import json
import logging
import logging.config
from datetime import datetime, timezone

from bookkeeper.config import Settings, get_settings

# Attributes every LogRecord carries; anything else was passed via extra=
_STANDARD_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "exc_info", "exc_text", "stack_info",
    "message", "taskName",
}


class JsonFormatter(logging.Formatter):
    """
    JSON log formatter for structured logging.

    Outputs JSON lines with consistent fields: timestamp, level,
    logger, message, location, plus exception text and any extra
    fields passed to the logger.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            },
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extras = {}
        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS:
                continue
            try:
                json.dumps(value)
                extras[key] = value
            except (TypeError, ValueError):
                extras[key] = str(value)

        if extras:
            log_entry["extra"] = extras

        return json.dumps(log_entry, default=str)


def get_logging_config(settings: Settings) -> dict:
    """Build a logging.config.dictConfig dictionary from settings."""
    level = settings.LOG_LEVEL.upper()

    if settings.LOG_FORMAT == "json":
        formatter = {"()": "bookkeeper.logging_config.JsonFormatter"}
    else:
        formatter = {
            "format": "[{asctime}] {levelname} {name} {message}",
            "style": "{",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
            },
            "bookkeeper": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            # Statement logging is controlled by SQL_ECHO
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "INFO" if settings.SQL_ECHO else "WARNING",
                "propagate": False,
            },
        },
    }


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the logging configuration. Safe to call more than once."""
    logging.config.dictConfig(get_logging_config(settings or get_settings()))
