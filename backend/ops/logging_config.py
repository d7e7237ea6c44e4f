"""
Logging setup for the Stockroom backend.

settings.py calls get_logging_config(DEBUG) and assigns the result to
LOGGING. Output goes to stdout either as JSON lines (JsonFormatter) or
as a one-line console format for local work.

Environment variables:
- LOG_FORMAT: "json" or "console" (default: console when DEBUG, else json)
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: DEBUG when DEBUG, else INFO)

Application code logs with ``logging.getLogger(__name__)`` and passes
structured fields through ``extra=``.
"""
import json
import logging
import os
from datetime import datetime, timezone

APP_LOGGERS = ("accounts", "employees", "inventory", "ops")

# extra= keys whose values never reach the log stream
REDACTED_KEYS = frozenset({"password", "token", "authorization", "signing_key"})

# Attributes every LogRecord carries; anything else came in through extra=.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _logger(level: str, handler: str = "console") -> dict:
    return {"handlers": [handler], "level": level, "propagate": False}


def get_logging_config(debug: bool = False) -> dict:
    level = os.environ.get("LOG_LEVEL", "DEBUG" if debug else "INFO")
    fmt = os.environ.get("LOG_FORMAT", "console" if debug else "json")

    formatters = {
        "json": {"()": "ops.logging_config.JsonFormatter"},
        "console": {"format": "[{asctime}] {levelname} {name} {message}", "style": "{"},
    }
    if fmt not in formatters:
        fmt = "json"

    loggers = {
        "django": _logger(level),
        "django.request": _logger(level if debug else "ERROR"),
        # SQL echo only while debugging
        "django.db.backends": _logger("DEBUG", "console") if debug else _logger("INFO", "null"),
    }
    loggers.update({name: _logger(level) for name in APP_LOGGERS})

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {fmt: formatters[fmt]},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": fmt,
                "stream": "ext://sys.stdout",
            },
            "null": {"class": "logging.NullHandler"},
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": loggers,
    }


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: timestamp (UTC ISO 8601), level, logger, message, location,
    exception (when present) and extra. Values under REDACTED_KEYS are
    replaced with "***"; values json cannot encode are stringified.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {"file": record.pathname, "line": record.lineno, "function": record.funcName},
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extra = {
            key: _clean(key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
        }
        if extra:
            entry["extra"] = extra

        return json.dumps(entry)


def _clean(key: str, value):
    if key.lower() in REDACTED_KEYS:
        return "***"
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value
