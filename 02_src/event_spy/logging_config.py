"""Structured logging configuration for the Maven event spy."""

import json
import logging
import logging.config
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path

from .config import SpyConfig

SPY_LOGGER = "event_spy"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Handlers attach the event kind they were processing
        if hasattr(record, "event_kind"):
            log_data["event_kind"] = record.event_kind

        return json.dumps(log_data)


def setup_logging(config: SpyConfig) -> None:
    """
    Apply the log settings of the spy to the ``event_spy`` logger.

    Records always go to the console as JSON lines. When ``config.log_file``
    is set they are also written to a rotating file.

    Args:
        config: Spy settings providing ``log_level`` and ``log_file``.
    """
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            # stdout belongs to the build
            "stream": "ext://sys.stderr",
        },
    }

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_path),
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "json",
            "encoding": "utf-8",
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "event_spy.logging_config.JSONFormatter",
            },
        },
        "handlers": handlers,
        "loggers": {
            SPY_LOGGER: {
                "level": config.log_level,
                "handlers": list(handlers),
                "propagate": True,
            },
        },
    }

    logging.config.dictConfig(logging_config)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
