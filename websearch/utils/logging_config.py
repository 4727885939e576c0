"""Opt-in console logging for the ``websearch`` loggers.

The library only emits records; nothing here runs unless the caller asks.
``setup_logging`` attaches a single handler to the ``websearch`` logger and
leaves the root logger, and any handlers the host application owns, alone.
"""

import json
import logging
import sys
from typing import IO, Any, Optional

from websearch.utils.config import get_settings

LIBRARY_LOGGER = "websearch"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``extra_fields`` merged in."""

    def __init__(self, app_name: Optional[str] = None, environment: Optional[str] = None) -> None:
        super().__init__()
        self.app_name = app_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with log data
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if self.app_name:
            log_data["app_name"] = self.app_name
        if self.environment:
            log_data["environment"] = self.environment

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # The client attaches query, status_code and results here
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data)


class StandardFormatter(logging.Formatter):
    """Plain text: ``[time] LEVEL - logger - message``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(
    level: Optional[str] = None,
    use_json: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Send ``websearch`` log records to a console stream.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level name; defaults to LOG_LEVEL from settings
        use_json: If True, use JSON format. If False, use standard text format.
        stream: Stream to write to; defaults to stdout

    Returns:
        The installed handler
    """
    settings = get_settings()
    log_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    reset_logging()

    handler = _ConsoleHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    if use_json:
        handler.setFormatter(JsonFormatter(settings.APP_NAME, settings.ENVIRONMENT))
    else:
        handler.setFormatter(StandardFormatter())

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(log_level)
    library_logger.addHandler(handler)

    library_logger.debug(
        "Logging configured: level=%s, format=%s",
        logging.getLevelName(log_level),
        "json" if use_json else "standard",
    )
    return handler


def reset_logging() -> None:
    """Remove the handler installed by setup_logging and clear the level."""
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in [h for h in library_logger.handlers if isinstance(h, _ConsoleHandler)]:
        library_logger.removeHandler(handler)
        handler.close()
    library_logger.setLevel(logging.NOTSET)
