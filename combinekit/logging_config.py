"""
Logging for combinekit.

The library only creates loggers; it never configures handlers on import.
Diagnostics go to the "combinekit.diagnostics" logger at WARNING level with
a composer_id extra field, so messages from different composers can be told
apart.

setup_logging() is for applications and the CLI.

Environment Variables:
    COMBINEKIT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    COMBINEKIT_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from combinekit.logging_config import setup_logging

    setup_logging()
    reducer = combine_reducers({...})
    # {"timestamp": "...", "level": "WARNING", "message": "Unexpected key ...", "composer_id": "3f9a1c2e"}
"""

import logging
import os
import sys
from typing import Callable, Optional

from pythonjsonlogger.json import JsonFormatter

DIAGNOSTICS_LOGGER = "combinekit.diagnostics"


def setup_logging(stream=None) -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - COMBINEKIT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - COMBINEKIT_LOG_FORMAT: json, text (default: json)
    """
    log_level = os.getenv("COMBINEKIT_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("COMBINEKIT_LOG_FORMAT", "json").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.addFilter(ComposerIDFilter())

    if log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(composer_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [composer_id=%(composer_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, composer_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger carrying a composer_id for correlation.

    Args:
        name: Logger name
        composer_id: Identifier of the composer instance emitting records

    Returns:
        LoggerAdapter with composer_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"composer_id": composer_id or "N/A"})


def diagnostic_reporter(composer_id: Optional[str] = None) -> Callable[[str], None]:
    """Return a sink that logs each diagnostic message as a warning."""
    logger = get_logger(DIAGNOSTICS_LOGGER, composer_id=composer_id)

    def report(message: str) -> None:
        logger.warning(message)

    return report


class ComposerIDFilter(logging.Filter):
    """
    Logging filter that adds composer_id to all log records.

    Records from other libraries have no composer_id; the formatters need one.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "composer_id"):
            record.composer_id = "N/A"  # type: ignore
        return True
