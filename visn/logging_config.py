"""
Structured logging configuration for visn.

visn runs inside other projects' test suites, so it only ever configures
its own "visn" logger. Root handlers (pytest's caplog among them) are left
alone, and records still propagate to them unless told otherwise.

Environment Variables:
    VISN_LOG_LEVEL: Level for the "visn" logger (DEBUG, INFO, WARNING, ERROR).
        Unset leaves the logger inheriting its level from the host.
    VISN_LOG_FORMAT: Output format of the visn handler (json, text) - default: json
    VISN_LOG_PROPAGATE: Forward visn records to root handlers (true, false) - default: true

Usage:
    from visn.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="lww-register")
    logger.info("Resolving", extra={"events": 3})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAME = "visn"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Marks handlers installed by setup_logging(), the only ones it removes
_INSTALLED_ATTR = "_visn_installed"


def _formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    return JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
        rename_fields={
            "asctime": "timestamp",
            "name": "logger",
            "levelname": "level",
        },
    )


def setup_logging() -> logging.Logger:
    """
    Attach a stdout handler to the "visn" logger.

    Calling it again replaces the handler it installed before; handlers
    added by anyone else stay in place.

    Returns:
        The configured "visn" logger
    """
    level_name = os.getenv("VISN_LOG_LEVEL")
    log_format = os.getenv("VISN_LOG_FORMAT", "json").lower()
    propagate = os.getenv("VISN_LOG_PROPAGATE", "true").lower() not in ("0", "false", "no")

    logger = logging.getLogger(LOGGER_NAME)
    for installed in [h for h in logger.handlers if getattr(h, _INSTALLED_ATTR, False)]:
        logger.removeHandler(installed)

    handler = logging.StreamHandler(sys.stdout)
    setattr(handler, _INSTALLED_ATTR, True)
    handler.addFilter(TraceIDFilter())
    handler.setFormatter(_formatter(log_format))

    if level_name is not None:
        level = LEVELS.get(level_name.upper(), logging.INFO)
        logger.setLevel(level)
        handler.setLevel(level)
    else:
        handler.setLevel(logging.INFO)

    logger.addHandler(handler)
    logger.propagate = propagate
    return logger


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the engine's trace_id)

    Returns:
        LoggerAdapter with trace_id in extra fields

    Example:
        logger = get_logger(__name__, trace_id="lww-register")
        logger.info("Resolution finished")
        # Output (JSON): {"timestamp": "...", "level": "INFO", "message": "Resolution finished", "trace_id": "lww-register"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
