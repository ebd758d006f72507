"""
Centralized logging configuration for the job application tracker.

Provides a simple/JSON console setup and a context logger that tags
messages with the job application being worked on.
"""

import json
import logging
import os
import sys
from typing import Optional


# Global debug mode flag - can be set via environment
_GLOBAL_DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"


def set_global_debug_mode(enabled: bool) -> None:
    """Set global debug mode."""
    global _GLOBAL_DEBUG_MODE
    _GLOBAL_DEBUG_MODE = enabled


def is_debug_mode() -> bool:
    """Check if debug mode is enabled globally."""
    return _GLOBAL_DEBUG_MODE


class TrackerLogger:
    """
    Structured logger for tracker operations.

    Adds contextual information like the job application id to all log messages.
    """

    def __init__(
        self,
        name: str,
        job_id: Optional[str] = None,
        debug_mode: Optional[bool] = None
    ):
        """
        Initialize tracker logger.

        Args:
            name: Logger name (usually __name__)
            job_id: Optional job application id for correlation
            debug_mode: If True, enables DEBUG level for this logger.
                       If None, uses global debug mode setting.
        """
        self.logger = logging.getLogger(name)
        self.job_id = job_id

        self._debug_mode = debug_mode if debug_mode is not None else is_debug_mode()

        if self._debug_mode:
            self.logger.setLevel(logging.DEBUG)

    @property
    def level(self) -> int:
        """Get current logging level."""
        return self.logger.level

    def bind(self, job_id: str) -> "TrackerLogger":
        """Return a logger for the same name tagged with another job id."""
        return TrackerLogger(self.logger.name, job_id=job_id, debug_mode=self._debug_mode)

    def _format_message(self, message: str) -> str:
        if self.job_id:
            return f"[job:{self.job_id}] {message}"
        return message

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(self._format_message(message), **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with traceback."""
        self.logger.exception(self._format_message(message), **kwargs)


class JsonFormatter(logging.Formatter):
    """One JSON object per line; message text is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Log format ("simple" or "json")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    if format == "json":
        # JSON format for production (parseable by log aggregators)
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(
    name: str,
    job_id: Optional[str] = None,
    debug_mode: Optional[bool] = None
) -> TrackerLogger:
    """
    Get a tracker logger instance.

    Args:
        name: Logger name (usually __name__)
        job_id: Optional job application id
        debug_mode: If True, enables DEBUG level. If None, uses global setting.

    Returns:
        TrackerLogger instance
    """
    return TrackerLogger(name, job_id, debug_mode)
