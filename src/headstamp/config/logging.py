"""Headstamp logging with a TRACE level and colored output.

This module extends the standard logging module with a custom TRACE level,
a specialized logger class, and a `yachalk`-based formatter.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Final, cast

from yachalk import chalk

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "HEADSTAMP_LOG_LEVEL"


class HeadstampLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level, below DEBUG."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(HeadstampLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_ENV_LEVELS: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        return chalk.blue(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by HEADSTAMP_LOG_LEVEL, or None if unset or unrecognized."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = _ENV_LEVELS.get(name)
    if name and level is None:
        logging.getLogger(__name__).warning("Ignoring %s=%r", LOG_LEVEL_ENV_VAR, name)
    return level


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a log level and colored output.

    If ``level`` is None, the environment is consulted via
    `resolve_env_log_level`. Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace, never stack, handlers across repeated calls
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> HeadstampLogger:
    """Return the `HeadstampLogger` registered under ``name``."""
    return cast("HeadstampLogger", logging.getLogger(name))
