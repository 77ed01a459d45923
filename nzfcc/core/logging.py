"""Logging configuration for the NZFCC package."""

from __future__ import annotations

import logging
import sys
import time
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the package logger; calling again only changes the level.

    Logs go to stderr so they never mix with command output on stdout.
    """
    logger = logging.getLogger("nzfcc")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = "nzfcc") -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class LogContext:
    """Logs the start, completion (with duration) or failure of an operation.

    Context keyword arguments are rendered into the start message:

        with LogContext(logger, "generate", snapshot="categories.json"):
            ...
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        self.logger = logger
        self.operation = operation
        self.context = context
        self._started = 0.0

    def _describe(self) -> str:
        if not self.context:
            return self.operation
        fields = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.operation} ({fields})"

    def __enter__(self) -> "LogContext":
        self._started = time.perf_counter()
        self.logger.info(f"Starting {self._describe()}", stacklevel=2)
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: Any) -> bool:
        elapsed = time.perf_counter() - self._started
        if exc_type is not None:
            self.logger.error(f"Failed {self.operation} after {elapsed:.3f}s: {exc_val}", stacklevel=2)
        else:
            self.logger.info(f"Completed {self.operation} in {elapsed:.3f}s", stacklevel=2)
        return False


# Initialize default logger
logger = setup_logging()
