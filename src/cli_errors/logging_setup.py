"""Logging configuration for cli-errors."""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "WARNING", format_str: str | None = None) -> None:
    """Send ``cli_errors`` log records to stderr at *level*.

    Only the package logger is touched so that the host tool keeps
    control of the root logger.

    Raises
    ------
    ValueError
        When *level* is not a known logging level name.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_str or DEFAULT_FORMAT))

    package_logger = logging.getLogger("cli_errors")
    package_logger.setLevel(numeric_level)
    for existing in package_logger.handlers[:]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.propagate = False
