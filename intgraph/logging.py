"""Logging for intgraph.

All package loggers hang off a single ``intgraph`` logger that owns one
handler writing to stderr; stdout is reserved for service output, which may
be binary. The starting level is INFO unless ``INTGRAPH_LOG_LEVEL`` names
another level (``DEBUG``, ``WARNING``, ...). The CLI maps its ``--verbose``
and ``--quiet`` flags onto a level with `level_from_flags`.
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "intgraph"
LOG_LEVEL_ENV = "INTGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Return the log level selected by CLI verbosity flags.

    ``verbose`` wins over ``quiet``; neither gives INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``intgraph`` logger once.

    Later calls do nothing until `reset_logging` runs.

    Args:
        level: Starting level; defaults to ``INTGRAPH_LOG_LEVEL`` or INFO.
        format_string: Record format; defaults to `DEFAULT_FORMAT`.
        handler: Handler to install instead of a stderr ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = _level_from_env(logging.INFO)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, configuring the package logger if needed.

    Child loggers carry no level or handlers of their own.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the package handler and level so setup can run again."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
