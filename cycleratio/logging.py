"""Centralized logging configuration for cycleratio.

Every module obtains its logger through `get_logger(__name__)`; all of them
hang below the package logger "cycleratio", which owns the only handler.
"""

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "cycleratio"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package logger has its handler attached
_ROOT_LOGGER_CONFIGURED = False


def _as_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return resolved
    return level


def setup_root_logger(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the package logger.

    Calling it again after the first successful call does nothing; use
    `reset_logging()` first to reconfigure.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_as_level(level))
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees our records
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the package configuration.

    Args:
        name: Logger name, normally the calling module's __name__.

    Returns:
        The logger. Its own level is left at NOTSET so that the package
        logger decides what gets through.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the package logger and of its handlers.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
    """
    setup_root_logger()
    numeric = _as_level(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric)
    for handler in package_logger.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    """Show per-round solver progress."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
