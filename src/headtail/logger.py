"""Logger configuration for the headtail package."""

import logging
import sys

from .config import env_log_level

__all__ = ["logger", "setup_logger"]

PACKAGE_LOGGER = "headtail"


def _resolve_level(level: str | None) -> int:
    if level is None:
        return env_log_level()
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Only the package logger gets a handler. ``headtail.<module>`` children
    propagate to it, so one handler serves the whole package.

    Args:
        name: Logger name (``headtail`` or a ``headtail.<module>`` child)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to WARNING
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    if name != PACKAGE_LOGGER and name.startswith(PACKAGE_LOGGER + "."):
        setup_logger(PACKAGE_LOGGER)
        return logging.getLogger(name)

    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
        logger.propagate = False

    return logger


logger = setup_logger()
