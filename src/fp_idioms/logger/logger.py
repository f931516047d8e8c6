"""Global logger configuration for the fp-idioms project."""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "resolve_level"]

DEFAULT_LEVEL = "INFO"


def resolve_level(level: str) -> int:
    """
    Translate a level name into a logging level number.

    Unknown names (e.g. LOG_LEVEL=verbose) fall back to INFO instead of
    breaking every import of this module.
    """
    levels = logging.getLevelNamesMapping()
    return levels.get(level.strip().upper(), levels[DEFAULT_LEVEL])


def _own_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def setup_logger(
    name: str = "fp_idioms",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Stdout is reserved for demo output, so records go to stderr.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not _own_handlers(logger):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


logger = setup_logger()
