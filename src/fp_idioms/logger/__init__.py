"""Logging setup shared by library code and demos."""

from .logger import logger, resolve_level, setup_logger

__all__ = ["logger", "resolve_level", "setup_logger"]
