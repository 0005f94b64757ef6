"""
flatenv Logger Module

Usage:
    from flatenv.logger import get_logger, create_logger

    logger = get_logger("flatenv")
    logger.info("Config loaded", keys=12)

    logger = create_logger(name="flatenv", level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (e.g., FLATENV for "flatenv")
"""

import logging
import os
from typing import Dict, Optional

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "flatenv" -> "FLATENV"
        "my-app.config" -> "MY_APP_CONFIG"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = "flatenv",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters that are not provided are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON.

    Args:
        name: Logger name
        level: Logging level (defaults to WARNING or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


_loggers: Dict[str, Logger] = {}


def get_logger(name: str = "flatenv") -> Logger:
    """Get the shared logger for ``name``, creating it on first use.

    The instance is configured from environment variables once and then
    reused, so repeated calls never reconfigure handlers.
    """
    logger = _loggers.get(name)
    if logger is None:
        logger = _loggers[name] = create_logger(name=name)
    return logger


def reset_loggers() -> None:
    """Forget cached loggers so the next get_logger call rebuilds them."""
    _loggers.clear()


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
    "reset_loggers",
]
