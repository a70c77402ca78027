"""
layerenv Logger Module

Provides the logging interface used across layerenv with session tracking,
structured output, and optional JSON formatting.

Usage:
    from layerenv.logger import Logger, get_logger, create_logger

    # Shared logger configured from the environment
    logger = get_logger()
    logger.debug("Loaded env", sources=2, entries=10)

    # Or create a custom logger with specific settings
    logger = create_logger(
        name="layerenv",
        level=logging.DEBUG,
        json_format=True,
        log_file="/var/log/layerenv.log"
    )

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (e.g., LAYERENV for "layerenv")
"""

import logging
import os
from typing import Dict, Optional

from .interface import Logger
from .stream_logger import StreamLogger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

_loggers: Dict[str, Logger] = {}


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "layerenv" -> "LAYERENV"
        "layerenv-cli" -> "LAYERENV_CLI"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = "layerenv",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters that are not provided are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON. The default level is WARNING
    so that a library import stays quiet.

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


def get_logger(name: str = "layerenv") -> Logger:
    """Get the shared logger for ``name``, creating it on first use.

    Configuration is read from the environment the first time only;
    call reset_loggers() to pick up changes.
    """
    logger = _loggers.get(name)
    if logger is None:
        logger = create_logger(name=name)
        _loggers[name] = logger
    return logger


def reset_loggers() -> None:
    """Forget cached loggers (mainly for tests)."""
    _loggers.clear()


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "StreamLogger",
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
    "reset_loggers",
]
