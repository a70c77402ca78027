"""
Stream logger with session tracking.

Writes one formatted line per message to a text stream (stderr by
default). Used by the command line for ``--verbose`` output and handy
in tests with an ``io.StringIO``.
"""

import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from .interface import Logger

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class StreamLogger(Logger):
    """Logger that writes formatted lines to an output stream.

    Example:
        logger = StreamLogger(output=io.StringIO(), level="DEBUG")
        logger.info("Loaded env", sources=2, entries=14)
    """

    def __init__(
        self,
        name: str = "layerenv",
        output: Optional[TextIO] = None,
        level: str = "DEBUG",
        include_timestamp: bool = True,
    ):
        """Initialize the stream logger.

        Args:
            name: Logger name (included in output for identification)
            output: Output stream (default: stderr)
            level: Minimum level name to emit
            include_timestamp: Whether to include timestamps in log messages
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output or sys.stderr
        self._threshold = _LEVELS.get(level.upper(), _LEVELS["DEBUG"])
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        """Get the current session ID."""
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())

        parts.append(f"[{level}]")
        parts.append(f"[{self._name}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            parts.append(f"({extra})")

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < self._threshold:
            return
        print(self._format_message(level, message, **kwargs), file=self._output)
        self._output.flush()

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
