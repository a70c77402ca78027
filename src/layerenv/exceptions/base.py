"""Exception classes for layerenv.

Every error carries structured information:
- code: Machine-readable error kind (an ErrorCode member)
- message: Human-readable error description
- details: Additional context for debugging/recovery

Load errors (missing or empty sources) may be suppressed by an optional
load. Everything else always reaches the caller.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Tagged error kinds raised by layerenv."""

    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    SOURCE_EMPTY = "SOURCE_EMPTY"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    MISSING_KEY = "MISSING_KEY"
    VALUE_PARSE = "VALUE_PARSE"


class LayerEnvError(Exception):
    """Base exception for all layerenv errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        code = self.code.value if isinstance(self.code, ErrorCode) else self.code
        if self.details:
            return f"{code}: {self.message} (details: {self.details})"
        return f"{code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code.value if isinstance(self.code, ErrorCode) else self.code,
            "message": self.message,
            "details": self.details,
        }


class LoadError(LayerEnvError):
    """Base for errors raised while retrieving source text.

    These are the only errors an optional load swallows.
    """

    suppressible = True


class SourceNotFoundError(LoadError):
    """Raised when a required source cannot be located."""

    def __init__(self, source: str, details: Optional[Dict[str, Any]] = None):
        self.source = source
        super().__init__(
            ErrorCode.SOURCE_NOT_FOUND,
            f"Env source not found: {source}",
            {"source": source, **(details or {})},
        )


class SourceEmptyError(LoadError):
    """Raised when a required source resolves to zero-length text."""

    def __init__(self, source: str, details: Optional[Dict[str, Any]] = None):
        self.source = source
        super().__init__(
            ErrorCode.SOURCE_EMPTY,
            f"Env source is empty: {source}",
            {"source": source, **(details or {})},
        )


class StateError(LayerEnvError):
    """Base for errors caused by using a store in the wrong state."""

    suppressible = False


class NotInitializedError(StateError):
    """Raised when a store is read before any load completed."""

    def __init__(self) -> None:
        super().__init__(
            ErrorCode.NOT_INITIALIZED,
            "Env store is not initialized; call initialize(), load() or load_from_string() first",
        )


class LookupFailure(LayerEnvError):
    """Base for errors raised by the typed accessors."""

    suppressible = False


class MissingKeyError(LookupFailure, KeyError):
    """Raised when a key is absent and no fallback was given."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            ErrorCode.MISSING_KEY,
            f"{name} variable not found. A non-null fallback is required for missing entries",
            {"name": name},
        )


class ValueParseError(LookupFailure, ValueError):
    """Raised when a stored value cannot be converted to the requested type."""

    def __init__(self, name: str, value: str, target: str):
        self.name = name
        self.value = value
        self.target = target
        super().__init__(
            ErrorCode.VALUE_PARSE,
            f"Could not parse {name} as {target}",
            {"name": name, "value": value, "target": target},
        )
