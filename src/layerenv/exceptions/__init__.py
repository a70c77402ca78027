"""Exceptions for layerenv.

All exceptions include structured error information:
- code: Machine-readable error identifier (ErrorCode)
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from layerenv.exceptions import (
        LayerEnvError,
        SourceNotFoundError,
        SourceEmptyError,
        NotInitializedError,
        MissingKeyError,
        ValueParseError,
    )
"""

from layerenv.exceptions.base import (
    ErrorCode,
    LayerEnvError,
    LoadError,
    LookupFailure,
    MissingKeyError,
    NotInitializedError,
    SourceEmptyError,
    SourceNotFoundError,
    StateError,
    ValueParseError,
)

__all__ = [
    "ErrorCode",
    # Base exceptions
    "LayerEnvError",
    "LoadError",
    "StateError",
    "LookupFailure",
    # Concrete errors
    "SourceNotFoundError",
    "SourceEmptyError",
    "NotInitializedError",
    "MissingKeyError",
    "ValueParseError",
]
