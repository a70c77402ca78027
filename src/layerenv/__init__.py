"""layerenv - layered .env loading with typed accessors.

This package provides:
- parser: the env-file grammar (quotes, escapes, multi-line values,
  comments, $NAME interpolation)
- merge: precedence merging of supplied pairs, override sources and a
  primary source
- store: EnvStore with typed accessors and load state
- sources: pluggable readers that turn source names into text
- logger: structured logging with optional JSON output
- exceptions: structured error classes with machine-readable codes
"""

__version__ = "1.0.0"

from layerenv.config import LoadSettings

from layerenv.exceptions import (
    ErrorCode,
    LayerEnvError,
    LoadError,
    MissingKeyError,
    NotInitializedError,
    SourceEmptyError,
    SourceNotFoundError,
    ValueParseError,
)

from layerenv.logger import (
    Logger,
    StreamLogger,
    StructuredLogger,
    get_logger,
    create_logger,
)

from layerenv.merge import MergeEngine, MergeResult, RawSource, SourceKind

from layerenv.parser import ParsedEntry, Parser

from layerenv.sources import (
    FileSourceReader,
    MappingSourceReader,
    SourceHandle,
    SourceReader,
)

from layerenv.store import EnvStore, LoadReport

__all__ = [
    "__version__",
    # Store
    "EnvStore",
    "LoadReport",
    # Merge
    "MergeEngine",
    "MergeResult",
    "RawSource",
    "SourceKind",
    # Parser
    "Parser",
    "ParsedEntry",
    # Sources
    "SourceReader",
    "SourceHandle",
    "FileSourceReader",
    "MappingSourceReader",
    # Config
    "LoadSettings",
    # Logger
    "Logger",
    "StreamLogger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    # Exceptions
    "ErrorCode",
    "LayerEnvError",
    "LoadError",
    "SourceNotFoundError",
    "SourceEmptyError",
    "NotInitializedError",
    "MissingKeyError",
    "ValueParseError",
]
