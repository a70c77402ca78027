"""Env store: merged values plus typed accessors.

Usage:
    from layerenv import EnvStore

    store = EnvStore()
    store.load(".env", override_with_files=[".env.local"], merge_with={"STAGE": "dev"})

    host = store.get("HOST")
    port = store.get_int("PORT", fallback=8000)
    debug = store.get_bool("DEBUG", fallback=False)

    # Verify required variables are present
    if not store.is_every_defined(["HOST", "PORT"]):
        raise SystemExit("incomplete configuration")

Each store is an independent object; there is no module-level instance.
Stores are not thread-safe: serialize initialize()/reset() externally or
give each thread its own store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, KeysView, Mapping, Optional, Sequence, TypeVar

from layerenv.config import LoadSettings
from layerenv.exceptions import MissingKeyError, NotInitializedError, ValueParseError
from layerenv.logger import Logger, get_logger
from layerenv.merge import MergeEngine, MergeResult, SourceInput
from layerenv.parser import Parser
from layerenv.sources import FileSourceReader, SourceHandle, SourceReader

T = TypeVar("T")

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")


@dataclass(frozen=True)
class LoadReport:
    """Summary of a successful load.

    Attributes:
        sources: Names of the sources that contributed, highest precedence first
        skipped: Names of optional sources that were missing or empty
        entry_count: Number of keys in the store after the load
    """

    sources: tuple
    skipped: tuple
    entry_count: int

    @classmethod
    def from_merge(cls, result: MergeResult) -> "LoadReport":
        return cls(
            sources=tuple(source.name for source in result.sources),
            skipped=tuple(str(error.details.get("source", "")) for error in result.skipped),
            entry_count=len(result.entries),
        )


def parse_bool(value: str) -> bool:
    """Parse ``true``/``1``/``false``/``0`` (case-insensitive)."""
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Could not parse {value!r} as a bool")


class EnvStore:
    """Environment values loaded from layered env sources.

    The store starts uninitialized; reading it before a load raises
    NotInitializedError. A successful load replaces the contents and marks
    the store initialized. A failed load changes nothing.
    """

    def __init__(
        self,
        reader: Optional[SourceReader] = None,
        parser: Optional[Parser] = None,
        logger: Optional[Logger] = None,
        settings: Optional[LoadSettings] = None,
    ) -> None:
        """Create an empty, uninitialized store.

        Args:
            reader: Resolves source handles (default: files under settings.base_dir)
            parser: Parser used for every load (default: Parser())
            logger: Logger for load events (default: shared layerenv logger)
            settings: Load defaults (default: LoadSettings.from_env())
        """
        self.settings = settings or LoadSettings.from_env()
        self.reader = reader or FileSourceReader(self.settings.base_dir, encoding=self.settings.encoding)
        self.logger = logger or get_logger()
        self._engine = MergeEngine(reader=self.reader, parser=parser, logger=self.logger)
        self._env: Dict[str, str] = {}
        self._is_initialized = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def initialize(
        self,
        primary: Optional[SourceInput],
        overrides: Sequence[SourceInput] = (),
        supplied: Optional[Mapping[str, object]] = None,
        optional: bool = False,
    ) -> LoadReport:
        """Merge the given sources into the store.

        Args:
            primary: Lowest-precedence source: text, a list of lines, a path
                or a SourceHandle (None for no primary source)
            overrides: Sources that override the primary, earlier ones win
            supplied: Key/value pairs that override every source
            optional: Treat missing or empty sources as contributing nothing

        Returns:
            A LoadReport describing what was loaded

        Raises:
            SourceNotFoundError: A required source could not be located
            SourceEmptyError: A required source had zero-length text
        """
        result = self._engine.merge(primary, overrides, supplied, optional)

        self._env = dict(result.entries)
        self._is_initialized = True

        report = LoadReport.from_merge(result)
        self.logger.debug(
            "Env store initialized",
            sources=",".join(report.sources),
            entries=report.entry_count,
        )
        return report

    def load(
        self,
        file_name: Optional[str] = None,
        override_with_files: Sequence[str] = (),
        merge_with: Optional[Mapping[str, object]] = None,
        is_optional: Optional[bool] = None,
    ) -> LoadReport:
        """Load named sources through the store's reader.

        Args:
            file_name: Primary source name (default: settings.file_name)
            override_with_files: Source names whose values override file_name
            merge_with: Key/value pairs that override every file
            is_optional: Ignore not-found and empty sources (default: settings.optional)
        """
        return self.initialize(
            SourceHandle(file_name or self.settings.file_name),
            [SourceHandle(name) for name in override_with_files],
            merge_with,
            self.settings.optional if is_optional is None else is_optional,
        )

    def load_from_string(
        self,
        env_string: str = "",
        override_with: Sequence[str] = (),
        merge_with: Optional[Mapping[str, object]] = None,
        is_optional: bool = False,
    ) -> LoadReport:
        """Load from env-formatted strings instead of named sources.

        Args:
            env_string: Primary env text
            override_with: Env texts whose values override env_string; a single
                string counts as one text
            merge_with: Key/value pairs that override every text
            is_optional: Ignore empty texts
        """
        if isinstance(override_with, str):
            override_with = [override_with]
        return self.initialize(env_string, list(override_with), merge_with, is_optional)

    def reset(self) -> None:
        """Empty the store. The initialized flag is left as it is."""
        self._env.clear()

    clean = reset

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    @property
    def env(self) -> Dict[str, str]:
        """A copy of the loaded variables."""
        self._require_initialized()
        return dict(self._env)

    def keys(self) -> KeysView[str]:
        self._require_initialized()
        return self._env.keys()

    def __contains__(self, name: object) -> bool:
        self._require_initialized()
        return name in self._env

    def __len__(self) -> int:
        self._require_initialized()
        return len(self._env)

    def maybe_get(self, name: str, fallback: Optional[str] = None) -> Optional[str]:
        """Return the value of ``name``, or ``fallback`` when absent."""
        self._require_initialized()
        return self._env.get(name, fallback)

    def get(self, name: str, fallback: Optional[str] = None) -> str:
        """Return the value of ``name``.

        Raises:
            MissingKeyError: If absent and no fallback is given
        """
        value = self.maybe_get(name, fallback)
        if value is None:
            raise MissingKeyError(name)
        return value

    def get_int(self, name: str, fallback: Optional[int] = None) -> int:
        """Load the variable value as an int.

        The fallback is used when the variable is absent or cannot be
        parsed. Without a fallback those cases raise MissingKeyError and
        ValueParseError respectively.

        Accepts what Python's int() accepts: an optional sign, decimal
        digits and underscores between digits (``1_000``). Hex such as
        ``0x1F`` is rejected.
        """
        return self._get_typed(name, fallback, int, "int")

    def get_float(self, name: str, fallback: Optional[float] = None) -> float:
        """Load the variable value as a float (see get_int for fallback rules).

        Accepts what Python's float() accepts, including ``nan``, ``inf``
        and ``1e3``.
        """
        return self._get_typed(name, fallback, float, "float")

    def get_bool(self, name: str, fallback: Optional[bool] = None) -> bool:
        """Load the variable value as a bool.

        Accepts ``true``/``1`` and ``false``/``0`` in any case; see get_int
        for fallback rules.
        """
        return self._get_typed(name, fallback, parse_bool, "bool")

    def is_every_defined(self, names: Iterable[str]) -> bool:
        """True if every name is present with a non-empty value.

        Unlike ``in``, an empty value counts as undefined. Does not require
        the store to be initialized; an empty store answers False.
        """
        return all(self._env.get(name) for name in names)

    # ------------------------------------------------------------------

    def _require_initialized(self) -> None:
        if not self._is_initialized:
            raise NotInitializedError()

    def _get_typed(
        self,
        name: str,
        fallback: Optional[T],
        convert: Callable[[str], T],
        type_name: str,
    ) -> T:
        value = self.maybe_get(name)
        if value is None:
            if fallback is None:
                raise MissingKeyError(name)
            return fallback

        try:
            return convert(value)
        except ValueError as exc:
            if fallback is not None:
                self.logger.debug("Using fallback for unparseable value", name=name, type=type_name)
                return fallback
            raise ValueParseError(name, value, type_name) from exc


__all__ = [
    "EnvStore",
    "LoadReport",
    "parse_bool",
]
