"""Multi-source merge with deterministic precedence.

Sources are combined in this order (high -> low precedence):
1) Supplied pairs (a mapping passed by the caller)
2) Override sources, in the order given
3) The primary source

All lines are concatenated in that order and parsed in one pass. The
first definition of a key wins, so higher-precedence sources are parsed
first and can be referenced by interpolation in the sources after them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from layerenv.exceptions import LoadError, SourceEmptyError, SourceNotFoundError
from layerenv.logger import Logger, get_logger
from layerenv.parser import Parser
from layerenv.sources import FileSourceReader, SourceHandle, SourceReader

# Text, pre-split lines, or a handle resolved through a SourceReader
SourceInput = Union[str, Sequence[str], os.PathLike, SourceHandle]


class SourceKind(str, Enum):
    SUPPLIED = "supplied"
    OVERRIDE = "override"
    PRIMARY = "primary"


@dataclass(frozen=True)
class RawSource:
    """Physical lines read from one origin."""

    name: str
    kind: SourceKind
    lines: Tuple[str, ...]


@dataclass
class MergeResult:
    """Outcome of a merge.

    Attributes:
        entries: Merged key/value pairs
        sources: Sources that contributed lines, highest precedence first
        skipped: Load errors suppressed because the load was optional
    """

    entries: Dict[str, str]
    sources: List[RawSource] = field(default_factory=list)
    skipped: List[LoadError] = field(default_factory=list)


def split_lines(text: str) -> Tuple[str, ...]:
    return tuple(text.split("\n"))


def supplied_lines(pairs: Mapping[str, object]) -> Tuple[str, ...]:
    """Render supplied pairs as synthetic ``key=value`` lines."""
    return tuple(f"{key}={value}" for key, value in pairs.items())


class MergeEngine:
    """Resolve sources, order them by precedence and parse them together.

    Example:
        engine = MergeEngine(reader=MappingSourceReader({".env": "A=1"}))
        result = engine.merge(SourceHandle(".env"), overrides=["A=2"])
        result.entries    # {"A": "2"}
    """

    def __init__(
        self,
        reader: Optional[SourceReader] = None,
        parser: Optional[Parser] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.reader = reader or FileSourceReader()
        self.parser = parser or Parser()
        self.logger = logger or get_logger()

    def read_source(self, source: SourceInput, kind: SourceKind, label: str) -> RawSource:
        """Turn one source input into a RawSource.

        Raises:
            SourceNotFoundError: If a handle cannot be resolved
            SourceEmptyError: If the source has zero-length text
        """
        if isinstance(source, SourceHandle) or isinstance(source, os.PathLike):
            name = os.fspath(source) if isinstance(source, os.PathLike) else source.name
            text = self.reader.read(name)
            if text is None:
                raise SourceNotFoundError(name, {"kind": kind.value})
            lines = split_lines(text)
        elif isinstance(source, str):
            name = label
            text = source
            lines = split_lines(text)
        elif isinstance(source, Sequence):
            name = label
            lines = tuple(source)
            text = "\n".join(lines)
        else:
            raise TypeError(f"Unsupported env source type: {type(source).__name__}")

        if not text:
            raise SourceEmptyError(name, {"kind": kind.value})
        return RawSource(name=name, kind=kind, lines=lines)

    def precedence(
        self,
        primary: Optional[SourceInput],
        overrides: Sequence[SourceInput] = (),
        supplied: Optional[Mapping[str, object]] = None,
        optional: bool = False,
    ) -> Tuple[List[RawSource], List[LoadError]]:
        """Build the precedence list, highest priority first.

        Every source is read before anything is parsed, so a failure leaves
        no partial result behind. With ``optional`` a missing or empty
        source contributes zero lines instead of failing.
        """
        sources: List[RawSource] = []
        skipped: List[LoadError] = []

        if supplied:
            sources.append(
                RawSource(name="<supplied>", kind=SourceKind.SUPPLIED, lines=supplied_lines(supplied))
            )

        candidates: List[Tuple[SourceInput, SourceKind, str]] = [
            (override, SourceKind.OVERRIDE, f"<override {position}>")
            for position, override in enumerate(overrides)
        ]
        if primary is not None:
            candidates.append((primary, SourceKind.PRIMARY, "<primary>"))

        for source, kind, label in candidates:
            try:
                sources.append(self.read_source(source, kind, label))
            except LoadError as exc:
                if not optional:
                    raise
                self.logger.warning(
                    "Skipping optional env source",
                    source=exc.details.get("source", label),
                    kind=kind.value,
                    code=exc.code.value,
                )
                skipped.append(exc)

        return sources, skipped

    def merge(
        self,
        primary: Optional[SourceInput],
        overrides: Sequence[SourceInput] = (),
        supplied: Optional[Mapping[str, object]] = None,
        optional: bool = False,
    ) -> MergeResult:
        """Merge all sources into one mapping; first definition wins."""
        if isinstance(overrides, (str, SourceHandle, os.PathLike)):
            overrides = [overrides]

        sources, skipped = self.precedence(primary, overrides, supplied, optional)

        lines: List[str] = []
        for source in sources:
            lines.extend(source.lines)

        entries = self.parser.parse(lines)
        self.logger.debug(
            "Merged env sources",
            sources=len(sources),
            skipped=len(skipped),
            lines=len(lines),
            entries=len(entries),
        )
        return MergeResult(entries=entries, sources=sources, skipped=skipped)


__all__ = [
    "MergeEngine",
    "MergeResult",
    "RawSource",
    "SourceInput",
    "SourceKind",
    "split_lines",
    "supplied_lines",
]
