"""Entry parser: turns env-file lines into key/value pairs."""

from typing import Dict, Iterable, Mapping, NamedTuple, Optional

from layerenv.parser.comments import strip_comment
from layerenv.parser.interpolation import interpolate
from layerenv.parser.lines import LogicalLine, reassemble
from layerenv.parser.quotes import (
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    strip_quotes,
    unescape_double,
    unescape_single,
)

_EXPORT_KEYWORD = "export"


class ParsedEntry(NamedTuple):
    """A single ``key=value`` definition."""

    key: str
    value: str


def trim_export_keyword(key: str) -> str:
    """Remove a leading ``export`` keyword and trim the key.

    The keyword may be preceded by spaces and followed by one optional
    space. Matching is case-sensitive.
    """
    candidate = key.lstrip(" ")
    if candidate.startswith(_EXPORT_KEYWORD):
        candidate = candidate[len(_EXPORT_KEYWORD):]
        if candidate.startswith(" "):
            candidate = candidate[1:]
        return candidate.strip()
    return key.strip()


class Parser:
    """Creates key/value pairs from lines formatted as env definitions.

    Parser methods are pure: the only state they see is the mapping passed
    in, which holds the entries committed earlier in the same load. A
    custom subclass can be handed to the store to change how lines are
    interpreted.

    Example:
        parser = Parser()
        parser.parse(["A=1", 'B="${A}2"'])   # {"A": "1", "B": "12"}
    """

    def parse(self, lines: Iterable[str]) -> Dict[str, str]:
        """Parse ``lines`` in order; the first definition of a key wins.

        Later definitions of a key already present are discarded, and each
        value can only interpolate keys committed before it.
        """
        entries: Dict[str, str] = {}
        for logical in reassemble(list(lines)):
            entry = self.parse_logical(logical, entries)
            if entry is not None and entry.key not in entries:
                entries[entry.key] = entry.value
        return entries

    def parse_logical(
        self, logical: LogicalLine, env: Mapping[str, Optional[str]]
    ) -> Optional[ParsedEntry]:
        return self.parse_one(logical.text, env, folded_quote=logical.folded_quote)

    def parse_one(
        self,
        line: str,
        env: Optional[Mapping[str, Optional[str]]] = None,
        folded_quote: Optional[str] = None,
    ) -> Optional[ParsedEntry]:
        """Parse a single logical line.

        Args:
            line: The ``[export ]KEY=VALUE`` text
            env: Entries visible to interpolation
            folded_quote: Quote character of a reassembled multi-line value;
                the value then arrives without its quotes and is not
                comment-stripped

        Returns:
            The parsed entry, or None for blank, comment-only and malformed
            lines.
        """
        env = env if env is not None else {}
        if folded_quote is None:
            line = strip_comment(line)
        if "=" not in line:
            return None

        raw_key, _, raw_value = line.partition("=")
        key = trim_export_keyword(raw_key)
        if not key:
            return None

        value = raw_value.strip()
        if folded_quote is None:
            value, quote = strip_quotes(value)
        else:
            quote = folded_quote

        return ParsedEntry(key, self.resolve_value(value, quote, env))

    def resolve_value(
        self, value: str, quote: Optional[str], env: Mapping[str, Optional[str]]
    ) -> str:
        """Apply quote-specific unescaping and interpolation to a value."""
        if quote == SINGLE_QUOTE:
            # Single-quoted values are literal
            return unescape_single(value)
        if quote == DOUBLE_QUOTE:
            value = unescape_double(value)
        return interpolate(value, env).replace("\\$", "$")
