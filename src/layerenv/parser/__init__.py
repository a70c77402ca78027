"""Env-file grammar parser.

Usage:
    from layerenv.parser import Parser

    entries = Parser().parse(text.split("\\n"))

Building blocks are exposed for custom parsers:
- strip_comment: remove ``#`` comments outside quotes
- strip_quotes / surrounding_quote: quote detection and removal
- interpolate: ``$NAME`` / ``${NAME}`` substitution
- reassemble: fold multi-line quoted values into logical lines
"""

from layerenv.parser.comments import strip_comment
from layerenv.parser.core import ParsedEntry, Parser, trim_export_keyword
from layerenv.parser.interpolation import interpolate
from layerenv.parser.lines import LogicalLine, reassemble
from layerenv.parser.quotes import (
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    strip_quotes,
    surrounding_quote,
    unescape_double,
    unescape_single,
)

__all__ = [
    "Parser",
    "ParsedEntry",
    "LogicalLine",
    "reassemble",
    "strip_comment",
    "strip_quotes",
    "surrounding_quote",
    "unescape_single",
    "unescape_double",
    "interpolate",
    "trim_export_keyword",
    "SINGLE_QUOTE",
    "DOUBLE_QUOTE",
]
