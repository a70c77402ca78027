"""Line classification and multi-line value reassembly.

Physical lines are folded into logical lines before any per-line parsing.
A value that opens a quote without closing it on the same line continues
on the following lines until a line ends with the same quote::

    CERT="-----BEGIN CERTIFICATE-----
    MIIB...
    -----END CERTIFICATE-----"
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from layerenv.parser.comments import COMMENT_CHAR
from layerenv.parser.quotes import QUOTE_CHARS


@dataclass(frozen=True)
class LogicalLine:
    """One entry candidate after multi-line values have been folded.

    Attributes:
        text: Reconstructed ``key=value`` text
        start: Index of the first physical line covered
        end: Index of the last physical line covered
        folded_quote: Quote character that opened a folded value. Its text
            has the surrounding quotes already removed.
    """

    text: str
    start: int
    end: int
    folded_quote: Optional[str] = None

    @property
    def is_folded(self) -> bool:
        return self.folded_quote is not None


def is_skippable(line: str) -> bool:
    """Blank lines and whole-line comments carry no entry."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_CHAR)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _opening_quote(value: str) -> Optional[str]:
    if value and value[0] in QUOTE_CHARS and not value.endswith(value[0]):
        return value[0]
    return None


def _continues_value(line: str) -> bool:
    return bool(line.strip()) and "=" not in line


def reassemble(lines: Sequence[str]) -> Iterator[LogicalLine]:
    """Yield logical lines for every physical line that may hold an entry.

    Lines without ``=``, blank lines and comment lines are dropped here.
    Lines consumed by a multi-line value are never yielded on their own.
    If the closing quote never appears, the value runs to the last line.
    """
    count = len(lines)
    index = 0
    while index < count:
        line = lines[index]
        if is_skippable(line) or "=" not in line:
            index += 1
            continue

        key, _, rest = line.partition("=")
        value = rest.strip()
        quote = _opening_quote(value)
        start = index

        if quote is not None and index + 1 < count and _continues_value(lines[index + 1]):
            parts: List[str] = [value[1:]]
            index += 1
            while index < count:
                current = lines[index]
                if current.strip().endswith(quote):
                    parts.append(current[: current.rindex(quote)])
                    break
                parts.append(current)
                index += 1
            body = normalize_newlines("\n".join(parts))
            yield LogicalLine(f"{key}={body}", start, min(index, count - 1), quote)
        else:
            yield LogicalLine(line, start, start)
        index += 1
