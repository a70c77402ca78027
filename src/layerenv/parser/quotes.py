"""Quote detection, stripping and quote-specific unescaping."""

from typing import Optional, Tuple

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
QUOTE_CHARS = (SINGLE_QUOTE, DOUBLE_QUOTE)


def surrounding_quote(value: str) -> Optional[str]:
    """Return the quote character when ``value`` is wholly wrapped in one pair.

    The closing quote is the first unescaped occurrence of the opening
    quote after position 0; the value is wrapped only if that occurrence is
    the final character. ``'a' 'b'`` is therefore not wrapped.
    """
    if len(value) < 2 or value[0] not in QUOTE_CHARS:
        return None

    quote = value[0]
    last = len(value) - 1
    index = 1
    while index <= last:
        char = value[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return quote if index == last else None
        index += 1
    return None


def strip_quotes(value: str) -> Tuple[str, Optional[str]]:
    """Strip surrounding quotes, returning ``(content, quote_char)``.

    Values that are not wholly wrapped (including ones that only start or
    only end with a quote) come back unmodified with ``None``.
    """
    quote = surrounding_quote(value)
    if quote is None:
        return value, None
    return value[1:-1], quote


def unescape_single(content: str) -> str:
    """Single-quoted values only understand ``\\'``."""
    return content.replace("\\'", "'")


def unescape_double(content: str) -> str:
    """Unescape ``\\"`` and turn literal ``\\n`` into a newline."""
    content = content.replace('\\"', '"')
    content = content.replace("\\n", "\n")
    return content.replace("\r\n", "\n")
