"""Comment stripping for env-file lines."""

from layerenv.parser.quotes import DOUBLE_QUOTE, SINGLE_QUOTE

COMMENT_CHAR = "#"


def comment_index(line: str) -> int:
    """Return the index of the first ``#`` outside any quoted span, or -1.

    A quote character opens or closes its own span only when the other
    kind is not open. Inside a span a backslash escapes the next character.
    """
    in_single = False
    in_double = False
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\" and (in_single or in_double):
            index += 2
            continue
        if char == DOUBLE_QUOTE and not in_single:
            in_double = not in_double
        elif char == SINGLE_QUOTE and not in_double:
            in_single = not in_single
        elif char == COMMENT_CHAR and not (in_single or in_double):
            return index
        index += 1
    return -1


def strip_comment(line: str) -> str:
    """Remove a trailing or whole-line comment and trim the result.

    Examples:
        >>> strip_comment("KEY=value # note")
        'KEY=value'
        >>> strip_comment('KEY="a # b"')
        'KEY="a # b"'
        >>> strip_comment("   # only a comment")
        ''
    """
    index = comment_index(line)
    if index >= 0:
        line = line[:index]
    return line.strip()
