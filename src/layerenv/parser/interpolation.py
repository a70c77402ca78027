"""Substitution of ``$NAME`` and ``${NAME}`` references."""

import string
from typing import List, Mapping, Optional, Tuple

_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def read_reference(value: str, dollar: int) -> Optional[Tuple[str, int]]:
    """Read the reference whose ``$`` sits at ``dollar``.

    Accepts ``$NAME``, ``${NAME}`` and the lenient ``${NAME`` / ``$NAME}``
    forms (braces are optional on either side).

    Returns:
        ``(name, end)`` where ``end`` is the index just past the reference,
        or None when no identifier follows the ``$``.
    """
    length = len(value)
    pos = dollar + 1
    if pos < length and value[pos] == "{":
        pos += 1
    if pos >= length or value[pos] not in _IDENT_START:
        return None

    end = pos + 1
    while end < length and value[end] in _IDENT_CHARS:
        end += 1
    name = value[pos:end]

    if end < length and value[end] == "}":
        end += 1
    return name, end


def interpolate(value: str, env: Mapping[str, Optional[str]]) -> str:
    """Replace variable references in ``value`` with entries from ``env``.

    A reference preceded by a backslash is emitted as ``$NAME`` and not
    substituted. Unknown names, and names mapped to None, become the empty
    string. Substituted text is not scanned again.

    Examples:
        >>> interpolate("a $B ${C}", {"B": "1", "C": "2"})
        'a 1 2'
        >>> interpolate("\\\\$B", {"B": "1"})
        '$B'
    """
    out: List[str] = []
    length = len(value)
    index = 0
    while index < length:
        char = value[index]
        escaped = char == "\\" and index + 1 < length and value[index + 1] == "$"
        dollar = index + 1 if escaped else index

        if value[dollar] == "$":
            reference = read_reference(value, dollar)
            if reference is not None:
                name, end = reference
                if escaped:
                    out.append("$" + name)
                else:
                    resolved = env.get(name)
                    out.append(resolved if resolved is not None else "")
                index = end
                continue

        out.append(char)
        index += 1
    return "".join(out)
