#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/escaping.py
"""Escaping and unescaping of INI values.

Values are escaped on the way out so that a single physical line can carry
newlines, tabs and the comment markers ``;`` and ``#``:

=========  =======
Character  Escaped
=========  =======
``\\``     ``\\\\``
newline    ``\\n``
CR         ``\\r``
tab        ``\\t``
``"``      ``\\"``
``;``      ``\\;``
``#``      ``\\#``
=========  =======

Both directions are single forward scans. Unescaping consumes each
two-character sequence atomically, so an escaped backslash followed by a
literal ``n`` never turns into a newline.
"""

from __future__ import annotations

from serini.constants import ESCAPE_CHAR, ESCAPE_TABLE, UNESCAPE_TABLE


def escape(value: str) -> str:
    """Escape special characters in a value.

    Parameters
    ----------
    value : str
        Raw value text

    Returns
    -------
    str
        Text safe to place after ``key =`` on a single line

    Examples
    --------
    >>> escape("a;b#c")
    'a\\\\;b\\\\#c'

    """
    out: list[str] = []
    for char in value:
        marker = ESCAPE_TABLE.get(char)
        if marker is None:
            out.append(char)
        else:
            out.append(ESCAPE_CHAR)
            out.append(marker)
    return "".join(out)


def unescape(value: str) -> str:
    """Reverse :func:`escape`.

    Unknown escape sequences and a trailing lone backslash are kept as-is.

    Parameters
    ----------
    value : str
        Escaped value text, already trimmed

    Returns
    -------
    str
        Raw value text

    """
    out: list[str] = []
    i = 0
    length = len(value)
    while i < length:
        char = value[i]
        if char == ESCAPE_CHAR and i + 1 < length:
            raw = UNESCAPE_TABLE.get(value[i + 1])
            if raw is not None:
                out.append(raw)
                i += 2
                continue
        out.append(char)
        i += 1
    return "".join(out)
