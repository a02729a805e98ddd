#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/parser.py
"""INI text to section table.

The parser is deliberately permissive: it never fails. Blank lines and
full-line comments are skipped, lines without ``=`` are ignored, and unknown
keys are kept for the decoder to ignore. Type and shape checks all happen
later, in :mod:`serini.decoder`.

Examples
--------
Input INI::

    name = App
    port = 8080

    [db]
    host = localhost

Resulting table::

    {"": {"name": "App", "port": "8080"}, "db": {"host": "localhost"}}

"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from serini.constants import (
    COMMENT_PREFIXES,
    KEY_VALUE_DELIMITER,
    LINE_SEPARATOR,
    ROOT_SECTION,
    SECTION_CLOSE,
    SECTION_OPEN,
)
from serini.escaping import unescape

logger = logging.getLogger(__name__)

Section = Mapping[str, str]


class LineKind(Enum):
    """Classification of a physical line."""

    BLANK = auto()
    COMMENT = auto()
    SECTION = auto()
    KEY_VALUE = auto()
    MALFORMED = auto()


@dataclass(frozen=True)
class RawLine:
    """A classified line.

    ``name`` holds the section name for headers and the key for key/value
    lines; ``value`` holds the unescaped value.
    """

    kind: LineKind
    lineno: int
    name: str = ""
    value: str = ""


class SectionTable(Mapping[str, Section]):
    """Read-only mapping of section name to its key/value pairs.

    The root section (empty name) always exists. Sections and the keys
    inside them keep their first-appearance order.

    Parameters
    ----------
    sections : Mapping[str, Mapping[str, str]]
        Section contents; copied on construction

    """

    def __init__(self, sections: Mapping[str, Mapping[str, str]] | None = None):
        """Freeze the given sections, adding an empty root if missing."""
        frozen: dict[str, Section] = {ROOT_SECTION: MappingProxyType({})}
        for name, pairs in (sections or {}).items():
            frozen[name] = MappingProxyType(dict(pairs))
        self._sections = frozen

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        contents = {name: dict(pairs) for name, pairs in self._sections.items()}
        return f"SectionTable({contents!r})"

    @property
    def root(self) -> Section:
        """Key/value pairs appearing before any header."""
        return self._sections[ROOT_SECTION]

    def section_names(self) -> list[str]:
        """Return the names of all non-root sections in order of appearance."""
        return [name for name in self._sections if name != ROOT_SECTION]


def classify_line(line: str, lineno: int = 0) -> RawLine:
    """Classify one physical line.

    Parameters
    ----------
    line : str
        The line, with or without surrounding whitespace
    lineno : int, default 0
        1-based line number, kept for diagnostics

    Returns
    -------
    RawLine
        The classified line; key/value lines carry the unescaped value

    """
    stripped = line.strip()
    if not stripped:
        return RawLine(LineKind.BLANK, lineno)
    if stripped.startswith(COMMENT_PREFIXES):
        return RawLine(LineKind.COMMENT, lineno)
    if stripped.startswith(SECTION_OPEN) and stripped.endswith(SECTION_CLOSE) and len(stripped) >= 2:
        return RawLine(LineKind.SECTION, lineno, name=stripped[1:-1])
    key, sep, value = stripped.partition(KEY_VALUE_DELIMITER)
    if not sep:
        return RawLine(LineKind.MALFORMED, lineno, value=stripped)
    return RawLine(LineKind.KEY_VALUE, lineno, name=key.strip(), value=unescape(value.strip()))


def parse(text: str) -> SectionTable:
    """Parse INI text into a :class:`SectionTable`.

    A repeated header re-opens the existing section: earlier keys are kept
    and later duplicates overwrite them.

    Parameters
    ----------
    text : str
        Full document text; ``\\r\\n`` line endings are accepted

    Returns
    -------
    SectionTable
        Parsed sections, root included

    """
    sections: dict[str, dict[str, str]] = {ROOT_SECTION: {}}
    current = sections[ROOT_SECTION]

    for lineno, line in enumerate(text.split(LINE_SEPARATOR), start=1):
        raw = classify_line(line, lineno)
        if raw.kind is LineKind.SECTION:
            current = sections.setdefault(raw.name, {})
        elif raw.kind is LineKind.KEY_VALUE:
            current[raw.name] = raw.value
        elif raw.kind is LineKind.MALFORMED:
            logger.debug("Ignoring line %d without '%s': %r", lineno, KEY_VALUE_DELIMITER, raw.value)

    logger.debug("Parsed %d section(s) besides root", len(sections) - 1)
    return SectionTable(sections)
