#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/encoder.py
"""Dataclass records to INI text.

Scalar fields become ``key = value`` lines, record fields become sections.
Root scalars always come first; sections follow in field declaration order,
whatever the order of scalar and record fields in the dataclass.

Examples
--------
Input value::

    Config(name="My App", port=8080, debug=None, database=Database(host="localhost", password=None))

Output INI::

    name = My App
    port = 8080
    ; debug =

    [database]
    host = localhost
    ; password =

Sections are never nested: a record inside a section produces another
header further down the same flat list.
"""

from __future__ import annotations

import logging
from collections.abc import Set as AbstractSet
from typing import Any

from serini.coercion import render
from serini.constants import LINE_SEPARATOR, NONE_PLACEHOLDER_PREFIX, SECTION_CLOSE, SECTION_OPEN
from serini.escaping import escape
from serini.exceptions import UnsupportedTopLevelError
from serini.options import SerializerOptions
from serini.prober import FieldPlanEntry, build_field_plan
from serini.schema import is_record

logger = logging.getLogger(__name__)


class Encoder:
    """Encode dataclass records to INI text.

    Parameters
    ----------
    options : SerializerOptions or None, default = None
        Serialization options

    """

    def __init__(self, options: SerializerOptions | None = None):
        """Initialize the encoder with options."""
        self.options: SerializerOptions = options or SerializerOptions()

    def encode(self, value: Any) -> str:
        """Encode a record.

        Parameters
        ----------
        value : Any
            Dataclass instance

        Returns
        -------
        str
            INI text, each line terminated by a newline

        Raises
        ------
        UnsupportedTopLevelError
            If ``value`` is not a dataclass instance
        UnsupportedFeatureError
            If a field holds or is annotated with an unsupported shape
        InvalidValueError
            If a width-annotated field holds a value outside its range

        """
        if not is_record(value):
            raise UnsupportedTopLevelError(type(value))
        return self._encode_record(value, frozenset())

    def _encode_record(self, record: Any, inherited_sections: AbstractSet[str]) -> str:
        plan = build_field_plan(record)
        known_sections = inherited_sections | {entry.key for entry in plan if entry.is_record}

        scalar_lines: list[str] = []
        section_blocks: list[str] = []
        for entry in plan:
            if entry.is_record:
                section_blocks.append(self._encode_section(entry, known_sections))
            elif entry.value is None:
                placeholder = self._none_placeholder(entry, known_sections)
                if placeholder is not None:
                    scalar_lines.append(placeholder)
            else:
                text = render(entry.value, entry.spec.scalar)
                scalar_lines.append(f"{entry.key}{self.options.key_value_separator}{escape(text)}")

        output = "".join(line + LINE_SEPARATOR for line in scalar_lines)
        for block in section_blocks:
            if output and self.options.blank_line_before_section:
                output += LINE_SEPARATOR
            output += block
        return output

    def _encode_section(self, entry: FieldPlanEntry, known_sections: AbstractSet[str]) -> str:
        header = f"{SECTION_OPEN}{entry.key}{SECTION_CLOSE}{LINE_SEPARATOR}"
        return header + self._encode_record(entry.value, known_sections)

    def _none_placeholder(self, entry: FieldPlanEntry, known_sections: AbstractSet[str]) -> str | None:
        if entry.spec.skip_if_none or not self.options.emit_none_placeholders:
            return None
        if entry.key in known_sections:
            # would read like a commented-out copy of the section header
            logger.debug("Skipping placeholder for '%s': name is used by a section", entry.key)
            return None
        separator = self.options.key_value_separator
        return f"{NONE_PLACEHOLDER_PREFIX}{entry.key}{separator}"
