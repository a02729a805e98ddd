#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/decoder.py
"""INI text to dataclass records.

The outermost record is always read as a composite of the whole table:
its scalar fields come from the root section (or from the section named
by ``DeserializerOptions.section``), and each of its record fields comes
from the section whose name equals the field's key. A record read from a
section takes all of its fields from that one section; records nested any
deeper cannot be expressed by the flat list of headers and are rejected
when their key shows up as a raw value.

A key missing from its section is *absent*: optional fields become
``None``, fields with a dataclass default keep it, and any other field
raises :class:`~serini.exceptions.MissingFieldError`. Keys and sections
that no field asks for are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from serini.coercion import coerce
from serini.constants import ROOT_SECTION
from serini.exceptions import DecodeError, MissingFieldError, UnsupportedFeatureError, UnsupportedTopLevelError
from serini.options import DeserializerOptions
from serini.parser import Section, SectionTable, parse
from serini.schema import FieldSpec, is_record_type, record_fields

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ABSENT = object()


class Decoder:
    """Decode INI text into dataclass records.

    Parameters
    ----------
    options : DeserializerOptions or None, default = None
        Deserialization options

    """

    def __init__(self, options: DeserializerOptions | None = None):
        """Initialize the decoder with options."""
        self.options: DeserializerOptions = options or DeserializerOptions()

    def decode(self, text: str, cls: type[T]) -> T:
        """Parse INI text and decode it into ``cls``.

        Parameters
        ----------
        text : str
            INI document
        cls : type
            Target dataclass

        Returns
        -------
        T
            Instance of ``cls``

        Raises
        ------
        UnsupportedTopLevelError
            If ``cls`` is not a dataclass
        MissingFieldError
            If a required field has no key
        InvalidValueError
            If a raw value does not parse as its field's kind
        UnsupportedFeatureError
            If ``cls`` uses an unsupported shape

        """
        return self.decode_table(parse(text), cls)

    def decode_table(self, table: SectionTable, cls: type[T]) -> T:
        """Decode an already parsed :class:`SectionTable` into ``cls``."""
        if not is_record_type(cls):
            raise UnsupportedTopLevelError(cls if isinstance(cls, type) else type(cls))

        name = self.options.section
        if name is None:
            section = table.root
        elif name in table:
            section = table[name]
        else:
            logger.debug("Section '%s' not found, reading %s from an empty section", name, cls.__name__)
            section = {}

        used_sections = {name if name is not None else ROOT_SECTION}
        value = self._decode_record(cls, section, table, used_sections)

        unused = [section_name for section_name in table.section_names() if section_name not in used_sections]
        if unused:
            logger.debug("Ignoring sections not mapped to any field: %s", unused)
        return value

    def _decode_record(
        self,
        cls: type[T],
        section: Section,
        table: SectionTable | None,
        used_sections: set[str],
    ) -> T:
        # table is None once inside a section: deeper records cannot be resolved
        specs = record_fields(cls)
        kwargs: dict[str, Any] = {}
        for spec in specs:
            if spec.kind.is_record:
                value = self._resolve_record(spec, section, table, used_sections)
            else:
                raw = section.get(spec.key, _ABSENT)
                value = _ABSENT if raw is _ABSENT else coerce(raw, spec.scalar)

            if value is _ABSENT:
                if spec.has_default or not spec.init:
                    continue
                if spec.kind.is_optional:
                    value = None
                else:
                    raise MissingFieldError(spec.key, cls.__name__)
            if spec.init:
                kwargs[spec.name] = value

        _log_unknown_keys(cls, section, specs)
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise DecodeError(f"Failed to construct {cls.__name__}: {e}", original_error=e) from e

    def _resolve_record(
        self,
        spec: FieldSpec,
        section: Section,
        table: SectionTable | None,
        used_sections: set[str],
    ) -> Any:
        if table is not None and spec.key != ROOT_SECTION and spec.key in table:
            used_sections.add(spec.key)
            return self._decode_record(spec.record_type, table[spec.key], None, used_sections)
        if spec.key in section:
            raise UnsupportedFeatureError("structs in values")
        return _ABSENT


def _log_unknown_keys(cls: type, section: Mapping[str, str], specs: list[FieldSpec]) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    known = {spec.key for spec in specs}
    unknown = [key for key in section if key not in known]
    if unknown:
        logger.debug("Ignoring keys not declared by %s: %s", cls.__name__, unknown)
