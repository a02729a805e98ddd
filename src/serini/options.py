#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/options.py
"""Options for INI serialization and deserialization.

This module defines configuration options for the two directions of the
codec. Option objects are frozen dataclasses; use ``create_updated()`` to
derive a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from serini.constants import (
    DEFAULT_BLANK_LINE_BEFORE_SECTION,
    DEFAULT_CHARDET_CONFIDENCE_THRESHOLD,
    DEFAULT_EMIT_NONE_PLACEHOLDERS,
    DEFAULT_FALLBACK_ENCODINGS,
    DEFAULT_KEY_VALUE_SEPARATOR,
    DEFAULT_USE_CHARDET,
    KEY_VALUE_DELIMITER,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class SerializerOptions(CloneFrozenMixin):
    """Configuration options for value to INI serialization.

    Parameters
    ----------
    blank_line_before_section : bool, default = True
        If True, separate every ``[section]`` header from non-empty preceding
        output with a blank line.
    emit_none_placeholders : bool, default = True
        If True, optional fields holding ``None`` are written as a commented
        ``; key = `` line. If False, they are omitted entirely.
    key_value_separator : str, default = " = "
        Text placed between key and value. Must contain a single ``=``,
        optionally padded with spaces or tabs.

    """

    blank_line_before_section: bool = field(
        default=DEFAULT_BLANK_LINE_BEFORE_SECTION,
        metadata={"help": "Insert a blank line before each section header", "importance": "core"},
    )
    emit_none_placeholders: bool = field(
        default=DEFAULT_EMIT_NONE_PLACEHOLDERS,
        metadata={"help": "Write '; key = ' for optional fields holding None", "importance": "core"},
    )
    key_value_separator: str = field(
        default=DEFAULT_KEY_VALUE_SEPARATOR,
        metadata={"help": "Separator between key and value", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the key/value separator.

        Raises
        ------
        ValueError
            If the separator is not a single '=' padded with blanks.

        """
        if self.key_value_separator.strip(" \t") != KEY_VALUE_DELIMITER:
            raise ValueError(
                f"key_value_separator must be '{KEY_VALUE_DELIMITER}' padded with spaces or tabs, "
                f"got {self.key_value_separator!r}"
            )


@dataclass(frozen=True)
class DeserializerOptions(CloneFrozenMixin):
    """Configuration options for INI to value deserialization.

    Parameters
    ----------
    section : str or None, default = None
        If set, scalar fields of the outermost record are read from this
        section instead of the root section.
    use_chardet : bool, default = True
        Whether ``load`` runs chardet detection on byte input.
    fallback_encodings : tuple[str, ...]
        Encodings tried in order when detection is disabled or inconclusive.
    chardet_confidence_threshold : float, default = 0.7
        Minimum chardet confidence for its guess to be used.

    """

    section: str | None = field(
        default=None,
        metadata={"help": "Read the outermost record from this section instead of the root", "importance": "core"},
    )
    use_chardet: bool = field(
        default=DEFAULT_USE_CHARDET,
        metadata={"help": "Detect the encoding of byte input with chardet", "importance": "advanced"},
    )
    fallback_encodings: tuple[str, ...] = field(
        default=DEFAULT_FALLBACK_ENCODINGS,
        metadata={"help": "Encodings tried in order for byte input", "importance": "advanced"},
    )
    chardet_confidence_threshold: float = field(
        default=DEFAULT_CHARDET_CONFIDENCE_THRESHOLD,
        metadata={"help": "Minimum chardet confidence", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If the confidence threshold is outside [0, 1].

        """
        if not 0.0 <= self.chardet_confidence_threshold <= 1.0:
            raise ValueError(
                f"chardet_confidence_threshold must be within [0, 1], got {self.chardet_confidence_threshold}"
            )
