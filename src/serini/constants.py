#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the serini library.

This module centralizes the fixed tables of the INI dialect: the escape
table shared by the encoder and the parser, the comment and header markers,
the integer bounds used by scalar coercion, and the option defaults.

Constants are organized by category:
1. Wire Format - Markers and separators of the text format
2. Escaping - Character substitution table
3. Scalar Bounds - Ranges of the width-annotated integer kinds
4. Option Defaults - Default values for serializer and deserializer options
"""

from __future__ import annotations

# =============================================================================
# Wire Format
# =============================================================================

ROOT_SECTION = ""
COMMENT_PREFIXES = (";", "#")
SECTION_OPEN = "["
SECTION_CLOSE = "]"
KEY_VALUE_DELIMITER = "="
LINE_SEPARATOR = "\n"

# Prefix of the placeholder line written for an optional field holding no value
NONE_PLACEHOLDER_PREFIX = "; "

# =============================================================================
# Escaping
# =============================================================================

ESCAPE_CHAR = "\\"

# Raw character -> character following the backslash in the escaped form
ESCAPE_TABLE: dict[str, str] = {
    "\\": "\\",
    "\n": "n",
    "\r": "r",
    "\t": "t",
    '"': '"',
    ";": ";",
    "#": "#",
}

UNESCAPE_TABLE: dict[str, str] = {marker: raw for raw, marker in ESCAPE_TABLE.items()}

# =============================================================================
# Scalar Bounds
# =============================================================================

INTEGER_BOUNDS: dict[str, tuple[int, int]] = {
    "i8": (-(2**7), 2**7 - 1),
    "i16": (-(2**15), 2**15 - 1),
    "i32": (-(2**31), 2**31 - 1),
    "i64": (-(2**63), 2**63 - 1),
    "u8": (0, 2**8 - 1),
    "u16": (0, 2**16 - 1),
    "u32": (0, 2**32 - 1),
    "u64": (0, 2**64 - 1),
}

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_BLANK_LINE_BEFORE_SECTION = True
DEFAULT_EMIT_NONE_PLACEHOLDERS = True
DEFAULT_KEY_VALUE_SEPARATOR = " = "
DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")
DEFAULT_USE_CHARDET = True
DEFAULT_CHARDET_CONFIDENCE_THRESHOLD = 0.7
