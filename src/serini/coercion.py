#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/coercion.py
"""Conversion between raw INI text and Python scalars.

The text carries no type information; the requested :class:`ScalarKind`
alone decides how a raw string is read back. Grammars are strict: no
surrounding whitespace, no leading ``+`` on integers, no digit separators.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from collections.abc import Set as AbstractSet
from enum import Enum
from typing import Any

from serini.constants import INTEGER_BOUNDS
from serini.exceptions import InvalidValueError, UnsupportedFeatureError
from serini.types import ScalarKind

_SIGNED_INT_RE = re.compile(r"-?[0-9]+")
_UNSIGNED_INT_RE = re.compile(r"[0-9]+")


def coerce(raw: str, kind: ScalarKind) -> Any:
    """Convert raw text to a scalar of the requested kind.

    Parameters
    ----------
    raw : str
        Unescaped, trimmed value text
    kind : ScalarKind
        Requested scalar kind

    Returns
    -------
    Any
        ``bool``, ``int``, ``float``, ``str`` or ``bytes``

    Raises
    ------
    InvalidValueError
        If the text does not parse as the requested kind

    Examples
    --------
    >>> coerce("8080", ScalarKind.U16)
    8080
    >>> coerce("true", ScalarKind.BOOL)
    True

    """
    if kind is ScalarKind.BOOL:
        if raw == "true":
            return True
        if raw == "false":
            return False
        raise InvalidValueError(kind.value, raw)
    if kind.is_integer:
        return _parse_int(raw, kind)
    if kind.is_float:
        return _parse_float(raw, kind)
    if kind is ScalarKind.CHAR:
        if len(raw) != 1:
            raise InvalidValueError(kind.value, raw)
        return raw
    if kind is ScalarKind.BYTES:
        return raw.encode("utf-8")
    return raw


def _parse_int(raw: str, kind: ScalarKind) -> int:
    pattern = _SIGNED_INT_RE if kind.is_signed else _UNSIGNED_INT_RE
    if not pattern.fullmatch(raw):
        raise InvalidValueError(kind.value, raw)
    try:
        value = int(raw)
    except ValueError as e:
        # digit count above sys.get_int_max_str_digits()
        raise InvalidValueError(kind.value, raw, original_error=e) from e
    _check_bounds(value, kind, raw)
    return value


def _parse_float(raw: str, kind: ScalarKind) -> float:
    # float() also accepts underscores, padding and non-ASCII digits
    if "_" in raw or raw != raw.strip() or not raw.isascii():
        raise InvalidValueError(kind.value, raw)
    try:
        return float(raw)
    except ValueError as e:
        raise InvalidValueError(kind.value, raw, original_error=e) from e


def _check_bounds(value: int, kind: ScalarKind | None, text: str) -> None:
    if kind is None:
        return
    bounds = INTEGER_BOUNDS.get(kind.value)
    if bounds is not None and not bounds[0] <= value <= bounds[1]:
        raise InvalidValueError(kind.value, text)


def format_float(value: float) -> str:
    """Render a float as its shortest round-trip text, without a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def render(value: Any, kind: ScalarKind | None = None) -> str:
    """Render a scalar value as unescaped INI text.

    Parameters
    ----------
    value : Any
        The scalar to render
    kind : ScalarKind, optional
        Kind declared by the field's annotation; used for range and
        single-character checks

    Returns
    -------
    str
        Value text, not yet escaped

    Raises
    ------
    InvalidValueError
        If the value falls outside its declared kind
    UnsupportedFeatureError
        If the value is a container or an enum member

    """
    if isinstance(value, Enum):
        raise UnsupportedFeatureError("enum variants")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        try:
            text = str(value)
        except ValueError as e:
            typ = kind.value if kind is not None else ScalarKind.INT.value
            raise InvalidValueError(typ, f"<{value.bit_length()}-bit integer>", original_error=e) from e
        _check_bounds(value, kind, text)
        return text
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        if kind is ScalarKind.CHAR and len(value) != 1:
            raise InvalidValueError(kind.value, value)
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    raise UnsupportedFeatureError(describe_unsupported(value))


def describe_unsupported(value: Any) -> str:
    """Name the unsupported shape of a value for error messages."""
    if isinstance(value, tuple):
        return "tuple structs" if hasattr(value, "_fields") else "tuples"
    if isinstance(value, Mapping):
        return "maps"
    if isinstance(value, AbstractSet):
        return "sets"
    if isinstance(value, (list, range)):
        return "sequences"
    return f"values of type {type(value).__name__}"
