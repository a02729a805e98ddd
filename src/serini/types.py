#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/types.py
"""Scalar kinds and width markers.

Python has a single ``int`` and a single ``float``; the INI format however
round-trips fixed-width values whose range is checked on both sides. A field
opts into a width with one of the ``Annotated`` aliases below::

    from dataclasses import dataclass
    from serini.types import U16

    @dataclass
    class Server:
        host: str
        port: U16

Plain ``int`` is an unbounded signed integer, plain ``float`` is ``f64``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated


class ScalarKind(str, Enum):
    """Closed set of scalar kinds understood by the codec.

    The value of each member is the name reported in
    :class:`~serini.exceptions.InvalidValueError`.
    """

    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    INT = "int"
    F32 = "f32"
    F64 = "f64"
    CHAR = "char"
    STRING = "string"
    BYTES = "bytes"

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_KINDS

    @property
    def is_signed(self) -> bool:
        return self in (ScalarKind.I8, ScalarKind.I16, ScalarKind.I32, ScalarKind.I64, ScalarKind.INT)

    @property
    def is_float(self) -> bool:
        return self in (ScalarKind.F32, ScalarKind.F64)


_INTEGER_KINDS = frozenset(
    {
        ScalarKind.I8,
        ScalarKind.I16,
        ScalarKind.I32,
        ScalarKind.I64,
        ScalarKind.U8,
        ScalarKind.U16,
        ScalarKind.U32,
        ScalarKind.U64,
        ScalarKind.INT,
    }
)

# Plain Python annotations and the kind they map to
PLAIN_KINDS: dict[type, ScalarKind] = {
    bool: ScalarKind.BOOL,
    int: ScalarKind.INT,
    float: ScalarKind.F64,
    str: ScalarKind.STRING,
    bytes: ScalarKind.BYTES,
}

I8 = Annotated[int, ScalarKind.I8]
I16 = Annotated[int, ScalarKind.I16]
I32 = Annotated[int, ScalarKind.I32]
I64 = Annotated[int, ScalarKind.I64]
U8 = Annotated[int, ScalarKind.U8]
U16 = Annotated[int, ScalarKind.U16]
U32 = Annotated[int, ScalarKind.U32]
U64 = Annotated[int, ScalarKind.U64]
F32 = Annotated[float, ScalarKind.F32]
F64 = Annotated[float, ScalarKind.F64]
Char = Annotated[str, ScalarKind.CHAR]

__all__ = [
    "ScalarKind",
    "PLAIN_KINDS",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "F32",
    "F64",
    "Char",
]
