"""serini - serialize Python dataclasses to and from INI text.

serini maps dataclass records onto the INI format: scalar fields become
``key = value`` lines, nested records become ``[section]`` headers, and an
optional field holding ``None`` becomes a commented ``; key = `` placeholder.
Decoding runs the other way, coercing each raw value to the field's declared
type.

Key Features
------------
- Fixed-width integers and floats via ``typing.Annotated`` markers
  (``U16``, ``I32``, ``F32``, ``Char`` ...), range-checked in both directions
- Escaping of newlines, tabs, quotes, backslashes and comment characters
- Field renaming and ``None`` skipping via :func:`ini_field`
- Encoding detection for byte input with chardet

Requirements
------------
- Python 3.10+

Examples
--------
Round-trip a nested configuration:

    >>> from dataclasses import dataclass
    >>> from typing import Optional
    >>> from serini import U16, deserialize, serialize
    >>>
    >>> @dataclass
    ... class Database:
    ...     host: str
    ...     password: Optional[str] = None
    >>>
    >>> @dataclass
    ... class Config:
    ...     name: str
    ...     port: U16
    ...     database: Database
    >>>
    >>> text = serialize(Config("My App", 8080, Database("localhost")))
    >>> print(text)  # doctest: +NORMALIZE_WHITESPACE
    name = My App
    port = 8080
    <BLANKLINE>
    [database]
    host = localhost
    ; password =
    <BLANKLINE>
    >>> deserialize(text, Config) == Config("My App", 8080, Database("localhost"))
    True

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "serini requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from serini.api import deserialize, dump, load, serialize
from serini.escaping import escape, unescape
from serini.exceptions import (
    DecodeError,
    EncodeError,
    InvalidOptionsError,
    InvalidValueError,
    MissingFieldError,
    SchemaError,
    SeriniError,
    UnsupportedFeatureError,
    UnsupportedTopLevelError,
    ValidationError,
)
from serini.options import DeserializerOptions, SerializerOptions
from serini.parser import SectionTable, parse
from serini.prober import Verdict, probe
from serini.schema import ini_field
from serini.types import F32, F64, I8, I16, I32, I64, U8, U16, U32, U64, Char, ScalarKind

__all__ = [
    "__version__",
    "serialize",
    "deserialize",
    "dump",
    "load",
    "escape",
    "unescape",
    "parse",
    "SectionTable",
    "probe",
    "Verdict",
    "ini_field",
    "SerializerOptions",
    "DeserializerOptions",
    "ScalarKind",
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
    # Exceptions
    "SeriniError",
    "ValidationError",
    "InvalidOptionsError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTopLevelError",
    "MissingFieldError",
    "InvalidValueError",
    "UnsupportedFeatureError",
]
