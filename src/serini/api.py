"""The major exported API functions for INI serialization."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/serini/api.py
import logging
from typing import Any, Optional, TypeVar

from serini.decoder import Decoder
from serini.encoder import Encoder
from serini.exceptions import InvalidOptionsError
from serini.options import DeserializerOptions, SerializerOptions
from serini.utils.io_utils import TextOutput, TextSource, read_text, write_text

logger = logging.getLogger(__name__)

T = TypeVar("T")
OptionsT = TypeVar("OptionsT", SerializerOptions, DeserializerOptions)


def _validate_options_type(options: Any, expected_type: type[OptionsT], entry_point: str) -> OptionsT:
    """Return ``options`` or defaults, rejecting options of the wrong class.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not None and not an instance of ``expected_type``

    """
    if options is None:
        return expected_type()
    if not isinstance(options, expected_type):
        raise InvalidOptionsError(entry_point, expected_type, type(options))
    return options


def serialize(value: Any, options: Optional[SerializerOptions] = None) -> str:
    """Serialize a dataclass instance to INI text.

    Parameters
    ----------
    value : Any
        Dataclass instance. Scalar fields become ``key = value`` lines in the
        root section, record fields become ``[key]`` sections.
    options : SerializerOptions, optional
        Output formatting options

    Returns
    -------
    str
        INI text

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a SerializerOptions
    UnsupportedTopLevelError
        If ``value`` is not a dataclass instance
    UnsupportedFeatureError
        If a field holds a sequence, map, enum or other unsupported shape
    InvalidValueError
        If a width-annotated field holds an out-of-range value

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class App:
    ...     name: str
    ...     port: int
    >>> serialize(App(name="demo", port=8080))
    'name = demo\\nport = 8080\\n'

    """
    options = _validate_options_type(options, SerializerOptions, "serialize")
    return Encoder(options).encode(value)


def deserialize(text: str, cls: type[T], options: Optional[DeserializerOptions] = None) -> T:
    """Deserialize INI text into an instance of ``cls``.

    Parameters
    ----------
    text : str
        INI document
    cls : type
        Target dataclass
    options : DeserializerOptions, optional
        Decoding options

    Returns
    -------
    T
        Decoded instance

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a DeserializerOptions
    UnsupportedTopLevelError
        If ``cls`` is not a dataclass
    MissingFieldError
        If a required field is absent
    InvalidValueError
        If a value does not parse as its field's type

    """
    options = _validate_options_type(options, DeserializerOptions, "deserialize")
    return Decoder(options).decode(text, cls)


def dump(value: Any, output: TextOutput, options: Optional[SerializerOptions] = None) -> None:
    """Serialize ``value`` and write it to a path or file-like object.

    Parameters
    ----------
    value : Any
        Dataclass instance
    output : str, Path, IO[bytes], or IO[str]
        Destination. Paths and binary streams receive UTF-8.
    options : SerializerOptions, optional
        Output formatting options

    """
    options = _validate_options_type(options, SerializerOptions, "dump")
    write_text(serialize(value, options), output)


def load(source: TextSource, cls: type[T], options: Optional[DeserializerOptions] = None) -> T:
    """Read INI text from a path, bytes, or file-like object and decode it.

    Parameters
    ----------
    source : str, Path, bytes, IO[bytes], or IO[str]
        INI source. A ``str`` is a file path; byte input goes through
        encoding detection.
    cls : type
        Target dataclass
    options : DeserializerOptions, optional
        Decoding and encoding-detection options

    Returns
    -------
    T
        Decoded instance

    """
    options = _validate_options_type(options, DeserializerOptions, "load")
    text = read_text(
        source,
        fallback_encodings=options.fallback_encodings,
        use_chardet=options.use_chardet,
        chardet_confidence_threshold=options.chardet_confidence_threshold,
    )
    logger.debug(f"Loaded {len(text)} characters of INI text for {getattr(cls, '__name__', cls)}")
    return deserialize(text, cls, options)


__all__ = ["deserialize", "dump", "load", "serialize"]
