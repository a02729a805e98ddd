#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/utils/io_utils.py
"""Reading INI documents from and writing them to paths and streams."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Union, cast

from serini.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

TextSource = Union[str, Path, bytes, IO[bytes], IO[str]]
TextOutput = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(stream: IO[bytes] | IO[str]) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(content: str, output: TextOutput) -> None:
    """Write INI text to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Destination. Paths and binary streams receive UTF-8 bytes.

    Raises
    ------
    TypeError
        If ``output`` is neither a path nor writable

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} characters to {output}")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


def read_text(
    source: TextSource,
    fallback_encodings: tuple[str, ...] | None = None,
    use_chardet: bool = True,
    chardet_confidence_threshold: float = 0.7,
) -> str:
    """Read INI text from a path, raw bytes, or a file-like object.

    Parameters
    ----------
    source : str, Path, bytes, IO[bytes], or IO[str]
        A ``str`` is always treated as a file path.
    fallback_encodings : tuple[str, ...] or None, optional
        Encodings tried when byte input is not valid UTF-8
    use_chardet : bool, default True
        Whether to use chardet on byte input
    chardet_confidence_threshold : float, default 0.7
        Minimum confidence for the chardet guess

    Returns
    -------
    str
        Decoded text

    Raises
    ------
    TypeError
        If ``source`` is of an unsupported type
    OSError
        If a path cannot be read

    """
    if isinstance(source, (str, Path)):
        data = Path(source).read_bytes()
    elif isinstance(source, bytes):
        data = source
    elif hasattr(source, "read"):
        return normalize_stream_to_text(
            source,
            fallback_encodings=fallback_encodings,
            use_chardet=use_chardet,
            chardet_confidence_threshold=chardet_confidence_threshold,
        )
    else:
        raise TypeError(f"Unsupported source type: {type(source)}")

    return read_text_with_encoding_detection(
        data,
        fallback_encodings=fallback_encodings,
        use_chardet=use_chardet,
        chardet_confidence_threshold=chardet_confidence_threshold,
    )


__all__ = ["TextOutput", "TextSource", "read_text", "write_text"]
