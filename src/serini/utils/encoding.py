#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/utils/encoding.py
"""Character encoding detection for INI input.

INI files in the wild are rarely guaranteed to be UTF-8. Byte input given
to :func:`serini.load` is decoded as strict UTF-8 when valid, then by a
chardet guess, then by a list of fallback encodings.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import IO

import chardet

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or its
        confidence is below the threshold

    """
    sample = data[:sample_size]
    result = chardet.detect(sample)

    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence >= confidence_threshold:
        return encoding
    logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
    return None


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: Sequence[str] | None = None,
    use_chardet: bool = True,
    chardet_confidence_threshold: float = 0.7,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Attempts, in order:
    1. Strict UTF-8 (a leading byte order mark is dropped)
    2. chardet-based detection (if enabled)
    3. Fallback encodings in order
    4. UTF-8 with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : Sequence[str] | None, default None
        Encodings to try in order. If None, uses
        ``('utf-8', 'utf-8-sig', 'latin-1')``
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first
    chardet_confidence_threshold : float, default 0.7
        Minimum confidence for chardet detection

    Returns
    -------
    str
        Decoded text content

    """
    if fallback_encodings is None:
        fallback_encodings = ("utf-8", "utf-8-sig", "latin-1")

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8, trying detection")

    if use_chardet:
        detected_encoding = detect_encoding(data, confidence_threshold=chardet_confidence_threshold)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Failed to decode with chardet-detected encoding {detected_encoding}: {e}")

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
            logger.debug(f"Successfully decoded with encoding: {encoding}")
            return text
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(
    stream: IO[bytes] | IO[str],
    fallback_encodings: Sequence[str] | None = None,
    use_chardet: bool = True,
    chardet_confidence_threshold: float = 0.7,
) -> str:
    """Read a binary or text file-like object as text.

    Parameters
    ----------
    stream : IO[bytes] or IO[str]
        File-like object to read from
    fallback_encodings : Sequence[str] or None, optional
        Encodings tried for binary streams when detection fails
    use_chardet : bool, default True
        Whether to use chardet on binary streams
    chardet_confidence_threshold : float, default 0.7
        Minimum confidence level for chardet detection

    Returns
    -------
    str
        Decoded text content

    Raises
    ------
    TypeError
        If stream.read() returns something other than bytes or str

    """
    content = stream.read()

    if isinstance(content, bytes):
        return read_text_with_encoding_detection(
            content,
            fallback_encodings=fallback_encodings,
            use_chardet=use_chardet,
            chardet_confidence_threshold=chardet_confidence_threshold,
        )
    elif isinstance(content, str):
        return content
    else:
        raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")
