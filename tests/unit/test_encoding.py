#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_encoding.py
"""Unit tests for encoding detection and text I/O helpers."""

from io import BytesIO, StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from serini.utils.encoding import detect_encoding, normalize_stream_to_text, read_text_with_encoding_detection
from serini.utils.io_utils import read_text, write_text


@pytest.mark.unit
class TestDetectEncoding:
    """Tests for detect_encoding()."""

    def test_plain_ascii(self) -> None:
        data = b"name = My App\nport = 8080\n"
        encoding = detect_encoding(data)
        assert encoding is not None
        assert data.decode(encoding) == "name = My App\nport = 8080\n"

    def test_below_threshold(self) -> None:
        with patch("serini.utils.encoding.chardet.detect", return_value={"encoding": "cp1252", "confidence": 0.2}):
            assert detect_encoding(b"\xe9") is None

    def test_no_result(self) -> None:
        with patch("serini.utils.encoding.chardet.detect", return_value={"encoding": None, "confidence": 0.0}):
            assert detect_encoding(b"") is None


@pytest.mark.unit
class TestReadTextWithEncodingDetection:
    """Tests for read_text_with_encoding_detection()."""

    def test_utf8_preferred(self) -> None:
        assert read_text_with_encoding_detection("ümlaut".encode("utf-8")) == "ümlaut"

    def test_bom_dropped(self) -> None:
        assert read_text_with_encoding_detection(b"\xef\xbb\xbfa = 1") == "a = 1"

    def test_chardet_guess_used(self) -> None:
        with patch("serini.utils.encoding.chardet.detect", return_value={"encoding": "cp1252", "confidence": 0.9}):
            assert read_text_with_encoding_detection(b"caf\xe9") == "café"

    def test_fallback_encodings(self) -> None:
        text = read_text_with_encoding_detection(b"caf\xe9", fallback_encodings=("ascii", "latin-1"), use_chardet=False)
        assert text == "café"

    def test_unknown_fallback_skipped(self) -> None:
        text = read_text_with_encoding_detection(
            b"caf\xe9", fallback_encodings=("no-such-codec", "latin-1"), use_chardet=False
        )
        assert text == "café"

    def test_replacement_as_last_resort(self, caplog: pytest.LogCaptureFixture) -> None:
        text = read_text_with_encoding_detection(b"caf\xe9", fallback_encodings=("ascii",), use_chardet=False)
        assert text == "caf�"
        assert "All encoding attempts failed" in caplog.text


@pytest.mark.unit
class TestStreams:
    """Tests for stream and path helpers."""

    def test_text_stream(self) -> None:
        assert normalize_stream_to_text(StringIO("a = 1")) == "a = 1"

    def test_binary_stream(self) -> None:
        assert normalize_stream_to_text(BytesIO(b"a = 1")) == "a = 1"

    def test_unexpected_read_type(self) -> None:
        class Weird:
            def read(self) -> int:
                return 3

        with pytest.raises(TypeError):
            normalize_stream_to_text(Weird())  # type: ignore[arg-type]

    def test_write_and_read_path(self, tmp_path: Path) -> None:
        path = tmp_path / "x.ini"
        write_text("a = ü\n", path)
        assert read_text(path) == "a = ü\n"

    def test_write_binary_by_mode(self) -> None:
        class ModeOnly:
            mode = "wb"

            def __init__(self) -> None:
                self.data = b""

            def write(self, data: bytes) -> None:
                self.data += data

        out = ModeOnly()
        write_text("a = 1\n", out)  # type: ignore[arg-type]
        assert out.data == b"a = 1\n"
