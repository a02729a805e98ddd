#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_escaping.py
"""Unit tests for value escaping and unescaping."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from serini.escaping import escape, unescape


@pytest.mark.unit
class TestEscape:
    """Tests for escape()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("plain", "plain"),
            ("", ""),
            ("a\\b", "a\\\\b"),
            ("line1\nline2", "line1\\nline2"),
            ("cr\rhere", "cr\\rhere"),
            ("tab\there", "tab\\there"),
            ('say "hi"', 'say \\"hi\\"'),
            ("a;b#c", "a\\;b\\#c"),
        ],
    )
    def test_escape_table(self, raw: str, expected: str) -> None:
        """Each special character maps to its two-character form."""
        assert escape(raw) == expected

    def test_escape_mixed_value(self) -> None:
        """Escaping a value with several special characters."""
        raw = 'Line 1\nLine 2\tTabbed'
        assert escape(raw) == "Line 1\\nLine 2\\tTabbed"
        raw = 'Value with "quotes" and ; semicolon # hash'
        assert escape(raw) == 'Value with \\"quotes\\" and \\; semicolon \\# hash'

    def test_escape_leaves_unicode_alone(self) -> None:
        assert escape("héllo wörld ✓") == "héllo wörld ✓"

    def test_escaped_value_is_single_line(self) -> None:
        assert "\n" not in escape("a\nb\nc")


@pytest.mark.unit
class TestUnescape:
    """Tests for unescape()."""

    def test_unescape_known_sequences(self) -> None:
        assert unescape("a\\nb\\tc\\rd") == "a\nb\tc\rd"
        assert unescape('\\"q\\"') == '"q"'
        assert unescape("a\\;b\\#c") == "a;b#c"

    def test_escaped_backslash_before_n(self) -> None:
        """An escaped backslash followed by 'n' is a backslash and an n, not a newline."""
        assert unescape("\\\\n") == "\\n"

    def test_unknown_escape_kept_literally(self) -> None:
        assert unescape("\\x41") == "\\x41"

    def test_trailing_backslash_kept(self) -> None:
        assert unescape("end\\") == "end\\"

    def test_plain_text_unchanged(self) -> None:
        assert unescape("nothing to do") == "nothing to do"


@pytest.mark.unit
@pytest.mark.property
class TestEscapingProperties:
    """Property-based tests for the escaping codec."""

    @given(st.text())
    def test_unescape_reverses_escape(self, value: str) -> None:
        """Property: unescape(escape(s)) == s for every string."""
        assert unescape(escape(value)) == value

    @given(st.text())
    def test_escape_output_has_no_raw_specials(self, value: str) -> None:
        """Property: escaped text never contains a raw newline, CR, tab, ';' or '#' outside an escape."""
        escaped = escape(value)
        assert "\n" not in escaped
        assert "\r" not in escaped
        assert "\t" not in escaped
        i = 0
        while i < len(escaped):
            if escaped[i] == "\\":
                i += 2
                continue
            assert escaped[i] not in ";#\""
            i += 1
