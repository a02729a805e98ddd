#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy."""

import pytest

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


@pytest.mark.unit
class TestHierarchy:
    """Tests for how the exception classes relate."""

    @pytest.mark.parametrize(
        "exc_class, bases",
        [
            (InvalidOptionsError, (ValidationError, SeriniError)),
            (SchemaError, (ValidationError, SeriniError)),
            (UnsupportedTopLevelError, (EncodeError, DecodeError, SeriniError)),
            (MissingFieldError, (DecodeError, SeriniError)),
            (InvalidValueError, (EncodeError, DecodeError, SeriniError)),
            (UnsupportedFeatureError, (EncodeError, DecodeError, SeriniError)),
        ],
    )
    def test_subclassing(self, exc_class: type, bases: tuple) -> None:
        for base in bases:
            assert issubclass(exc_class, base)


@pytest.mark.unit
class TestAttributes:
    """Tests for the data carried by each exception."""

    def test_invalid_value(self) -> None:
        error = InvalidValueError("u16", "not_a_number")
        assert error.typ == "u16"
        assert error.value == "not_a_number"
        assert "u16" in str(error)
        assert "not_a_number" in str(error)

    def test_missing_field(self) -> None:
        error = MissingFieldError("port", "Server")
        assert error.field == "port"
        assert error.record == "Server"
        assert str(error) == "Missing field 'port' for Server"

    def test_unsupported_feature(self) -> None:
        error = UnsupportedFeatureError("sequences")
        assert error.kind == "sequences"
        assert str(error) == "Unsupported feature: sequences"

    def test_unsupported_top_level(self) -> None:
        error = UnsupportedTopLevelError(int)
        assert error.received_type is int
        assert "int" in str(error)

    def test_invalid_options_message(self) -> None:
        error = InvalidOptionsError("serialize", dict, list)
        assert error.parameter_name == "options"
        assert "dict" in error.message
        assert "list" in error.message

    def test_original_error_kept(self) -> None:
        cause = ValueError("bad")
        error = SeriniError("wrapped", original_error=cause)
        assert error.original_error is cause
        assert error.message == "wrapped"
