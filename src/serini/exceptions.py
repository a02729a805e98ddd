#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the serini library.

This module defines the exception classes raised while encoding values to
INI text and decoding INI text back into dataclass instances. Every failure
aborts the current call; nothing is retried or recovered locally.

Exception Hierarchy
-------------------
- SeriniError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for an entry point)
    - SchemaError (dataclass annotations that cannot be resolved)

  - EncodeError (value to text failures)

  - DecodeError (text to value failures)
    - MissingFieldError (required field without a key)

  - UnsupportedTopLevelError (top-level value or target is not a record; encode and decode)

  - InvalidValueError (scalar text/value does not fit its kind; encode and decode)

  - UnsupportedFeatureError (sequences, tuples, maps, enums; encode and decode)

"""

from typing import Any


class SeriniError(Exception):
    """Base exception class for all serini-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(SeriniError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    entry_point : str
        Name of the entry point that received invalid options
    expected_type : type
        The expected options class
    received_type : type
        The class of the options object actually received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        entry_point: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{entry_point} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.entry_point = entry_point
        self.expected_type = expected_type
        self.received_type = received_type


class SchemaError(ValidationError):
    """Exception raised when a dataclass cannot be described as a record.

    This covers annotations that fail to resolve, such as forward references
    to names that are not importable from the dataclass' module.

    Parameters
    ----------
    record_type : type
        The dataclass whose schema could not be built
    message : str
        Description of the failure

    """

    def __init__(self, record_type: type, message: str, original_error: Exception | None = None):
        """Initialize the schema error."""
        super().__init__(message, parameter_name="cls", parameter_value=record_type, original_error=original_error)
        self.record_type = record_type


class EncodeError(SeriniError):
    """Base exception for failures while encoding a value to INI text."""


class DecodeError(SeriniError):
    """Base exception for failures while decoding INI text to a value."""


class UnsupportedTopLevelError(EncodeError, DecodeError):
    """Exception raised when the outermost value or target is not a record.

    Parameters
    ----------
    received_type : type
        Type of the value (or the target class) that was rejected

    """

    def __init__(self, received_type: type, message: str | None = None):
        """Initialize the unsupported top-level error."""
        if message is None:
            message = f"Top-level value must be a dataclass record, got '{received_type.__name__}'"
        super().__init__(message)
        self.received_type = received_type


class MissingFieldError(DecodeError):
    """Exception raised when a required field has no key in its section.

    Parameters
    ----------
    field : str
        INI key of the missing field
    record : str
        Name of the dataclass being decoded

    """

    def __init__(self, field: str, record: str):
        """Initialize the missing field error."""
        super().__init__(f"Missing field '{field}' for {record}")
        self.field = field
        self.record = record


class InvalidValueError(EncodeError, DecodeError):
    """Exception raised when text or a value does not fit the requested scalar kind.

    Parameters
    ----------
    typ : str
        Name of the expected scalar kind (e.g. ``"u16"``, ``"bool"``)
    value : str
        The offending raw text

    Attributes
    ----------
    typ : str
        Name of the expected scalar kind
    value : str
        The offending raw text

    """

    def __init__(self, typ: str, value: str, original_error: Exception | None = None):
        """Initialize the invalid value error."""
        super().__init__(f"Invalid {typ} value: {value!r}", original_error=original_error)
        self.typ = typ
        self.value = value


class UnsupportedFeatureError(EncodeError, DecodeError):
    """Exception raised for shapes the INI format cannot represent.

    Sequences, tuples, tuple records, maps, sets and enum variants are
    rejected at any depth, in both directions.

    Parameters
    ----------
    kind : str
        Short description of the rejected shape (e.g. ``"sequences"``)

    """

    def __init__(self, kind: str):
        """Initialize the unsupported feature error."""
        super().__init__(f"Unsupported feature: {kind}")
        self.kind = kind
