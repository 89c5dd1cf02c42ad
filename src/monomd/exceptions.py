#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the monomd library.

This module defines specialized exception classes for the error conditions
that can occur while rendering MonoMD markup. The renderer degrades silently
on malformed markup wherever it can; these exceptions cover invalid
configuration, violated structural preconditions and unexpected failures.

Exception Hierarchy
-------------------
- MonoMdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class passed to the renderer)
    - InputTooLargeError (input exceeds the configured size cap)

  - ParsingError (structural precondition failures)
    - TableFormatError (table span without header and alignment lines)
    - ListFormatError (list run without items)

  - RenderingError (unexpected output generation failures)

"""

from typing import Any


class MonoMdError(Exception):
    """Base exception class for all monomd-specific errors.

    Catching this will catch every error raised on purpose by the library.

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


class ValidationError(MonoMdError):
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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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
    """Exception raised when the renderer receives an options object of the wrong type.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(self, expected_type: type, received_type: type, message: str | None = None):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"render() expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.expected_type = expected_type
        self.received_type = received_type


class InputTooLargeError(ValidationError):
    """Exception raised when the markup exceeds ``max_input_chars``.

    Parameters
    ----------
    size : int
        Length of the rejected input in characters
    limit : int
        The configured limit

    """

    def __init__(self, size: int, limit: int):
        """Initialize with the offending size and the configured limit."""
        super().__init__(
            f"Input of {size} characters exceeds the limit of {limit} characters",
            parameter_name="markdown",
            parameter_value=size,
        )
        self.size = size
        self.limit = limit


class ParsingError(MonoMdError):
    """Exception raised when a structural precondition of the markup is violated.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class TableFormatError(ParsingError):
    """Raised when a table span lacks a header line or an alignment line."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the table error."""
        super().__init__(message, parsing_stage="table", original_error=original_error)


class ListFormatError(ParsingError):
    """Raised when a list run contains no items."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the list error."""
        super().__init__(message, parsing_stage="list", original_error=original_error)


class RenderingError(MonoMdError):
    """Exception raised when output rendering fails unexpectedly.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
