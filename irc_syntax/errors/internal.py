"""Centralized parser error hierarchy.

These exceptions give callers semantic categories for the failures the parser
can raise. Everything raised by the parser derives from ``ParsingError`` which is
also a ``ValueError`` so callers treating bad input generically keep working.

Classes:
  InternalError        – Base for all package errors (carries a data mapping).
  ConfigError          – Invalid parser settings or settings file.
  ParsingError         – A line could not be turned into an operation call.
  MalformedLineError   – Structural failure while tokenizing (no command token).
  ArityError           – Recognized command/code with an argument count outside
                         its contract.
  TooFewItemsError     – Arity violation below the contract's minimum.
  TooManyItemsError    – Arity violation above the contract's maximum.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all package errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Exception raised for invalid parser settings.

    Raised when a settings file cannot be read as a JSON object or when its
    values fail validation.
    """


class ParsingError(InternalError, ValueError):
    """Exception raised when a line cannot be dispatched to an operation."""


class MalformedLineError(ParsingError):
    """Exception raised when a line has no command token.

    Covers the empty line and lines whose only content is a tag block and/or
    a prefix.
    """

    def __init__(self, message: str, *, line: str) -> None:
        super().__init__(message, data={"line": line})
        self.line = line


class ArityError(ParsingError):
    """Exception raised when a recognized command gets the wrong argument count.

    Attributes:
        key: The numeric code or command name that was being dispatched.
        actual: Number of arguments received.
    """

    def __init__(self, message: str, *, key: int | str, actual: int) -> None:
        super().__init__(message, data={"key": key, "actual": actual})
        self.key = key
        self.actual = actual


class TooFewItemsError(ArityError):
    """Argument count below the contract's minimum."""


class TooManyItemsError(ArityError):
    """Argument count above the contract's maximum."""


__all__ = [
    "InternalError",
    "ConfigError",
    "ParsingError",
    "MalformedLineError",
    "ArityError",
    "TooFewItemsError",
    "TooManyItemsError",
]
