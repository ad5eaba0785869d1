"""Error hierarchy and error-reporting helpers."""

from .internal import (  # noqa: F401
    ArityError,
    ConfigError,
    InternalError,
    MalformedLineError,
    ParsingError,
    TooFewItemsError,
    TooManyItemsError,
)

__all__ = [
    "ArityError",
    "ConfigError",
    "InternalError",
    "MalformedLineError",
    "ParsingError",
    "TooFewItemsError",
    "TooManyItemsError",
]
