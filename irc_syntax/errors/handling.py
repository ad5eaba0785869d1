from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    ArityError,
    ConfigError,
    InternalError,
    MalformedLineError,
)


def classify_error(error: Exception) -> str:
    """Return the structured-log category for ``error``."""
    if isinstance(error, MalformedLineError):
        return "malformed"
    if isinstance(error, ArityError):
        return "arity"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, InternalError):
        return "internal"
    if isinstance(error, OSError):
        return "io"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    The error is categorized from its type and forwarded to the structured
    error log so repeated failures are aggregated per category. Any ``data``
    attached to package errors is merged into the logged context.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )


__all__ = ["classify_error", "log_error"]
