"""Named command dispatch."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .errors.internal import ArityError
from .logs.logger import logger
from .models import MessageContext
from .registry.commands import COMMAND_TABLE, UNKNOWN_COMMAND
from .registry.operation import Operation


class CommandParser:
    """Routes a textual command to its operation.

    Operations receive a MessageContext built from ``tags`` and ``prefix``
    followed by their bound values. Names are upper-cased before lookup when
    ``case_insensitive`` is set; unknown names reach
    ``callback.on_unknown_command(context, name, arguments)`` with the name as
    received.
    """

    def __init__(
        self,
        table: Mapping[str, Operation] | None = None,
        *,
        case_insensitive: bool = True,
    ) -> None:
        self.table = COMMAND_TABLE if table is None else table
        self.case_insensitive = case_insensitive

    def lookup(self, name: str) -> Operation | None:
        key = name.upper() if self.case_insensitive else name
        return self.table.get(key)

    def parse(
        self,
        name: str,
        tags: Sequence[str],
        prefix: str | None,
        arguments: Sequence[str],
        callback: Any,
    ) -> Any:
        """Dispatch command ``name`` to ``callback``.

        Returns:
            Whatever the invoked callback method returns.

        Raises:
            TooFewItemsError: Recognized command, too few arguments.
            TooManyItemsError: Recognized command, too many arguments.
        """
        context = MessageContext(tags=tuple(tags), prefix=prefix)
        operation = self.lookup(name)
        if operation is None:
            logger.log_event(
                "dispatch", "unknown_command", level=logging.DEBUG, name=name
            )
            return getattr(callback, UNKNOWN_COMMAND.method)(context, name, arguments)

        args = list(arguments)
        try:
            operation.arity.check(operation.trigger, len(args))
        except ArityError as e:
            logger.log_event(
                "dispatch",
                "arity_violation",
                level=logging.DEBUG,
                key=operation.trigger,
                reason=str(e),
            )
            raise
        return getattr(callback, operation.method)(context, *operation.bind(args))


default_command_parser = CommandParser()


def parse_command(
    name: str,
    tags: Sequence[str],
    prefix: str | None,
    arguments: Sequence[str],
    callback: Any,
) -> Any:
    return default_command_parser.parse(name, tags, prefix, arguments, callback)


__all__ = ["CommandParser", "default_command_parser", "parse_command"]
