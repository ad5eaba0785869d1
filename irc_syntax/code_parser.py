"""Numeric reply dispatch."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .errors.internal import ArityError
from .logs.logger import logger
from .models import MessageContext
from .registry.codes import CODE_TABLE, UNKNOWN_CODE
from .registry.operation import Operation


class CodeParser:
    """Routes a numeric reply code to its operation.

    Recognized codes have their arity contract checked, their arguments bound
    and ``callback.on_<operation>(context, *values)`` invoked; everything else
    goes to ``callback.on_unknown_code(context, code, arguments)`` with the
    arguments untouched. The table is read-only, so one instance (or the
    module default) may be shared freely.
    """

    def __init__(self, table: Mapping[int, Operation] | None = None) -> None:
        self.table = CODE_TABLE if table is None else table

    def lookup(self, code: int) -> Operation | None:
        return self.table.get(code)

    def parse(
        self,
        code: int,
        arguments: Sequence[str],
        callback: Any,
        context: MessageContext | None = None,
    ) -> Any:
        """Dispatch ``code`` with ``arguments`` to ``callback``.

        ``context`` defaults to an empty MessageContext.

        Returns:
            Whatever the invoked callback method returns.

        Raises:
            TooFewItemsError: Recognized code, too few arguments.
            TooManyItemsError: Recognized code, too many arguments.
        """
        if context is None:
            context = MessageContext()
        operation = self.table.get(code)
        if operation is None:
            logger.log_event("dispatch", "unknown_code", level=logging.DEBUG, code=code)
            return getattr(callback, UNKNOWN_CODE.method)(context, code, arguments)

        args = list(arguments)
        try:
            operation.arity.check(code, len(args))
        except ArityError as e:
            logger.log_event(
                "dispatch",
                "arity_violation",
                level=logging.DEBUG,
                key=f"{code:03d}",
                reason=str(e),
            )
            raise
        return getattr(callback, operation.method)(context, *operation.bind(args))


default_code_parser = CodeParser()


def parse_code(
    code: int,
    arguments: Sequence[str],
    callback: Any,
    context: MessageContext | None = None,
) -> Any:
    return default_code_parser.parse(code, arguments, callback, context)


__all__ = ["CodeParser", "default_code_parser", "parse_code"]
