"""Operation registry.

Every operation the parser can invoke, authored as data. Both dispatchers,
the no-op callback, the message dataclasses and the manifest are derived from
``OPERATIONS``; external code generators consume ``manifest()``.
"""

from __future__ import annotations

from .codes import CODE_TABLE, REPLIES, UNKNOWN_CODE
from .commands import COMMAND_TABLE, COMMANDS, UNKNOWN_COMMAND
from .operation import Operation, Param, operation

OPERATIONS: tuple[Operation, ...] = (*REPLIES, *COMMANDS, UNKNOWN_CODE, UNKNOWN_COMMAND)

OPERATIONS_BY_METHOD: dict[str, Operation] = {op.method: op for op in OPERATIONS}

if len(OPERATIONS_BY_METHOD) != len(OPERATIONS):  # pragma: no cover - authoring error
    raise ValueError("duplicate operation name in registry")


def manifest() -> list[dict[str, object]]:
    """Describe every operation, sorted by callback method name."""
    return [op.describe() for op in sorted(OPERATIONS, key=lambda op: op.method)]


def find_operation(method: str) -> Operation | None:
    return OPERATIONS_BY_METHOD.get(method)


__all__ = [
    "CODE_TABLE",
    "COMMAND_TABLE",
    "OPERATIONS",
    "OPERATIONS_BY_METHOD",
    "Operation",
    "Param",
    "UNKNOWN_CODE",
    "UNKNOWN_COMMAND",
    "find_operation",
    "manifest",
    "operation",
]
