"""Operation set implementations.

A MessageCallback is any object providing ``on_<operation>(context, ...)`` for
the operations it cares about. ``AbstractMessageCallback`` supplies a method
for every registered operation returning None, so subclasses override only
what they handle::

    class Joins(AbstractMessageCallback):
        def on_join(self, context, channels, account, real_name):
            return context.source.nick, channels

``MessageFactoryCallback`` returns a plain-data message for every operation.
"""

from __future__ import annotations

import inspect
from typing import Any, Generic, TypeVar

from .messages import Message, build_message
from .models import MessageContext
from .registry import OPERATIONS
from .registry.operation import Operation

T = TypeVar("T")


def _signature(op: Operation) -> inspect.Signature:
    params = [
        inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD),
        inspect.Parameter(
            "context",
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            annotation="MessageContext",
        ),
    ]
    params.extend(
        inspect.Parameter(p.name, inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=p.type)
        for p in op.params
    )
    return inspect.Signature(params, return_annotation="T | None")


def _trigger_text(op: Operation) -> str:
    if isinstance(op.trigger, int):
        return f"numeric {op.trigger:03d}"
    return op.trigger or "unrecognized input"


def _install(cls: type, op: Operation, impl: Any) -> None:
    impl.__name__ = op.method
    impl.__qualname__ = f"{cls.__name__}.{op.method}"
    impl.__doc__ = f"Handle {_trigger_text(op)} ({', '.join(op.param_names)})."
    impl.__signature__ = _signature(op)
    setattr(cls, op.method, impl)


class AbstractMessageCallback(Generic[T]):
    """No-op operation set: every operation returns None."""


def _noop_method() -> Any:
    def handler(self, context: MessageContext, *values: Any) -> T | None:
        return None

    return handler


class MessageFactoryCallback(AbstractMessageCallback[Message]):
    """Operation set returning a ``messages`` dataclass for every operation."""


def _factory_method(op: Operation) -> Any:
    method = op.method

    def handler(self, context: MessageContext, *values: Any) -> Message:
        return build_message(method, context, *values)

    return handler


for _op in OPERATIONS:
    _install(AbstractMessageCallback, _op, _noop_method())
    _install(MessageFactoryCallback, _op, _factory_method(_op))

del _op


__all__ = [
    "AbstractMessageCallback",
    "MessageFactoryCallback",
]
