"""Plain-data messages, one dataclass per registered operation.

Each class is named after its operation (``on_end_of_names`` ->
``EndOfNames``) and carries the dispatch context fields followed by the
operation's parameters::

    EndOfNames(tags=(), prefix="irc.example", target="me",
               channel="#chan", message="End of /NAMES list.")

The classes are generated from the registry when this module is imported and
exposed as module attributes and through ``MESSAGE_TYPES``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, make_dataclass
from typing import Any

from .models import MessageContext
from .registry import OPERATIONS
from .registry.operation import Operation


@dataclass(frozen=True)
class Message:
    tags: tuple[str, ...]
    prefix: str | None
    target: str | None

    @property
    def operation(self) -> str:
        return _OPERATION_BY_TYPE[type(self)].method

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["tags"] = list(self.tags)
        return {"type": type(self).__name__, **data}


def _build_message_type(op: Operation) -> type[Message]:
    fields = [(p.name, p.type) for p in op.params]
    return make_dataclass(
        op.message_name,
        fields,
        bases=(Message,),
        frozen=True,
        namespace={"__module__": __name__, "__doc__": f"Message for ``{op.method}``."},
    )


MESSAGE_TYPES: dict[str, type[Message]] = {
    op.method: _build_message_type(op) for op in OPERATIONS
}
_OPERATION_BY_TYPE: dict[type[Message], Operation] = {
    MESSAGE_TYPES[op.method]: op for op in OPERATIONS
}

globals().update({cls.__name__: cls for cls in MESSAGE_TYPES.values()})


def build_message(method: str, context: MessageContext, *values: Any) -> Message:
    """Instantiate the message for ``method`` from a context and bound values."""
    cls = MESSAGE_TYPES[method]
    return cls(context.tags, context.prefix, context.target, *values)


__all__ = ["MESSAGE_TYPES", "Message", "build_message"] + sorted(
    cls.__name__ for cls in MESSAGE_TYPES.values()
)
