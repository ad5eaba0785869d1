"""Operation records: the data every dispatch table is built from."""

from __future__ import annotations

from dataclasses import dataclass

from ..arity import Arity
from ..binder import Binder, positional

# Names taken by the dispatch context and by generated methods.
RESERVED_PARAMS = frozenset({"tags", "prefix", "target", "context", "self"})


@dataclass(frozen=True, slots=True)
class Param:
    name: str
    type: str = "str"


@dataclass(frozen=True, slots=True)
class Operation:
    """One handler in the operation set.

    Attributes:
        name: snake_case operation name; the callback method is ``on_<name>``.
        trigger: Numeric code or upper-case command name; None for catch-alls.
        params: Ordered parameters the callback receives after the context.
        arity: Contract checked before ``binder`` runs.
        binder: Maps validated arguments to the parameter values.
    """

    name: str
    trigger: int | str | None
    params: tuple[Param, ...]
    arity: Arity
    binder: Binder

    def __post_init__(self) -> None:
        clashes = RESERVED_PARAMS.intersection(p.name for p in self.params)
        if clashes:
            raise ValueError(f"{self.name}: reserved parameter names {sorted(clashes)}")

    @property
    def method(self) -> str:
        return f"on_{self.name}"

    @property
    def message_name(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params)

    def bind(self, arguments: list[str]) -> tuple:
        return self.binder(arguments)

    def describe(self) -> dict[str, object]:
        if isinstance(self.trigger, int):
            trigger: dict[str, object] = {"code": self.trigger}
        elif isinstance(self.trigger, str):
            trigger = {"command": self.trigger}
        else:
            trigger = {"fallback": True}
        return {
            "operation": self.method,
            "message": self.message_name,
            "trigger": trigger,
            "parameters": [{"name": p.name, "type": p.type} for p in self.params],
            "arity": self.arity.describe(),
        }


def parse_params(text: str) -> tuple[Param, ...]:
    """Parse ``"channel, message, tokens:list[str]"`` into Params."""
    params = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        name, _, type_ = item.partition(":")
        params.append(Param(name.strip(), type_.strip() or "str"))
    return tuple(params)


def operation(
    name: str,
    trigger: int | str | None,
    params: str,
    arity: Arity,
    binder: Binder | None = None,
) -> Operation:
    """Build an Operation; the default binder is positional over ``params``."""
    parsed = parse_params(params)
    return Operation(
        name=name,
        trigger=trigger,
        params=parsed,
        arity=arity,
        binder=binder or positional(len(parsed)),
    )


__all__ = ["Operation", "Param", "RESERVED_PARAMS", "operation", "parse_params"]
