"""Arity contracts for registered operations.

A contract states how many arguments a command or reply code accepts. The
dispatchers check it before any argument binding happens.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors.internal import TooFewItemsError, TooManyItemsError

TOO_FEW = "Too few items"
TOO_MANY = "Too many items"


@dataclass(frozen=True, slots=True)
class Arity:
    """Inclusive argument count bounds; ``maximum`` None means unbounded."""

    minimum: int = 0
    maximum: int | None = None

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError("minimum must be >= 0")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError("maximum must be >= minimum")

    @property
    def kind(self) -> str:
        if self.maximum is None:
            return "unconstrained" if self.minimum == 0 else "minimum"
        return "exact" if self.maximum == self.minimum else "between"

    def check(self, key: int | str, count: int) -> None:
        """Raise TooFewItemsError/TooManyItemsError when ``count`` is outside."""
        if count < self.minimum:
            raise TooFewItemsError(TOO_FEW, key=key, actual=count)
        if self.maximum is not None and count > self.maximum:
            raise TooManyItemsError(TOO_MANY, key=key, actual=count)

    def describe(self) -> dict[str, object]:
        data: dict[str, object] = {"kind": self.kind}
        if self.kind == "exact":
            data["count"] = self.minimum
        elif self.kind != "unconstrained":
            data["minimum"] = self.minimum
            if self.maximum is not None:
                data["maximum"] = self.maximum
        return data


def exact(count: int) -> Arity:
    return Arity(count, count)


def at_least(count: int) -> Arity:
    return Arity(count, None)


def between(minimum: int, maximum: int) -> Arity:
    return Arity(minimum, maximum)


UNCONSTRAINED = Arity()

__all__ = [
    "Arity",
    "TOO_FEW",
    "TOO_MANY",
    "UNCONSTRAINED",
    "at_least",
    "between",
    "exact",
]
