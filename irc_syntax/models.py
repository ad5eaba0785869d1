"""Shared data models for tokenized lines and dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property


@dataclass(frozen=True, slots=True)
class NamedCommand:
    """A textual command such as ``PRIVMSG``, kept exactly as received."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class NumericCommand:
    """A three-digit reply code, ``code`` in 0..999."""

    code: int

    def __str__(self) -> str:
        return f"{self.code:03d}"


Command = NamedCommand | NumericCommand


@dataclass(frozen=True, slots=True)
class Source:
    """A prefix split into its ``nick!user@host`` components."""

    nick: str
    user: str | None = None
    host: str | None = None


@dataclass(frozen=True, slots=True)
class NameEntry:
    """One entry of a NAMES reply.

    ``modes`` holds the membership prefix characters found in front of the
    nickname (several with multi-prefix), highest rank first.
    """

    modes: str
    nick: str
    user: str | None = None
    host: str | None = None


@dataclass(frozen=True, slots=True)
class NamReply:
    visibility: str | None
    channel: str | None
    names: list[NameEntry] = field(default_factory=list)


@dataclass(frozen=True)
class MessageContext:
    """Per-call dispatch context handed to every MessageCallback operation.

    Attributes:
        tags: Raw tag entries (``key`` or ``key=value``) in line order.
        prefix: Message source without the leading ``:``.
        target: First argument of a numeric reply (the client it is addressed
            to); None for named commands.
    """

    tags: tuple[str, ...] = ()
    prefix: str | None = None
    target: str | None = None

    @cached_property
    def source(self) -> Source | None:
        from .binder import split_prefix

        return split_prefix(self.prefix) if self.prefix is not None else None

    @cached_property
    def tag_map(self) -> dict[str, str | None]:
        from .binder import parse_tags

        return parse_tags(self.tags)


__all__ = [
    "Command",
    "MessageContext",
    "NamReply",
    "NameEntry",
    "NamedCommand",
    "NumericCommand",
    "Source",
]
