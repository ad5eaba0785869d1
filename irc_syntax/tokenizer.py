"""IRC line tokenizer.

Splits one already-delimited line into its structural components::

    [@tag1;tag2=val ][:prefix ]<COMMAND> [arg1] [arg2] ... [:trailing with spaces]

The scan runs left to right once, without backtracking. Leading spaces are
skipped. It performs no lookup: whether a command is numeric is decided from
the shape of its token alone. Any other command token is accepted as a
NamedCommand as received (``1a2``, ``:x``), so a token that is not letters
reaches the unknown-command catch-all instead of failing the line. The line
terminator must already be removed; a trailing CR stays in the last argument.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    NUMERIC_DIGITS,
    NUMERIC_LENGTH,
    PREFIX_MARKER,
    TAG_MARKER,
    TAG_SEPARATOR,
    TRAILING_MARKER,
)
from .errors.internal import MalformedLineError
from .models import Command, NamedCommand, NumericCommand


@dataclass(frozen=True, slots=True)
class TokenizedLine:
    tags: tuple[str, ...]
    prefix: str | None
    command: Command
    arguments: tuple[str, ...]

    def to_line(self) -> str:
        """Serialize back to wire form (without line terminator)."""
        parts: list[str] = []
        if self.tags:
            parts.append(TAG_MARKER + TAG_SEPARATOR.join(self.tags))
        if self.prefix is not None:
            parts.append(PREFIX_MARKER + self.prefix)
        parts.append(str(self.command))
        if self.arguments:
            *middle, last = self.arguments
            parts.extend(middle)
            if not last or " " in last or last.startswith(TRAILING_MARKER):
                last = TRAILING_MARKER + last
            parts.append(last)
        return " ".join(parts)


def classify_command(token: str) -> Command:
    """Return NumericCommand for exactly three ASCII digits, else NamedCommand."""
    if len(token) == NUMERIC_LENGTH and all(ch in NUMERIC_DIGITS for ch in token):
        return NumericCommand(int(token))
    return NamedCommand(token)


def _skip_spaces(line: str, pos: int) -> int:
    length = len(line)
    while pos < length and line[pos] == " ":
        pos += 1
    return pos


def _read_token(line: str, pos: int) -> tuple[str, int]:
    end = line.find(" ", pos)
    if end == -1:
        end = len(line)
    return line[pos:end], end


def tokenize(line: str) -> TokenizedLine:
    """Split ``line`` into tags, prefix, command and arguments.

    Raises:
        MalformedLineError: If the line is empty or holds only a tag block
            and/or a prefix.
    """
    length = len(line)
    pos = _skip_spaces(line, 0)

    tags: tuple[str, ...] = ()
    if line.startswith(TAG_MARKER, pos):
        block, pos = _read_token(line, pos + 1)
        tags = tuple(tag for tag in block.split(TAG_SEPARATOR) if tag)
        pos = _skip_spaces(line, pos)

    prefix: str | None = None
    if line.startswith(PREFIX_MARKER, pos):
        prefix, pos = _read_token(line, pos + 1)
        pos = _skip_spaces(line, pos)

    if pos >= length:
        raise MalformedLineError("Line has no command", line=line)
    token, pos = _read_token(line, pos)
    command = classify_command(token)

    arguments: list[str] = []
    pos = _skip_spaces(line, pos)
    while pos < length:
        if line[pos] == TRAILING_MARKER:
            arguments.append(line[pos + 1:])
            break
        token, pos = _read_token(line, pos)
        arguments.append(token)
        pos = _skip_spaces(line, pos)

    return TokenizedLine(
        tags=tags, prefix=prefix, command=command, arguments=tuple(arguments)
    )


__all__ = ["TokenizedLine", "classify_command", "tokenize"]
