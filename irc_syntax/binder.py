"""Argument binders and structured helpers.

A binder turns an argument list that already passed its arity check into the
positional values of one operation. Binders are pure and total over every
list their contract admits; they never check counts themselves.

The remaining helpers give structure to pieces the tokenizer leaves raw:
prefixes, tag entries, NAMES entries and ISUPPORT tokens.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .constants import (
    DEFAULT_NAME_PREFIXES,
    LIST_SEPARATOR,
    NO_VALUE,
    TAG_VALUE_ESCAPES,
    TAG_VALUE_SEPARATOR,
)
from .models import NamReply, NameEntry, Source

Binder = Callable[[Sequence[str]], tuple]


# Generic shapes


def positional(count: int) -> Binder:
    """Pass arguments through in order, padding absent optionals with None."""

    def bind(arguments: Sequence[str]) -> tuple:
        values: list[str | None] = list(arguments[:count])
        values.extend([None] * (count - len(values)))
        return tuple(values)

    bind.__name__ = f"positional_{count}"
    return bind


def trailing_message(arguments: Sequence[str]) -> tuple:
    """``(last, [leading...])``, e.g. ISUPPORT's tokens and its message."""
    return arguments[-1], list(arguments[:-1])


def verbatim(arguments: Sequence[str]) -> tuple:
    return (list(arguments),)


def leading_then_rest(count: int) -> Binder:
    """First ``count`` arguments positionally, the rest as one list."""

    def bind(arguments: Sequence[str]) -> tuple:
        return (*arguments[:count], list(arguments[count:]))

    bind.__name__ = f"leading_{count}_then_rest"
    return bind


def split_list(value: str | None, separator: str = LIST_SEPARATOR) -> list[str]:
    """Split a comma (or other) joined argument, dropping empty items."""
    if not value:
        return []
    return [item for item in value.split(separator) if item]


def split_words(value: str | None) -> list[str]:
    return value.split() if value else []


def none_if_placeholder(value: str | None) -> str | None:
    return None if value is None or value == NO_VALUE else value


# Numeric reply binders


def bind_space_list(arguments: Sequence[str]) -> tuple:
    return (split_words(arguments[0]),)


def bind_comma_list(arguments: Sequence[str]) -> tuple:
    return (split_list(arguments[0]),)


def bind_whois_user(arguments: Sequence[str]) -> tuple:
    # <nick> <user> <host> * :<realname>; the fourth field is unused.
    nick, user, host, _unused, real_name = arguments
    return nick, user, host, real_name


def bind_whois_idle(arguments: Sequence[str]) -> tuple:
    # <nick> <secs> [<signon>] :<message>
    if len(arguments) == 4:
        nick, idle, signon, message = arguments
    else:
        nick, idle, message = arguments
        signon = None
    return nick, idle, signon, message


def bind_whois_channels(arguments: Sequence[str]) -> tuple:
    return arguments[0], split_words(arguments[1])


def bind_who_reply(arguments: Sequence[str]) -> tuple:
    # <channel> <user> <host> <server> <nick> <flags> :<hopcount> <realname>
    channel, user, host, server, nick, flags, last = arguments
    hop_count, _, real_name = last.partition(" ")
    return channel, user, host, server, nick, flags, hop_count, real_name


def bind_time(arguments: Sequence[str]) -> tuple:
    # <server> [<timestamp> [<offset>]] :<human readable time>
    return arguments[0], arguments[-1], list(arguments[1:-1])


def bind_sasl_mechanisms(arguments: Sequence[str]) -> tuple:
    return split_list(arguments[0]), arguments[1]


# Named command binders


def bind_account(arguments: Sequence[str]) -> tuple:
    return (none_if_placeholder(arguments[0]),)


def bind_batch(arguments: Sequence[str]) -> tuple:
    reference = arguments[0]
    batch_type = arguments[1] if len(arguments) > 1 else None
    return reference, batch_type, list(arguments[2:])


def bind_cap(arguments: Sequence[str]) -> tuple:
    # <client> <subcommand> [*] [:<capabilities>]; the client is dropped.
    subcommand = arguments[1].upper()
    rest = arguments[2:]
    continued = len(rest) == 2 and rest[0] == NO_VALUE
    capabilities = split_words(rest[-1]) if rest else []
    return subcommand, capabilities, continued


def bind_join(arguments: Sequence[str]) -> tuple:
    channels = split_list(arguments[0])
    account = none_if_placeholder(arguments[1]) if len(arguments) > 1 else None
    real_name = arguments[2] if len(arguments) > 2 else None
    return channels, account, real_name


def bind_kick(arguments: Sequence[str]) -> tuple:
    comment = arguments[2] if len(arguments) > 2 else None
    return split_list(arguments[0]), split_list(arguments[1]), comment


def bind_targets_message(arguments: Sequence[str]) -> tuple:
    return split_list(arguments[0]), arguments[1]


def bind_channels_optional(arguments: Sequence[str]) -> tuple:
    message = arguments[1] if len(arguments) > 1 else None
    return split_list(arguments[0]), message


# Structured helpers


def split_prefix(prefix: str) -> Source:
    """Split ``nick!user@host`` (any part after nick optional) into a Source."""
    nick, bang, rest = prefix.partition("!")
    if bang:
        user, at, host = rest.partition("@")
        return Source(nick, user, host if at else None)
    nick, at, host = prefix.partition("@")
    return Source(nick, None, host if at else None)


def unescape_tag_value(value: str) -> str:
    """Undo IRCv3 tag value escaping; unknown escapes drop the backslash."""
    if "\\" not in value:
        return value
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        escaped = next(chars, None)
        if escaped is None:
            break
        out.append(TAG_VALUE_ESCAPES.get(escaped, escaped))
    return "".join(out)


def parse_tags(tags: Iterable[str]) -> dict[str, str | None]:
    """Map raw tag entries to ``{key: value}``; bare keys map to None.

    Later duplicates win, matching the message-tags rule for repeated keys.
    """
    parsed: dict[str, str | None] = {}
    for tag in tags:
        key, sep, value = tag.partition(TAG_VALUE_SEPARATOR)
        parsed[key] = unescape_tag_value(value) if sep else None
    return parsed


def parse_name_entry(
    entry: str, prefixes: str = DEFAULT_NAME_PREFIXES
) -> NameEntry:
    """Split a NAMES entry like ``@+nick!user@host`` into a NameEntry."""
    index = 0
    while index < len(entry) and entry[index] in prefixes:
        index += 1
    source = split_prefix(entry[index:])
    return NameEntry(entry[:index], source.nick, source.user, source.host)


def parse_nam_reply(
    arguments: Sequence[str], prefixes: str = DEFAULT_NAME_PREFIXES
) -> NamReply:
    """Structure RPL_NAMREPLY arguments ``[<symbol>] <channel> :<names>``."""
    if not arguments:
        return NamReply(None, None, [])
    names = [parse_name_entry(e, prefixes) for e in split_words(arguments[-1])]
    if len(arguments) >= 3:
        return NamReply(arguments[-3], arguments[-2], names)
    if len(arguments) == 2:
        return NamReply(None, arguments[0], names)
    return NamReply(None, None, names)


def parse_isupport(tokens: Iterable[str]) -> dict[str, str | None]:
    """Parse ISUPPORT tokens; ``-KEY`` negations map to None, bare keys to ''."""
    parsed: dict[str, str | None] = {}
    for token in tokens:
        if token.startswith("-"):
            parsed[token[1:]] = None
            continue
        key, _, value = token.partition(TAG_VALUE_SEPARATOR)
        parsed[key] = unescape_isupport_value(value)
    return parsed


def unescape_isupport_value(value: str) -> str:
    # Values use \xHH escapes (e.g. \x20 for space, \x5C for backslash)
    if "\\x" not in value:
        return value
    out: list[str] = []
    index = 0
    while index < len(value):
        chunk = value[index:index + 4]
        if chunk.startswith("\\x") and len(chunk) == 4:
            try:
                out.append(chr(int(chunk[2:], 16)))
                index += 4
                continue
            except ValueError:
                pass
        out.append(value[index])
        index += 1
    return "".join(out)


def parse_prefix_modes(value: str) -> dict[str, str]:
    """Map ISUPPORT ``PREFIX=(ov)@+`` to ``{"o": "@", "v": "+"}``."""
    if not value.startswith("("):
        return {}
    modes, close, symbols = value[1:].partition(")")
    if not close:
        return {}
    return dict(zip(modes, symbols))


__all__ = [
    "Binder",
    "bind_account",
    "bind_batch",
    "bind_cap",
    "bind_channels_optional",
    "bind_comma_list",
    "bind_join",
    "bind_kick",
    "bind_sasl_mechanisms",
    "bind_space_list",
    "bind_targets_message",
    "bind_time",
    "bind_who_reply",
    "bind_whois_channels",
    "bind_whois_idle",
    "bind_whois_user",
    "leading_then_rest",
    "none_if_placeholder",
    "parse_isupport",
    "parse_name_entry",
    "parse_nam_reply",
    "parse_prefix_modes",
    "parse_tags",
    "positional",
    "split_list",
    "split_prefix",
    "split_words",
    "trailing_message",
    "unescape_isupport_value",
    "unescape_tag_value",
    "verbatim",
]
