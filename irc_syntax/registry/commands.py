"""Named command registry (server-to-client forms of RFC 2812 and IRCv3)."""

from __future__ import annotations

from ..arity import UNCONSTRAINED, at_least, between, exact
from ..binder import (
    bind_account,
    bind_batch,
    bind_cap,
    bind_channels_optional,
    bind_join,
    bind_kick,
    bind_targets_message,
    leading_then_rest,
)
from .operation import Operation, operation

COMMANDS: tuple[Operation, ...] = (
    operation("account", "ACCOUNT", "account:str | None", exact(1), bind_account),
    operation("authenticate", "AUTHENTICATE", "data", exact(1)),
    operation("away", "AWAY", "message:str | None", between(0, 1)),
    operation(
        "batch",
        "BATCH",
        "reference, batch_type:str | None, parameters:list[str]",
        at_least(1),
        bind_batch,
    ),
    operation(
        "cap",
        "CAP",
        "subcommand, capabilities:list[str], continued:bool",
        between(2, 4),
        bind_cap,
    ),
    operation("chghost", "CHGHOST", "new_user, new_host", exact(2)),
    operation("error", "ERROR", "message", exact(1)),
    operation("invite", "INVITE", "nick, channel", exact(2)),
    operation(
        "join",
        "JOIN",
        "channels:list[str], account:str | None, real_name:str | None",
        between(1, 3),
        bind_join,
    ),
    operation(
        "kick",
        "KICK",
        "channels:list[str], nicks:list[str], comment:str | None",
        between(2, 3),
        bind_kick,
    ),
    operation("kill", "KILL", "nick, comment:str | None", between(1, 2)),
    operation(
        "mode",
        "MODE",
        "mode_target, modes, mode_arguments:list[str]",
        at_least(2),
        leading_then_rest(2),
    ),
    operation("nick", "NICK", "nick", exact(1)),
    operation(
        "notice", "NOTICE", "targets:list[str], message", exact(2), bind_targets_message
    ),
    operation(
        "part",
        "PART",
        "channels:list[str], message:str | None",
        between(1, 2),
        bind_channels_optional,
    ),
    operation("ping", "PING", "token, server:str | None", between(1, 2)),
    operation("pong", "PONG", "server, token:str | None", between(1, 2)),
    operation(
        "privmsg", "PRIVMSG", "targets:list[str], message", exact(2), bind_targets_message
    ),
    operation("quit", "QUIT", "message:str | None", between(0, 1)),
    operation("setname", "SETNAME", "real_name", exact(1)),
    operation("tagmsg", "TAGMSG", "recipient", exact(1)),
    operation("topic", "TOPIC", "channel, topic", exact(2)),
    operation("wallops", "WALLOPS", "message", exact(1)),
)

UNKNOWN_COMMAND = operation(
    "unknown_command", None, "name, arguments:list[str]", UNCONSTRAINED
)

COMMAND_TABLE: dict[str, Operation] = {op.trigger: op for op in COMMANDS}

__all__ = ["COMMANDS", "COMMAND_TABLE", "UNKNOWN_COMMAND"]
