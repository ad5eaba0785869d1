"""IRC line tokenizer and operation dispatcher.

Typical use::

    from irc_syntax import AbstractMessageCallback, MessageParser

    class Printer(AbstractMessageCallback):
        def on_privmsg(self, context, targets, message):
            return f"{context.source.nick} -> {targets}: {message}"

    MessageParser(Printer()).parse(":nick!u@h PRIVMSG #chan :hello there")
"""

from .callbacks import (  # noqa: F401
    AbstractMessageCallback,
    MessageFactoryCallback,
)
from .code_parser import CodeParser, parse_code  # noqa: F401
from .command_parser import CommandParser, parse_command  # noqa: F401
from .config import ParserSettings, load_settings  # noqa: F401
from .errors import (  # noqa: F401
    ArityError,
    MalformedLineError,
    ParsingError,
    TooFewItemsError,
    TooManyItemsError,
)
from .message_parser import MessageParser  # noqa: F401
from .messages import Message  # noqa: F401
from .models import (  # noqa: F401
    MessageContext,
    NamedCommand,
    NameEntry,
    NamReply,
    NumericCommand,
    Source,
)
from .registry import OPERATIONS, manifest  # noqa: F401
from .tokenizer import TokenizedLine, tokenize  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "AbstractMessageCallback",
    "ArityError",
    "CodeParser",
    "CommandParser",
    "MalformedLineError",
    "Message",
    "MessageContext",
    "MessageFactoryCallback",
    "MessageParser",
    "NamReply",
    "NameEntry",
    "NamedCommand",
    "NumericCommand",
    "OPERATIONS",
    "ParserSettings",
    "ParsingError",
    "Source",
    "TokenizedLine",
    "TooFewItemsError",
    "TooManyItemsError",
    "load_settings",
    "manifest",
    "parse_code",
    "parse_command",
    "tokenize",
]
