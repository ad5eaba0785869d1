"""Parser facade: one line in, one operation call out."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .binder import parse_nam_reply
from .code_parser import CodeParser, default_code_parser
from .command_parser import CommandParser
from .config.model import ParserSettings
from .errors.internal import ParsingError
from .logs.logger import logger
from .models import MessageContext, NamedCommand, NamReply
from .tokenizer import TokenizedLine, tokenize

T = TypeVar("T")


class MessageParser(Generic[T]):
    """Parses lines and invokes the matching operation on ``callback``.

    Every operation receives a fresh MessageContext as its first argument.
    For numeric replies the first argument of the line becomes
    ``context.target`` and the remaining arguments are checked against the
    reply's contract. The parser keeps no per-line state, so it can be reused
    for any number of lines and keeps working after a failed line.
    """

    def __init__(self, callback, settings: ParserSettings | None = None) -> None:
        self.callback = callback
        self.settings = settings or ParserSettings()
        self.code_parser: CodeParser = default_code_parser
        self.command_parser = CommandParser(
            case_insensitive=self.settings.case_insensitive_commands
        )

    def parse(self, line: str) -> T:
        """Parse ``line`` and return the invoked operation's result.

        Raises:
            MalformedLineError: The line has no command token.
            TooFewItemsError: Recognized command, too few arguments.
            TooManyItemsError: Recognized command, too many arguments.
        """
        try:
            return self._dispatch(tokenize(line))
        except ParsingError as e:
            if self.settings.log_rejected_lines:
                logger.log_event(
                    "parser",
                    "rejected",
                    level=logging.DEBUG,
                    reason=str(e),
                    line=line,
                )
            raise

    def _dispatch(self, tokens: TokenizedLine) -> T:
        logger.log_event(
            "tokenizer",
            "tokenized",
            level=logging.DEBUG,
            command=str(tokens.command),
            argument_count=len(tokens.arguments),
        )
        if isinstance(tokens.command, NamedCommand):
            return self.command_parser.parse(
                tokens.command.name,
                tokens.tags,
                tokens.prefix,
                list(tokens.arguments),
                self.callback,
            )
        target, *arguments = tokens.arguments or (None,)
        context = MessageContext(tags=tokens.tags, prefix=tokens.prefix, target=target)
        return self.code_parser.parse(
            tokens.command.code,
            arguments,
            self.callback,
            context,
        )

    def names(self, arguments: list[str]) -> NamReply:
        """Structure RPL_NAMREPLY arguments with this parser's prefix set."""
        return parse_nam_reply(arguments, self.settings.name_prefixes)


__all__ = ["MessageParser"]
