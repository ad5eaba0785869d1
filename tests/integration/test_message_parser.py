"""
Integration tests: raw lines through the MessageParser facade.
"""

import threading
from unittest.mock import Mock

import pytest

from irc_syntax import (
    AbstractMessageCallback,
    MalformedLineError,
    MessageContext,
    MessageFactoryCallback,
    MessageParser,
    ParserSettings,
    TooFewItemsError,
    TooManyItemsError,
)
from irc_syntax import messages
from irc_syntax.models import NameEntry


@pytest.fixture
def parser(callback):
    return MessageParser(callback)


class TestNumericReplies:
    def test_welcome_moves_target_into_context(self, parser, callback):
        parser.parse(":irc.example.net 001 me :Welcome to the Example network")
        callback.on_welcome.assert_called_once_with(
            MessageContext(tags=(), prefix="irc.example.net", target="me"),
            "Welcome to the Example network",
        )

    def test_isupport(self, parser, callback):
        parser.parse(":srv 005 me CHANTYPES=# PREFIX=(ov)@+ :are supported by this server")
        context, message, tokens = callback.on_isupport.call_args.args
        assert context.target == "me"
        assert message == "are supported by this server"
        assert tokens == ["CHANTYPES=#", "PREFIX=(ov)@+"]

    def test_nam_reply_and_end_of_names(self, parser, callback):
        parser.parse(":srv 353 me = #chan :@op +voice plain")
        parser.parse(":srv 366 me #chan :End of /NAMES list.")
        context, arguments = callback.on_nam_reply.call_args.args
        assert arguments == ["=", "#chan", "@op +voice plain"]
        assert parser.names(arguments).names[0] == NameEntry("@", "op")
        callback.on_end_of_names.assert_called_once_with(
            MessageContext(prefix="srv", target="me"), "#chan", "End of /NAMES list."
        )

    def test_unknown_numeric(self, parser, callback):
        parser.parse("@k=v :srv 998 me a b :c d")
        callback.on_unknown_code.assert_called_once_with(
            MessageContext(tags=("k=v",), prefix="srv", target="me"), 998, ["a", "b", "c d"]
        )

    def test_numeric_without_any_argument(self, parser, callback):
        parser.parse(":srv 999")
        callback.on_unknown_code.assert_called_once_with(
            MessageContext(prefix="srv", target=None), 999, []
        )
        with pytest.raises(TooFewItemsError):
            parser.parse(":srv 001")

    def test_arity_violation(self, parser, callback):
        with pytest.raises(TooManyItemsError):
            parser.parse(":srv 366 me #chan extra :End of /NAMES list.")
        callback.on_end_of_names.assert_not_called()


class TestNamedCommands:
    def test_privmsg(self, parser, callback):
        parser.parse("@time=2024-01-01T00:00:00Z :bob!b@host PRIVMSG #chan :hello there")
        context, targets, message = callback.on_privmsg.call_args.args
        assert context.tags == ("time=2024-01-01T00:00:00Z",)
        assert context.source.nick == "bob"
        assert context.target is None
        assert targets == ["#chan"]
        assert message == "hello there"

    def test_lowercase_command(self, parser, callback):
        parser.parse(":a!b@c join #chan")
        callback.on_join.assert_called_once()

    def test_case_sensitive_settings(self, callback):
        parser = MessageParser(callback, ParserSettings(case_insensitive_commands=False))
        parser.parse(":a!b@c join #chan")
        callback.on_join.assert_not_called()
        callback.on_unknown_command.assert_called_once_with(
            MessageContext(prefix="a!b@c"), "join", ["#chan"]
        )

    def test_unknown_command(self, parser, callback):
        parser.parse(":srv FROB x :y z")
        callback.on_unknown_command.assert_called_once_with(
            MessageContext(prefix="srv"), "FROB", ["x", "y z"]
        )

    def test_non_letter_command_reaches_catch_all(self, parser, callback):
        parser.parse(" :srv 1a2 x")
        callback.on_unknown_command.assert_called_once_with(
            MessageContext(prefix="srv"), "1a2", ["x"]
        )


class TestFacade:
    def test_returns_operation_result(self):
        class Collector(AbstractMessageCallback):
            def __init__(self):
                self.seen = []

            def on_privmsg(self, context, targets, message):
                self.seen.append(message)
                return len(self.seen)

        collector = Collector()
        parser = MessageParser(collector)
        assert parser.parse(":a PRIVMSG #c :one") == 1
        assert parser.parse(":a PRIVMSG #c :two") == 2
        assert parser.parse(":a NOTICE #c :ignored") is None
        assert collector.seen == ["one", "two"]

    @pytest.mark.parametrize("line", ["", "@a=b", ":prefix", "@a=b :prefix "])
    def test_malformed(self, parser, line):
        with pytest.raises(MalformedLineError):
            parser.parse(line)

    def test_reusable_after_failure(self, parser, callback):
        with pytest.raises(TooFewItemsError):
            parser.parse("@a=1 :x 001 me")
        parser.parse(":y 001 me :hi")
        callback.on_welcome.assert_called_once_with(
            MessageContext(tags=(), prefix="y", target="me"), "hi"
        )

    def test_context_not_shared_between_lines(self, parser, callback):
        parser.parse("@a=1 :x PRIVMSG #c :one")
        parser.parse("PRIVMSG #c :two")
        first, second = (c.args[0] for c in callback.on_privmsg.call_args_list)
        assert first == MessageContext(tags=("a=1",), prefix="x")
        assert second == MessageContext()

    def test_factory_callback(self):
        parser = MessageParser(MessageFactoryCallback())
        message = parser.parse("@a=1 :srv 366 me #chan :End of /NAMES list.")
        assert message == messages.EndOfNames(
            ("a=1",), "srv", "me", "#chan", "End of /NAMES list."
        )

    def test_shared_instance_across_threads(self):
        results = {}
        parser = MessageParser(MessageFactoryCallback())

        def work(index):
            results[index] = [
                parser.parse(f":n{index}!u@h PRIVMSG #c :{i}").prefix for i in range(200)
            ]

        threads = [threading.Thread(target=work, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for index, prefixes in results.items():
            assert set(prefixes) == {f"n{index}!u@h"}

    def test_rejected_line_logged_at_debug(self, caplog):
        caplog.set_level("DEBUG", logger="irc_syntax")
        parser = MessageParser(Mock())
        with pytest.raises(MalformedLineError):
            parser.parse("@only=tags")
        assert any("Line has no command" in r.getMessage() for r in caplog.records)

    def test_rejected_line_logging_disabled(self, caplog):
        caplog.set_level("DEBUG", logger="irc_syntax")
        parser = MessageParser(Mock(), ParserSettings(log_rejected_lines=False))
        with pytest.raises(MalformedLineError):
            parser.parse("@only=tags")
        assert not any("Line has no command" in r.getMessage() for r in caplog.records)
