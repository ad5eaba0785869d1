"""
Unit tests for numeric reply dispatch.
"""

from unittest.mock import Mock

import pytest

from irc_syntax import messages
from irc_syntax.callbacks import AbstractMessageCallback, MessageFactoryCallback
from irc_syntax.code_parser import CodeParser, parse_code
from irc_syntax.errors import ArityError, TooFewItemsError, TooManyItemsError
from irc_syntax.models import MessageContext
from irc_syntax.registry.codes import CODE_TABLE

ONE = ["a"]
TWO = ["a", "b"]
THREE = ["a", "b", "c"]
FOUR = ["a", "b", "c", "d"]
EMPTY = MessageContext()


def verify_too_few(code, arguments, callback):
    with pytest.raises(TooFewItemsError):
        parse_code(code, arguments, callback)


def verify_too_many(code, arguments, callback):
    with pytest.raises(TooManyItemsError):
        parse_code(code, arguments, callback)


class TestUnknownCodes:
    def test_unknown_code_empty(self, callback):
        parse_code(999, [], callback)
        callback.on_unknown_code.assert_called_once_with(EMPTY, 999, [])

    def test_unknown_code_passes_arguments_untouched(self, callback):
        arguments = list(FOUR)
        parse_code(998, arguments, callback)
        callback.on_unknown_code.assert_called_once_with(EMPTY, 998, FOUR)
        assert callback.on_unknown_code.call_args.args[2] is arguments

    @pytest.mark.parametrize("code", [c for c in range(1000) if c not in CODE_TABLE][::37])
    def test_any_unregistered_code_never_fails(self, code):
        callback = Mock()
        for arguments in ([], ONE, FOUR + FOUR):
            callback.reset_mock()
            parse_code(code, arguments, callback)
            callback.on_unknown_code.assert_called_once_with(EMPTY, code, arguments)

    def test_returns_callback_result(self, callback):
        callback.on_unknown_code.return_value = "handled"
        assert parse_code(997, [], callback) == "handled"


class TestWelcome:
    def test_too_few(self, callback):
        verify_too_few(1, [], callback)
        callback.on_welcome.assert_not_called()

    def test_exact(self, callback):
        parse_code(1, ["message"], callback)
        callback.on_welcome.assert_called_once_with(EMPTY, "message")

    def test_too_many(self, callback):
        verify_too_many(1, TWO, callback)
        callback.on_welcome.assert_not_called()


class TestIsupport:
    def test_too_few(self, callback):
        verify_too_few(5, [], callback)
        verify_too_few(5, ONE, callback)
        callback.on_isupport.assert_not_called()

    def test_minimum(self, callback):
        parse_code(5, ["token", "message"], callback)
        callback.on_isupport.assert_called_once_with(EMPTY, "message", ["token"])

    def test_unbounded(self, callback):
        parse_code(5, FOUR + ["message"], callback)
        callback.on_isupport.assert_called_once_with(EMPTY, "message", FOUR)


class TestNamReply:
    def test_empty(self, callback):
        parse_code(353, [], callback)
        callback.on_nam_reply.assert_called_once_with(EMPTY, [])

    def test_verbatim(self, callback):
        parse_code(353, FOUR, callback)
        callback.on_nam_reply.assert_called_once_with(EMPTY, FOUR)


class TestEndOfNames:
    def test_too_few(self, callback):
        verify_too_few(366, [], callback)
        verify_too_few(366, ONE, callback)

    def test_exact(self, callback):
        parse_code(366, ["channel", "message"], callback)
        callback.on_end_of_names.assert_called_once_with(EMPTY, "channel", "message")

    def test_too_many(self, callback):
        verify_too_many(366, THREE, callback)
        callback.on_end_of_names.assert_not_called()


class TestOtherReplies:
    """A sample of the wider registry and its binders."""

    def test_my_info_optional_field(self, callback):
        parse_code(4, ["srv", "v1", "iw", "ntk"], callback)
        callback.on_my_info.assert_called_once_with(EMPTY, "srv", "v1", "iw", "ntk", None)

    def test_whois_user_drops_placeholder(self, callback):
        parse_code(311, ["nick", "user", "host", "*", "Real Name"], callback)
        callback.on_whois_user.assert_called_once_with(
            EMPTY, "nick", "user", "host", "Real Name"
        )

    def test_whois_idle_with_and_without_signon(self, callback):
        parse_code(317, ["nick", "12", "1700000000", "seconds idle, signon time"], callback)
        parse_code(317, ["nick", "12", "seconds idle"], callback)
        assert callback.on_whois_idle.call_args_list[0].args == (
            EMPTY, "nick", "12", "1700000000", "seconds idle, signon time",
        )
        assert callback.on_whois_idle.call_args_list[1].args == (
            EMPTY, "nick", "12", None, "seconds idle",
        )

    def test_who_reply_splits_hop_count(self, callback):
        parse_code(
            352, ["#c", "u", "h", "srv", "nick", "H@", "0 Real Name"], callback
        )
        callback.on_who_reply.assert_called_once_with(
            EMPTY, "#c", "u", "h", "srv", "nick", "H@", "0", "Real Name"
        )

    def test_channel_mode_is(self, callback):
        parse_code(324, ["#c", "+kl", "key", "10"], callback)
        callback.on_channel_mode_is.assert_called_once_with(
            EMPTY, "#c", "+kl", ["key", "10"]
        )

    def test_ban_list_optional_setter(self, callback):
        parse_code(367, ["#c", "*!*@bad"], callback)
        callback.on_ban_list.assert_called_once_with(EMPTY, "#c", "*!*@bad", None, None)
        verify_too_many(367, ["#c", "m", "s", "t", "x"], callback)

    def test_monitor_targets(self, callback):
        parse_code(730, ["a!u@h,b!u@h"], callback)
        callback.on_mon_online.assert_called_once_with(EMPTY, ["a!u@h", "b!u@h"])

    def test_sasl_mechs(self, callback):
        parse_code(908, ["PLAIN,EXTERNAL", "are available SASL mechanisms"], callback)
        callback.on_sasl_mechs.assert_called_once_with(
            EMPTY, ["PLAIN", "EXTERNAL"], "are available SASL mechanisms"
        )

    def test_time_details(self, callback):
        parse_code(391, ["srv", "1700000000", "0", "Tue Nov 14"], callback)
        callback.on_time.assert_called_once_with(
            EMPTY, "srv", "Tue Nov 14", ["1700000000", "0"]
        )


class TestContext:
    def test_given_context_reaches_handler(self, callback):
        context = MessageContext(tags=("k=v",), prefix="srv", target="me")
        parse_code(1, ["hi"], callback, context)
        parse_code(998, ONE, callback, context)
        callback.on_welcome.assert_called_once_with(context, "hi")
        callback.on_unknown_code.assert_called_once_with(context, 998, ONE)


class TestPackagedOperationSets:
    context = MessageContext(prefix="srv", target="me")

    def test_factory_welcome(self):
        message = parse_code(1, ["hi"], MessageFactoryCallback(), self.context)
        assert message == messages.Welcome((), "srv", "me", "hi")

    def test_factory_with_default_context(self):
        message = parse_code(1, ["hi"], MessageFactoryCallback())
        assert message == messages.Welcome((), None, None, "hi")

    def test_factory_isupport(self):
        message = parse_code(5, ["A=1", "B", "supported"], MessageFactoryCallback())
        assert message.message == "supported"
        assert message.tokens == ["A=1", "B"]

    def test_factory_nam_reply(self):
        message = parse_code(353, ["=", "#c", "@op"], MessageFactoryCallback())
        assert message.arguments == ["=", "#c", "@op"]

    def test_factory_end_of_names(self):
        message = parse_code(366, ["#c", "End"], MessageFactoryCallback(), self.context)
        assert message == messages.EndOfNames((), "srv", "me", "#c", "End")

    def test_factory_unknown_code(self):
        message = parse_code(998, TWO, MessageFactoryCallback(), self.context)
        assert message.code == 998
        assert message.arguments == TWO
        assert message.target == "me"

    def test_abstract_subclass_binds_values(self):
        class Welcomes(AbstractMessageCallback):
            def on_welcome(self, context, message):
                return context.target, message

        assert parse_code(1, ["hi"], Welcomes(), self.context) == ("me", "hi")
        assert parse_code(366, TWO, Welcomes()) is None


class TestCodeParser:
    def test_error_carries_key_and_count(self, callback):
        with pytest.raises(ArityError) as excinfo:
            parse_code(366, ONE, callback)
        assert excinfo.value.key == 366
        assert excinfo.value.actual == 1
        assert "Too few items" in str(excinfo.value)

    def test_custom_table(self, callback):
        parser = CodeParser({1: CODE_TABLE[366]})
        parser.parse(1, TWO, callback)
        callback.on_end_of_names.assert_called_once_with(EMPTY, "a", "b")
        parser.parse(366, TWO, callback)
        callback.on_unknown_code.assert_called_once_with(EMPTY, 366, TWO)

    def test_lookup(self):
        parser = CodeParser()
        assert parser.lookup(1).method == "on_welcome"
        assert parser.lookup(999) is None
