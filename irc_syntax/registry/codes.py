"""Numeric reply registry.

One entry per reply code of RFC 1459/2812 and the modern client protocol
(IRCv3 SASL, MONITOR, STARTTLS). Argument lists exclude the leading client
target, which the facade moves into the dispatch context. Unless stated
otherwise a reply has an exact contract equal to its parameter count and is
bound positionally.
"""

from __future__ import annotations

from ..arity import UNCONSTRAINED, Arity, at_least, between, exact
from ..binder import (
    Binder,
    bind_comma_list,
    bind_sasl_mechanisms,
    bind_space_list,
    bind_time,
    bind_who_reply,
    bind_whois_channels,
    bind_whois_idle,
    bind_whois_user,
    leading_then_rest,
    trailing_message,
    verbatim,
)
from .operation import Operation, operation, parse_params


def _reply(
    code: int,
    name: str,
    params: str,
    arity: Arity | None = None,
    binder: Binder | None = None,
) -> Operation:
    if arity is None:
        arity = exact(len(parse_params(params)))
    return operation(name, code, params, arity, binder)


_LIST_ENTRY = "channel, mask, setter:str | None, set_at:str | None"

REPLIES: tuple[Operation, ...] = (
    # Connection registration
    _reply(1, "welcome", "message"),
    _reply(2, "your_host", "message"),
    _reply(3, "created", "message"),
    _reply(
        4,
        "my_info",
        "server_name, version, user_modes, channel_modes, channel_modes_with_param:str | None",
        between(4, 5),
    ),
    _reply(5, "isupport", "message, tokens:list[str]", at_least(2), trailing_message),
    _reply(10, "bounce", "hostname, port, message"),
    # User mode and server statistics
    _reply(221, "user_mode_is", "user_modes"),
    _reply(251, "luser_client", "message"),
    _reply(252, "luser_op", "count, message"),
    _reply(253, "luser_unknown", "count, message"),
    _reply(254, "luser_channels", "count, message"),
    _reply(255, "luser_me", "message"),
    _reply(256, "admin_me", "server, message"),
    _reply(257, "admin_loc1", "message"),
    _reply(258, "admin_loc2", "message"),
    _reply(259, "admin_email", "message"),
    _reply(263, "try_again", "command, message"),
    _reply(265, "local_users", "message, counts:list[str]", at_least(1), trailing_message),
    _reply(266, "global_users", "message, counts:list[str]", at_least(1), trailing_message),
    # WHOIS / WHOWAS / AWAY
    _reply(276, "whois_cert_fp", "nick, message"),
    _reply(301, "nick_away", "nick, message"),
    _reply(302, "user_host", "replies:list[str]", binder=bind_space_list),
    _reply(305, "unaway", "message"),
    _reply(306, "now_away", "message"),
    _reply(307, "whois_reg_nick", "nick, message"),
    _reply(
        311,
        "whois_user",
        "nick, user, host, real_name",
        exact(5),
        bind_whois_user,
    ),
    _reply(312, "whois_server", "nick, server, server_info"),
    _reply(313, "whois_operator", "nick, message"),
    _reply(
        314,
        "whowas_user",
        "nick, user, host, real_name",
        exact(5),
        bind_whois_user,
    ),
    _reply(315, "end_of_who", "mask, message"),
    _reply(
        317,
        "whois_idle",
        "nick, idle_seconds, signon:str | None, message",
        between(3, 4),
        bind_whois_idle,
    ),
    _reply(318, "end_of_whois", "nick, message"),
    _reply(
        319,
        "whois_channels",
        "nick, channels:list[str]",
        binder=bind_whois_channels,
    ),
    _reply(320, "whois_special", "nick, message"),
    # Channel list, modes and topic
    _reply(321, "list_start", "arguments:list[str]", UNCONSTRAINED, verbatim),
    _reply(322, "list", "channel, visible_count, topic"),
    _reply(323, "list_end", "message"),
    _reply(
        324,
        "channel_mode_is",
        "channel, modes, mode_arguments:list[str]",
        at_least(2),
        leading_then_rest(2),
    ),
    _reply(329, "creation_time", "channel, creation_time"),
    _reply(330, "whois_account", "nick, account, message"),
    _reply(331, "no_topic", "channel, message"),
    _reply(332, "channel_topic", "channel, topic"),
    _reply(333, "topic_who_time", "channel, setter, set_at"),
    _reply(336, "invite_list", "channel"),
    _reply(337, "end_of_invite_list", "message"),
    _reply(338, "whois_actually", "arguments:list[str]", UNCONSTRAINED, verbatim),
    _reply(341, "inviting", "nick, channel"),
    _reply(346, "invex_list", _LIST_ENTRY, between(2, 4)),
    _reply(347, "end_of_invex_list", "channel, message"),
    _reply(348, "except_list", _LIST_ENTRY, between(2, 4)),
    _reply(349, "end_of_except_list", "channel, message"),
    _reply(351, "version", "version, server, comments"),
    _reply(
        352,
        "who_reply",
        "channel, user, host, server, nick, flags, hop_count, real_name",
        exact(7),
        bind_who_reply,
    ),
    _reply(353, "nam_reply", "arguments:list[str]", UNCONSTRAINED, verbatim),
    _reply(354, "whox_reply", "arguments:list[str]", UNCONSTRAINED, verbatim),
    _reply(364, "links", "mask, server, info"),
    _reply(365, "end_of_links", "mask, message"),
    _reply(366, "end_of_names", "channel, message"),
    _reply(367, "ban_list", _LIST_ENTRY, between(2, 4)),
    _reply(368, "end_of_ban_list", "channel, message"),
    _reply(369, "end_of_whowas", "nick, message"),
    # Server information
    _reply(371, "info", "message"),
    _reply(372, "motd", "message"),
    _reply(374, "end_of_info", "message"),
    _reply(375, "motd_start", "message"),
    _reply(376, "end_of_motd", "message"),
    _reply(378, "whois_host", "nick, message"),
    _reply(379, "whois_modes", "nick, message"),
    _reply(381, "youre_oper", "message"),
    _reply(382, "rehashing", "config_file, message"),
    _reply(
        391,
        "time",
        "server, message, details:list[str]",
        at_least(2),
        bind_time,
    ),
    # Errors
    _reply(400, "unknown_error", "message, details:list[str]", at_least(2), trailing_message),
    _reply(401, "no_such_nick", "nick, message"),
    _reply(402, "no_such_server", "server, message"),
    _reply(403, "no_such_channel", "channel, message"),
    _reply(404, "cannot_send_to_chan", "channel, message"),
    _reply(405, "too_many_channels", "channel, message"),
    _reply(406, "was_no_such_nick", "nick, message"),
    _reply(409, "no_origin", "message"),
    _reply(411, "no_recipient", "message"),
    _reply(412, "no_text_to_send", "message"),
    _reply(417, "input_too_long", "message"),
    _reply(421, "unknown_command_error", "command, message"),
    _reply(422, "no_motd", "message"),
    _reply(431, "no_nickname_given", "message"),
    _reply(432, "erroneous_nickname", "nick, message"),
    _reply(433, "nickname_in_use", "nick, message"),
    _reply(436, "nick_collision", "nick, message"),
    _reply(441, "user_not_in_channel", "nick, channel, message"),
    _reply(442, "not_on_channel", "channel, message"),
    _reply(443, "user_on_channel", "nick, channel, message"),
    _reply(451, "not_registered", "message"),
    _reply(461, "need_more_params", "command, message"),
    _reply(462, "already_registered", "message"),
    _reply(464, "passwd_mismatch", "message"),
    _reply(465, "youre_banned_creep", "message"),
    _reply(471, "channel_is_full", "channel, message"),
    _reply(472, "unknown_mode", "mode_char, message"),
    _reply(473, "invite_only_chan", "channel, message"),
    _reply(474, "banned_from_chan", "channel, message"),
    _reply(475, "bad_channel_key", "channel, message"),
    _reply(476, "bad_chan_mask", "channel, message"),
    _reply(481, "no_privileges", "message"),
    _reply(482, "chanop_privs_needed", "channel, message"),
    _reply(483, "cant_kill_server", "message"),
    _reply(491, "no_oper_host", "message"),
    _reply(501, "umode_unknown_flag", "message"),
    _reply(502, "users_dont_match", "message"),
    _reply(524, "help_not_found", "subject, message"),
    _reply(525, "invalid_key", "channel, message"),
    # STARTTLS, mode parameters, HELP
    _reply(670, "start_tls", "message"),
    _reply(691, "start_tls_error", "message"),
    _reply(696, "invalid_mode_param", "mode_target, mode_char, parameter, message"),
    _reply(704, "help_start", "subject, message"),
    _reply(705, "help_text", "subject, message"),
    _reply(706, "end_of_help", "subject, message"),
    _reply(723, "no_privs", "privilege, message"),
    # MONITOR
    _reply(730, "mon_online", "targets:list[str]", binder=bind_comma_list),
    _reply(731, "mon_offline", "targets:list[str]", binder=bind_comma_list),
    _reply(732, "mon_list", "targets:list[str]", binder=bind_comma_list),
    _reply(733, "end_of_mon_list", "message"),
    _reply(734, "mon_list_full", "limit, targets, message"),
    # SASL
    _reply(900, "logged_in", "mask, account, message"),
    _reply(901, "logged_out", "mask, message"),
    _reply(902, "nick_locked", "message"),
    _reply(903, "sasl_success", "message"),
    _reply(904, "sasl_fail", "message"),
    _reply(905, "sasl_too_long", "message"),
    _reply(906, "sasl_aborted", "message"),
    _reply(907, "sasl_already", "message"),
    _reply(
        908,
        "sasl_mechs",
        "mechanisms:list[str], message",
        binder=bind_sasl_mechanisms,
    ),
)

UNKNOWN_CODE = operation(
    "unknown_code", None, "code:int, arguments:list[str]", UNCONSTRAINED
)

CODE_TABLE: dict[int, Operation] = {op.trigger: op for op in REPLIES}

if len(CODE_TABLE) != len(REPLIES):  # pragma: no cover - registry authoring error
    raise ValueError("duplicate numeric code in reply registry")

__all__ = ["CODE_TABLE", "REPLIES", "UNKNOWN_CODE"]
