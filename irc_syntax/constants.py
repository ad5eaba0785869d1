"""
Protocol constants shared by the tokenizer, binders and settings.
"""

TAG_MARKER = "@"
PREFIX_MARKER = ":"
TRAILING_MARKER = ":"
TAG_SEPARATOR = ";"
TAG_VALUE_SEPARATOR = "="
LIST_SEPARATOR = ","

# Membership prefixes in rank order (founder, protected, op, halfop, voice).
DEFAULT_NAME_PREFIXES = "~&@%+"

# Placeholder some servers send where a field is absent (ACCOUNT, extended-join).
NO_VALUE = "*"

# IRCv3 message-tags value escapes.
TAG_VALUE_ESCAPES = {
    ":": ";",
    "s": " ",
    "\\": "\\",
    "r": "\r",
    "n": "\n",
}

NUMERIC_DIGITS = frozenset("0123456789")
NUMERIC_LENGTH = 3
