from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_NAME_PREFIXES


class ParserSettings(BaseModel):
    """Tunable policy for a MessageParser.

    Attributes:
        case_insensitive_commands: Match named commands regardless of case.
            When disabled only the upper-case spelling is recognized and other
            spellings go to the unknown-command catch-all.
        name_prefixes: Channel membership prefix characters stripped from
            NAMES entries, highest rank first.
        log_rejected_lines: Emit a DEBUG event when a line fails to parse.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    case_insensitive_commands: bool = True
    name_prefixes: str = Field(default=DEFAULT_NAME_PREFIXES, min_length=1)
    log_rejected_lines: bool = True

    @field_validator("name_prefixes")
    @classmethod
    def validate_name_prefixes(cls, v: str) -> str:
        """Reject whitespace and alphanumerics, they can start a nickname."""
        for ch in v:
            if ch.isspace() or ch.isalnum():
                raise ValueError(f"invalid membership prefix character {ch!r}")
        # Dedup while keeping rank order
        return "".join(dict.fromkeys(v))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserSettings:
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
