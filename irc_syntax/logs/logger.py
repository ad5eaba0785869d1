"""Event logger for the parser."""

from __future__ import annotations

import logging
import os


class SyntaxLogger:
    """Thin event-oriented wrapper over a stdlib logger.

    Events are identified by ``(domain, action)``; the human readable text comes
    from the event template catalog unless given explicitly. Remaining keyword
    arguments are appended as ``key=value`` context when ``DEBUG`` is enabled.
    """

    def __init__(self, name: str = "irc_syntax") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 32
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        # Parsing runs per line; skip formatting entirely when filtered out.
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                kwargs.setdefault("derived", True)
        msg = (
            self._build_debug_message(event_name, human_text, kwargs)
            if self._is_debug_enabled()
            else human_text
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    def _build_debug_message(
        self, event_name: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        context = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = SyntaxLogger()
