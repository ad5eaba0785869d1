"""Settings loading utilities."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import ParserSettings

CONF_FILE_ENV = "IRC_SYNTAX_CONF_FILE"
ENV_PREFIX = "IRC_SYNTAX_"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _read_settings_file(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Settings file is not valid JSON: {e}", data={"path": str(path)}
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            "Settings file must contain a JSON object", data={"path": str(path)}
        )
    return data


def _coerce_env_value(field: str, raw: str) -> Any:
    annotation = ParserSettings.model_fields[field].annotation
    if annotation is bool:
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigError(
            f"Invalid boolean for {ENV_PREFIX}{field.upper()}: {raw!r}",
            data={"field": field},
        )
    return raw


def apply_env_overrides(
    data: dict[str, Any], environ: dict[str, str] | None = None
) -> dict[str, Any]:
    """Return ``data`` updated with ``IRC_SYNTAX_<FIELD>`` environment values."""
    env = os.environ if environ is None else environ
    merged = dict(data)
    for field in ParserSettings.model_fields:
        raw = env.get(f"{ENV_PREFIX}{field.upper()}")
        if raw is None:
            continue
        merged[field] = _coerce_env_value(field, raw)
        logger.log_event("config", "env_override", level=logging.DEBUG, field=field)
    return merged


def load_settings(
    path: str | os.PathLike[str] | None = None,
    environ: dict[str, str] | None = None,
) -> ParserSettings:
    """Load parser settings from a JSON file and the environment.

    Args:
        path: Settings file; falls back to ``$IRC_SYNTAX_CONF_FILE``. A missing
            file yields the defaults.
        environ: Environment mapping, ``os.environ`` when omitted.

    Returns:
        Validated ParserSettings.

    Raises:
        ConfigError: If the file is not a JSON object or values are invalid.
    """
    env = os.environ if environ is None else environ
    location = path if path is not None else env.get(CONF_FILE_ENV)
    data: dict[str, Any] = {}
    if location:
        file_path = Path(location)
        if file_path.is_file():
            data = _read_settings_file(file_path)
            logger.log_event("config", "loaded", level=logging.DEBUG, path=str(file_path))
        else:
            logger.log_event("config", "defaults", level=logging.DEBUG)
    data = apply_env_overrides(data, env)
    try:
        return ParserSettings.from_dict(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid parser settings: {e}", data={"path": location}) from e


__all__ = ["CONF_FILE_ENV", "ENV_PREFIX", "apply_env_overrides", "load_settings"]
