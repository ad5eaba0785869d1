"""Configuration package exports."""

from .config_loader import apply_env_overrides, load_settings  # noqa: F401
from .model import ParserSettings

__all__ = ["ParserSettings", "apply_env_overrides", "load_settings"]
