"""Config – environment-driven settings."""

from mp_option.config.env import load_from_env
from mp_option.config.option import (
    OptionSettings,
    get_settings,
    reset_settings,
    tracing_enabled,
    use_settings,
)

__all__ = [
    "OptionSettings",
    "get_settings",
    "load_from_env",
    "reset_settings",
    "tracing_enabled",
    "use_settings",
]
