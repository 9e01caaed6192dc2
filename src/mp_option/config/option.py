"""Config – OptionSettings and the process-wide active settings.

Nothing here runs at import time or on the lookup path: the environment is
read only when ``get_settings()`` is called, and lookup tracing follows
whatever settings were installed explicitly.
"""
from __future__ import annotations

import dataclasses
import logging

from mp_option.config.env import load_from_env
from mp_option.errors import InvalidSettingValueError


@dataclasses.dataclass
class OptionSettings:
    """Runtime knobs, read from ``MP_OPTION_*`` environment variables.

    Attributes:
        log_level: Root log level applied by ``configure_logging``.
        json_logs: Render log lines as JSON (console renderer otherwise).
        trace_lookups: Emit debug events from ``from_func`` / ``from_map``.
    """

    _prefix: dataclasses.ClassVar[str] = "MP_OPTION"

    log_level: str = "WARNING"
    json_logs: bool = True
    trace_lookups: bool = False

    def __post_init__(self) -> None:
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name"
            )

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


_active: OptionSettings | None = None


def get_settings() -> OptionSettings:
    """Return the active settings, loading them from the environment once.

    Raises ``ConfigError`` when the ``MP_OPTION_*`` variables are invalid.
    """
    global _active
    if _active is None:
        _active = load_from_env(OptionSettings)
    return _active


def use_settings(settings: OptionSettings) -> None:
    """Install *settings* as the active settings."""
    global _active
    _active = settings


def reset_settings() -> None:
    """Forget the active settings; the next ``get_settings()`` reloads them."""
    global _active
    _active = None


def tracing_enabled() -> bool:
    """True when installed settings ask for lookup tracing; never loads or raises."""
    return _active is not None and _active.trace_lookups


__all__ = [
    "OptionSettings",
    "get_settings",
    "reset_settings",
    "tracing_enabled",
    "use_settings",
]
