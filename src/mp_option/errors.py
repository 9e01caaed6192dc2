"""Errors raised by mp_option.

Hierarchy::

    OptionKitError
    ├── UnwrapError                  (also a ValueError)
    └── ConfigError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError

The container operations never raise; only ``unwrap()`` and explicit
configuration loading do.
"""

from __future__ import annotations

from typing import Any


class OptionKitError(Exception):
    """Root of the mp_option errors.

    ``code`` is a stable slug for log fields; ``detail`` carries the values
    that explain the failure.
    """

    code: str = "option_error"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Log-friendly form: ``{"code", "message", **detail}``."""
        return {"code": self.code, "message": self.message, **self.detail}


class UnwrapError(OptionKitError, ValueError):
    """``unwrap()`` was called on ``Nothing``."""

    code = "unwrap_on_nothing"


class ConfigError(OptionKitError):
    """``MP_OPTION_*`` settings could not be loaded."""

    code = "config_error"


class MissingRequiredSettingError(ConfigError):
    code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", setting=setting_name)
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting=setting_name,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OptionKitError",
    "UnwrapError",
]
