"""Config – build a settings dataclass from ``<PREFIX>_<FIELD>`` variables."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_option.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    OptionKitError,
)

T = TypeVar("T")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def load_from_env(settings_class: type[T], environ: Mapping[str, str] | None = None) -> T:
    """Instantiate *settings_class* from environment variables.

    The variable prefix is the class's ``_prefix``; unset variables leave the
    field default in place.  Reads ``os.environ`` unless *environ* is given.
    """
    environ = os.environ if environ is None else environ
    prefix = getattr(settings_class, "_prefix", "").upper()
    kwargs: dict[str, Any] = {}

    for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
        env_key = f"{prefix}_{field.name}".upper().lstrip("_")
        raw = environ.get(env_key)

        if raw is None:
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise MissingRequiredSettingError(env_key)
            continue

        try:
            kwargs[field.name] = _coerce(raw, field.type)
        except ValueError as exc:
            raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

    try:
        return settings_class(**kwargs)
    except OptionKitError:
        raise
    except Exception as exc:
        raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc


def _coerce(value: str, type_hint: Any) -> Any:
    # annotations arrive as strings under ``from __future__ import annotations``
    name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
    if name == "bool":
        return value.strip().lower() in _TRUTHY
    if name == "int":
        return int(value)
    if name == "float":
        return float(value)
    if name.startswith("list"):
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


__all__ = ["load_from_env"]
