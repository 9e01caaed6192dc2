"""Observability – structlog configuration and the get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_option.config import OptionSettings, get_settings, use_settings


def configure_logging(settings: OptionSettings | None = None) -> None:
    """Route structlog through the stdlib root logger.

    Output is JSON when ``settings.json_logs`` is set and a console rendering
    otherwise; the root level comes from ``settings.log_level``.  Uses the
    active settings when *settings* is omitted, and installs *settings* as
    the active settings otherwise, so its ``trace_lookups`` takes effect.
    """
    if settings is None:
        settings = get_settings()
    else:
        use_settings(settings)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["configure_logging", "get_logger"]
