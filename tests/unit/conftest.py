"""Shared fixtures for the unit suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from mp_option.config import reset_settings


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test fresh settings and the default structlog config."""
    for key in ("MP_OPTION_LOG_LEVEL", "MP_OPTION_JSON_LOGS", "MP_OPTION_TRACE_LOOKUPS"):
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    level = root.level
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()
    # drop handlers installed by configure_logging
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
