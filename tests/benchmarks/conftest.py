"""conftest.py for benchmarks.

Run with ``pytest tests/benchmarks``; requires ``pytest-benchmark``.
Lookup tracing is forced off so the numbers measure the container only.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mp_option.config import OptionSettings, reset_settings, use_settings


@pytest.fixture(autouse=True, scope="session")
def _untraced_settings() -> Iterator[None]:
    use_settings(OptionSettings(trace_lookups=False))
    yield
    reset_settings()
