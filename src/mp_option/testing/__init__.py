"""Testing helpers for code that embeds Option values."""
from mp_option.testing.strategies import nothings, options, somes

__all__ = ["nothings", "options", "somes"]
