"""Value types — public re-export surface.

Modules:
  option.py — Option, Some, Nothing and the interop constructors
"""

from mp_option.types.option import (
    Lookup,
    Nothing,
    Option,
    Some,
    from_func,
    from_map,
    from_optional,
    from_value,
)

__all__ = [
    "Lookup",
    "Nothing",
    "Option",
    "Some",
    "from_func",
    "from_map",
    "from_optional",
    "from_value",
]
