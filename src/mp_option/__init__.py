"""
mp_option – an explicit optional-value container.

Import path convention::

    from mp_option import Nothing, Option, Some, from_map
    from mp_option.errors import UnwrapError
    from mp_option.observability import configure_logging
"""

from mp_option.types import (
    Lookup,
    Nothing,
    Option,
    Some,
    from_func,
    from_map,
    from_optional,
    from_value,
)

__version__ = "0.1.0"
__all__ = [
    "Lookup",
    "Nothing",
    "Option",
    "Some",
    "__version__",
    "from_func",
    "from_map",
    "from_optional",
    "from_value",
]
