"""Option[T] — a value that may be present (Some) or absent (Nothing).

``Option`` is the single canonical type; ``Some`` and ``Nothing`` are its two
constructors.  Presence is carried by an explicit flag, never inferred from
the inner value, so ``Some(None)`` and ``Some(0)`` are ordinary present
values.

Example::

    @dataclasses.dataclass(frozen=True)
    class User:
        name: str
        email: Option[str] = Nothing()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, Iterator, Literal, TypeVar

from mp_option.config import tracing_enabled
from mp_option.errors import UnwrapError
from mp_option.observability.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")

type Lookup[T] = Callable[[], tuple[T, bool]]

_MISSING: Any = object()

logger = get_logger(__name__)


class Option(Generic[T]):
    """Optional ``T``; construct through :class:`Some` or :class:`Nothing`."""

    __slots__ = ("_inner", "_present")

    _inner: T | None
    _present: bool

    def __new__(cls, *args: Any, **kwargs: Any) -> Option[T]:
        raise TypeError("Option cannot be instantiated directly; use Some(...) or Nothing()")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- inspection ---------------------------------------------------------

    def value(self) -> tuple[T, Literal[True]] | tuple[None, Literal[False]]:
        """Return ``(inner, True)`` when present and ``(None, False)`` otherwise.

        Check the flag before using the first element.
        """
        if self._present:
            return self._inner, True  # type: ignore[return-value]
        return None, False

    def is_some(self) -> bool:
        _, present = self.value()
        return present

    def is_none(self) -> bool:
        return not self.is_some()

    # -- extraction ---------------------------------------------------------

    def or_else(self, func: Callable[[], T]) -> T:
        """Return the inner value, or the result of ``func`` when absent.

        ``func`` is only called for an absent option.
        """
        inner, present = self.value()
        if present:
            return inner  # type: ignore[return-value]
        return func()

    def or_default(self, fallback: T) -> T:
        """Return the inner value, or ``fallback`` when absent."""
        return self.or_else(lambda: fallback)

    def unwrap(self) -> T:
        inner, present = self.value()
        if not present:
            raise UnwrapError("Called unwrap() on Nothing")
        return inner  # type: ignore[return-value]

    # -- combinators --------------------------------------------------------

    def map(self, func: Callable[[T], U]) -> Option[U]:
        inner, present = self.value()
        if present:
            return Some(func(inner))  # type: ignore[arg-type]
        return Nothing()

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        inner, present = self.value()
        if present:
            return func(inner)  # type: ignore[arg-type]
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        inner, present = self.value()
        if present and predicate(inner):  # type: ignore[arg-type]
            return self
        return Nothing()

    # -- dunder -------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        inner, present = self.value()
        if present:
            yield inner  # type: ignore[misc]

    def __bool__(self) -> bool:
        raise TypeError(
            "Option has no truth value; use is_some() / is_none() instead"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._present != other._present:
            return False
        return not self._present or bool(self._inner == other._inner)

    def __hash__(self) -> int:
        if self._present:
            return hash((True, self._inner))
        return hash((False,))

    def __repr__(self) -> str:
        if self._present:
            return f"Some({self._inner!r})"
        return "Nothing"


class Some(Option[T]):
    """Present option holding ``value``."""

    __slots__ = ()

    def __new__(cls, value: T) -> Some[T]:
        self = object.__new__(cls)
        object.__setattr__(self, "_inner", value)
        object.__setattr__(self, "_present", True)
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Some, (self._inner,))


class Nothing(Option[T]):
    """Empty option."""

    __slots__ = ()

    def __new__(cls) -> Nothing[T]:
        self = object.__new__(cls)
        object.__setattr__(self, "_inner", None)
        object.__setattr__(self, "_present", False)
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Nothing, ())


# ---------------------------------------------------------------------------
# Interop constructors
# ---------------------------------------------------------------------------


def from_value(value: T, ok: bool) -> Option[T]:
    """``Some(value)`` when ``ok`` is truthy, ``Nothing()`` otherwise."""
    if ok:
        return Some(value)
    return Nothing()


def _from_lookup(func: Lookup[T]) -> Option[T]:
    value, ok = func()
    return from_value(value, ok)


def from_func(func: Lookup[T]) -> Option[T]:
    """Call ``func`` once and wrap its ``(value, ok)`` pair."""
    result = _from_lookup(func)
    if tracing_enabled():
        logger.debug("option.from_func", present=result.is_some())
    return result


def from_map(mapping: Mapping[K, V], key: K) -> Option[V]:
    """Look ``key`` up in ``mapping`` without modifying it.

    ``mapping.get`` is used instead of ``mapping[key]`` so that
    ``defaultdict`` never grows an entry.
    """

    def lookup() -> tuple[V, bool]:
        found = mapping.get(key, _MISSING)
        return found, found is not _MISSING

    result = _from_lookup(lookup)
    if tracing_enabled():
        logger.debug("option.from_map", key=key, present=result.is_some())
    return result


def from_optional(value: T | None) -> Option[T]:
    """Adapt a ``T | None`` value; ``None`` becomes ``Nothing()``."""
    if value is None:
        return Nothing()
    return Some(value)


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
