"""Property-based tests for Option, driven by the bundled Hypothesis strategies."""

from __future__ import annotations

import threading
from typing import Any

import hypothesis.strategies as st
from hypothesis import given

from mp_option import Nothing, Option, Some, from_func, from_map, from_value
from mp_option.testing import nothings, options, somes

_values = st.one_of(st.none(), st.booleans(), st.integers(), st.text(), st.lists(st.integers()))


@given(options())
def test_is_none_negates_is_some(opt: Option[Any]) -> None:
    assert opt.is_none() == (not opt.is_some())


@given(options())
def test_value_flag_matches_is_some(opt: Option[Any]) -> None:
    _, present = opt.value()
    assert present == opt.is_some()


@given(_values)
def test_some_value_returns_same_object(v: Any) -> None:
    inner, present = Some(v).value()
    assert present is True
    assert inner is v


@given(nothings())
def test_nothing_value_is_absent_marker(opt: Nothing[Any]) -> None:
    assert opt.value() == (None, False)


@given(somes(st.integers()), st.integers())
def test_some_or_default_ignores_fallback(opt: Some[int], fallback: int) -> None:
    assert opt.or_default(fallback) == opt.unwrap()


@given(_values)
def test_nothing_or_default_is_fallback(fallback: Any) -> None:
    assert Nothing().or_default(fallback) is fallback


@given(somes())
def test_some_or_else_never_calls(opt: Some[Any]) -> None:
    calls: list[None] = []

    def fallback() -> Any:
        calls.append(None)
        return object()

    inner, _ = opt.value()
    assert opt.or_else(fallback) is inner
    assert calls == []


@given(_values)
def test_nothing_or_else_calls_once(r: Any) -> None:
    calls: list[None] = []

    def fallback() -> Any:
        calls.append(None)
        return r

    assert Nothing().or_else(fallback) is r
    assert len(calls) == 1


@given(_values, st.booleans())
def test_from_value_matches_constructors(v: Any, ok: bool) -> None:
    expected: Option[Any] = Some(v) if ok else Nothing()
    assert from_value(v, ok) == expected


@given(_values, st.booleans())
def test_from_func_forwards_pair_once(v: Any, ok: bool) -> None:
    calls: list[None] = []

    def produce() -> tuple[Any, bool]:
        calls.append(None)
        return v, ok

    assert from_func(produce) == from_value(v, ok)
    assert len(calls) == 1


@given(st.dictionaries(st.text(max_size=3), st.integers()), st.text(max_size=3))
def test_from_map_mirrors_membership(m: dict[str, int], key: str) -> None:
    before = dict(m)
    opt = from_map(m, key)
    assert opt.is_some() == (key in m)
    if key in m:
        assert opt == Some(m[key])
    assert m == before


@given(options(st.integers()))
def test_shared_instance_reads_are_stable_across_threads(opt: Option[int]) -> None:
    expected = opt.value()
    seen: list[tuple[Any, bool]] = []
    lock = threading.Lock()

    def read() -> None:
        for _ in range(50):
            observed = opt.value()
            with lock:
                seen.append(observed)

    threads = [threading.Thread(target=read) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 200
    assert all(s == expected for s in seen)
