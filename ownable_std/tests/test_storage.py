from __future__ import annotations

from ownable_std.state import (MemoryStorage, Order, Storage, export_state,
                               load_state)


def _filled() -> MemoryStorage:
    s = MemoryStorage()
    for k in (b"b", b"a", b"\x00", b"ab", b"\xff", b"c"):
        s.set(k, k + b"!")
    return s


def test_get_set_remove():
    s = MemoryStorage()
    assert s.get(b"k") is None
    s.set(b"k", b"v1")
    s.set(b"k", b"v2")
    assert s.get(b"k") == b"v2"
    assert len(s) == 1 and b"k" in s and s.has(b"k")
    s.remove(b"k")
    s.remove(b"k")  # idempotent
    assert s.get(b"k") is None and len(s) == 0


def test_empty_values_are_kept():
    s = MemoryStorage()
    s.set(b"k", b"")
    assert s.get(b"k") == b""
    assert list(s.range()) == [(b"k", b"")]


def test_range_is_byte_lexicographic():
    keys = [k for k, _ in _filled().range()]
    assert keys == [b"\x00", b"a", b"ab", b"b", b"c", b"\xff"]


def test_range_descending():
    keys = [k for k, _ in _filled().range(order=Order.DESCENDING)]
    assert keys == [b"\xff", b"c", b"b", b"ab", b"a", b"\x00"]


def test_range_bounds_start_inclusive_end_exclusive():
    s = _filled()
    assert [k for k, _ in s.range(b"a", b"b")] == [b"a", b"ab"]
    assert [k for k, _ in s.range(start=b"b")] == [b"b", b"c", b"\xff"]
    assert [k for k, _ in s.range(end=b"a")] == [b"\x00"]
    assert [k for k, _ in s.range(b"b", b"b")] == []


def test_mutation_during_range_is_safe():
    s = _filled()
    for k, _ in s.range():
        s.remove(k)
    assert len(s) == 0


def test_bytearray_keys_normalised():
    s = MemoryStorage()
    s.set(bytearray(b"k"), memoryview(b"v"))
    assert s.get(b"k") == b"v"
    assert isinstance(next(s.range())[0], bytes)


def test_protocol_conformance():
    assert isinstance(MemoryStorage(), Storage)


def test_empty_value_is_not_a_missing_key():
    s = load_state([(b"empty", b"")])
    assert s.has(b"empty")
    assert s.get(b"empty") == b""
    assert s.get(b"absent") is None
    assert export_state(s).entries == ((b"empty", b""),)
