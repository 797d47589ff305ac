"""
Ordered key/value storage for one ownable invocation
====================================================

`Storage` is the backend-agnostic surface a contract sees (get/set/remove and
range iteration). `MemoryStorage` is the in-process implementation that is
materialised from a snapshot dump at invocation start and exported again at
the end.

Iteration
---------
`range(start, end, order)` yields `(key, value)` pairs in byte-lexicographic
key order (ascending or descending), `start` inclusive and `end` exclusive.
Ordering is guaranteed by construction: keys are sorted on every range call,
so insertion order never leaks into a dump.

Values may be empty; keys are arbitrary bytes.

>>> s = MemoryStorage()
>>> s.set(b"b", b"2"); s.set(b"a", b"1")
>>> list(s.range())
[(b'a', b'1'), (b'b', b'2')]
"""

from __future__ import annotations

from enum import Enum
from typing import (Dict, Iterator, Optional, Protocol, Tuple,
                    runtime_checkable)

from ownable_std.utils.bytes import BytesLike, b


class Order(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@runtime_checkable
class Storage(Protocol):
    """Minimal RW surface used by contracts and the snapshot codec."""

    def get(self, key: bytes) -> Optional[bytes]:
        """Fetch value or None if missing."""
        ...

    def set(self, key: bytes, value: bytes) -> None:
        """Store (key, value). Overwrites if present."""
        ...

    def remove(self, key: bytes) -> None:
        """Remove key if present (idempotent)."""
        ...

    def range(
        self,
        start: Optional[bytes] = None,
        end: Optional[bytes] = None,
        order: Order = Order.ASCENDING,
    ) -> Iterator[Tuple[bytes, bytes]]:
        """Iterate `(key, value)` pairs with start <= key < end in key order."""
        ...


class MemoryStorage:
    """
    In-memory ordered store. Not thread-safe: one invocation owns it.

    Unlike the host-side store of the contract runtime, which aborts the call
    on `set(key, b"")`, empty values are stored as-is and read back as `b""`
    (distinct from a missing key). Dumps carrying empty values therefore load
    instead of failing the invocation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: Dict[bytes, bytes] = {}

    def get(self, key: BytesLike) -> Optional[bytes]:
        return self._data.get(b(key))

    def set(self, key: BytesLike, value: BytesLike) -> None:
        self._data[b(key)] = b(value)

    def remove(self, key: BytesLike) -> None:
        self._data.pop(b(key), None)

    def has(self, key: BytesLike) -> bool:
        return b(key) in self._data

    def range(
        self,
        start: Optional[BytesLike] = None,
        end: Optional[BytesLike] = None,
        order: Order = Order.ASCENDING,
    ) -> Iterator[Tuple[bytes, bytes]]:
        lo = None if start is None else b(start)
        hi = None if end is None else b(end)
        keys = sorted(self._data, reverse=Order(order) is Order.DESCENDING)
        # Snapshot the matching pairs so callers may mutate while iterating.
        items = [
            (k, self._data[k])
            for k in keys
            if (lo is None or k >= lo) and (hi is None or k < hi)
        ]
        return iter(items)

    def items(self) -> Iterator[Tuple[bytes, bytes]]:
        """All entries in ascending key order."""
        return self.range()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, (bytes, bytearray, memoryview)) and bytes(key) in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoryStorage):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"MemoryStorage(entries={len(self._data)})"


__all__ = ["Order", "Storage", "MemoryStorage"]
