"""
ownable_std.state.snapshot — state dumps exchanged with the host.

Each ownable invocation runs in a fresh sandbox without storage. The host
keeps the contract state as a *dump* (an ordered list of key/value pairs,
persisted in the browser's IndexedDB), materialises a `MemoryStorage` from it
before the call and pulls a fresh dump out afterwards.

Laws
----
- export_state(store) lists every entry once, in ascending key order.
- load_state(dump) applies pairs in dump order; a duplicate key keeps the
  *last* value (plain map assignment).
- export_state(load_state(d)) == canonicalize(d) for every dump d,
  including the empty dump.

Wire format
-----------
JSON object with one field, byte strings as arrays of integers 0..255
(the byte-array encoding the browser host already stores):

    {"state_dump": [[[107, 49], [118, 49]], [[107, 50], []]]}

Entry order on the wire is preserved; nothing is re-encoded as text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from ownable_std.errors import DecodeError
from ownable_std.utils.bytes import b

from .storage import MemoryStorage, Order, Storage

log = logging.getLogger("ownable_std.state.snapshot")

Entry = Tuple[bytes, bytes]


@dataclass(frozen=True)
class StateDump:
    """Ordered, immutable list of (key, value) pairs exported from a store."""

    entries: Tuple[Entry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "entries", tuple((b(k), b(v)) for k, v in self.entries)
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[bytes, bytes]]) -> "StateDump":
        return cls(entries=tuple(pairs))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def canonical(self) -> "StateDump":
        """Sorted by key with duplicates resolved last-write-wins."""
        merged: Dict[bytes, bytes] = {}
        for k, v in self.entries:
            merged[k] = v
        return StateDump(entries=tuple(sorted(merged.items())))

    # ---------------- wire codec ----------------

    def to_dict(self) -> Dict[str, Any]:
        return {"state_dump": [[list(k), list(v)] for k, v in self.entries]}

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "StateDump":
        if not isinstance(obj, Mapping) or "state_dump" not in obj:
            raise DecodeError("state_dump", "expected an object with a 'state_dump' field")
        raw = obj["state_dump"]
        if not isinstance(raw, list):
            raise DecodeError("state_dump", "'state_dump' must be a list of pairs")
        entries: List[Entry] = []
        for i, pair in enumerate(raw):
            if not isinstance(pair, list) or len(pair) != 2:
                raise DecodeError("state_dump", f"entry {i} is not a [key, value] pair", index=i)
            entries.append((_bytes_from_json(pair[0], i, "key"), _bytes_from_json(pair[1], i, "value")))
        return cls(entries=tuple(entries))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "StateDump":
        try:
            obj = json.loads(text)
        except ValueError as e:
            raise DecodeError("state_dump", f"invalid json: {e}", cause=e) from e
        return cls.from_dict(obj)


def _bytes_from_json(arr: Any, index: int, part: str) -> bytes:
    if not isinstance(arr, list):
        raise DecodeError("state_dump", f"entry {index} {part} must be a byte array", index=index)
    for x in arr:
        # bool is an int subclass; reject it explicitly
        if isinstance(x, bool) or not isinstance(x, int) or not 0 <= x <= 255:
            raise DecodeError(
                "state_dump", f"entry {index} {part} holds a non-byte value {x!r}", index=index
            )
    return bytes(arr)


DumpLike = Union[StateDump, Sequence[Tuple[bytes, bytes]]]


def _as_dump(dump: DumpLike) -> StateDump:
    return dump if isinstance(dump, StateDump) else StateDump.from_pairs(dump)


# ---------------------------------------------------------------------------
# Store ↔ dump
# ---------------------------------------------------------------------------


def export_state(store: Storage) -> StateDump:
    """Export every entry of `store` in ascending key order."""
    dump = StateDump(entries=tuple(store.range(None, None, Order.ASCENDING)))
    log.debug("state_exported", extra={"entries": len(dump)})
    return dump


def load_into(store: Storage, dump: DumpLike) -> Storage:
    """Apply the pairs of `dump` onto `store` in order (last write wins)."""
    d = _as_dump(dump)
    for k, v in d.entries:
        store.set(k, v)
    return store


def load_state(dump: DumpLike) -> MemoryStorage:
    """Materialise a fresh MemoryStorage from a dump."""
    d = _as_dump(dump)
    store = MemoryStorage()
    load_into(store, d)
    log.debug("state_loaded", extra={"entries": len(d), "keys": len(store)})
    return store


def canonicalize(dump: DumpLike) -> StateDump:
    return _as_dump(dump).canonical()


__all__ = [
    "Entry",
    "StateDump",
    "DumpLike",
    "export_state",
    "load_into",
    "load_state",
    "canonicalize",
]
