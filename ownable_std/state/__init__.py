"""
ownable_std.state — the per-invocation store and its snapshot dump codec.
"""

from __future__ import annotations

from .snapshot import (StateDump, canonicalize, export_state, load_into,
                       load_state)
from .storage import MemoryStorage, Order, Storage

__all__ = [
    "Order",
    "Storage",
    "MemoryStorage",
    "StateDump",
    "export_state",
    "load_into",
    "load_state",
    "canonicalize",
]
