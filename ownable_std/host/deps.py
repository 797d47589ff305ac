"""
ownable_std.host.deps — storage/api/querier bundle for one invocation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ownable_std.state.snapshot import DumpLike, load_state
from ownable_std.state.storage import MemoryStorage

from .api import EmptyApi
from .querier import EmptyQuerier

log = logging.getLogger("ownable_std.host.deps")


@dataclass
class OwnedDeps:
    """Everything a contract entry point needs; owned by a single invocation."""

    storage: MemoryStorage = field(default_factory=MemoryStorage)
    api: EmptyApi = field(default_factory=EmptyApi)
    querier: EmptyQuerier = field(default_factory=EmptyQuerier)


def load_owned_deps(state_dump: Optional[DumpLike] = None) -> OwnedDeps:
    """
    Build deps for an invocation: an empty store when there is no dump yet
    (first call of a fresh ownable), otherwise the store restored from it.
    """
    if state_dump is None:
        log.debug("deps_fresh_storage")
        return OwnedDeps()
    return OwnedDeps(storage=load_state(state_dump))


__all__ = ["OwnedDeps", "load_owned_deps"]
