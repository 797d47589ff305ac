"""
ownable_std.host — what the sandbox hands to an ownable entry point.

- api:     capability surface (`Api`) and its placeholder `EmptyApi`
- querier: `Querier` and the refusing `EmptyQuerier`
- env:     synthetic block/contract environment
- deps:    storage + api + querier bundle restored from a state dump
"""

from __future__ import annotations

from .api import Api, EmptyApi, default_debug_sink
from .deps import OwnedDeps, load_owned_deps
from .env import (BlockInfo, ContractInfo, Env, Timestamp, TransactionInfo,
                  create_env, create_ownable_env)
from .querier import EmptyQuerier, Querier

__all__ = [
    "Api",
    "EmptyApi",
    "default_debug_sink",
    "Querier",
    "EmptyQuerier",
    "Timestamp",
    "BlockInfo",
    "ContractInfo",
    "TransactionInfo",
    "Env",
    "create_env",
    "create_ownable_env",
    "OwnedDeps",
    "load_owned_deps",
]
