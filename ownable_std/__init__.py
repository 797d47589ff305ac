"""
ownable_std — standard helpers for browser-executed ownables.

Ownables run one call at a time in a fresh, storage-less sandbox. This package
provides what every ownable needs around that sandbox:

- address derivation from public keys (EIP-155 with EIP-55 checksum, LTO)
- the per-invocation ordered store and its state-dump round trip
- the placeholder host capability surface (EmptyApi / EmptyQuerier) and a
  synthetic environment
- small shared types and a hash → colour helper

Quick start
-----------
    from ownable_std import derive_lto_address, load_owned_deps, export_state

    deps = load_owned_deps(dump)           # dump: StateDump | None
    deps.storage.set(b"owner", b"3Mt...")
    new_dump = export_state(deps.storage)
"""

from __future__ import annotations

from .address import (checksum_case, derive_eip155_address,
                      derive_lto_address)
from .color import derive_rgb_values, get_random_color, rgb_hex
from .constants import CANONICAL_LENGTH
from .errors import (BadLength, DecodeError, EmptyInput, InvalidAddress,
                     InvalidNetwork, InvalidPublicKey, InvalidUtf8,
                     NotImplementedFeature, OwnableError, RecoverPubkeyError,
                     TooLong, TooShort, VerificationError)
from .host import (Api, EmptyApi, EmptyQuerier, Env, OwnedDeps, Timestamp,
                   create_env, create_ownable_env, load_owned_deps)
from .state import (MemoryStorage, Order, StateDump, export_state, load_state)
from .types import NFT, ExternalEventMsg, InfoResponse, Metadata, OwnableInfo
from .version import __version__

__all__ = [
    "__version__",
    "CANONICAL_LENGTH",
    # address
    "checksum_case",
    "derive_eip155_address",
    "derive_lto_address",
    # state
    "MemoryStorage",
    "Order",
    "StateDump",
    "export_state",
    "load_state",
    # host
    "Api",
    "EmptyApi",
    "EmptyQuerier",
    "Env",
    "Timestamp",
    "OwnedDeps",
    "create_env",
    "create_ownable_env",
    "load_owned_deps",
    # color
    "derive_rgb_values",
    "rgb_hex",
    "get_random_color",
    # types
    "Metadata",
    "ExternalEventMsg",
    "OwnableInfo",
    "NFT",
    "InfoResponse",
    # errors
    "OwnableError",
    "EmptyInput",
    "DecodeError",
    "InvalidPublicKey",
    "InvalidNetwork",
    "InvalidAddress",
    "TooShort",
    "TooLong",
    "BadLength",
    "InvalidUtf8",
    "VerificationError",
    "RecoverPubkeyError",
    "NotImplementedFeature",
]
