"""
ownable_std.host.env — block/contract environment handed to ownable entry points.

The browser sandbox has no chain behind it, so the environment is synthetic:
height 0, an empty contract address and a caller-chosen chain id and time.
`to_dict()` renders the cosmwasm JSON shape (timestamps as nanosecond
strings) that contract code serialises against.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ownable_std.config import load_config

_NANOS_PER_SECOND = 1_000_000_000
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True, order=True)
class Timestamp:
    """Point in time as nanoseconds since the UNIX epoch (u64)."""

    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos <= _U64_MAX:
            raise ValueError(f"timestamp out of u64 range: {self.nanos}")

    @classmethod
    def from_seconds(cls, seconds: int) -> "Timestamp":
        return cls(nanos=seconds * _NANOS_PER_SECOND)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Timestamp":
        return cls(nanos=nanos)

    @property
    def seconds(self) -> int:
        return self.nanos // _NANOS_PER_SECOND

    def to_json(self) -> str:
        return str(self.nanos)


@dataclass(frozen=True)
class BlockInfo:
    height: int
    time: Timestamp
    chain_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"height": self.height, "time": self.time.to_json(), "chain_id": self.chain_id}


@dataclass(frozen=True)
class ContractInfo:
    address: str

    def to_dict(self) -> Dict[str, Any]:
        return {"address": self.address}


@dataclass(frozen=True)
class TransactionInfo:
    index: int

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index}


@dataclass(frozen=True)
class Env:
    block: BlockInfo
    contract: ContractInfo
    transaction: Optional[TransactionInfo] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "block": self.block.to_dict(),
            "contract": self.contract.to_dict(),
            "transaction": None if self.transaction is None else self.transaction.to_dict(),
        }


def create_ownable_env(chain_id: str, time: Optional[Timestamp] = None) -> Env:
    """Synthetic environment for `chain_id`; time defaults to the epoch."""
    return Env(
        block=BlockInfo(
            height=0,
            time=time if time is not None else Timestamp.from_seconds(0),
            chain_id=str(chain_id),
        ),
        contract=ContractInfo(address=""),
        transaction=None,
    )


def create_env() -> Env:
    """Environment with the configured default chain id (empty unless OWNABLE_DEFAULT_CHAIN_ID)."""
    return create_ownable_env(load_config().default_chain_id, None)


__all__ = [
    "Timestamp",
    "BlockInfo",
    "ContractInfo",
    "TransactionInfo",
    "Env",
    "create_ownable_env",
    "create_env",
]
