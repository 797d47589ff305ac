"""
ownable_std.types
=================

Shared message/response shapes used by ownable contracts.

Fields are snake_case in JSON. `NFT.id` is a Uint128 and, like every 128-bit
integer on the wire, is serialised as a decimal string. Optional fields are
emitted as `null`.

- Metadata          display metadata (cw721 "metadata-onchain" shape)
- ExternalEventMsg  event from another chain; `network` is CAIP-2 ("eip155:1")
- OwnableInfo       owner / issuer / type
- NFT               the NFT an ownable is bound to
- InfoResponse      answer to the standard `get_info` query
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional

UINT128_MAX = (1 << 128) - 1


def _opt_str(o: Mapping[str, Any], key: str) -> Optional[str]:
    v = o.get(key)
    return None if v is None else str(v)


@dataclass(frozen=True)
class Metadata:
    image: Optional[str] = None
    image_data: Optional[str] = None
    external_url: Optional[str] = None
    description: Optional[str] = None
    name: Optional[str] = None
    background_color: Optional[str] = None
    animation_url: Optional[str] = None
    youtube_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, o: Mapping[str, Any]) -> "Metadata":
        return cls(**{k: _opt_str(o, k) for k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class ExternalEventMsg:
    event_type: str
    attributes: Dict[str, str] = field(default_factory=dict)
    network: Optional[str] = None  # CAIP-2: "<namespace>:<reference>"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "network": self.network,
            "event_type": self.event_type,
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, o: Mapping[str, Any]) -> "ExternalEventMsg":
        return cls(
            network=_opt_str(o, "network"),
            event_type=str(o["event_type"]),
            attributes={str(k): str(v) for k, v in (o.get("attributes") or {}).items()},
        )


@dataclass(frozen=True)
class OwnableInfo:
    owner: str
    issuer: str
    ownable_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, o: Mapping[str, Any]) -> "OwnableInfo":
        return cls(owner=str(o["owner"]), issuer=str(o["issuer"]), ownable_type=_opt_str(o, "ownable_type"))


@dataclass(frozen=True)
class NFT:
    network: str  # eip155:1
    id: int
    address: str  # 0x341...
    lock_service: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("NFT.id must be an int")
        if not 0 <= self.id <= UINT128_MAX:
            raise ValueError(f"NFT.id out of Uint128 range: {self.id}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "network": self.network,
            "id": str(self.id),
            "address": self.address,
            "lock_service": self.lock_service,
        }

    @classmethod
    def from_dict(cls, o: Mapping[str, Any]) -> "NFT":
        return cls(
            network=str(o["network"]),
            id=int(o["id"]),
            address=str(o["address"]),
            lock_service=_opt_str(o, "lock_service"),
        )


@dataclass(frozen=True)
class InfoResponse:
    owner: str
    issuer: str
    nft: Optional[NFT] = None
    ownable_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "issuer": self.issuer,
            "nft": None if self.nft is None else self.nft.to_dict(),
            "ownable_type": self.ownable_type,
        }

    @classmethod
    def from_dict(cls, o: Mapping[str, Any]) -> "InfoResponse":
        nft = o.get("nft")
        return cls(
            owner=str(o["owner"]),
            issuer=str(o["issuer"]),
            nft=None if nft is None else NFT.from_dict(nft),
            ownable_type=_opt_str(o, "ownable_type"),
        )


__all__ = [
    "UINT128_MAX",
    "Metadata",
    "ExternalEventMsg",
    "OwnableInfo",
    "NFT",
    "InfoResponse",
]
