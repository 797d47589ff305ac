"""
ownable_std.address.lto — LTO Network addresses.

Layout (26 bytes, base58 encoded):

    version(1)=0x01 | network(1) | secure_hash(pubkey)[:20] | checksum(4)

with `secure_hash = sha256(blake2b_256(x))` and
`checksum = secure_hash(version | network | address_bytes)[:4]`.

The network byte is the ASCII code of the network id: 'L' (mainnet) or
'T' (testnet).
"""

from __future__ import annotations

import logging
from typing import Tuple

from ownable_std.constants import (ADDRESS_BYTES, LTO_ADDRESS_LENGTH,
                                   LTO_ADDRESS_VERSION, LTO_CHECKSUM_BYTES,
                                   LTO_NETWORKS)
from ownable_std.errors import DecodeError, InvalidNetwork
from ownable_std.utils.bytes import BytesLike, b, base58_decode, base58_encode
from ownable_std.utils.hash import secure_hash

log = logging.getLogger("ownable_std.address.lto")


def _network_byte(network_id: str) -> int:
    if not isinstance(network_id, str) or network_id not in LTO_NETWORKS:
        raise InvalidNetwork(network_id, LTO_NETWORKS)
    return ord(network_id)


def lto_address_bytes(network_id: str, pubkey: BytesLike) -> bytes:
    """Return the raw 26-byte LTO address payload for `pubkey`."""
    net = _network_byte(network_id)
    address_bytes = secure_hash(b(pubkey))[:ADDRESS_BYTES]
    body = bytes([LTO_ADDRESS_VERSION, net]) + address_bytes
    checksum = secure_hash(body)[:LTO_CHECKSUM_BYTES]
    return body + checksum


def lto_address_from_public_key(network_id: str, pubkey: BytesLike) -> str:
    return base58_encode(lto_address_bytes(network_id, pubkey))


def derive_lto_address(network_id: str, pubkey_base58: str) -> str:
    """
    Derive an LTO address for `network_id` ('L' or 'T') from a base58 public key.

    The network is checked before the key is decoded. Raises InvalidNetwork
    or DecodeError.
    """
    _network_byte(network_id)
    pubkey = base58_decode(pubkey_base58)
    address = lto_address_from_public_key(network_id, pubkey)
    log.debug("lto_address_derived", extra={"address": address, "network": network_id})
    return address


def decode_lto_address(address: str) -> Tuple[str, bytes]:
    """
    Split an LTO address into (network_id, 20 address bytes), checking the
    version byte, network and checksum.
    """
    raw = base58_decode(address)
    if len(raw) != LTO_ADDRESS_LENGTH:
        raise DecodeError("lto address", f"expected {LTO_ADDRESS_LENGTH} bytes, got {len(raw)}")
    if raw[0] != LTO_ADDRESS_VERSION:
        raise DecodeError("lto address", f"unsupported version {raw[0]}")
    network_id = chr(raw[1])
    _network_byte(network_id)
    body, checksum = raw[:-LTO_CHECKSUM_BYTES], raw[-LTO_CHECKSUM_BYTES:]
    if secure_hash(body)[:LTO_CHECKSUM_BYTES] != checksum:
        raise DecodeError("lto address", "checksum mismatch")
    return network_id, body[2:]


def is_valid_lto_address(address: str, network_id: str | None = None) -> bool:
    try:
        net, _ = decode_lto_address(address)
    except (DecodeError, InvalidNetwork):
        return False
    return network_id is None or net == network_id


__all__ = [
    "lto_address_bytes",
    "lto_address_from_public_key",
    "derive_lto_address",
    "decode_lto_address",
    "is_valid_lto_address",
]
