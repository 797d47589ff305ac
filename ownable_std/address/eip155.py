"""
ownable_std.address.eip155 — Ethereum (eip155:*) addresses from secp256k1 keys.

    address = "0x" + EIP55( hex( keccak256(X || Y)[12:32] ) )

where X || Y is the 64-byte uncompressed point without its 0x04 marker.
Both compressed (33-byte) and uncompressed (65-byte) SEC1 encodings are
accepted; the point is always re-serialised uncompressed before hashing, so
both encodings of the same key yield the same address.
"""

from __future__ import annotations

import logging

from ecdsa import SECP256k1, VerifyingKey
from ecdsa.errors import MalformedPointError
from ecdsa.numbertheory import Error as NumberTheoryError

from ownable_std.constants import (ADDRESS_BYTES, COMPRESSED_PUBKEY_LENGTH,
                                   UNCOMPRESSED_PUBKEY_LENGTH)
from ownable_std.errors import EmptyInput, InvalidPublicKey
from ownable_std.utils.bytes import BytesLike, b, base58_decode
from ownable_std.utils.hash import keccak256

from .eip55 import checksum_case

log = logging.getLogger("ownable_std.address.eip155")

_ACCEPTED_LENGTHS = (COMPRESSED_PUBKEY_LENGTH, UNCOMPRESSED_PUBKEY_LENGTH)


def uncompressed_point(pubkey: BytesLike) -> bytes:
    """
    Parse a SEC1 secp256k1 public key and return its 65-byte uncompressed form.

    Raises InvalidPublicKey for any other length or for bytes that do not
    decode to a point on the curve.
    """
    raw = b(pubkey)
    if len(raw) not in _ACCEPTED_LENGTHS:
        raise InvalidPublicKey(
            f"expected {COMPRESSED_PUBKEY_LENGTH} or {UNCOMPRESSED_PUBKEY_LENGTH} bytes, got {len(raw)}",
            length=len(raw),
        )
    try:
        vk = VerifyingKey.from_string(
            raw,
            curve=SECP256k1,
            valid_encodings=("compressed", "uncompressed"),
        )
    except (MalformedPointError, NumberTheoryError, ValueError) as e:
        raise InvalidPublicKey(str(e) or "not a valid curve point", cause=e, length=len(raw)) from e
    return vk.to_string("uncompressed")


def eip155_address_from_public_key(pubkey: BytesLike) -> str:
    """Derive the EIP-55 checksummed address for raw SEC1 public key bytes."""
    xy = uncompressed_point(pubkey)[1:]
    digest = keccak256(xy)
    raw_hex = digest[-ADDRESS_BYTES:].hex()
    return "0x" + checksum_case(raw_hex)


def derive_eip155_address(pubkey_base58: str) -> str:
    """
    Derive an Ethereum address from a base58-encoded secp256k1 public key.

    Raises EmptyInput, DecodeError (invalid base58) or InvalidPublicKey.
    """
    if not pubkey_base58:
        raise EmptyInput("public key")
    pubkey = base58_decode(pubkey_base58)
    address = eip155_address_from_public_key(pubkey)
    log.debug("eip155_address_derived", extra={"address": address, "key_len": len(pubkey)})
    return address


__all__ = [
    "uncompressed_point",
    "eip155_address_from_public_key",
    "derive_eip155_address",
]
