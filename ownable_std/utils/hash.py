"""
ownable_std.utils.hash
======================

Thin wrappers for the digests used by address derivation.

Provided digests (all bytes in → 32 bytes out):
- keccak256(data)      Ethereum-style Keccak-256 (pre-standard SHA-3 padding)
- blake2b_256(data)    BLAKE2b with the digest size fixed to 32 bytes
- sha256(data)
- secure_hash(data)    LTO address hash: sha256(blake2b_256(data))

Keccak-256 comes from pycryptodome (`Crypto.Hash.keccak`); hashlib's
sha3_256 uses different padding and is NOT a substitute.
"""

from __future__ import annotations

import hashlib

from Crypto.Hash import keccak as _keccak

from ownable_std.constants import HASH_SIZE

from .bytes import BytesLike
from .bytes import b as _b


def keccak256(data: BytesLike) -> bytes:
    """Keccak-256 digest (Ethereum-style)."""
    return _keccak.new(digest_bits=256, data=_b(data)).digest()


def blake2b_256(data: BytesLike) -> bytes:
    """BLAKE2b digest with a 32-byte output."""
    return hashlib.blake2b(_b(data), digest_size=HASH_SIZE).digest()


def sha256(data: BytesLike) -> bytes:
    """SHA-256 digest."""
    return hashlib.sha256(_b(data)).digest()


def secure_hash(data: BytesLike) -> bytes:
    """
    LTO "secure hash": sha256(blake2b_256(data)).

    Used identically for the public-key hash and for the address checksum.
    """
    return sha256(blake2b_256(data))


def keccak256_hex(data: BytesLike) -> str:
    return keccak256(data).hex()


__all__ = [
    "keccak256",
    "blake2b_256",
    "sha256",
    "secure_hash",
    "keccak256_hex",
]
