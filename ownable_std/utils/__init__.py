"""
ownable_std.utils — hash pipeline and byte codecs.

Re-exports the small, pure helpers used by address derivation and the colour
helpers so callers can write `from ownable_std.utils import keccak256`.
"""

from __future__ import annotations

from .bytes import (BytesLike, b, base58_decode, base58_encode, ensure_len,
                    hex_decode, hex_encode, is_byteslike, strip0x)
from .hash import blake2b_256, keccak256, keccak256_hex, secure_hash, sha256

__all__ = [
    # bytes
    "BytesLike",
    "b",
    "is_byteslike",
    "strip0x",
    "hex_encode",
    "hex_decode",
    "base58_encode",
    "base58_decode",
    "ensure_len",
    # hash
    "keccak256",
    "keccak256_hex",
    "blake2b_256",
    "sha256",
    "secure_hash",
]
