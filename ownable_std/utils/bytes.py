"""
ownable_std.utils.bytes
=======================

Byte handling helpers shared by the address and snapshot code:

- Hex helpers: hex_encode / hex_decode, 0x-prefix management
- Base58 (Bitcoin alphabet) via the `base58` package
- Length guards: ensure_len
- Bytes-like normalization: b(), is_byteslike()

Decoding failures surface as `ownable_std.errors.DecodeError` naming the
encoding that failed, never as a bare ValueError.

Examples
--------
>>> hex_encode(b"\\x01\\x02")
'0102'
>>> hex_decode('0xabc')
b'\\n\\xbc'
>>> base58_decode(base58_encode(b"\\x00\\x01"))
b'\\x00\\x01'
"""

from __future__ import annotations

import string
from typing import Union

import base58

from ownable_std.errors import DecodeError

BytesLike = Union[bytes, bytearray, memoryview]

_HEXDIGITS = frozenset(string.hexdigits)


# -----------------------
# Basic bytes/hex helpers
# -----------------------

def is_byteslike(x: object) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def b(x: BytesLike) -> bytes:
    """Normalize a bytes-like value to immutable bytes."""
    if isinstance(x, bytes):
        return x
    if isinstance(x, (bytearray, memoryview)):
        return bytes(x)
    raise TypeError(f"expected bytes-like, got {type(x).__name__}")


def strip0x(s: str) -> str:
    return s[2:] if s.startswith(("0x", "0X")) else s


def hex_encode(data: BytesLike, *, prefix: bool = False) -> str:
    """Return the lowercase hex string of data (no prefix unless asked)."""
    h = b(data).hex()
    return f"0x{h}" if prefix else h


def hex_decode(h: str) -> bytes:
    """
    Parse a hex string leniently:

    - surrounding whitespace is ignored
    - one optional "0x"/"0X" prefix is stripped
    - odd length is left-padded with a zero nibble ("abc" → "0abc")

    Anything else that is not a hex digit raises DecodeError.
    """
    if not isinstance(h, str):
        raise TypeError("hex_decode expects str")
    s = strip0x(h.strip())
    if len(s) % 2 == 1:
        s = "0" + s
    bad = next((c for c in s if c not in _HEXDIGITS), None)
    if bad is not None:
        raise DecodeError("hex", f"invalid character {bad!r}", value=h)
    return bytes.fromhex(s)


# ---------------
# Base58
# ---------------

def base58_encode(data: BytesLike) -> str:
    """Base58 (Bitcoin alphabet) encode bytes to an ASCII string."""
    return base58.b58encode(b(data)).decode("ascii")


def base58_decode(s: str) -> bytes:
    """Base58 (Bitcoin alphabet) decode; DecodeError carries the decoder's message."""
    if not isinstance(s, str):
        raise TypeError("base58_decode expects str")
    try:
        return base58.b58decode(s)
    except ValueError as e:
        # UnicodeEncodeError (non-ascii input) is a ValueError too
        raise DecodeError("base58", str(e), cause=e, value=s) from e


# ---------------------
# Length/shape guarding
# ---------------------

def ensure_len(data: BytesLike, n: int, *, name: str = "bytes") -> bytes:
    data_b = b(data)
    if len(data_b) != n:
        raise ValueError(f"{name} must be length {n}, got {len(data_b)}")
    return data_b


__all__ = [
    "BytesLike",
    "is_byteslike",
    "b",
    "strip0x",
    "hex_encode",
    "hex_decode",
    "base58_encode",
    "base58_decode",
    "ensure_len",
]
