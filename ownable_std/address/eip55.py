"""
ownable_std.address.eip55 — mixed-case checksum encoding (EIP-55).

The checksum hash is taken over the *lowercase hex string's ASCII bytes*,
never over the raw 20 address bytes. Each alphabetic hex digit is upper-cased
when the nibble of the hash at the same position is >= 8.
"""

from __future__ import annotations

import string

from ownable_std.utils.bytes import strip0x
from ownable_std.utils.hash import keccak256


def checksum_case(lowercase_hex: str) -> str:
    """Apply EIP-55 casing to a lowercase hex string without `0x` prefix."""
    digest_hex = keccak256(lowercase_hex.encode("ascii")).hex()
    out = []
    for i, ch in enumerate(lowercase_hex):
        if ch in "abcdef" and int(digest_hex[i], 16) >= 8:
            out.append(ch.upper())
        else:
            out.append(ch)
    return "".join(out)


def to_checksum_address(address: str) -> str:
    """Normalize any-case `0x` address text to its EIP-55 form."""
    return "0x" + checksum_case(strip0x(address).lower())


def is_checksum_address(address: str) -> bool:
    if not address.startswith("0x") or len(address) != 42:
        return False
    if any(c not in string.hexdigits for c in address[2:]):
        return False
    return to_checksum_address(address) == address


__all__ = ["checksum_case", "to_checksum_address", "is_checksum_address"]
