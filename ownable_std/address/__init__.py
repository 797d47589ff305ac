"""
ownable_std.address — chain address derivation from public keys.

- EIP-155 (Ethereum-style, EIP-55 checksummed hex)
- LTO Network (base58, version/network/checksum framed)
"""

from __future__ import annotations

from .eip55 import checksum_case, is_checksum_address, to_checksum_address
from .eip155 import (derive_eip155_address, eip155_address_from_public_key,
                     uncompressed_point)
from .lto import (decode_lto_address, derive_lto_address, is_valid_lto_address,
                  lto_address_bytes, lto_address_from_public_key)

__all__ = [
    "checksum_case",
    "to_checksum_address",
    "is_checksum_address",
    "uncompressed_point",
    "eip155_address_from_public_key",
    "derive_eip155_address",
    "lto_address_bytes",
    "lto_address_from_public_key",
    "derive_lto_address",
    "decode_lto_address",
    "is_valid_lto_address",
]
