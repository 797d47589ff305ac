"""
ownable_std.constants — fixed sizes and markers shared across modules.

These are protocol constants, not configuration: changing any of them changes
derived addresses or the stub's canonical address shape.
"""

from __future__ import annotations

from typing import FrozenSet

# Digest sizes
HASH_SIZE = 32

# secp256k1 SEC1 encodings
COMPRESSED_PUBKEY_LENGTH = 33
UNCOMPRESSED_PUBKEY_LENGTH = 65
UNCOMPRESSED_PUBKEY_PREFIX = 0x04

# Both EIP-155 and LTO keep 20 bytes of the key hash
ADDRESS_BYTES = 20

# LTO: version(1) | network(1) | address(20) | checksum(4)
LTO_ADDRESS_VERSION = 0x01
LTO_CHECKSUM_BYTES = 4
LTO_ADDRESS_LENGTH = 1 + 1 + ADDRESS_BYTES + LTO_CHECKSUM_BYTES
LTO_MAINNET = "L"
LTO_TESTNET = "T"
LTO_NETWORKS: FrozenSet[str] = frozenset({LTO_MAINNET, LTO_TESTNET})

# Stub capability provider
CANONICAL_LENGTH = 54
MIN_HUMAN_ADDRESS_LENGTH = 3

__all__ = [
    "HASH_SIZE",
    "COMPRESSED_PUBKEY_LENGTH",
    "UNCOMPRESSED_PUBKEY_LENGTH",
    "UNCOMPRESSED_PUBKEY_PREFIX",
    "ADDRESS_BYTES",
    "LTO_ADDRESS_VERSION",
    "LTO_CHECKSUM_BYTES",
    "LTO_ADDRESS_LENGTH",
    "LTO_MAINNET",
    "LTO_TESTNET",
    "LTO_NETWORKS",
    "CANONICAL_LENGTH",
    "MIN_HUMAN_ADDRESS_LENGTH",
]
