from __future__ import annotations

from typing import Iterator

import pytest
from ecdsa import SECP256k1, SigningKey

from ownable_std.config import load_config
from ownable_std.utils.bytes import base58_encode


@pytest.fixture
def fresh_config() -> Iterator[None]:
    """Config is cached per process; tests that touch OWNABLE_* env need a rebuild."""
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def generator_pubkey_b58() -> str:
    """Base58 of the uncompressed secp256k1 generator point (private key 1)."""
    vk = SigningKey.from_secret_exponent(1, curve=SECP256k1).get_verifying_key()
    return base58_encode(vk.to_string("uncompressed"))


@pytest.fixture
def lto_test_account() -> dict:
    """
    Test account of LTO Network's JavaScript client (lto-api.js): the ed25519
    sign public key and the testnet ('T') address the client derives from it.
    The pair was cross-checked with coreutils b2sum/sha256sum, independently
    of this package.
    """
    return {
        "public_key": "4EcSxUkMxqxBEBUBL2oKz3ARVsbyRJTivWpNrYQGdguz",
        "address": "3MtHYnCkd3oFZr21yb2vEdngcSGXvuNNCq2",
    }
