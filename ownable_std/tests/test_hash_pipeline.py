from __future__ import annotations

import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ownable_std.errors import DecodeError
from ownable_std.utils import (base58_decode, base58_encode, blake2b_256,
                               hex_decode, hex_encode, keccak256,
                               keccak256_hex, secure_hash, sha256)

# -- Known digests of the empty string -----------------------------------------

KECCAK_EMPTY = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
SHA256_EMPTY = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
BLAKE2B_256_EMPTY = "0e5751c026e543b2e8ab2eb06099daa1d1e5df47778f7787faab45cdf12fe3a8"


def test_empty_digests():
    assert keccak256(b"").hex() == KECCAK_EMPTY
    assert keccak256_hex(b"") == KECCAK_EMPTY
    assert sha256(b"").hex() == SHA256_EMPTY
    assert blake2b_256(b"").hex() == BLAKE2B_256_EMPTY


def test_keccak_is_not_sha3():
    assert keccak256(b"") != hashlib.sha3_256(b"").digest()


@given(st.binary(max_size=256))
def test_digest_sizes_and_composition(data: bytes):
    for fn in (keccak256, blake2b_256, sha256, secure_hash):
        assert len(fn(data)) == 32
    assert secure_hash(data) == hashlib.sha256(hashlib.blake2b(data, digest_size=32).digest()).digest()


def test_bytes_like_inputs_accepted():
    assert keccak256(bytearray(b"abc")) == keccak256(memoryview(b"abc")) == keccak256(b"abc")


def test_non_bytes_rejected():
    with pytest.raises(TypeError):
        sha256("abc")  # type: ignore[arg-type]


# -- hex ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", b""),
        ("00ff", b"\x00\xff"),
        ("0x00ff", b"\x00\xff"),
        ("0XABcd", b"\xab\xcd"),
        ("abc", b"\x0a\xbc"),
        ("0x1", b"\x01"),
        ("  0xdead  ", b"\xde\xad"),
    ],
)
def test_hex_decode_lenient(text: str, expected: bytes):
    assert hex_decode(text) == expected


@pytest.mark.parametrize("text", ["zz", "0xg0", "12 34", "0x0x12"])
def test_hex_decode_rejects_garbage(text: str):
    with pytest.raises(DecodeError) as ei:
        hex_decode(text)
    assert ei.value.encoding == "hex"


def test_hex_encode():
    assert hex_encode(b"\x01\xab") == "01ab"
    assert hex_encode(b"\x01\xab", prefix=True) == "0x01ab"


# -- base58 ------------------------------------------------------------------


def test_base58_known_values():
    assert base58_encode(b"hello world") == "StV1DL6CwTryKyV"
    assert base58_encode(b"\x00\x00\x01") == "112"
    assert base58_decode("112") == b"\x00\x00\x01"
    assert base58_encode(b"") == ""


@pytest.mark.parametrize("text", ["0abc", "OOO", "Il1", "abc!", "ünïcode"])
def test_base58_invalid_characters(text: str):
    with pytest.raises(DecodeError) as ei:
        base58_decode(text)
    assert ei.value.encoding == "base58"
    assert "base58" in ei.value.message


@given(st.binary(max_size=64))
def test_base58_roundtrip(data: bytes):
    assert base58_decode(base58_encode(data)) == data
