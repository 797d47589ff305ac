from __future__ import annotations

import logging
from typing import List

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ownable_std.constants import CANONICAL_LENGTH
from ownable_std.errors import (BadLength, ErrorCode, InvalidAddress,
                                InvalidUtf8, RecoverPubkeyError, TooLong,
                                TooShort, VerificationError)
from ownable_std.host import Api, EmptyApi

# No NUL, no surrogates; 3..18 chars stays within 3..54 UTF-8 bytes.
HUMAN = st.text(
    alphabet=st.characters(min_codepoint=1, max_codepoint=0xD7FF),
    min_size=3,
    max_size=18,
)


@pytest.fixture
def api() -> EmptyApi:
    return EmptyApi(debug_sink=lambda _m: None)


def test_is_an_api(api: EmptyApi):
    assert isinstance(api, Api)
    assert api.canonical_length == CANONICAL_LENGTH == 54


def test_canonicalize_pads_to_54(api: EmptyApi):
    out = api.addr_canonicalize("abc")
    assert out == b"abc" + b"\x00" * 51
    assert len(out) == 54


def test_canonicalize_bounds(api: EmptyApi):
    with pytest.raises(TooShort) as ei:
        api.addr_canonicalize("ab")
    assert ei.value.message == "Invalid input: human address too short"
    assert ei.value.data == {"length": 2, "min": 3}

    assert len(api.addr_canonicalize("x" * 54)) == 54
    with pytest.raises(TooLong):
        api.addr_canonicalize("x" * 55)


def test_canonicalize_counts_utf8_bytes(api: EmptyApi):
    # one char, two bytes: still too short
    with pytest.raises(TooShort):
        api.addr_canonicalize("é")
    # 27 two-byte chars = 54 bytes fits, 28 does not
    assert len(api.addr_canonicalize("é" * 27)) == 54
    with pytest.raises(TooLong):
        api.addr_canonicalize("é" * 28)


def test_humanize_requires_exact_length(api: EmptyApi):
    with pytest.raises(BadLength) as ei:
        api.addr_humanize(b"abc" + b"\x00" * 50)
    assert ei.value.data == {"length": 53, "expected": 54}
    with pytest.raises(BadLength):
        api.addr_humanize(b"\x00" * 55)


def test_humanize_drops_every_zero_byte(api: EmptyApi):
    raw = b"a\x00b\x00c".ljust(54, b"\x00")
    assert api.addr_humanize(raw) == "abc"


def test_humanize_invalid_utf8(api: EmptyApi):
    with pytest.raises(InvalidUtf8):
        api.addr_humanize(b"\xff\xfe".ljust(54, b"\x00"))


@given(HUMAN)
def test_canonicalize_humanize_roundtrip(human: str):
    api = EmptyApi(debug_sink=lambda _m: None)
    assert api.addr_humanize(api.addr_canonicalize(human)) == human


def test_validate(api: EmptyApi):
    assert api.addr_validate("3MtHYnCkd3oFZr21yb2vEdngcSGXvuNNCq2") == "3MtHYnCkd3oFZr21yb2vEdngcSGXvuNNCq2"
    with pytest.raises(InvalidAddress) as ei:
        api.addr_validate("ab")
    assert ei.value.code is ErrorCode.INVALID_ADDRESS
    assert isinstance(ei.value.cause, TooShort)


def test_secp256k1_placeholders_always_fail(api: EmptyApi):
    with pytest.raises(VerificationError):
        api.secp256k1_verify(b"\x00" * 32, b"\x00" * 64, b"\x02" * 33)
    with pytest.raises(RecoverPubkeyError):
        api.secp256k1_recover_pubkey(b"\x00" * 32, b"\x00" * 64, 0)


def test_ed25519_placeholders_always_pass(api: EmptyApi):
    assert api.ed25519_verify(b"msg", b"garbage", b"") is True
    assert api.ed25519_batch_verify([], [], []) is True
    assert api.ed25519_batch_verify([b"a", b"b"], [b"x"], [b"k1", b"k2", b"k3"]) is True


def test_debug_custom_sink():
    seen: List[str] = []
    EmptyApi(debug_sink=seen.append).debug("hello")
    assert seen == ["hello"]


def test_debug_stdout_sink(capsys, monkeypatch, fresh_config):
    monkeypatch.delenv("OWNABLE_DEBUG_SINK", raising=False)
    EmptyApi().debug("to stdout")
    assert capsys.readouterr().out == "to stdout\n"


def test_debug_log_sink(caplog, monkeypatch, fresh_config):
    monkeypatch.setenv("OWNABLE_DEBUG_SINK", "log")
    caplog.set_level(logging.INFO, logger="ownable_std.host.api")
    EmptyApi().debug("to log")
    rec = [r for r in caplog.records if r.getMessage() == "to log"]
    assert len(rec) == 1
    assert rec[0].component == "contract_debug"
