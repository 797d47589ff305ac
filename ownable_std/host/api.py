"""
ownable_std.host.api
====================

Host capability surface expected by ownable contracts, plus the one stub
implementation the browser sandbox ships.

`Api` is the structural interface (address helpers, signature checks, debug
output). `EmptyApi` only exists so the sandbox is structurally complete: its
behaviour is fixed and other code asserts on it, so it must not be "fixed"
into real cryptography.

EmptyApi behaviour
------------------
- addr_canonicalize(human)   → UTF-8 bytes of `human`, zero-padded to 54 bytes
                               (TooShort below 3 bytes, TooLong above 54)
- addr_humanize(canonical)   → drop every 0x00 byte, decode UTF-8
                               (BadLength unless exactly 54 bytes, InvalidUtf8)
- addr_validate(human)       → `human` iff addr_canonicalize succeeds, else InvalidAddress
- secp256k1_verify           → ALWAYS raises VerificationError   (placeholder)
- secp256k1_recover_pubkey   → ALWAYS raises RecoverPubkeyError  (placeholder)
- ed25519_verify             → ALWAYS True                       (placeholder)
- ed25519_batch_verify       → ALWAYS True                       (placeholder)
- debug(message)             → diagnostic sink (stdout, or the module logger)

Lengths are measured in UTF-8 bytes.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, Protocol, Sequence, runtime_checkable

from ownable_std.config import load_config
from ownable_std.constants import CANONICAL_LENGTH, MIN_HUMAN_ADDRESS_LENGTH
from ownable_std.errors import (BadLength, InvalidAddress, InvalidUtf8,
                                OwnableError, RecoverPubkeyError, TooLong,
                                TooShort, VerificationError)
from ownable_std.utils.bytes import BytesLike, b

log = logging.getLogger("ownable_std.host.api")

DebugSink = Callable[[str], None]


@runtime_checkable
class Api(Protocol):
    """Capability surface a host-compatible sandbox must expose."""

    def addr_validate(self, human: str) -> str: ...
    def addr_canonicalize(self, human: str) -> bytes: ...
    def addr_humanize(self, canonical: BytesLike) -> str: ...

    def secp256k1_verify(self, message_hash: bytes, signature: bytes, public_key: bytes) -> bool: ...
    def secp256k1_recover_pubkey(self, message_hash: bytes, signature: bytes, recovery_param: int) -> bytes: ...
    def ed25519_verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool: ...
    def ed25519_batch_verify(
        self,
        messages: Sequence[bytes],
        signatures: Sequence[bytes],
        public_keys: Sequence[bytes],
    ) -> bool: ...

    def debug(self, message: str) -> None: ...


def _stdout_sink(message: str) -> None:
    sys.stdout.write(message + "\n")
    sys.stdout.flush()


def _log_sink(message: str) -> None:
    log.info(message, extra={"component": "contract_debug"})


def default_debug_sink() -> DebugSink:
    """Resolve the sink named by OWNABLE_DEBUG_SINK (stdout | log)."""
    return _log_sink if load_config().debug_sink == "log" else _stdout_sink


class EmptyApi:
    """
    Placeholder Api for the browser sandbox. Not real cryptography.

    Contracts must not assume anything about `canonical_length`.
    """

    __slots__ = ("canonical_length", "_sink")

    def __init__(
        self,
        canonical_length: int = CANONICAL_LENGTH,
        *,
        debug_sink: Optional[DebugSink] = None,
    ) -> None:
        self.canonical_length = canonical_length
        self._sink = debug_sink or default_debug_sink()

    # ---- addresses ----

    def addr_validate(self, human: str) -> str:
        try:
            self.addr_canonicalize(human)
        except OwnableError as e:
            raise InvalidAddress(human, cause=e) from e
        return human

    def addr_canonicalize(self, human: str) -> bytes:
        # Dummy validation only; real chains check bech32 format and checksum here.
        raw = human.encode("utf-8")
        if len(raw) < MIN_HUMAN_ADDRESS_LENGTH:
            raise TooShort(len(raw), MIN_HUMAN_ADDRESS_LENGTH)
        if len(raw) > self.canonical_length:
            raise TooLong(len(raw), self.canonical_length)
        return raw.ljust(self.canonical_length, b"\x00")

    def addr_humanize(self, canonical: BytesLike) -> str:
        raw = b(canonical)
        if len(raw) != self.canonical_length:
            raise BadLength(len(raw), self.canonical_length)
        trimmed = raw.replace(b"\x00", b"")
        try:
            return trimmed.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8(cause=e) from e

    # ---- signatures (placeholders) ----

    def secp256k1_verify(self, message_hash: bytes, signature: bytes, public_key: bytes) -> bool:
        # Placeholder: never verifies.
        raise VerificationError("secp256k1")

    def secp256k1_recover_pubkey(self, message_hash: bytes, signature: bytes, recovery_param: int) -> bytes:
        # Placeholder: never recovers.
        raise RecoverPubkeyError()

    def ed25519_verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool:
        # Placeholder: accepts everything. NOT a signature check.
        return True

    def ed25519_batch_verify(
        self,
        messages: Sequence[bytes],
        signatures: Sequence[bytes],
        public_keys: Sequence[bytes],
    ) -> bool:
        # Placeholder: accepts everything. NOT a signature check.
        return True

    # ---- diagnostics ----

    def debug(self, message: str) -> None:
        self._sink(message)

    def __repr__(self) -> str:
        return f"EmptyApi(canonical_length={self.canonical_length})"


__all__ = ["Api", "EmptyApi", "DebugSink", "default_debug_sink"]
