"""
ownable_std.errors
------------------

A small, consistent error system for the ownable runtime helpers.

Design goals
------------
- One root `OwnableError` with machine-friendly `code` and optional `data`.
- One concrete subclass per failure kind (decode, public key, network,
  canonical address bounds, utf-8, stubbed verification).
- Safe JSON representation (`to_dict`) suitable for logs and host bridges.
- Everything is *permanent*: every operation here is pure, so retrying with
  the same input cannot succeed.

This module uses only stdlib to avoid import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorCode(str, Enum):
    # Input / decoding
    EMPTY_INPUT = "OWNABLE/EMPTY_INPUT"
    DECODE = "OWNABLE/DECODE"

    # Address derivation
    INVALID_PUBLIC_KEY = "OWNABLE/INVALID_PUBLIC_KEY"
    INVALID_NETWORK = "OWNABLE/INVALID_NETWORK"

    # Capability stub (canonical addresses)
    INVALID_ADDRESS = "OWNABLE/INVALID_ADDRESS"
    ADDR_TOO_SHORT = "OWNABLE/ADDR_TOO_SHORT"
    ADDR_TOO_LONG = "OWNABLE/ADDR_TOO_LONG"
    ADDR_BAD_LENGTH = "OWNABLE/ADDR_BAD_LENGTH"
    INVALID_UTF8 = "OWNABLE/INVALID_UTF8"

    # Capability stub (crypto placeholders)
    VERIFICATION = "OWNABLE/VERIFICATION"
    RECOVER_PUBKEY = "OWNABLE/RECOVER_PUBKEY"
    NOT_IMPLEMENTED = "OWNABLE/NOT_IMPLEMENTED"


@dataclass(eq=False)
class OwnableError(Exception):
    """
    Root error for ownable_std.

    Attributes
    ----------
    code: str
        Machine-stable error code (see ErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data (lengths, encodings, inputs). JSON-serializable.
    cause: Optional[BaseException]
        Wrapped original exception; not part of `to_dict` unless requested.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        super().__init__(f"{_code_str(self.code)}: {self.message}")

    @property
    def retryable(self) -> bool:
        return False

    def to_dict(self, include_cause: bool = False) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs/host bridges."""
        out: Dict[str, Any] = {
            "code": _code_str(self.code),
            "message": self.message,
            "data": _coerce_json(self.data),
            "retryable": self.retryable,
        }
        if include_cause and self.cause is not None:
            out["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return out

    def __str__(self) -> str:  # pragma: no cover - human formatting
        parts = [f"{_code_str(self.code)}: {self.message}"]
        if self.data:
            preview = ", ".join(f"{k}={_preview(v)}" for k, v in self.data.items())
            parts.append(f"[{preview}]")
        return " ".join(parts)


# ---------------------------------------------------------------------------
# Concrete subclasses
# ---------------------------------------------------------------------------


class EmptyInput(OwnableError):
    def __init__(self, argument: str = "input") -> None:
        super().__init__(
            code=ErrorCode.EMPTY_INPUT,
            message=f"{argument} must not be empty",
            data={"argument": argument},
        )


class DecodeError(OwnableError):
    """Decoding failed; `encoding` names the offending format (base58, hex, ...)."""

    def __init__(
        self,
        encoding: str,
        reason: str = "",
        *,
        cause: Optional[BaseException] = None,
        **data: Any,
    ) -> None:
        msg = f"invalid {encoding}"
        if reason:
            msg += f": {reason}"
        super().__init__(
            code=ErrorCode.DECODE,
            message=msg,
            data={"encoding": encoding, **_jsonmap(data)},
            cause=cause,
        )

    @property
    def encoding(self) -> str:
        return self.data["encoding"]


class InvalidPublicKey(OwnableError):
    def __init__(
        self, reason: str = "not a valid curve point", *, cause: Optional[BaseException] = None, **data: Any
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PUBLIC_KEY,
            message=f"invalid public key: {reason}",
            data=_jsonmap(data),
            cause=cause,
        )


class InvalidNetwork(OwnableError):
    def __init__(self, network_id: Any, allowed: Any = ()) -> None:
        super().__init__(
            code=ErrorCode.INVALID_NETWORK,
            message=f"invalid network id {network_id!r}",
            data={"network_id": _coerce_json(network_id), "allowed": sorted(allowed)},
        )


class InvalidAddress(OwnableError):
    def __init__(self, address: str, *, cause: Optional[BaseException] = None) -> None:
        reason = cause.message if isinstance(cause, OwnableError) else "invalid address"
        super().__init__(
            code=ErrorCode.INVALID_ADDRESS,
            message=reason,
            data={"address": address},
            cause=cause,
        )


class TooShort(OwnableError):
    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(
            code=ErrorCode.ADDR_TOO_SHORT,
            message="Invalid input: human address too short",
            data={"length": length, "min": minimum},
        )


class TooLong(OwnableError):
    def __init__(self, length: int, maximum: int) -> None:
        super().__init__(
            code=ErrorCode.ADDR_TOO_LONG,
            message="Invalid input: human address too long",
            data={"length": length, "max": maximum},
        )


class BadLength(OwnableError):
    def __init__(self, length: int, expected: int) -> None:
        super().__init__(
            code=ErrorCode.ADDR_BAD_LENGTH,
            message="Invalid input: canonical address length not correct",
            data={"length": length, "expected": expected},
        )


class InvalidUtf8(OwnableError):
    def __init__(self, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_UTF8,
            message="canonical address is not valid utf-8",
            cause=cause,
        )


class VerificationError(OwnableError):
    def __init__(self, scheme: str, message: str = "unknown error") -> None:
        super().__init__(
            code=ErrorCode.VERIFICATION,
            message=f"{scheme} verification: {message}",
            data={"scheme": scheme, "error_code": 0},
        )


class RecoverPubkeyError(OwnableError):
    def __init__(self, message: str = "unknown error") -> None:
        super().__init__(
            code=ErrorCode.RECOVER_PUBKEY,
            message=f"secp256k1 pubkey recovery: {message}",
            data={"error_code": 0},
        )


class NotImplementedFeature(OwnableError):
    def __init__(self, message: str = "feature not implemented", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.NOT_IMPLEMENTED, message=message, data=_jsonmap(data)
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _code_str(code: Any) -> str:
    return code.value if isinstance(code, Enum) else str(code)


def _jsonmap(m: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in m.items()}


def _coerce_json(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (bytes, bytearray, memoryview)):
        return "0x" + bytes(v).hex()
    if isinstance(v, Mapping):
        return {str(k): _coerce_json(x) for k, x in v.items()}
    if isinstance(v, (list, tuple, set, frozenset)):
        return [_coerce_json(x) for x in v]
    if isinstance(v, Enum):
        return _coerce_json(v.value)
    return str(v)


def _preview(v: Any, limit: int = 64) -> str:
    s = repr(v)
    return s if len(s) <= limit else s[: limit - 3] + "..."


__all__ = [
    "ErrorCode",
    "OwnableError",
    "EmptyInput",
    "DecodeError",
    "InvalidPublicKey",
    "InvalidNetwork",
    "InvalidAddress",
    "TooShort",
    "TooLong",
    "BadLength",
    "InvalidUtf8",
    "VerificationError",
    "RecoverPubkeyError",
    "NotImplementedFeature",
]
