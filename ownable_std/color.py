"""
ownable_std.color — deterministic display colour from a hash.

Ownable widgets tint themselves from a transaction or event hash. The last
three bytes of the hash (read back to front) become red, green and blue.
Malformed input falls back to black instead of failing the render.
"""

from __future__ import annotations

import string
from typing import Tuple

_HEXDIGITS = frozenset(string.hexdigits)
_BLACK = (0, 0, 0)


def derive_rgb_values(hash_hex: str) -> Tuple[int, int, int]:
    """
    Derive an (r, g, b) triple from a hex hash.

    The input is trimmed once, then every leading lowercase "0x" is stripped
    and odd-length text is left-padded with "0". What remains must be plain
    hex digits; anything else (inner whitespace, "0X", a stray "x") gives
    (0, 0, 0). Missing bytes count as 0.
    """
    s = hash_hex.strip()
    while s.startswith("0x"):
        s = s[2:]
    if len(s) % 2 == 1:
        s = "0" + s
    if any(c not in _HEXDIGITS for c in s):
        return _BLACK
    rev = bytes.fromhex(s)[::-1]
    padded = rev[:3].ljust(3, b"\x00")
    return (padded[0], padded[1], padded[2])


def rgb_hex(r: int, g: int, b: int) -> str:
    """'#RRGGBB' in uppercase hex; each channel must be 0..255."""
    for name, v in (("r", r), ("g", g), ("b", b)):
        if not 0 <= v <= 255:
            raise ValueError(f"{name} must be in 0..255, got {v}")
    return f"#{r:02X}{g:02X}{b:02X}"


def get_random_color(hash_hex: str) -> str:
    return rgb_hex(*derive_rgb_values(hash_hex))


__all__ = ["derive_rgb_values", "rgb_hex", "get_random_color"]
