"""ownable_std.version — package version.

Resolution order (first match wins):
- OWNABLE_STD_VERSION environment override
- installed distribution metadata ("ownable-std")
- BASE_VERSION
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import metadata as importlib_metadata

# Bump whenever derived addresses or the dump wire format change.
BASE_VERSION = "0.1.0"

DIST_NAME = "ownable-std"


@lru_cache(maxsize=1)
def compute_version() -> str:
    env = os.getenv("OWNABLE_STD_VERSION")
    if env:
        return env.strip()
    try:
        return importlib_metadata.version(DIST_NAME)
    except importlib_metadata.PackageNotFoundError:
        return BASE_VERSION


__version__ = compute_version()

__all__ = ["BASE_VERSION", "DIST_NAME", "compute_version", "__version__"]
