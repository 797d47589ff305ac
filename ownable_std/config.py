"""
ownable_std.config — logging knobs, debug sink and environment defaults.

This module centralizes the few runtime settings of the ownable helpers. It has
NO third-party deps and is safe to import very early.

Configuration precedence:
  1) Environment variables (OWNABLE_*)
  2) Hardcoded defaults below

Key env vars:
  - OWNABLE_LOG_LEVEL          (str)    default: INFO
  - OWNABLE_LOG_FORMAT         (str)    json | text | unset (auto: json when not a TTY)
  - OWNABLE_DEBUG_SINK         (str)    stdout | log   default: stdout
  - OWNABLE_DEFAULT_CHAIN_ID   (str)    default: ""    (chain id used by create_env)

Protocol constants (canonical address length, LTO version byte, hash sizes)
are *not* configurable; see ownable_std.constants.

Usage:
    from ownable_std.config import load_config
    CFG = load_config()
    if CFG.debug_sink == "log": ...
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

DEBUG_SINKS = ("stdout", "log")
LOG_FORMATS = ("json", "text")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


# ----------------------------- helpers ---------------------------------------


def _env_choice(name: str, default: Optional[str], choices: tuple[str, ...], *, upper: bool = False) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    val = raw.strip().upper() if upper else raw.strip().lower()
    if val not in choices:
        return default
    return val


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip()


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class OwnableConfig:
    log_level: str
    log_format: Optional[str]  # None → decided from the stream (TTY → text)
    debug_sink: str
    default_chain_id: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "debug_sink": self.debug_sink,
            "default_chain_id": self.default_chain_id,
        }


@lru_cache(maxsize=1)
def load_config() -> OwnableConfig:
    """
    Build and cache an OwnableConfig from environment + defaults.

    Unknown values fall back to the defaults rather than raising.
    """
    return OwnableConfig(
        log_level=_env_choice("OWNABLE_LOG_LEVEL", "INFO", LOG_LEVELS, upper=True) or "INFO",
        log_format=_env_choice("OWNABLE_LOG_FORMAT", None, LOG_FORMATS),
        debug_sink=_env_choice("OWNABLE_DEBUG_SINK", "stdout", DEBUG_SINKS) or "stdout",
        default_chain_id=_env_str("OWNABLE_DEFAULT_CHAIN_ID", ""),
    )


# Module-level singleton for convenience; load_config() stays the canonical
# (cached) accessor. Call load_config.cache_clear() after changing the env.
CFG: OwnableConfig = load_config()

__all__ = ["OwnableConfig", "load_config", "CFG", "DEBUG_SINKS", "LOG_FORMATS", "LOG_LEVELS"]
