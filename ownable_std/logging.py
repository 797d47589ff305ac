"""
ownable_std.logging
-------------------

Handler setup for the `ownable_std` logger tree.

Library modules never touch handlers: they call
`logging.getLogger("ownable_std.<module>")` and attach structured fields with
`extra={...}`. Whoever hosts the sandbox (browser glue, a test, a script)
calls `configure()` or `configure_from_config()` once.

Fields bound with `bind()` (or `trace_scope()` for one invocation) live in a
contextvar and are merged into every record the formatters render.

    from ownable_std import logging as olog

    olog.configure_from_config()
    with olog.trace_scope():
        olog.bind(network="T")
        olog.get_logger("ownable_std.demo").info("derived", extra={"n": 1})
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import IO, Any, Dict, Iterator, Optional

ROOT_LOGGER = "ownable_std"

_FIELDS: ContextVar[Dict[str, Any]] = ContextVar("ownable_std_log_fields", default={})

# Shown first (in this order) by the text formatter.
DEFAULT_CONTEXT_KEYS = ("trace_id", "chain_id", "component", "network")

# Everything a bare LogRecord carries; the rest came in through `extra=`.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


# ----------------------------
# Context fields
# ----------------------------


def context() -> Dict[str, Any]:
    return dict(_FIELDS.get())


def bind(**fields: Any) -> None:
    _FIELDS.set({**_FIELDS.get(), **{k: _jsonable(v) for k, v in fields.items()}})


def unbind(*keys: str) -> None:
    _FIELDS.set({k: v for k, v in _FIELDS.get().items() if k not in keys})


def clear_context() -> None:
    _FIELDS.set({})


@contextmanager
def trace_scope(trace_id: Optional[str] = None) -> Iterator[str]:
    """Bind a trace_id for the block; fields bound inside are dropped on exit."""
    token = _FIELDS.set({**_FIELDS.get(), "trace_id": trace_id or uuid.uuid4().hex[:12]})
    try:
        yield _FIELDS.get()["trace_id"]
    finally:
        _FIELDS.reset(token)


# ----------------------------
# Formatters
# ----------------------------


def _jsonable(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v).hex()
    if isinstance(v, (list, tuple)):
        return [_jsonable(x) for x in v]
    if isinstance(v, dict):
        return {str(k): _jsonable(x) for k, x in v.items()}
    return str(v)


def _record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Context fields, then per-call extras (extras win on a clash)."""
    fields = context()
    for k, v in vars(record).items():
        if k not in _STANDARD_ATTRS and not k.startswith("_"):
            fields[k] = _jsonable(v)
    return fields


def _timestamp(record: logging.LogRecord) -> str:
    ts = _dt.datetime.fromtimestamp(record.created, tz=_dt.timezone.utc)
    return ts.isoformat(timespec="milliseconds")


class JSONFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, msg, then structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        out: Dict[str, Any] = {
            "ts": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in _record_fields(record).items():
            out.setdefault(k, v)
        if record.exc_info:
            out["err"] = self.formatException(record.exc_info)
        return json.dumps(out, separators=(",", ":"), default=str)


class TextFormatter(logging.Formatter):
    """`ts | LEVEL | logger | k=v ... | message` for terminals."""

    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        ordered = [k for k in DEFAULT_CONTEXT_KEYS if k in fields]
        ordered += sorted(k for k in fields if k not in DEFAULT_CONTEXT_KEYS)
        parts = [_timestamp(record), f"{record.levelname:<5}", record.name]
        if ordered:
            parts.append(" ".join(f"{k}={fields[k]}" for k in ordered))
        parts.append(record.getMessage())
        line = " | ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


# ----------------------------
# Setup
# ----------------------------


def _level(level: Any) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure(
    *,
    json: Optional[bool] = None,
    level: Any = "INFO",
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Replace the handlers of the `ownable_std` logger with one stream handler.

    json=None picks JSON for non-interactive streams and text on a TTY.
    """
    stream = stream if stream is not None else sys.stderr
    if json is None:
        isatty = getattr(stream, "isatty", None)
        json = not (callable(isatty) and isatty())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if json else TextFormatter())

    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(_level(level))
    return logger


def configure_from_config(cfg: Any = None, *, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Apply OWNABLE_LOG_LEVEL / OWNABLE_LOG_FORMAT (via load_config()) to the logger tree."""
    if cfg is None:
        from ownable_std.config import load_config

        cfg = load_config()
    fmt = cfg.log_format
    return configure(json=None if fmt is None else fmt == "json", level=cfg.log_level, stream=stream)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER)


__all__ = [
    "ROOT_LOGGER",
    "DEFAULT_CONTEXT_KEYS",
    "context",
    "bind",
    "unbind",
    "clear_context",
    "trace_scope",
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "configure_from_config",
    "get_logger",
]
