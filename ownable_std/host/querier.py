"""
ownable_std.host.querier — cross-contract query surface.

Ownables run isolated in the browser, so there is nothing to query: the
`EmptyQuerier` only satisfies the interface and refuses every request.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from ownable_std.errors import NotImplementedFeature

log = logging.getLogger("ownable_std.host.querier")


@runtime_checkable
class Querier(Protocol):
    def raw_query(self, request: bytes) -> Any: ...


class EmptyQuerier:
    """Querier placeholder; must never be relied upon."""

    def raw_query(self, request: bytes) -> Any:
        log.warning("raw_query_unsupported", extra={"request_len": len(request)})
        raise NotImplementedFeature("raw_query is not available in the ownable sandbox")


__all__ = ["Querier", "EmptyQuerier"]
