"""Read contract of the object cache.

The printer only reads from the cache. Watch/update mechanics live with the
cache owner and are not part of this contract.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..context import RenderContext

__all__ = ["CacheKey", "Cache"]


@dataclass(frozen=True)
class CacheKey:
    namespace: str
    api_version: str
    kind: str
    name: str | None = None
    # label selector: every pair must match the object's labels
    selector: Mapping[str, str] | None = field(default=None, hash=False)


class Cache(Protocol):
    def list(self, ctx: RenderContext, key: CacheKey) -> list[Mapping[str, Any]]:
        """Objects matching `key` (empty list when nothing matches)."""
        ...

    def get(self, ctx: RenderContext, key: CacheKey) -> Mapping[str, Any]:
        """The single object named by `key`; raises NotFoundError on a miss."""
        ...
