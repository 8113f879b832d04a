"""In-process cache implementation.

Backs the debug CLI and tests. Objects are stored by
(namespace, apiVersion, kind, name); `list` returns them in insertion order.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .. import objects
from ..context import RenderContext
from ..errors import InvalidInputError, NotFoundError
from .interface import CacheKey

logger = logging.getLogger(__name__)

__all__ = ["MemoryCache"]

_Ident = tuple[str, str, str, str]


class MemoryCache:
    def __init__(self, items: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._store: dict[_Ident, Mapping[str, Any]] = {}
        for obj in items or ():
            self.add(obj)

    def add(self, obj: Mapping[str, Any]) -> None:
        name = objects.name(obj)
        if not name:
            raise InvalidInputError("cached object requires metadata.name")
        ident = (objects.namespace(obj), objects.api_version(obj), objects.kind(obj), name)
        self._store[ident] = copy.deepcopy(dict(obj))

    def __len__(self) -> int:
        return len(self._store)

    def list(self, ctx: RenderContext, key: CacheKey) -> list[Mapping[str, Any]]:
        ctx.raise_if_done()
        out: list[Mapping[str, Any]] = []
        for (ns, api_version, kind, name), obj in self._store.items():
            if (ns, api_version, kind) != (key.namespace, key.api_version, key.kind):
                continue
            if key.name is not None and name != key.name:
                continue
            if key.selector and not _selector_matches(key.selector, objects.labels(obj)):
                continue
            out.append(copy.deepcopy(obj))
        logger.debug("cache list %s/%s ns=%s -> %d", key.api_version, key.kind, key.namespace, len(out))
        return out

    def get(self, ctx: RenderContext, key: CacheKey) -> Mapping[str, Any]:
        ctx.raise_if_done()
        if key.name is None:
            raise InvalidInputError("cache get requires a name")
        obj = self._store.get((key.namespace, key.api_version, key.kind, key.name))
        if obj is None:
            logger.debug("cache miss %s/%s %s/%s", key.api_version, key.kind, key.namespace, key.name)
            raise NotFoundError(f"{key.kind} {key.namespace}/{key.name} not found")
        return copy.deepcopy(obj)


def _selector_matches(selector: Mapping[str, str], labels: Mapping[str, str]) -> bool:
    return all(labels.get(k) == v for k, v in selector.items())
