"""Plugin manager: fan a print request out to registered plugins.

Plugins register under a unique name, optionally scoped to the
(apiVersion, kind) pairs they understand. `print` calls every matching plugin
in registration order and concatenates their config sections, so the manager
itself satisfies the `PluginPrinter` contract and can be handed to the
printer as `Options.plugin_printer`.

Failure policy: the first plugin that raises or returns a malformed response
aborts the whole call with `PluginError` (no skipping, no retries).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .. import objects
from ..component import SummarySection
from ..errors import PluginError
from .interface import PluginPrinter, PrintResponse

logger = logging.getLogger(__name__)

__all__ = ["PluginManager", "validate_response"]


@dataclass(frozen=True)
class _Registration:
    name: str
    plugin: PluginPrinter
    kinds: frozenset[tuple[str, str]] | None

    def handles(self, entity: Mapping[str, Any]) -> bool:
        if self.kinds is None:
            return True
        return (objects.api_version(entity), objects.kind(entity)) in self.kinds


def validate_response(name: str, resp: Any) -> PrintResponse:
    """Return `resp` if it is a well-formed PrintResponse, else raise PluginError."""
    if not isinstance(resp, PrintResponse):
        raise PluginError(f"plugin {name!r} returned {type(resp).__name__}, expected PrintResponse")
    for section in resp.config:
        if not isinstance(section, SummarySection):
            raise PluginError(f"plugin {name!r} returned a non-SummarySection config entry: {section!r}")
    return resp


class PluginManager:
    def __init__(self) -> None:
        self._plugins: list[_Registration] = []

    def register(
        self,
        name: str,
        plugin: PluginPrinter,
        kinds: Iterable[tuple[str, str]] | None = None,
    ) -> None:
        if any(r.name == name for r in self._plugins):
            raise ValueError(f"plugin {name!r} already registered")
        scope = frozenset(kinds) if kinds is not None else None
        self._plugins.append(_Registration(name, plugin, scope))
        logger.debug("plugin registered name=%s kinds=%s", name, sorted(scope) if scope else "*")

    def names(self) -> list[str]:
        return [r.name for r in self._plugins]

    def print(self, entity: Mapping[str, Any]) -> PrintResponse:
        sections: list[SummarySection] = []
        for reg in self._plugins:
            if not reg.handles(entity):
                continue
            try:
                resp = reg.plugin.print(entity)
            except PluginError:
                raise
            except Exception as e:
                raise PluginError(f"plugin {reg.name!r} print failed: {e}") from e
            sections.extend(validate_response(reg.name, resp).config)
        return PrintResponse(config=sections)
