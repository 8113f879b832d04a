"""Plugin printer contract.

A plugin contributes extra summary sections for an entity. The transport
between the dashboard and out-of-process plugins is not part of this package;
only the `print` contract is consumed.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from ..component import SummarySection

__all__ = ["PrintResponse", "PluginPrinter"]


@dataclass(frozen=True)
class PrintResponse:
    config: tuple[SummarySection, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", tuple(self.config))


class PluginPrinter(Protocol):
    def print(self, entity: Mapping[str, Any]) -> PrintResponse:
        """Extra config sections for `entity`. Exceptions are treated as plugin failures."""
        ...
