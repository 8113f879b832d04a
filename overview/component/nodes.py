"""Concrete component node types.

All nodes are frozen dataclasses. Sequence fields are normalized to tuples in
`__post_init__` so a node built from lists compares equal to one built from
tuples; this is what makes two identical builds structurally equal.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .base import Component, Width

__all__ = [
    "Text",
    "Labels",
    "Timestamp",
    "SummarySection",
    "Summary",
    "Table",
    "FlexLayoutItem",
    "FlexLayout",
]


def _dump(view: Component | None) -> dict[str, Any] | None:
    return view.to_dict() if view is not None else None


@dataclass(frozen=True)
class Text(Component):
    kind = "text"
    value: str
    title: str = ""

    def config(self) -> dict[str, Any]:
        return {"value": self.value}


@dataclass(frozen=True)
class Labels(Component):
    kind = "labels"
    labels: Mapping[str, str] = field(default_factory=dict)
    title: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", {str(k): str(v) for k, v in (self.labels or {}).items()})

    def config(self) -> dict[str, Any]:
        return {"labels": dict(self.labels)}


@dataclass(frozen=True)
class Timestamp(Component):
    """Point in time as epoch seconds; the client renders relative age."""

    kind = "timestamp"
    timestamp: int
    title: str = ""

    def config(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp}


@dataclass(frozen=True)
class SummarySection:
    header: str
    content: Component | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"header": self.header, "content": _dump(self.content)}


@dataclass(frozen=True)
class Summary(Component):
    kind = "summary"
    title: str
    sections: tuple[SummarySection, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(self.sections))

    def with_sections(self, *extra: SummarySection) -> Summary:
        """Copy of this summary with `extra` appended after existing sections."""
        return Summary(self.title, self.sections + tuple(extra))

    def config(self) -> dict[str, Any]:
        return {"sections": [s.to_dict() for s in self.sections]}


@dataclass(frozen=True)
class Table(Component):
    kind = "table"
    title: str
    columns: tuple[str, ...] = ()
    rows: tuple[Mapping[str, Component], ...] = ()
    empty_content: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(dict(r) for r in self.rows))

    def config(self) -> dict[str, Any]:
        return {
            "columns": [{"name": c, "accessor": c} for c in self.columns],
            "rows": [{k: v.to_dict() for k, v in r.items()} for r in self.rows],
            "emptyContent": self.empty_content,
        }


@dataclass(frozen=True)
class FlexLayoutItem:
    width: Width
    view: Component

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", Width.coerce(self.width))

    def to_dict(self) -> dict[str, Any]:
        return {"width": int(self.width), "view": self.view.to_dict()}


@dataclass(frozen=True)
class FlexLayout(Component):
    kind = "flexlayout"
    title: str
    sections: tuple[tuple[FlexLayoutItem, ...], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(tuple(s) for s in self.sections))

    def with_sections(self, *sections: Iterable[FlexLayoutItem]) -> FlexLayout:
        return FlexLayout(self.title, self.sections + tuple(tuple(s) for s in sections))

    def config(self) -> dict[str, Any]:
        return {"sections": [[item.to_dict() for item in s] for s in self.sections]}
