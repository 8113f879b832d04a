"""Incremental flex layout builder.

Generators append sections to a shared `FlexLayout` while a build is in
progress; `to_component` freezes the result into a `component.FlexLayout`.
"""
from __future__ import annotations

from .component import Component, FlexLayoutItem, Width
from .component import FlexLayout as FlexLayoutComponent

__all__ = ["FlexLayout", "Section"]


class Section:
    def __init__(self) -> None:
        self.members: list[FlexLayoutItem] = []

    def add(self, view: Component, width: Width | int) -> None:
        """Append `view` at `width`; raises InvalidInputError for an unknown width."""
        self.members.append(FlexLayoutItem(width=Width.coerce(width), view=view))

    def __len__(self) -> int:
        return len(self.members)


class FlexLayout:
    def __init__(self) -> None:
        self.sections: list[Section] = []

    def add_section(self) -> Section:
        section = Section()
        self.sections.append(section)
        return section

    def to_component(self, title: str) -> FlexLayoutComponent:
        return FlexLayoutComponent(title, [s.members for s in self.sections])
