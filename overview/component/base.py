"""Component base type and the width grid.

Components are immutable view nodes. The dashboard client renders them; this
package only builds them and serializes them into the JSON shape the client
expects::

    {"metadata": {"type": "<kind>", "title": "<title>"}, "config": {...}}
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar

from ..errors import InvalidInputError

__all__ = ["Component", "Width"]


class Width(IntEnum):
    """Relative width on a 24-column grid."""

    FULL = 24
    HALF = 12
    THIRD = 8
    QUARTER = 6

    @classmethod
    def coerce(cls, value: Width | int) -> Width:
        if isinstance(value, bool):
            raise InvalidInputError(f"invalid width: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"invalid width: {value!r}") from None


class Component:
    kind: ClassVar[str] = "component"
    title: str

    def config(self) -> dict[str, Any]:  # pragma: no cover - overridden
        return {}

    def to_dict(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {"type": self.kind}
        if self.title:
            metadata["title"] = self.title
        return {"metadata": metadata, "config": self.config()}
