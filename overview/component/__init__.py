"""View component model consumed by the dashboard client."""

from .base import Component, Width
from .nodes import (
    FlexLayout,
    FlexLayoutItem,
    Labels,
    Summary,
    SummarySection,
    Table,
    Text,
    Timestamp,
)

__all__ = [
    "Component",
    "Width",
    "Text",
    "Labels",
    "Timestamp",
    "SummarySection",
    "Summary",
    "Table",
    "FlexLayoutItem",
    "FlexLayout",
]
