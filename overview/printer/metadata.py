"""Default metadata generator: one half-width "Metadata" summary."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import objects
from ..component import Labels, Summary, SummarySection, Text, Timestamp, Width
from ..flexlayout import FlexLayout

__all__ = ["metadata_gen", "metadata_summary"]


def metadata_summary(entity: Mapping[str, Any]) -> Summary:
    if not isinstance(entity, Mapping):
        raise TypeError(f"metadata requires a mapping entity, got {type(entity).__name__}")
    sections: list[SummarySection] = []
    created = objects.parse_timestamp(objects.metadata(entity).get("creationTimestamp"))
    if created is not None:
        sections.append(SummarySection("Age", Timestamp(created)))
    lbls = objects.labels(entity)
    if lbls:
        sections.append(SummarySection("Labels", Labels(lbls)))
    ann = objects.annotations(entity)
    if ann:
        sections.append(SummarySection("Annotations", Labels(ann)))
    ref = objects.controller_of(entity)
    if ref is not None:
        sections.append(SummarySection("Controlled By", Text(f"{ref.get('kind', '')} {ref.get('name', '')}".strip())))
    return Summary("Metadata", sections)


def metadata_gen(entity: Mapping[str, Any], fl: FlexLayout) -> None:
    fl.add_section().add(metadata_summary(entity), Width.HALF)
