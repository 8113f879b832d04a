"""Default pod template generator.

Renders the workload's pod template as a full-width "Pod Template" summary:
template labels first (unless labels are disabled), then one entry per init
container and container in manifest order, each showing the container image.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .. import objects
from ..component import Labels, Summary, SummarySection, Text, Width
from ..flexlayout import FlexLayout

if TYPE_CHECKING:  # pragma: no cover
    from .object import Options

__all__ = ["pod_template_gen", "pod_template_summary"]


def _containers(spec: Mapping[str, Any], field: str) -> list[Mapping[str, Any]]:
    items = spec.get(field) or []
    return [c for c in items if isinstance(c, Mapping)]


def pod_template_summary(template: Mapping[str, Any], *, disable_labels: bool = False) -> Summary:
    if not isinstance(template, Mapping):
        raise TypeError(f"pod template must be a mapping, got {type(template).__name__}")
    sections: list[SummarySection] = []
    if not disable_labels:
        sections.append(SummarySection("Labels", Labels(objects.labels(template))))
    spec = template.get("spec") or {}
    for c in _containers(spec, "initContainers"):
        sections.append(SummarySection(f"Init Container {c.get('name', '')}", Text(str(c.get("image", "")))))
    for c in _containers(spec, "containers"):
        sections.append(SummarySection(f"Container {c.get('name', '')}", Text(str(c.get("image", "")))))
    return Summary("Pod Template", sections)


def pod_template_gen(
    entity: Mapping[str, Any],
    template: Mapping[str, Any],
    fl: FlexLayout,
    options: Options,
) -> None:
    summary = pod_template_summary(template, disable_labels=options.disable_labels)
    fl.add_section().add(summary, Width.FULL)
