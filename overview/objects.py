"""Accessors over mapping-shaped cluster objects.

Entities arrive as plain mappings (decoded JSON/YAML manifests). These helpers
read the common metadata fields tolerantly: absent fields yield empty values
rather than errors.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from .errors import InvalidInputError

__all__ = [
    "metadata",
    "name",
    "namespace",
    "uid",
    "kind",
    "api_version",
    "labels",
    "annotations",
    "controller_of",
    "parse_timestamp",
]


def metadata(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    md = obj.get("metadata")
    return md if isinstance(md, Mapping) else {}


def name(obj: Mapping[str, Any]) -> str:
    return str(metadata(obj).get("name") or "")


def namespace(obj: Mapping[str, Any]) -> str:
    return str(metadata(obj).get("namespace") or "")


def uid(obj: Mapping[str, Any]) -> str:
    return str(metadata(obj).get("uid") or "")


def kind(obj: Mapping[str, Any]) -> str:
    return str(obj.get("kind") or "")


def api_version(obj: Mapping[str, Any]) -> str:
    return str(obj.get("apiVersion") or "")


def _str_map(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def labels(obj: Mapping[str, Any]) -> dict[str, str]:
    return _str_map(metadata(obj).get("labels"))


def annotations(obj: Mapping[str, Any]) -> dict[str, str]:
    return _str_map(metadata(obj).get("annotations"))


def controller_of(obj: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Owner reference flagged `controller: true`, if any."""
    refs = metadata(obj).get("ownerReferences") or []
    if not isinstance(refs, list):
        return None
    for ref in refs:
        if isinstance(ref, Mapping) and ref.get("controller"):
            return ref
    return None


def parse_timestamp(value: Any) -> int | None:
    """RFC3339 string / datetime / epoch number -> epoch seconds (UTC)."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidInputError(f"invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            raise InvalidInputError(f"invalid timestamp: {value!r}") from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp())
