"""Shared builders and collaborator fakes for printer tests."""
from __future__ import annotations

from typing import Any

from overview.cache import CacheKey
from overview.plugin import PrintResponse


def create_deployment(name: str, namespace: str = "default", **metadata: Any) -> dict[str, Any]:
    md: dict[str, Any] = {"name": name, "namespace": namespace, "uid": f"uid-{name}"}
    md.update(metadata)
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": md,
        "spec": {
            "replicas": 1,
            "template": {
                "metadata": {"labels": {"app": name}},
                "spec": {"containers": [{"name": "app", "image": "nginx:1.25"}]},
            },
        },
    }


def create_event(
    name: str,
    involved: dict[str, Any],
    *,
    namespace: str = "default",
    reason: str = "Scaled",
    message: str = "",
    last: str = "2024-01-01T00:00:00Z",
    first: str | None = None,
    count: int = 1,
) -> dict[str, Any]:
    md = involved.get("metadata", {})
    return {
        "apiVersion": "v1",
        "kind": "Event",
        "metadata": {"name": name, "namespace": namespace},
        "involvedObject": {
            "apiVersion": involved.get("apiVersion"),
            "kind": involved.get("kind"),
            "name": md.get("name"),
            "namespace": md.get("namespace"),
            "uid": md.get("uid"),
        },
        "reason": reason,
        "message": message or f"{reason} {md.get('name')}",
        "type": "Normal",
        "firstTimestamp": first or last,
        "lastTimestamp": last,
        "count": count,
        "source": {"component": "deployment-controller"},
    }


class FakePluginPrinter:
    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response if response is not None else PrintResponse()
        self.error = error
        self.calls: list[Any] = []

    def print(self, entity: Any) -> Any:
        self.calls.append(entity)
        if self.error is not None:
            raise self.error
        return self.response


class FakeCache:
    """Cache double returning canned objects and recording keys."""

    def __init__(self, items: list[dict[str, Any]] | None = None, error: Exception | None = None) -> None:
        self.items = items or []
        self.error = error
        self.keys: list[CacheKey] = []

    def list(self, ctx, key: CacheKey):
        self.keys.append(key)
        if self.error is not None:
            raise self.error
        return list(self.items)

    def get(self, ctx, key: CacheKey):
        self.keys.append(key)
        raise AssertionError("get not expected")
