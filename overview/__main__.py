"""Debug CLI: build and print the overview layout for a manifest.

Usage:
  python -m overview deployment.yaml [--events events.yaml] [--pod-template] [--json]

The entity is read with PyYAML. `--events` loads a list of Event objects (a
bare list or a `kind: List` document) into an in-memory cache and enables the
events phase. `--pod-template` enables the pod template phase using
`spec.template` from the manifest. Output is a rich tree preview, or the
serialized component JSON with `--json`.

Exit codes: 0 ok, 1 build failed, 2 input could not be loaded.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console

from .cache import MemoryCache
from .console import layout_tree
from .errors import PrinterError
from .printer import Object, Options

logger = logging.getLogger("overview.cli")


def _load_yaml(path: str) -> Any:
    with Path(path).open(encoding="utf-8") as f:
        return yaml.safe_load(f)


def _event_items(doc: Any) -> list[Mapping[str, Any]]:
    if isinstance(doc, Mapping):
        doc = doc.get("items") or []
    if not isinstance(doc, list):
        raise ValueError("events file must hold a list or a List object with items")
    return [e for e in doc if isinstance(e, Mapping)]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="overview", description="Print the overview layout for a manifest")
    p.add_argument("entity", help="YAML manifest of the object to summarize")
    p.add_argument("--events", help="YAML file with Event objects for the events table")
    p.add_argument("--pod-template", action="store_true", help="render spec.template")
    p.add_argument("--json", action="store_true", help="print serialized components instead of a tree")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    try:
        entity = _load_yaml(args.entity)
        events = _event_items(_load_yaml(args.events)) if args.events else []
        cache = MemoryCache(events)
    except (OSError, ValueError, yaml.YAMLError, PrinterError) as e:
        logger.error("failed to load input: %s", e)
        return 2

    obj = Object(entity)
    if args.pod_template and isinstance(entity, Mapping):
        obj.enable_pod_template((entity.get("spec") or {}).get("template") or {})
    if args.events:
        obj.enable_events()

    try:
        layout = obj.to_component(options=Options(cache=cache))
    except PrinterError as e:
        logger.error("build failed: %s", e)
        return 1

    if args.json:
        sys.stdout.write(json.dumps(layout.to_dict(), indent=2) + "\n")
    else:
        Console().print(layout_tree(layout))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
