"""Environment configuration for the object printer.

All env-driven behavior of the printer routes through `PrinterEnv` so defaults
and parsing rules live in one place.

Recognized variables:
  OVERVIEW_LAYOUT_TITLE   title of the returned flex layout (default "Summary")
  OVERVIEW_EVENTS_LIMIT   max rows in the events table (default 50, min 1)
  OVERVIEW_METRICS        record Prometheus metrics (default on)
  OVERVIEW_PHASE_TIMING   log per-phase timings at INFO instead of DEBUG
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "PrinterEnv",
    "load_printer_env",
]

TRUE_SET = {"1", "true", "yes", "on"}
FALSE_SET = {"0", "false", "no", "off"}

DEFAULT_LAYOUT_TITLE = "Summary"
DEFAULT_EVENTS_LIMIT = 50


def _get(environ: Mapping[str, str], key: str) -> str | None:
    v = environ.get(key)
    if v is None:
        return None
    v2 = v.strip()
    return v2 if v2 != "" else None


def _get_bool(environ: Mapping[str, str], key: str, default: bool = False) -> bool:
    v = _get(environ, key)
    if v is None:
        return default
    lv = v.lower()
    if lv in TRUE_SET:
        return True
    if lv in FALSE_SET:
        return False
    return default  # Unrecognized -> default


def _get_int(
    environ: Mapping[str, str], key: str, default: int, *, min_v: int | None = None, max_v: int | None = None
) -> int:
    v = _get(environ, key)
    if v is None:
        return default
    try:
        iv = int(float(v))
    except ValueError:
        return default
    if min_v is not None and iv < min_v:
        iv = min_v
    if max_v is not None and iv > max_v:
        iv = max_v
    return iv


@dataclass(frozen=True)
class PrinterEnv:
    layout_title: str = DEFAULT_LAYOUT_TITLE
    events_limit: int = DEFAULT_EVENTS_LIMIT
    metrics_enabled: bool = True
    phase_timing: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> PrinterEnv:
        return cls(
            layout_title=_get(environ, "OVERVIEW_LAYOUT_TITLE") or DEFAULT_LAYOUT_TITLE,
            events_limit=_get_int(environ, "OVERVIEW_EVENTS_LIMIT", DEFAULT_EVENTS_LIMIT, min_v=1),
            metrics_enabled=_get_bool(environ, "OVERVIEW_METRICS", True),
            phase_timing=_get_bool(environ, "OVERVIEW_PHASE_TIMING", False),
        )

    def describe(self) -> dict[str, Any]:
        """Return a JSON-serializable summary (safe for diagnostics)."""
        return {
            "layout_title": self.layout_title,
            "events_limit": self.events_limit,
            "metrics_enabled": self.metrics_enabled,
            "phase_timing": self.phase_timing,
        }


_CACHED: PrinterEnv | None = None


def load_printer_env(*, force_reload: bool = False, environ: Mapping[str, str] | None = None) -> PrinterEnv:
    """Load (and cache) the effective PrinterEnv.

    Pass force_reload=True to rebuild the cache (tests that monkeypatch
    os.environ). An explicit `environ` mapping bypasses the cache.
    """
    global _CACHED
    if environ is not None:
        return PrinterEnv.from_environ(environ)
    if _CACHED is None or force_reload:
        _CACHED = PrinterEnv.from_environ(os.environ)
    return _CACHED
