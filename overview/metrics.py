"""Prometheus metrics for printer builds.

Metrics are created lazily on first use and shared by every build in the
process. Re-registration (module reloads in tests) reuses the collector that
is already present in the default registry.
"""
from __future__ import annotations

import logging
from typing import Any

from prometheus_client import REGISTRY, Counter, Histogram

logger = logging.getLogger(__name__)

__all__ = ["PrinterMetrics", "get_metrics"]


def _existing(name: str) -> Any:
    names_map = getattr(REGISTRY, '_names_to_collectors', {})
    return names_map.get(name)


def _register(factory: Any, name: str, doc: str, labels: tuple[str, ...] = ()) -> Any:
    try:
        return factory(name, doc, labels)
    except ValueError:
        logger.debug("Metric already exists: %s", name)
        existing = _existing(name)
        if existing is None:
            raise
        return existing


class PrinterMetrics:
    def __init__(self) -> None:
        self.build_seconds = _register(
            Histogram, 'overview_printer_build_seconds', 'Duration of object summary builds')
        self.phase_seconds = _register(
            Histogram, 'overview_printer_phase_seconds', 'Duration of each build phase', ('phase',))
        self.builds_total = _register(
            Counter, 'overview_printer_builds_total', 'Object summary builds by outcome', ('outcome',))
        self.errors_total = _register(
            Counter, 'overview_printer_errors_total', 'Aborted builds by phase and error type', ('phase', 'error_type'))

    def observe_phase(self, phase: str, seconds: float) -> None:
        self.phase_seconds.labels(phase=phase).observe(seconds)

    def observe_build(self, seconds: float, *, ok: bool) -> None:
        self.build_seconds.observe(seconds)
        self.builds_total.labels(outcome='ok' if ok else 'error').inc()

    def record_error(self, phase: str, error_type: str) -> None:
        self.errors_total.labels(phase=phase, error_type=error_type).inc()


_METRICS: PrinterMetrics | None = None


def get_metrics() -> PrinterMetrics:
    global _METRICS
    if _METRICS is None:
        _METRICS = PrinterMetrics()
    return _METRICS
