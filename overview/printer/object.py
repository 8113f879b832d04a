"""Object summary printer.

`Object` turns one cluster object into the flex layout shown on its overview
page. A build runs five phases in a fixed order, each appending sections to
a fresh layout:

  1. summary      one section: registered config components (plugin config
                  sections merged after all local content), then registered
                  summary items
  2. metadata     `metadata_gen` appends its own section(s)
  3. pod_template only after `enable_pod_template`
  4. events       only after `enable_events`; may read the cache
  5. items        one section per `register_items` call

The first error from any phase aborts the build; callers never see a partial
layout. Hooks can be swapped at construction time::

    def fake_metadata(o: Object) -> None:
        o.metadata_gen = lambda entity, fl: fl.add_section().add(Text("md"), Width.HALF)

    layout = Object(deployment, fake_metadata).to_component(ctx, Options())

Registration and `to_component` must not overlap; one Object serves one
render request.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple

from .. import objects
from ..cache import Cache
from ..component import Component, Summary, SummarySection, Width
from ..component import FlexLayout as FlexLayoutComponent
from ..config import load_printer_env
from ..context import RenderContext, background
from ..errors import (
    GeneratorError,
    InvalidInputError,
    Phase,
    PluginError,
    PrinterError,
    classify_exception,
)
from ..flexlayout import FlexLayout, Section
from ..metrics import PrinterMetrics, get_metrics
from ..plugin import PluginPrinter, validate_response
from .events import events_gen
from .metadata import metadata_gen
from .pod_template import pod_template_gen

logger = logging.getLogger(__name__)

__all__ = [
    "ItemFunc",
    "ItemDescriptor",
    "Options",
    "Object",
    "plugin_config_gen",
]

ItemFunc = Callable[[], Component]


@dataclass(frozen=True)
class Options:
    cache: Cache | None = None
    plugin_printer: PluginPrinter | None = None
    disable_labels: bool = False
    # overrides OVERVIEW_EVENTS_LIMIT when set
    event_limit: int | None = None

    def __post_init__(self) -> None:
        if self.event_limit is not None and (
            isinstance(self.event_limit, bool) or not isinstance(self.event_limit, int) or self.event_limit < 1
        ):
            raise InvalidInputError(f"event_limit must be a positive int, got {self.event_limit!r}")


@dataclass(frozen=True)
class ItemDescriptor:
    func: ItemFunc
    width: Width

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise InvalidInputError("item func must be callable")
        object.__setattr__(self, "width", Width.coerce(self.width))


class _Registered(NamedTuple):
    func: ItemFunc
    width: Width


MetadataGen = Callable[[Any, FlexLayout], None]
PodTemplateGen = Callable[[Any, Any, FlexLayout, Options], None]
EventsGen = Callable[[RenderContext, Any, FlexLayout, Options], None]
ConfigGen = Callable[[Any, Options], Sequence[SummarySection]]
Configurator = Callable[["Object"], None]


def plugin_config_gen(entity: Any, options: Options) -> Sequence[SummarySection]:
    """Extra config sections from the configured plugin printer (one call)."""
    if options.plugin_printer is None:
        return ()
    try:
        resp = options.plugin_printer.print(entity)
    except PluginError:
        raise
    except Exception as e:
        raise PluginError(f"plugin print failed: {e}") from e
    return validate_response("plugin_printer", resp).config


def _describe(entity: Any) -> str:
    if isinstance(entity, Mapping):
        return f"{objects.kind(entity) or '?'}/{objects.name(entity) or '?'}"
    return type(entity).__name__


def _produce(func: ItemFunc) -> Component:
    view = func()
    if not isinstance(view, Component):
        raise TypeError(f"producer returned {type(view).__name__}, expected Component")
    return view


def _merge_plugin_sections(
    views: list[tuple[Component, Width]],
    extra: Sequence[SummarySection],
) -> list[tuple[Component, Width]]:
    # plugin sections go after all local content: append to the last local summary
    if not extra:
        return views
    for i in range(len(views) - 1, -1, -1):
        view, width = views[i]
        if isinstance(view, Summary):
            views[i] = (view.with_sections(*extra), width)
            return views
    views.append((Summary("config", extra), Width.HALF))
    return views


class Object:
    def __init__(self, entity: Any, *configurators: Configurator) -> None:
        self.entity = entity

        self.metadata_gen: MetadataGen = metadata_gen
        self.pod_template_gen: PodTemplateGen = pod_template_gen
        self.events_gen: EventsGen = events_gen
        self.config_gen: ConfigGen = plugin_config_gen

        self._config_funcs: list[_Registered] = []
        self._summary_funcs: list[_Registered] = []
        self._item_batches: list[list[ItemDescriptor]] = []

        self._pod_template: Any = None
        self._pod_template_enabled = False
        self._events_enabled = False

        for fn in configurators:
            fn(self)

    # Registration ---------------------------------------------------------

    def register_config(self, func: ItemFunc, width: Width | int) -> None:
        self._config_funcs.append(self._registered(func, width))

    def register_summary(self, func: ItemFunc, width: Width | int) -> None:
        self._summary_funcs.append(self._registered(func, width))

    def enable_pod_template(self, template: Any) -> None:
        """Render `template` in the pod template phase.

        The entity is not checked for actually carrying a pod template.
        """
        self._pod_template = template
        self._pod_template_enabled = True

    def enable_events(self) -> None:
        self._events_enabled = True

    def register_items(self, *items: ItemDescriptor | Iterable[ItemDescriptor]) -> None:
        """Register one batch of items; the batch renders as its own section.

        Accepts descriptors as positional arguments or a single iterable of
        descriptors.
        """
        batch: list[Any]
        if len(items) == 1 and not isinstance(items[0], ItemDescriptor):
            if not isinstance(items[0], Iterable):
                raise InvalidInputError(f"expected ItemDescriptor or iterable, got {type(items[0]).__name__}")
            batch = list(items[0])
        else:
            batch = list(items)
        if not batch:
            raise InvalidInputError("register_items requires at least one item")
        for it in batch:
            if not isinstance(it, ItemDescriptor):
                raise InvalidInputError(f"expected ItemDescriptor, got {type(it).__name__}")
        self._item_batches.append(batch)

    @staticmethod
    def _registered(func: ItemFunc, width: Width | int) -> _Registered:
        if not callable(func):
            raise InvalidInputError("producer must be callable")
        return _Registered(func, Width.coerce(width))

    # Build ----------------------------------------------------------------

    def to_component(self, ctx: RenderContext | None = None, options: Options | None = None) -> FlexLayoutComponent:
        if self.entity is None:
            raise InvalidInputError("object is nil")
        ctx = ctx if ctx is not None else background()
        options = options if options is not None else Options()
        env = load_printer_env()
        metrics = get_metrics() if env.metrics_enabled else None

        fl = FlexLayout()
        phases: list[tuple[Phase, Callable[[], None]]] = [
            (Phase.SUMMARY, lambda: self._summary_phase(fl, options)),
            (Phase.METADATA, lambda: self.metadata_gen(self.entity, fl)),
        ]
        if self._pod_template_enabled:
            phases.append((Phase.POD_TEMPLATE, lambda: self.pod_template_gen(self.entity, self._pod_template, fl, options)))
        if self._events_enabled:
            phases.append((Phase.EVENTS, lambda: self.events_gen(ctx, self.entity, fl, options)))
        phases.append((Phase.ITEMS, lambda: self._items_phase(fl)))

        timings: dict[str, float] = {}
        started = time.perf_counter()
        try:
            for phase, run in phases:
                self._run_phase(phase, run, timings, metrics)
        except PrinterError as e:
            elapsed = time.perf_counter() - started
            phase_label = e.phase.value if e.phase is not None else "unknown"
            logger.warning(
                "object build aborted object=%s phase=%s error=%s: %s",
                _describe(self.entity), phase_label, type(e).__name__, e,
            )
            if metrics is not None:
                metrics.record_error(phase_label, classify_exception(e))
                metrics.observe_build(elapsed, ok=False)
            raise

        elapsed = time.perf_counter() - started
        if metrics is not None:
            metrics.observe_build(elapsed, ok=True)
        logger.log(
            logging.INFO if env.phase_timing else logging.DEBUG,
            "PHASE_TIMING object=%s %s | total=%.3fs",
            _describe(self.entity),
            " | ".join(f"{k}={v:.3f}s" for k, v in timings.items()),
            elapsed,
        )
        return fl.to_component(env.layout_title)

    def _run_phase(
        self,
        phase: Phase,
        run: Callable[[], None],
        timings: dict[str, float],
        metrics: PrinterMetrics | None,
    ) -> None:
        logger.debug("phase start %s object=%s", phase.value, _describe(self.entity))
        t0 = time.perf_counter()
        try:
            run()
        except PrinterError as e:
            if e.phase is None:
                e.phase = phase
            raise
        except Exception as e:
            raise GeneratorError(phase, f"{type(e).__name__}: {e}") from e
        finally:
            dt = time.perf_counter() - t0
            timings[phase.value] = dt
            if metrics is not None:
                metrics.observe_phase(phase.value, dt)

    def _summary_phase(self, fl: FlexLayout, options: Options) -> None:
        section = fl.add_section()
        views = [(_produce(reg.func), reg.width) for reg in self._config_funcs]
        extra = tuple(self.config_gen(self.entity, options))
        for s in extra:
            if not isinstance(s, SummarySection):
                raise PluginError(f"config section must be SummarySection, got {type(s).__name__}")
        for view, width in _merge_plugin_sections(views, extra):
            section.add(view, width)
        for reg in self._summary_funcs:
            section.add(_produce(reg.func), reg.width)

    def _items_phase(self, fl: FlexLayout) -> None:
        for batch in self._item_batches:
            section: Section = fl.add_section()
            for item in batch:
                section.add(_produce(item.func), item.width)
