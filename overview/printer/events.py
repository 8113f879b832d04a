"""Default events generator.

Looks up `v1/Event` objects in the entity's namespace through the cache,
keeps the ones whose involvedObject is the entity, and appends a full-width
"Events" table (newest first, truncated to the configured limit). The table
is appended even when no events match.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .. import objects
from ..cache import CacheKey
from ..component import Component, Table, Text, Timestamp, Width
from ..config import load_printer_env
from ..context import RenderContext
from ..errors import CollaboratorError, InvalidInputError, PrinterError
from ..flexlayout import FlexLayout

if TYPE_CHECKING:  # pragma: no cover
    from .object import Options

logger = logging.getLogger(__name__)

__all__ = ["EVENT_COLUMNS", "events_gen", "events_for", "events_table"]

EVENT_COLUMNS = ("Message", "Reason", "Type", "First Seen", "Last Seen", "From", "Count")


def _involves(event: Mapping[str, Any], entity: Mapping[str, Any]) -> bool:
    io = event.get("involvedObject") or {}
    if not isinstance(io, Mapping):
        return False
    entity_uid = objects.uid(entity)
    if entity_uid and io.get("uid"):
        return io.get("uid") == entity_uid
    return io.get("kind") == objects.kind(entity) and io.get("name") == objects.name(entity)


def _event_time(event: Mapping[str, Any], *fields: str) -> int | None:
    # a malformed timestamp is bad cache data, not bad input
    value = next((event.get(f) for f in fields if event.get(f)), None)
    try:
        return objects.parse_timestamp(value)
    except InvalidInputError as e:
        raise CollaboratorError(f"event {objects.name(event)!r}: {e}") from e


def _last_seen(event: Mapping[str, Any]) -> int:
    return _event_time(event, "lastTimestamp", "eventTime", "firstTimestamp") or 0


def _time_cell(event: Mapping[str, Any], *fields: str) -> Component:
    ts = _event_time(event, *fields)
    return Timestamp(ts) if ts is not None else Text("<unknown>")


def _source(event: Mapping[str, Any]) -> str:
    src = event.get("source") or {}
    if not isinstance(src, Mapping):
        return ""
    return " ".join(str(p) for p in (src.get("component"), src.get("host")) if p)


def _row(event: Mapping[str, Any]) -> dict[str, Component]:
    return {
        "Message": Text(str(event.get("message", ""))),
        "Reason": Text(str(event.get("reason", ""))),
        "Type": Text(str(event.get("type", ""))),
        "First Seen": _time_cell(event, "firstTimestamp"),
        "Last Seen": _time_cell(event, "lastTimestamp", "eventTime"),
        "From": Text(_source(event)),
        "Count": Text(str(event.get("count") or 1)),
    }


def events_for(ctx: RenderContext, entity: Mapping[str, Any], options: Options) -> list[Mapping[str, Any]]:
    """Events involving `entity`, newest first."""
    if options.cache is None:
        raise CollaboratorError("events require a cache")
    ctx.raise_if_done()
    key = CacheKey(namespace=objects.namespace(entity), api_version="v1", kind="Event")
    try:
        items = options.cache.list(ctx, key)
    except PrinterError:
        raise
    except Exception as e:
        raise CollaboratorError(f"list events in {key.namespace!r}: {e}") from e
    related = [ev for ev in items if isinstance(ev, Mapping) and _involves(ev, entity)]
    related.sort(key=lambda ev: (_last_seen(ev), objects.name(ev)), reverse=True)
    return related


def events_table(events: list[Mapping[str, Any]], limit: int) -> Table:
    return Table("Events", EVENT_COLUMNS, [_row(ev) for ev in events[:limit]], empty_content="There are no events!")


def events_gen(ctx: RenderContext, entity: Mapping[str, Any], fl: FlexLayout, options: Options) -> None:
    if not isinstance(entity, Mapping):
        raise TypeError(f"events require a mapping entity, got {type(entity).__name__}")
    related = events_for(ctx, entity, options)
    limit = options.event_limit if options.event_limit is not None else load_printer_env().events_limit
    if len(related) > limit:
        logger.debug("events truncated %d -> %d for %s", len(related), limit, objects.name(entity))
    fl.add_section().add(events_table(related, limit), Width.FULL)
