"""Error taxonomy for the object summary printer.

Every failure raised out of `Object.to_component` is a `PrinterError`
subclass so request handlers can branch on type instead of message text.

Classes:
  InvalidInputError    - the entity (or a width / argument) is unusable.
  GeneratorError       - a phase hook or registered producer failed; carries
                         the originating phase.
  PluginError          - the plugin printer failed or returned malformed data.
  CollaboratorError    - a cache lookup failed (surfaced through the hook
                         that depends on it).
  NotFoundError        - cache miss for a keyed `get`.
  RenderCancelledError - the render context was cancelled or timed out.

Helper:
  classify_exception(e) -> str  (label used by the error counter metric)
"""
from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    SUMMARY = "summary"
    METADATA = "metadata"
    POD_TEMPLATE = "pod_template"
    EVENTS = "events"
    ITEMS = "items"


class PrinterError(Exception):
    """Base class (do not raise directly)."""

    phase: Phase | None = None


class InvalidInputError(PrinterError):
    """Missing entity or an argument outside its accepted set."""


class GeneratorError(PrinterError):
    """A generator hook or registered producer raised."""

    def __init__(self, phase: Phase, message: str) -> None:
        super().__init__(f"{phase.value}: {message}")
        self.phase = phase


class PluginError(PrinterError):
    """Plugin printer call failed or its response was malformed."""


class CollaboratorError(PrinterError):
    """Cache (or other external collaborator) lookup failed."""


class NotFoundError(CollaboratorError):
    """Keyed cache lookup found nothing."""


class RenderCancelledError(PrinterError):
    """Render context cancelled or its deadline passed."""


def classify_exception(exc: BaseException) -> str:
    if isinstance(exc, InvalidInputError):
        return 'invalid_input'
    if isinstance(exc, RenderCancelledError):
        return 'cancelled'
    if isinstance(exc, PluginError):
        return 'plugin'
    if isinstance(exc, CollaboratorError):
        return 'collaborator'
    if isinstance(exc, GeneratorError):
        return 'generator'
    return 'unknown'


__all__ = [
    "Phase",
    "PrinterError",
    "InvalidInputError",
    "GeneratorError",
    "PluginError",
    "CollaboratorError",
    "NotFoundError",
    "RenderCancelledError",
    "classify_exception",
]
