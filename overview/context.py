"""Cancellable render context.

A `RenderContext` is threaded into phases that may touch collaborators (the
events phase and cache reads). Hooks call `raise_if_done()` before doing work;
the builder itself never inspects it.
"""
from __future__ import annotations

import threading
import time

from .errors import RenderCancelledError

__all__ = ["RenderContext", "background", "with_timeout"]


class RenderContext:
    def __init__(self, deadline: float | None = None, parent: RenderContext | None = None) -> None:
        self._cancelled = threading.Event()
        self._deadline = deadline  # time.monotonic() based
        self._parent = parent

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    def reason(self) -> str | None:
        """Why the context is done, or None while it is still live."""
        if self._cancelled.is_set():
            return "cancelled"
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return "deadline exceeded"
        if self._parent is not None:
            return self._parent.reason()
        return None

    def done(self) -> bool:
        return self.reason() is not None

    def raise_if_done(self) -> None:
        r = self.reason()
        if r is not None:
            raise RenderCancelledError(f"render context {r}")


def background() -> RenderContext:
    """A context that is never cancelled unless `cancel()` is called."""
    return RenderContext()


def with_timeout(seconds: float, parent: RenderContext | None = None) -> RenderContext:
    return RenderContext(deadline=time.monotonic() + seconds, parent=parent)
