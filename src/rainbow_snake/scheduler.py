"""Cooperative virtual clock with cancellable periodic handles.

Nothing here reads the wall clock. A driver feeds elapsed milliseconds into
:meth:`Scheduler.advance` (the pygame loop passes ``clock.tick()``, tests pass
fixed steps) and every due callback runs to completion, one at a time, in
due-time order. Callbacks due at the same instant run in the order their
handles were created.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable

logger = logging.getLogger(__name__)

Callback = Callable[[], object]


class PeriodicHandle:
    """A repeating timer; cancelling it drops any pending firing."""

    __slots__ = ("name", "period", "callback", "due", "order", "_active")

    def __init__(
        self, name: str, period: int, callback: Callback, due: int, order: int
    ) -> None:
        self.name = name
        self.period = period
        self.callback = callback
        self.due = due
        self.order = order
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        state = "active" if self._active else "cancelled"
        return f"PeriodicHandle({self.name!r}, period={self.period}, {state})"


class Scheduler:
    def __init__(self) -> None:
        self.now = 0
        self._queue: list[tuple[int, int, PeriodicHandle]] = []
        self._order = itertools.count()

    def every(self, period: int, callback: Callback, *, name: str = "") -> PeriodicHandle:
        """Fire ``callback`` every ``period`` ms, first at ``now + period``."""
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        handle = PeriodicHandle(
            name or getattr(callback, "__name__", "timer"),
            period,
            callback,
            self.now + period,
            next(self._order),
        )
        self._push(handle)
        logger.debug("Scheduled %s every %d ms", handle.name, period)
        return handle

    def advance(self, elapsed: int) -> int:
        """Move time forward by ``elapsed`` ms; returns how many callbacks ran."""
        if elapsed < 0:
            raise ValueError("time cannot run backwards")
        horizon = self.now + elapsed
        fired = 0
        while self._queue and self._queue[0][0] <= horizon:
            due, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self.now = due
            handle.due = due + handle.period
            self._push(handle)
            handle.callback()
            fired += 1
        self.now = horizon
        return fired

    def pending(self) -> list[PeriodicHandle]:
        """Active handles ordered by their next firing."""
        live = [entry for entry in self._queue if entry[2].active]
        return [handle for _, _, handle in sorted(live)]

    def _push(self, handle: PeriodicHandle) -> None:
        heapq.heappush(self._queue, (handle.due, handle.order, handle))
