# learning/clock.py
"""
Timers for the number-line sequencer.

Both clocks expose the same small surface: ``now()``, ``call_later(delay, cb)``
returning a handle with ``cancel()``. The sequencer never sleeps; it only
schedules the next phase boundary.

``VirtualClock`` keeps a scheduled-task queue and only moves when told to, so
tests (and the /api/learning/walk endpoint) can fast-forward a whole run
deterministically. ``AsyncioClock`` hands the same callbacks to the running
asyncio loop for live use.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from typing import Callable, List, Optional, Protocol, Tuple

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callback) -> TimerHandle: ...


class _VirtualTimer:
    __slots__ = ("when", "callback", "cancelled")

    def __init__(self, when: float, callback: Callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualClock:
    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        # (when, insertion order, timer); the counter keeps FIFO order for equal deadlines
        self._queue: List[Tuple[float, int, _VirtualTimer]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callback) -> _VirtualTimer:
        if delay < 0:
            delay = 0.0
        timer = _VirtualTimer(self._now + delay, callback)
        heapq.heappush(self._queue, (timer.when, next(self._seq), timer))
        return timer

    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def _pop_due(self, deadline: float) -> Optional[_VirtualTimer]:
        while self._queue and self._queue[0][0] <= deadline:
            _, _, timer = heapq.heappop(self._queue)
            if not timer.cancelled:
                return timer
        return None

    def advance(self, dt: float) -> None:
        """Move time forward by ``dt``, firing every timer that falls due on the way."""
        deadline = self._now + max(dt, 0.0)
        while True:
            timer = self._pop_due(deadline)
            if timer is None:
                break
            self._now = timer.when
            timer.callback()
        self._now = deadline

    def run(self, limit: int = 10_000) -> float:
        """Fire timers until the queue is empty. Returns the final time."""
        fired = 0
        while True:
            timer = self._pop_due(float("inf"))
            if timer is None:
                return self._now
            self._now = timer.when
            timer.callback()
            fired += 1
            if fired >= limit:
                raise RuntimeError(f"VirtualClock.run fired {limit} timers without draining")


class AsyncioClock:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        return self.loop.call_later(max(delay, 0.0), callback)
