"""Schedulers for deferred engine callbacks.

The engine marks a glyph complete a short moment after its last stroke is
traced so the final frame can render. That delay must never block pointer
processing, so the engine hands the callback to a Scheduler instead of
sleeping.

Key classes:
- ImmediateScheduler: Runs callbacks right away
- ManualScheduler: Deterministic virtual clock driven by advance()
- AsyncioScheduler: Defers callbacks on an asyncio event loop
"""

import asyncio
import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class ScheduledCall(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Something that can run a callback later without blocking."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...


class _DoneCall:
    def cancel(self) -> None:
        pass


class ImmediateScheduler:
    """Runs callbacks synchronously, ignoring the delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:  # noqa: ARG002
        callback()
        return _DoneCall()


@dataclass(order=True)
class _ManualCall:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual-clock scheduler; callbacks run only when the clock advances.

    Example:
        scheduler = ManualScheduler()
        scheduler.call_later(0.3, on_done)
        scheduler.advance(0.3)  # on_done runs here
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[_ManualCall] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to run."""
        return sum(1 for call in self._queue if not call.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = _ManualCall(self._now + max(delay, 0.0), next(self._seq), callback)
        heapq.heappush(self._queue, call)
        return call

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every callback that became due.

        Args:
            seconds: Time to advance

        Returns:
            Number of callbacks run
        """
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0].due <= target:
            call = heapq.heappop(self._queue)
            self._now = call.due
            if not call.cancelled:
                call.callback()
                ran += 1
        self._now = target
        return ran

    def run_all(self) -> int:
        """Run every pending callback regardless of its due time."""
        if not self._queue:
            return 0
        return self.advance(max(call.due for call in self._queue) - self._now)


class AsyncioScheduler:
    """Defers callbacks on an asyncio event loop.

    Args:
        loop: Loop to schedule on; the running loop is used if None
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
