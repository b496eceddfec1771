"""Schedulers for deferred opponent moves that need no event loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from gambit.game.interfaces import IScheduler


class ImmediateScheduler(IScheduler):
    """Runs callbacks synchronously on the calling thread.

    A callback scheduled while another one is running is queued and run
    by the outermost :meth:`call_later` once the current callback returns,
    so an AI reply that prompts the next AI turn loops instead of nesting.
    """

    __slots__ = ("_queue", "_running")

    def __init__(self) -> None:
        self._queue: deque[Callable[[], None]] = deque()
        self._running = False

    def call_later(self, callback: Callable[[], None]) -> None:
        self._queue.append(callback)
        if self._running:
            return
        self._running = True
        try:
            while self._queue:
                self._queue.popleft()()
        finally:
            self._running = False


class ManualScheduler(IScheduler):
    """Queues callbacks until :meth:`run_pending` is called.

    Models deferred "thinking time" without a timer: the caller decides
    when queued callbacks run, always on its own thread.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: deque[Callable[[], None]] = deque()

    def call_later(self, callback: Callable[[], None]) -> None:
        self._queue.append(callback)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """Run the callbacks queued so far; returns how many ran.

        Callbacks queued while running wait for the next call.
        """
        count = len(self._queue)
        for _ in range(count):
            self._queue.popleft()()
        return count

    def clear(self) -> None:
        self._queue.clear()
