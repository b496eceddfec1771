"""Qt bridge: defer opponent moves on the Qt event loop.

Requires the optional ``qt`` extra (PyQt6).
"""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from gambit.game.interfaces import DEFAULT_MOVE_DELAY_MS, IScheduler


class QtScheduler(IScheduler):
    """Runs callbacks on the GUI thread after a single-shot timer delay."""

    __slots__ = ("_delay_ms", "_parent", "_timers")

    def __init__(
        self,
        delay_ms: int = DEFAULT_MOVE_DELAY_MS,
        parent: QObject | None = None,
    ) -> None:
        self._delay_ms = delay_ms
        self._parent = parent
        self._timers: list[QTimer] = []

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def pending(self) -> int:
        return len(self._timers)

    def call_later(self, callback: Callable[[], None]) -> None:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.append(timer)
        timer.start(self._delay_ms)

    def _fire(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timers.remove(timer)
        timer.deleteLater()
        callback()
