"""Concrete player implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gambit.core.enums import Color
from gambit.game.interfaces import IPlayer, IScheduler, ReplyCallback
from gambit.game.scheduler import ImmediateScheduler
from gambit.game.strategy import GreedyCaptureStrategy, OpponentStrategy

if TYPE_CHECKING:
    from gambit.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class HumanPlayer(IPlayer):
    """A human participant - moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, state: GameState, reply: ReplyCallback) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """An AI participant that picks moves with an :class:`OpponentStrategy`.

    The choice is deferred through *scheduler* (simulated thinking time).
    When the scheduled callback finally runs it re-checks the game: if the
    player was disabled, the game ended, a promotion is pending or it is no
    longer this side's turn, the callback does nothing.

    Args:
        color: Side the AI plays.
        name: Display name.
        strategy: Move picker; greedy-capture-or-random by default.
        scheduler: Deferral primitive; runs immediately by default.
    """

    __slots__ = ("_color", "_name", "_strategy", "_scheduler", "_enabled")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        strategy: OpponentStrategy | None = None,
        scheduler: IScheduler | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._strategy = strategy if strategy is not None else GreedyCaptureStrategy()
        self._scheduler = scheduler if scheduler is not None else ImmediateScheduler()
        self._enabled = True

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def request_move(self, state: GameState, reply: ReplyCallback) -> None:
        self._scheduler.call_later(lambda: self._play(state, reply))

    def cancel(self) -> None:
        # Queued callbacks stay queued; their run-time checks make them no-ops.
        pass

    def _play(self, state: GameState, reply: ReplyCallback) -> None:
        if not self._enabled:
            return
        if (
            state.is_game_over
            or state.pending_promotion is not None
            or state.side_to_move != self._color
        ):
            return
        choice = self._strategy.choose_move(state, self._color)
        if choice is None:
            _LOGGER.warning("%s has no legal move to play", self._name)
            return
        reply(choice)
