"""Opponent move-selection policies."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gambit.core.enums import Color
    from gambit.game.state import CandidateMove, GameState


class OpponentStrategy(Protocol):
    """Protocol for move pickers used by :class:`~gambit.game.player.AIPlayer`."""

    def choose_move(self, state: GameState, color: Color) -> CandidateMove | None: ...


class GreedyCaptureStrategy:
    """Play a random capture when one exists, otherwise a random legal move."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def choose_move(self, state: GameState, color: Color) -> CandidateMove | None:
        moves = state.all_legal_moves(color)
        if not moves:
            return None
        captures = [m for m in moves if m.captured is not None]
        return self._rng.choice(captures or moves)
