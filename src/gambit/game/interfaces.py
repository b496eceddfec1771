"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete player or scheduler implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from gambit.core.enums import Color

if TYPE_CHECKING:
    from gambit.core.enums import GameMode, PieceType
    from gambit.core.move import Move
    from gambit.core.types import Square
    from gambit.game.state import CandidateMove, GameState

ReplyCallback = Callable[["CandidateMove"], None]

# Delay before a scheduled opponent move is played, in milliseconds.
DEFAULT_MOVE_DELAY_MS = 200


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """What the controller is waiting for."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    THINKING = auto()  # AI move scheduled
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IScheduler(ABC):
    """Runs callbacks later on the caller's own thread."""

    @abstractmethod
    def call_later(self, callback: Callable[[], None]) -> None:
        """Queue *callback*; it must not run on another thread."""


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, state: GameState, reply: ReplyCallback) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For AI this schedules the move choice; the choice is handed to
        *reply*, which may discard it if the game moved on meanwhile.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        mode: GameMode | None = None,
    ) -> None:
        """Set up a new game (``None`` mode: classic)."""

    @abstractmethod
    def legal_moves_from(self, sq: Square) -> set[Square]:
        """Legal destinations of the piece on *sq*."""

    @abstractmethod
    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def promote(self, piece_type: PieceType) -> bool:
        """Resolve a pending promotion. Returns True on success."""

    @abstractmethod
    def undo_move(self) -> Move:
        """Undo the last move; raises ``EmptyHistory`` when there is none."""
