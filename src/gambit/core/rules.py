"""High-level rules: check, checkmate, stalemate classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.attacks import is_in_check
from gambit.core.enums import Color, GameMode, GameStatus
from gambit.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move


class Rules:
    """Static rule-checker that operates on a board for one side."""

    # Product policy: draws are never derived here.  The half-move clock is
    # tracked by the game state but neither the 50-move rule nor repetition
    # ends a game.

    @staticmethod
    def is_in_check(board: Board, color: Color, mode: GameMode = GameMode.CLASSIC) -> bool:
        return is_in_check(board, color, mode)

    @staticmethod
    def has_any_legal_move(
        board: Board,
        color: Color,
        mode: GameMode = GameMode.CLASSIC,
        last_move: Move | None = None,
    ) -> bool:
        return MoveGenerator(board, mode, last_move).has_any_legal_move(color)

    @staticmethod
    def is_checkmate(
        board: Board,
        color: Color,
        mode: GameMode = GameMode.CLASSIC,
        last_move: Move | None = None,
    ) -> bool:
        if not is_in_check(board, color, mode):
            return False
        return not Rules.has_any_legal_move(board, color, mode, last_move)

    @staticmethod
    def is_stalemate(
        board: Board,
        color: Color,
        mode: GameMode = GameMode.CLASSIC,
        last_move: Move | None = None,
    ) -> bool:
        if is_in_check(board, color, mode):
            return False
        return not Rules.has_any_legal_move(board, color, mode, last_move)

    @staticmethod
    def classify(
        board: Board,
        color: Color,
        mode: GameMode = GameMode.CLASSIC,
        last_move: Move | None = None,
    ) -> GameStatus:
        """Status of *color* as the side to move."""
        in_check = is_in_check(board, color, mode)
        can_move = Rules.has_any_legal_move(board, color, mode, last_move)
        if not can_move:
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.PLAYING
