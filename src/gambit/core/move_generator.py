"""Pseudo-legal and legal move generation, parameterised by game mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.attacks import is_in_check
from gambit.core.enums import CastlingSide, Color, GameMode, PieceType
from gambit.core.legality import is_safe
from gambit.core.types import (
    BISHOP_DIRS,
    KING_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    Square,
    is_valid_square,
)
from gambit.core.variants import variant_for

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move
    from gambit.core.piece import Piece

_KING_COL = 4

# side -> (rook column, rook column after castling, king destination column,
#          columns that must be empty, columns the king passes through)
CASTLING_LAYOUT: dict[CastlingSide, tuple[int, int, int, tuple[int, ...], tuple[int, ...]]] = {
    CastlingSide.KINGSIDE: (7, 5, 6, (5, 6), (5, 6)),
    CastlingSide.QUEENSIDE: (0, 3, 2, (1, 2, 3), (3, 2)),
}


def castling_side(piece: Piece, from_sq: Square, to_sq: Square) -> CastlingSide | None:
    """Castling side when *piece* moving *from_sq* → *to_sq* is a castle."""
    if piece.piece_type != PieceType.KING or from_sq.row != to_sq.row:
        return None
    if to_sq.col - from_sq.col == 2:
        return CastlingSide.KINGSIDE
    if to_sq.col - from_sq.col == -2:
        return CastlingSide.QUEENSIDE
    return None


class MoveGenerator:
    """Generates moves on a board under one game mode.

    *last_move* is the only piece of history the rules need (for en
    passant).  The generator never mutates the board; king-safety probes run
    on copies.
    """

    __slots__ = ("_board", "_mode", "_variant", "_last_move")

    def __init__(
        self,
        board: Board,
        mode: GameMode = GameMode.CLASSIC,
        last_move: Move | None = None,
    ) -> None:
        self._board = board
        self._mode = mode
        self._variant = variant_for(mode)
        self._last_move = last_move

    @property
    def mode(self) -> GameMode:
        return self._mode

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_targets(self, sq: Square) -> list[Square]:
        """Destinations of the piece on *sq* by its movement pattern alone.

        Empty for an empty square or a stunned piece.  The result may leave
        the mover's own king attacked.
        """
        piece = self._board[sq]
        if piece is None or piece.is_stunned:
            return []

        color = piece.color
        pt = piece.piece_type
        targets: list[Square] = []
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, piece, targets)
        elif pt == PieceType.KNIGHT:
            self._gen_steps(sq, color, self._variant.knight_offsets(), targets)
        elif pt == PieceType.BISHOP:
            self._gen_sliding(sq, color, BISHOP_DIRS, targets)
            targets.extend(self._variant.extra_bishop_targets(self._board, sq, color))
        elif pt == PieceType.ROOK:
            self._gen_sliding(sq, color, ROOK_DIRS, targets)
        elif pt == PieceType.QUEEN:
            self._gen_sliding(sq, color, QUEEN_DIRS, targets)
        elif pt == PieceType.KING:
            self._gen_steps(sq, color, KING_OFFSETS, targets)
            self._gen_castling(sq, piece, targets)
        return list(dict.fromkeys(targets))

    def legal_targets(self, sq: Square) -> list[Square]:
        """Pseudo-legal targets that keep the mover's king safe."""
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in self.pseudo_legal_targets(sq)
            if is_safe(
                self._board,
                sq,
                to_sq,
                piece.color,
                self._mode,
                self.en_passant_victim(sq, to_sq),
            )
        ]

    def legal_moves(self, color: Color) -> list[tuple[Square, Square]]:
        """Every legal ``(from, to)`` pair for *color*."""
        moves: list[tuple[Square, Square]] = []
        for sq in self._board.pieces(color):
            moves.extend((sq, to_sq) for to_sq in self.legal_targets(sq))
        return moves

    def has_any_legal_move(self, color: Color) -> bool:
        return any(self.legal_targets(sq) for sq in self._board.pieces(color))

    def en_passant_victim(self, from_sq: Square, to_sq: Square) -> Square | None:
        """Square of the pawn captured en passant by *from_sq* → *to_sq*, if any.

        The last move must have been an enemy pawn's two-square advance that
        landed beside the mover, and *to_sq* the empty square behind it.
        """
        piece = self._board[from_sq]
        last = self._last_move
        if piece is None or piece.piece_type != PieceType.PAWN or last is None:
            return None
        if not last.is_double_pawn_step or last.piece.color == piece.color:
            return None
        victim_sq = last.landing_sq
        if victim_sq.row != from_sq.row or abs(victim_sq.col - from_sq.col) != 1:
            return None
        if to_sq != Square(from_sq.row + piece.color.forward, victim_sq.col):
            return None
        victim = self._board[victim_sq]
        if (
            victim is None
            or victim.piece_type != PieceType.PAWN
            or victim.color == piece.color
            or not self._board.is_empty(to_sq)
        ):
            return None
        return victim_sq

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, targets: list[Square]) -> None:
        board = self._board
        color = piece.color
        step = color.forward

        one_step = sq.offset(step, 0)
        if is_valid_square(one_step) and board.is_empty(one_step):
            targets.append(one_step)
            if self._variant.allows_double_step(piece, sq):
                two_step = sq.offset(2 * step, 0)
                if is_valid_square(two_step) and board.is_empty(two_step):
                    targets.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not is_valid_square(cap_sq):
                continue
            if board.is_enemy(cap_sq, color):
                targets.append(cap_sq)
            elif self.en_passant_victim(sq, cap_sq) is not None:
                targets.append(cap_sq)

        targets.extend(self._variant.extra_pawn_targets(board, sq, piece))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        targets: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if is_valid_square(to_sq) and not board.is_friendly(to_sq, color):
                targets.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        targets: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while is_valid_square(to_sq):
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    targets.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, king: Piece, targets: list[Square]) -> None:
        color = king.color
        row = color.home_row
        if king.has_moved or king_sq != Square(row, _KING_COL):
            return
        board = self._board
        if is_in_check(board, color, self._mode):
            return

        for rook_col, _, king_to_col, empty_cols, transit_cols in CASTLING_LAYOUT.values():
            rook = board[Square(row, rook_col)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != color
                or rook.has_moved
            ):
                continue
            if not all(board.is_empty(Square(row, col)) for col in empty_cols):
                continue
            if all(
                is_safe(board, king_sq, Square(row, col), color, self._mode)
                for col in transit_cols
            ):
                targets.append(Square(row, king_to_col))
