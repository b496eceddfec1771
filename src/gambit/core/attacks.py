"""Attack detection - which squares a side attacks, and check."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, GameMode, PieceType
from gambit.core.types import BISHOP_DIRS, KING_OFFSETS, ROOK_DIRS, Square, is_valid_square
from gambit.core.variants import variant_for

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


def _holds(board: Board, sq: Square, color: Color, piece_type: PieceType) -> bool:
    if not is_valid_square(sq):
        return False
    piece = board[sq]
    return piece is not None and piece.color == color and piece.piece_type == piece_type


def _ray_hits(
    board: Board,
    sq: Square,
    by_color: Color,
    directions: tuple[tuple[int, int], ...],
    sliders: tuple[PieceType, ...],
) -> bool:
    for d_row, d_col in directions:
        cur = sq.offset(d_row, d_col)
        while is_valid_square(cur):
            piece = board[cur]
            if piece is not None:
                if piece.color == by_color and piece.piece_type in sliders:
                    return True
                break
            cur = cur.offset(d_row, d_col)
    return False


def is_square_attacked(
    board: Board,
    sq: Square,
    by_color: Color,
    mode: GameMode = GameMode.CLASSIC,
) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pawns attack diagonally forward only.  Every other piece attacks along
    its capture pattern in *mode*, without legality filtering and without
    castling.  Stunned pieces still attack.
    """
    variant = variant_for(mode)

    # A pawn of by_color attacks sq from one row behind it (from by_color's view).
    pawn_row = sq.row - by_color.forward
    for d_col in (-1, 1):
        if _holds(board, Square(pawn_row, sq.col + d_col), by_color, PieceType.PAWN):
            return True

    for d_row, d_col in variant.knight_offsets():
        if _holds(board, sq.offset(d_row, d_col), by_color, PieceType.KNIGHT):
            return True

    for d_row, d_col in KING_OFFSETS:
        if _holds(board, sq.offset(d_row, d_col), by_color, PieceType.KING):
            return True

    if _ray_hits(board, sq, by_color, BISHOP_DIRS, _DIAGONAL_SLIDERS):
        return True
    if _ray_hits(board, sq, by_color, ROOK_DIRS, _ORTHOGONAL_SLIDERS):
        return True

    if variant.bishop_snipes():
        for d_row, d_col in BISHOP_DIRS:
            if _holds(board, sq.offset(2 * d_row, 2 * d_col), by_color, PieceType.BISHOP):
                return True

    return False


def is_in_check(board: Board, color: Color, mode: GameMode = GameMode.CLASSIC) -> bool:
    """Is *color*'s king attacked by the opponent?  False when there is no king."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite, mode)
