"""King-safety filter: what-if simulation of a single relocation."""

from __future__ import annotations

from gambit.core.attacks import is_in_check
from gambit.core.board import Board
from gambit.core.enums import Color, GameMode
from gambit.core.types import Square


def is_safe(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    color: Color,
    mode: GameMode = GameMode.CLASSIC,
    captured_sq: Square | None = None,
) -> bool:
    """Would *color*'s king be safe after moving the piece on *from_sq* to *to_sq*?

    Works on a copy: the piece is relocated, *from_sq* vacated and, for en
    passant, the pawn on *captured_sq* removed.  The board passed in is never
    touched.  Castling transit squares are probed one by one with this same
    check.
    """
    probe = board.copy()
    probe[to_sq] = probe[from_sq]
    probe[from_sq] = None
    if captured_sq is not None:
        probe[captured_sq] = None
    return not is_in_check(probe, color, mode)
