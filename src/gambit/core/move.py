"""Move value object - a record of one applied ply."""

from __future__ import annotations

from dataclasses import dataclass, replace

from gambit.core.enums import CastlingSide, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of an applied move.

    Holds everything needed to reverse the move exactly: the mover and any
    captured piece as they were *before* the move, and the pre-move
    ``has_moved`` flags of both (the board copies get ``has_moved = True``
    as a side effect of moving).

    ``to_sq`` is the requested destination.  Under rook charge the rook may
    end one square further on, recorded in ``charge_sq``; ``landing_sq``
    gives wherever the mover actually stands.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None
    en_passant: Square | None = None
    castling: CastlingSide | None = None
    piece_had_moved: bool = False
    captured_had_moved: bool = False
    charge_sq: Square | None = None
    ghost_walk: bool = False

    @property
    def landing_sq(self) -> Square:
        return self.charge_sq if self.charge_sq is not None else self.to_sq

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_double_pawn_step(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and abs(self.to_sq.row - self.from_sq.row) == 2
        )

    def with_promotion(self, piece_type: PieceType) -> Move:
        """Copy of this move with the promotion choice stamped on."""
        return replace(self, promotion=piece_type)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.landing_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
