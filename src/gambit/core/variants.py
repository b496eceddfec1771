"""Rule modifiers ("variants") that alter piece movement.

Each :class:`GameMode` maps to one :class:`Variant`.  The base class is
classic chess; subclasses override only the hooks their rule touches.  The
move generator, attack detection and the game state machine consult these
hooks and never branch on the mode themselves, so a new variant plugs in
through :func:`register_variant` without touching the legality pipeline.

Generation hooks are pure.  Post-move hooks (:meth:`Variant.ghost_walk`,
:meth:`Variant.stun_targets`, :meth:`Variant.charge_square`) only inspect the
board and report what the state machine should do.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from gambit.core.enums import Color, GameMode, PieceType
from gambit.core.types import (
    BISHOP_DIRS,
    KNIGHT_OFFSETS,
    ROOK_DIRS,
    VAULT_OFFSETS,
    Square,
    is_valid_square,
)

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

# Modes ``RANDOM`` resolves to.  Bishop sniper and rook charge have never
# been part of the draw.
RANDOM_MODE_POOL: tuple[GameMode, ...] = (
    GameMode.CLASSIC,
    GameMode.SPECIAL_PAWN_POWER,
    GameMode.GHOST_PAWN,
    GameMode.HEAVY_KNIGHT,
)

_ORTHOGONAL: tuple[tuple[int, int], ...] = ROOK_DIRS
_CHARGE_MIN_DISTANCE = 3


class Variant:
    """Classic chess rules; the base every variant modifies."""

    mode: GameMode = GameMode.CLASSIC
    # Turns a piece reported by stun_targets sits out.
    stun_turns: int = 1

    # ── Generation hooks ─────────────────────────────────────────────────

    def allows_double_step(self, piece: Piece, sq: Square) -> bool:
        """Whether the pawn on *sq* may try a two-square advance."""
        return sq.row == piece.color.pawn_row and not piece.has_moved

    def extra_pawn_targets(self, board: Board, sq: Square, piece: Piece) -> list[Square]:
        return []

    def knight_offsets(self) -> tuple[tuple[int, int], ...]:
        return KNIGHT_OFFSETS

    def extra_bishop_targets(self, board: Board, sq: Square, color: Color) -> list[Square]:
        """Capture-only bishop targets on top of normal sliding."""
        return []

    def bishop_snipes(self) -> bool:
        """Whether bishops attack exactly two diagonal steps away regardless of blockers."""
        return False

    # ── Post-move hooks ──────────────────────────────────────────────────

    def ghost_walk(self, board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
        """Whether this move spends the pawn's one-time ghost jump."""
        return False

    def stun_targets(self, board: Board, landing_sq: Square, piece: Piece) -> list[Square]:
        """Enemy squares stunned by *piece* moving onto *landing_sq*.

        *piece* is the mover before any promotion, so a pawn promoting to a
        knight stuns nothing however the promotion is chosen.
        """
        return []

    def charge_square(
        self,
        board: Board,
        from_sq: Square,
        to_sq: Square,
        piece: Piece,
        captured: Piece | None,
    ) -> Square | None:
        """Square a capturing piece is carried on to after landing, if any."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.mode})"


class ClassicVariant(Variant):
    pass


class SpecialPawnPowerVariant(Variant):
    """Pawns may double-step from any rank, moved or not."""

    mode = GameMode.SPECIAL_PAWN_POWER

    def allows_double_step(self, piece: Piece, sq: Square) -> bool:
        return True


class GhostPawnVariant(Variant):
    """Each pawn may once jump two squares forward over any single piece."""

    mode = GameMode.GHOST_PAWN

    def extra_pawn_targets(self, board: Board, sq: Square, piece: Piece) -> list[Square]:
        if piece.ghost_walk_used:
            return []
        step = piece.color.forward
        mid = sq.offset(step, 0)
        landing = sq.offset(2 * step, 0)
        if is_valid_square(landing) and not board.is_empty(mid) and board.is_empty(landing):
            return [landing]
        return []

    def ghost_walk(self, board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
        if piece.piece_type != PieceType.PAWN or piece.ghost_walk_used:
            return False
        if abs(to_sq.row - from_sq.row) != 2 or to_sq.col != from_sq.col:
            return False
        mid = Square((from_sq.row + to_sq.row) // 2, from_sq.col)
        return not board.is_empty(mid)


class HeavyKnightVariant(Variant):
    """Knights also vault (3, 1) and stun orthogonally adjacent enemies on landing."""

    mode = GameMode.HEAVY_KNIGHT

    _OFFSETS = KNIGHT_OFFSETS + VAULT_OFFSETS

    def knight_offsets(self) -> tuple[tuple[int, int], ...]:
        return self._OFFSETS

    def stun_targets(self, board: Board, landing_sq: Square, piece: Piece) -> list[Square]:
        if piece.piece_type != PieceType.KNIGHT:
            return []
        targets: list[Square] = []
        for d_row, d_col in _ORTHOGONAL:
            sq = landing_sq.offset(d_row, d_col)
            if is_valid_square(sq) and board.is_enemy(sq, piece.color):
                targets.append(sq)
        return targets


class BishopSniperVariant(Variant):
    """Bishops capture exactly two diagonal steps away, ignoring the square between."""

    mode = GameMode.BISHOP_SNIPER

    def extra_bishop_targets(self, board: Board, sq: Square, color: Color) -> list[Square]:
        targets: list[Square] = []
        for d_row, d_col in BISHOP_DIRS:
            target = sq.offset(2 * d_row, 2 * d_col)
            if is_valid_square(target) and board.is_enemy(target, color):
                targets.append(target)
        return targets

    def bishop_snipes(self) -> bool:
        return True


class RookChargeVariant(Variant):
    """A rook capturing from three or more squares away plows one square further."""

    mode = GameMode.ROOK_CHARGE

    def charge_square(
        self,
        board: Board,
        from_sq: Square,
        to_sq: Square,
        piece: Piece,
        captured: Piece | None,
    ) -> Square | None:
        if piece.piece_type != PieceType.ROOK or captured is None:
            return None
        if from_sq.row != to_sq.row and from_sq.col != to_sq.col:
            return None
        distance = abs(to_sq.row - from_sq.row) + abs(to_sq.col - from_sq.col)
        if distance < _CHARGE_MIN_DISTANCE:
            return None
        d_row = (to_sq.row > from_sq.row) - (to_sq.row < from_sq.row)
        d_col = (to_sq.col > from_sq.col) - (to_sq.col < from_sq.col)
        extra = to_sq.offset(d_row, d_col)
        if is_valid_square(extra) and board.is_empty(extra):
            return extra
        return None


# ── Registry ────────────────────────────────────────────────────────────────

_VARIANTS: dict[GameMode, Variant] = {}


def register_variant(variant: Variant) -> None:
    """Make *variant* the rule set for ``variant.mode``."""
    if variant.mode == GameMode.RANDOM:
        raise ValueError("RANDOM is a meta-mode and cannot carry rules")
    _VARIANTS[variant.mode] = variant


def variant_for(mode: GameMode) -> Variant:
    """Rule set for a concrete *mode*."""
    try:
        return _VARIANTS[mode]
    except KeyError:
        raise ValueError(f"No rules registered for mode {mode}") from None


def resolve_mode(
    mode: GameMode,
    rng: random.Random | None = None,
    pool: tuple[GameMode, ...] = RANDOM_MODE_POOL,
) -> GameMode:
    """Turn ``RANDOM`` into a concrete mode drawn from *pool*; pass others through."""
    if mode != GameMode.RANDOM:
        return mode
    if not pool:
        raise ValueError("Random mode pool is empty")
    chosen = (rng or random.Random()).choice(pool)
    _LOGGER.debug("Random mode resolved to %s", chosen)
    return chosen


for _variant in (
    ClassicVariant(),
    SpecialPawnPowerVariant(),
    GhostPawnVariant(),
    HeavyKnightVariant(),
    BishopSniperVariant(),
    RookChargeVariant(),
):
    register_variant(_variant)
del _variant
