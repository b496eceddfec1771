"""Core enumerations for the chess-variant domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step (white moves up the board, towards row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Back-rank row index."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_row(self) -> int:
        """Row the pawns start on."""
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CastlingSide(Enum):
    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


class GameMode(Enum):
    """Rule set a game is played under.

    ``RANDOM`` is a meta-mode: it is resolved into one concrete mode when a
    game is reset and never stays active during play.
    """

    CLASSIC = "classic"
    RANDOM = "random"
    SPECIAL_PAWN_POWER = "special_pawn_power"
    GHOST_PAWN = "ghost_pawn"
    HEAVY_KNIGHT = "heavy_knight"
    BISHOP_SNIPER = "bishop_sniper"
    ROOK_CHARGE = "rook_charge"

    def __str__(self) -> str:
        return self.value


class GameStatus(Enum):
    """Status of the side to move."""

    PLAYING = "playing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.DRAW)

    def __str__(self) -> str:
        return self.value
