"""Square type and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black's back rank), row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h

So ``Square(6, 4)`` is e2 and ``Square(0, 4)`` is e8.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A board coordinate. Both components lie in ``[0, 8)`` when valid."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by the given deltas (may fall off the board)."""
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        if is_valid_square(self):
            return square_name(self)
        return f"({self.row}, {self.col})"


def is_valid_square(sq: Square) -> bool:
    """Pure range check."""
    return 0 <= sq.row < 8 and 0 <= sq.col < 8


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(6, 4)`` → ``'e2'``."""
    return chr(ord("a") + sq.col) + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))


# ── Movement offsets as (d_row, d_col) ──────────────────────────────────────

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

# Heavy-knight vault: the stretched (3, 1) L.
VAULT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-3, -1),
    (-3, 1),
    (3, -1),
    (3, 1),
    (-1, -3),
    (1, -3),
    (-1, 3),
    (1, 3),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS
