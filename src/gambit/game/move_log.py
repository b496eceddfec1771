"""Move log - ordered history of applied moves plus what undo needs."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, GameStatus, PieceType
from gambit.core.move import Move
from gambit.core.types import Square


@dataclass(frozen=True, slots=True)
class TurnSnapshot:
    """Game-level state saved before each move so it can be undone exactly."""

    side_to_move: Color
    status: GameStatus
    halfmove_clock: int
    # (square, stunned_turns) for every stunned piece, at pre-move squares.
    stuns: tuple[tuple[Square, int], ...] = ()


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move log."""

    move: Move
    snapshot: TurnSnapshot


class MoveLog:
    """Stack of :class:`MoveRecord` entries, owned by one game state."""

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []

    def append(self, move: Move, snapshot: TurnSnapshot) -> MoveRecord:
        record = MoveRecord(move, snapshot)
        self._records.append(record)
        return record

    def pop(self) -> MoveRecord:
        """Remove and return the newest record (``IndexError`` when empty)."""
        return self._records.pop()

    def stamp_promotion(self, piece_type: PieceType) -> Move:
        """Record the promotion choice on the newest move and return it."""
        record = self._records[-1]
        move = record.move.with_promotion(piece_type)
        self._records[-1] = MoveRecord(move, record.snapshot)
        return move

    @property
    def last_move(self) -> Move | None:
        """Most recent move - the only history the move rules look at."""
        return self._records[-1].move if self._records else None

    def moves(self) -> tuple[Move, ...]:
        return tuple(record.move for record in self._records)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
