"""Exceptions raised by the game state machine.

All of them are recoverable: a rejected operation leaves the game state
exactly as it was.
"""

from __future__ import annotations


class GameError(ValueError):
    """Base class for rejected game operations."""


class NoPieceAtSource(GameError):
    """A move or selection was attempted on an empty square."""


class NotYourTurn(GameError):
    """The piece on the source square belongs to the side not on move."""


class IllegalMove(GameError):
    """The destination is not in the piece's legal move set."""


class GameOver(GameError):
    """The game has reached checkmate or stalemate."""


class PromotionPending(GameError):
    """A pawn is waiting for its promotion choice; no other move is accepted."""


class NoPromotionPending(GameError):
    """``promote`` was called while no pawn is waiting to be promoted."""


class EmptyHistory(GameError):
    """``undo`` was called with no moves recorded."""

    def __init__(self, message: str = "No moves to undo") -> None:
        super().__init__(message)
