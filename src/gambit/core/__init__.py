"""Core domain layer - pure rules logic with zero external dependencies.

Quick start::

    from gambit.core import Board, GameMode, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board, GameMode.HEAVY_KNIGHT)
    print(gen.legal_targets(parse_square("g1")))
"""

from gambit.core.attacks import is_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import CastlingSide, Color, GameMode, GameStatus, PieceType
from gambit.core.errors import (
    EmptyHistory,
    GameError,
    GameOver,
    IllegalMove,
    NoPieceAtSource,
    NoPromotionPending,
    NotYourTurn,
    PromotionPending,
)
from gambit.core.legality import is_safe
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import Piece
from gambit.core.rules import Rules
from gambit.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)
from gambit.core.variants import (
    RANDOM_MODE_POOL,
    Variant,
    register_variant,
    resolve_mode,
    variant_for,
)

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "GameMode",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Predicates
    "is_in_check",
    "is_safe",
    "is_square_attacked",
    # Variants
    "RANDOM_MODE_POOL",
    "Variant",
    "register_variant",
    "resolve_mode",
    "variant_for",
    # Errors
    "EmptyHistory",
    "GameError",
    "GameOver",
    "IllegalMove",
    "NoPieceAtSource",
    "NoPromotionPending",
    "NotYourTurn",
    "PromotionPending",
]
