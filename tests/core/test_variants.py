"""Tests for the variant rule modifiers and the mode registry."""

import random

import pytest

from gambit.core.attacks import is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import Color, GameMode, PieceType
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import Piece
from gambit.core.types import Square
from gambit.core.types import parse_square as sq
from gambit.core.variants import (
    RANDOM_MODE_POOL,
    GhostPawnVariant,
    HeavyKnightVariant,
    RookChargeVariant,
    Variant,
    register_variant,
    resolve_mode,
    variant_for,
)

CONCRETE_MODES = [mode for mode in GameMode if mode != GameMode.RANDOM]


def _kings_only() -> Board:
    board = Board()
    board[sq("e1")] = Piece(PieceType.KING, Color.WHITE)
    board[sq("e8")] = Piece(PieceType.KING, Color.BLACK)
    return board


class TestRegistry:
    @pytest.mark.parametrize("mode", CONCRETE_MODES)
    def test_every_mode_has_rules(self, mode: GameMode) -> None:
        assert variant_for(mode).mode == mode

    def test_random_has_no_rules(self) -> None:
        with pytest.raises(ValueError, match="No rules registered"):
            variant_for(GameMode.RANDOM)

    def test_random_cannot_be_registered(self) -> None:
        class Bogus(Variant):
            mode = GameMode.RANDOM

        with pytest.raises(ValueError, match="meta-mode"):
            register_variant(Bogus())

    def test_concrete_mode_passes_through(self) -> None:
        assert resolve_mode(GameMode.GHOST_PAWN) == GameMode.GHOST_PAWN

    def test_random_resolves_into_pool(self) -> None:
        rng = random.Random(7)
        for _ in range(20):
            assert resolve_mode(GameMode.RANDOM, rng) in RANDOM_MODE_POOL

    def test_random_pool_override(self) -> None:
        pool = (GameMode.ROOK_CHARGE,)
        assert resolve_mode(GameMode.RANDOM, random.Random(1), pool) == GameMode.ROOK_CHARGE

    def test_empty_pool(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            resolve_mode(GameMode.RANDOM, pool=())

    def test_default_pool(self) -> None:
        assert set(RANDOM_MODE_POOL) == {
            GameMode.CLASSIC,
            GameMode.SPECIAL_PAWN_POWER,
            GameMode.GHOST_PAWN,
            GameMode.HEAVY_KNIGHT,
        }


class TestSpecialPawnPower:
    def test_moved_pawn_double_steps(self) -> None:
        board = _kings_only()
        board[sq("c4")] = Piece(PieceType.PAWN, Color.WHITE, has_moved=True)
        gen = MoveGenerator(board, GameMode.SPECIAL_PAWN_POWER)
        assert set(gen.legal_targets(sq("c4"))) == {sq("c5"), sq("c6")}

    def test_classic_moved_pawn_single_step(self) -> None:
        board = _kings_only()
        board[sq("c4")] = Piece(PieceType.PAWN, Color.WHITE, has_moved=True)
        assert MoveGenerator(board).legal_targets(sq("c4")) == [sq("c5")]

    def test_double_step_still_needs_clear_path(self) -> None:
        board = _kings_only()
        board[sq("c4")] = Piece(PieceType.PAWN, Color.WHITE, has_moved=True)
        board[sq("c5")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.SPECIAL_PAWN_POWER)
        assert gen.legal_targets(sq("c4")) == []


class TestGhostPawn:
    def test_jump_over_blocker(self) -> None:
        board = _kings_only()
        board[sq("c2")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("c3")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.GHOST_PAWN)
        assert gen.legal_targets(sq("c2")) == [sq("c4")]

    def test_jump_from_any_rank(self) -> None:
        board = _kings_only()
        board[sq("c5")] = Piece(PieceType.PAWN, Color.BLACK, has_moved=True)
        board[sq("c4")] = Piece(PieceType.PAWN, Color.WHITE, has_moved=True)
        gen = MoveGenerator(board, GameMode.GHOST_PAWN)
        assert sq("c3") in gen.legal_targets(sq("c5"))

    def test_spent_jump(self) -> None:
        board = _kings_only()
        board[sq("c2")] = Piece(PieceType.PAWN, Color.WHITE, ghost_walk_used=True)
        board[sq("c3")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.GHOST_PAWN)
        assert gen.legal_targets(sq("c2")) == []

    def test_landing_must_be_empty(self) -> None:
        board = _kings_only()
        board[sq("c2")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("c3")] = Piece(PieceType.KNIGHT, Color.BLACK)
        board[sq("c4")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.GHOST_PAWN)
        assert gen.legal_targets(sq("c2")) == []

    def test_classic_has_no_jump(self) -> None:
        board = _kings_only()
        board[sq("c2")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("c3")] = Piece(PieceType.KNIGHT, Color.BLACK)
        assert MoveGenerator(board).legal_targets(sq("c2")) == []

    def test_ghost_walk_hook(self) -> None:
        board = _kings_only()
        pawn = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("c2")] = pawn
        variant = GhostPawnVariant()
        assert not variant.ghost_walk(board, sq("c2"), sq("c4"), pawn)
        board[sq("c3")] = Piece(PieceType.BISHOP, Color.WHITE)
        assert variant.ghost_walk(board, sq("c2"), sq("c4"), pawn)


class TestHeavyKnight:
    def test_vault_targets(self) -> None:
        board = _kings_only()
        board[sq("d4")] = Piece(PieceType.KNIGHT, Color.WHITE)
        targets = set(MoveGenerator(board, GameMode.HEAVY_KNIGHT).legal_targets(sq("d4")))
        assert {sq("c7"), sq("e7"), sq("a5"), sq("g3"), sq("c1")} <= targets
        assert sq("f5") in targets  # ordinary L move

    def test_classic_knight_cannot_vault(self) -> None:
        board = _kings_only()
        board[sq("d4")] = Piece(PieceType.KNIGHT, Color.WHITE)
        assert sq("c7") not in MoveGenerator(board).legal_targets(sq("d4"))

    def test_vault_gives_check(self) -> None:
        board = _kings_only()
        board[sq("d5")] = Piece(PieceType.KNIGHT, Color.WHITE)
        # d5 -> e8 is a (3, 1) vault
        assert is_square_attacked(board, sq("e8"), Color.WHITE, GameMode.HEAVY_KNIGHT)
        assert not is_square_attacked(board, sq("e8"), Color.WHITE)

    def test_stun_targets_orthogonal_enemies(self) -> None:
        board = _kings_only()
        knight = Piece(PieceType.KNIGHT, Color.WHITE)
        board[sq("d4")] = knight
        board[sq("d5")] = Piece(PieceType.PAWN, Color.BLACK)
        board[sq("e4")] = Piece(PieceType.BISHOP, Color.BLACK)
        board[sq("c4")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("e5")] = Piece(PieceType.ROOK, Color.BLACK)  # diagonal
        stunned = HeavyKnightVariant().stun_targets(board, sq("d4"), knight)
        assert set(stunned) == {sq("d5"), sq("e4")}

    def test_only_knights_stun(self) -> None:
        board = _kings_only()
        bishop = Piece(PieceType.BISHOP, Color.WHITE)
        board[sq("d4")] = bishop
        board[sq("d5")] = Piece(PieceType.PAWN, Color.BLACK)
        assert HeavyKnightVariant().stun_targets(board, sq("d4"), bishop) == []


class TestBishopSniper:
    def test_snipe_over_blocker(self) -> None:
        board = _kings_only()
        board[sq("c1")] = Piece(PieceType.BISHOP, Color.WHITE)
        board[sq("d2")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("e3")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.BISHOP_SNIPER)
        assert sq("e3") in gen.legal_targets(sq("c1"))
        assert sq("e3") not in MoveGenerator(board).legal_targets(sq("c1"))

    def test_snipe_needs_enemy(self) -> None:
        board = _kings_only()
        board[sq("c1")] = Piece(PieceType.BISHOP, Color.WHITE)
        board[sq("d2")] = Piece(PieceType.PAWN, Color.WHITE)
        gen = MoveGenerator(board, GameMode.BISHOP_SNIPER)
        assert sq("e3") not in gen.legal_targets(sq("c1"))

    def test_snipe_distance_is_exactly_two(self) -> None:
        board = _kings_only()
        board[sq("c1")] = Piece(PieceType.BISHOP, Color.WHITE)
        board[sq("d2")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("f4")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.BISHOP_SNIPER)
        assert sq("f4") not in gen.legal_targets(sq("c1"))

    def test_queen_does_not_snipe(self) -> None:
        board = _kings_only()
        board[sq("c1")] = Piece(PieceType.QUEEN, Color.WHITE)
        board[sq("d2")] = Piece(PieceType.PAWN, Color.WHITE)
        board[sq("e3")] = Piece(PieceType.KNIGHT, Color.BLACK)
        gen = MoveGenerator(board, GameMode.BISHOP_SNIPER)
        assert sq("e3") not in gen.legal_targets(sq("c1"))

    def test_snipe_counts_as_attack(self) -> None:
        board = _kings_only()
        board[sq("c6")] = Piece(PieceType.BISHOP, Color.WHITE)
        board[sq("d7")] = Piece(PieceType.PAWN, Color.BLACK)
        assert is_square_attacked(board, sq("e8"), Color.WHITE, GameMode.BISHOP_SNIPER)
        assert not is_square_attacked(board, sq("e8"), Color.WHITE)


class TestRookCharge:
    @staticmethod
    def _capture(board: Board, from_name: str, to_name: str) -> Square | None:
        rook = Piece(PieceType.ROOK, Color.WHITE)
        captured = board[sq(to_name)]
        return RookChargeVariant().charge_square(
            board, sq(from_name), sq(to_name), rook, captured
        )

    def test_long_capture_charges(self) -> None:
        board = Board()
        board[sq("a5")] = Piece(PieceType.PAWN, Color.BLACK)
        assert self._capture(board, "a1", "a5") == sq("a6")

    def test_horizontal_charge(self) -> None:
        board = Board()
        board[sq("e1")] = Piece(PieceType.PAWN, Color.BLACK)
        assert self._capture(board, "a1", "e1") == sq("f1")

    def test_short_capture_does_not_charge(self) -> None:
        board = Board()
        board[sq("a3")] = Piece(PieceType.PAWN, Color.BLACK)
        assert self._capture(board, "a1", "a3") is None

    def test_quiet_move_does_not_charge(self) -> None:
        assert self._capture(Board(), "a1", "a5") is None

    def test_blocked_charge(self) -> None:
        board = Board()
        board[sq("a5")] = Piece(PieceType.PAWN, Color.BLACK)
        board[sq("a6")] = Piece(PieceType.PAWN, Color.BLACK)
        assert self._capture(board, "a1", "a5") is None

    def test_edge_of_board(self) -> None:
        board = Board()
        board[sq("a8")] = Piece(PieceType.PAWN, Color.BLACK)
        assert self._capture(board, "a1", "a8") is None

    def test_other_pieces_do_not_charge(self) -> None:
        board = Board()
        board[sq("a5")] = Piece(PieceType.PAWN, Color.BLACK)
        queen = Piece(PieceType.QUEEN, Color.WHITE)
        assert (
            RookChargeVariant().charge_square(board, sq("a1"), sq("a5"), queen, board[sq("a5")])
            is None
        )
