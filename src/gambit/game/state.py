"""Game state machine - board, turn, status, history and their transitions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from gambit.core.board import Board
from gambit.core.enums import Color, GameMode, GameStatus, PieceType
from gambit.core.errors import (
    EmptyHistory,
    GameOver,
    IllegalMove,
    NoPieceAtSource,
    NoPromotionPending,
    NotYourTurn,
    PromotionPending,
)
from gambit.core.legality import is_safe
from gambit.core.move import Move
from gambit.core.move_generator import CASTLING_LAYOUT, MoveGenerator, castling_side
from gambit.core.piece import Piece
from gambit.core.rules import Rules
from gambit.core.types import Square
from gambit.core.variants import RANDOM_MODE_POOL, resolve_mode, variant_for
from gambit.game.move_log import MoveLog, TurnSnapshot

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES = frozenset(
    (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)
)


@dataclass(frozen=True, slots=True)
class CandidateMove:
    """A legal move on offer to a player, before it is applied."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    captured: Piece | None = None


class GameState:
    """Owns the authoritative state of one game and every transition of it.

    State is read through properties and changed only by :meth:`apply_move`,
    :meth:`promote`, :meth:`undo` and :meth:`reset`.  Each of these either
    completes or raises a :class:`~gambit.core.errors.GameError` before
    touching anything, so a rejected call leaves the state unchanged.

    This is a pure data/logic class - no threading, no UI, no timers.
    """

    __slots__ = (
        "_rng",
        "_mode",
        "_board",
        "_side_to_move",
        "_status",
        "_pending_promotion",
        "_pending_stuns",
        "_log",
        "_captured",
        "_halfmove_clock",
    )

    def __init__(
        self,
        mode: GameMode = GameMode.CLASSIC,
        rng: random.Random | None = None,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._mode = GameMode.CLASSIC
        self._log = MoveLog()
        self.reset(mode, board=board, side_to_move=side_to_move)

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def from_board(
        cls,
        board: Board,
        side_to_move: Color = Color.WHITE,
        mode: GameMode = GameMode.CLASSIC,
        rng: random.Random | None = None,
    ) -> GameState:
        """Game starting from an arbitrary position (the board is copied)."""
        return cls(mode, rng, board=board, side_to_move=side_to_move)

    def reset(
        self,
        mode: GameMode | None = None,
        rng: random.Random | None = None,
        pool: tuple[GameMode, ...] = RANDOM_MODE_POOL,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Start a fresh game.

        ``None`` *mode* keeps the current mode; ``RANDOM`` draws one from
        *pool*.  *board* defaults to the standard starting position.
        """
        if rng is not None:
            self._rng = rng
        if mode is not None:
            self._mode = resolve_mode(mode, self._rng, pool)
        self._board = board.copy() if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._pending_promotion: Square | None = None
        self._pending_stuns: tuple[Square, ...] = ()
        self._log.clear()
        self._captured: dict[Color, list[Piece]] = {Color.WHITE: [], Color.BLACK: []}
        self._halfmove_clock = 0
        self._status = Rules.classify(self._board, side_to_move, self._mode)
        _LOGGER.info("New game, mode %s", self._mode)

    # ── Read accessors ───────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """A copy of the board; edits to it do not affect the game."""
        return self._board.copy()

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[sq]

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def pending_promotion(self) -> Square | None:
        return self._pending_promotion

    @property
    def move_history(self) -> tuple[Move, ...]:
        return self._log.moves()

    @property
    def last_move(self) -> Move | None:
        return self._log.last_move

    @property
    def captured_pieces(self) -> dict[Color, tuple[Piece, ...]]:
        """Captured pieces keyed by the color of the pieces, oldest first."""
        return {color: tuple(pieces) for color, pieces in self._captured.items()}

    @property
    def halfmove_clock(self) -> int:
        """Plies since the last pawn move or capture (tracked, never enforced)."""
        return self._halfmove_clock

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def ply_count(self) -> int:
        return len(self._log)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves_from(self, sq: Square) -> set[Square]:
        """Legal destinations for the piece on *sq*.

        Empty when the square is empty, holds the opponent's or a stunned
        piece, the game is over or a promotion is pending.
        """
        if self.is_game_over or self._pending_promotion is not None:
            return set()
        piece = self._board[sq]
        if piece is None or piece.color != self._side_to_move:
            return set()
        return set(self._generator().legal_targets(sq))

    def all_legal_moves(self, color: Color | None = None) -> list[CandidateMove]:
        """Every legal move for *color* (default: side to move).

        Pawn moves onto the last rank carry a queen promotion.
        """
        if self.is_game_over or self._pending_promotion is not None:
            return []
        color = self._side_to_move if color is None else color
        gen = self._generator()
        board = self._board
        candidates: list[CandidateMove] = []
        for from_sq, to_sq in gen.legal_moves(color):
            piece = board[from_sq]
            assert piece is not None
            promotion = None
            if piece.piece_type == PieceType.PAWN and to_sq.row == color.promotion_row:
                promotion = PieceType.QUEEN
            victim_sq = gen.en_passant_victim(from_sq, to_sq) or to_sq
            candidates.append(CandidateMove(from_sq, to_sq, promotion, board[victim_sq]))
        return candidates

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move:
        """Validate and apply one move, returning its record.

        A pawn reaching the last rank without *promotion* is applied and
        recorded, but the turn stays with the mover and
        :attr:`pending_promotion` is set until :meth:`promote` is called.
        """
        board = self._board
        piece = board[from_sq]
        if piece is None:
            raise NoPieceAtSource(f"No piece on {from_sq}")
        if self.is_game_over:
            raise GameOver(f"Game is over ({self._status})")
        if self._pending_promotion is not None:
            raise PromotionPending(f"Promotion pending on {self._pending_promotion}")
        if piece.color != self._side_to_move:
            raise NotYourTurn(f"{piece.color} piece on {from_sq}, {self._side_to_move} to move")
        if promotion is not None and promotion not in _PROMOTION_TYPES:
            raise IllegalMove(f"Cannot promote to {promotion}")
        gen = self._generator()
        if to_sq not in gen.legal_targets(from_sq):
            raise IllegalMove(f"{from_sq}{to_sq} is not legal")

        variant = variant_for(self._mode)
        snapshot = self._snapshot()
        color = piece.color

        ep_sq = gen.en_passant_victim(from_sq, to_sq)
        victim_sq = ep_sq if ep_sq is not None else to_sq
        captured = board[victim_sq]
        castle = castling_side(piece, from_sq, to_sq)
        ghost = variant.ghost_walk(board, from_sq, to_sq, piece)
        promotes = piece.piece_type == PieceType.PAWN and to_sq.row == color.promotion_row

        board[from_sq] = None
        board[victim_sq] = None
        if castle is not None:
            rook_col, rook_to_col = CASTLING_LAYOUT[castle][:2]
            rook_sq = Square(from_sq.row, rook_col)
            rook = board[rook_sq]
            assert rook is not None
            board[Square(from_sq.row, rook_to_col)] = rook.evolve(has_moved=True)
            board[rook_sq] = None

        if promotes and promotion is not None:
            placed = Piece(promotion, color, has_moved=True)
        else:
            placed = piece.evolve(
                has_moved=True,
                ghost_walk_used=piece.ghost_walk_used or ghost,
            )
        board[to_sq] = placed

        charge_sq = variant.charge_square(board, from_sq, to_sq, piece, captured)
        if charge_sq is not None and is_safe(board, to_sq, charge_sq, color, self._mode):
            board[charge_sq] = placed
            board[to_sq] = None
        else:
            charge_sq = None

        move = Move(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece,
            captured=captured,
            promotion=promotion if promotes else None,
            en_passant=ep_sq,
            castling=castle,
            piece_had_moved=piece.has_moved,
            captured_had_moved=captured.has_moved if captured is not None else False,
            charge_sq=charge_sq,
            ghost_walk=ghost,
        )
        if captured is not None:
            self._captured[captured.color].append(captured)
        stuns = tuple(variant.stun_targets(board, move.landing_sq, piece))
        self._log.append(move, snapshot)
        _LOGGER.debug("Applied %s (%s)", move, self._mode)

        if promotes and promotion is None:
            self._pending_promotion = to_sq
            self._pending_stuns = stuns
            _LOGGER.debug("Promotion pending on %s", to_sq)
            return move

        self._finish_turn(move, stuns)
        return move

    def promote(self, piece_type: PieceType) -> Move:
        """Resolve a pending promotion and pass the turn."""
        sq = self._pending_promotion
        if sq is None:
            raise NoPromotionPending("No promotion pending")
        if piece_type not in _PROMOTION_TYPES:
            raise IllegalMove(f"Cannot promote to {piece_type}")
        pawn = self._board[sq]
        assert pawn is not None
        self._board[sq] = Piece(piece_type, pawn.color, has_moved=True)
        # The record keeps the pawn as its piece; undo puts a pawn back.
        move = self._log.stamp_promotion(piece_type)
        stuns = self._pending_stuns
        self._pending_promotion = None
        self._pending_stuns = ()
        self._finish_turn(move, stuns)
        return move

    def undo(self) -> Move:
        """Reverse the most recent move exactly and return it."""
        if not self._log:
            raise EmptyHistory()
        record = self._log.pop()
        move, snapshot = record.move, record.snapshot
        board = self._board

        if move.castling is not None:
            rook_col, rook_to_col = CASTLING_LAYOUT[move.castling][:2]
            row = move.from_sq.row
            rook = board[Square(row, rook_to_col)]
            assert rook is not None
            board[Square(row, rook_col)] = rook.evolve(has_moved=False)
            board[Square(row, rook_to_col)] = None

        board[move.landing_sq] = None
        board[move.to_sq] = None
        board[move.from_sq] = move.piece.evolve(has_moved=move.piece_had_moved)

        if move.captured is not None:
            victim_sq = move.en_passant if move.en_passant is not None else move.to_sq
            board[victim_sq] = move.captured.evolve(has_moved=move.captured_had_moved)
            self._forget_capture(move.captured)

        stuns = dict(snapshot.stuns)
        for sq, piece in list(board.occupied()):
            turns = stuns.get(sq, 0)
            if piece.stunned_turns != turns:
                board[sq] = piece.evolve(stunned_turns=turns)

        self._side_to_move = snapshot.side_to_move
        self._status = snapshot.status
        self._halfmove_clock = snapshot.halfmove_clock
        self._pending_promotion = None
        self._pending_stuns = ()
        _LOGGER.debug("Undid %s", move)
        return move

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self._board, self._mode, self._log.last_move)

    def _snapshot(self) -> TurnSnapshot:
        return TurnSnapshot(
            side_to_move=self._side_to_move,
            status=self._status,
            halfmove_clock=self._halfmove_clock,
            stuns=tuple(
                (sq, piece.stunned_turns)
                for sq, piece in self._board.occupied()
                if piece.stunned_turns
            ),
        )

    def _finish_turn(self, move: Move, stuns: tuple[Square, ...]) -> None:
        """Clock, turn hand-over, stun bookkeeping and status after a full move."""
        if move.piece.piece_type == PieceType.PAWN or move.is_capture:
            self._halfmove_clock = 0
        else:
            self._halfmove_clock += 1

        self._side_to_move = self._side_to_move.opposite
        board = self._board
        for sq, piece in list(board.occupied()):
            if piece.color == self._side_to_move and piece.is_stunned:
                board[sq] = piece.evolve(stunned_turns=piece.stunned_turns - 1)

        # Applied after the tick so the stunned side sits out this turn.
        turns = variant_for(self._mode).stun_turns
        for sq in stuns:
            piece = board[sq]
            if piece is not None:
                board[sq] = piece.evolve(stunned_turns=max(piece.stunned_turns, turns))

        self._status = Rules.classify(board, self._side_to_move, self._mode, move)
        if self._status.is_terminal:
            _LOGGER.info("Game over: %s, %s to move", self._status, self._side_to_move)

    def _forget_capture(self, piece: Piece) -> None:
        pieces = self._captured[piece.color]
        for idx in range(len(pieces) - 1, -1, -1):
            if pieces[idx] == piece:
                del pieces[idx]
                return
