"""GameController - the central orchestrator of a game.

Coordinates: Players, GameState, opponent scheduling.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.enums import Color, GameMode, GameStatus, PieceType
from gambit.core.errors import GameError
from gambit.core.move import Move
from gambit.core.types import Square
from gambit.game.interfaces import GamePhase, IGameController, IPlayer
from gambit.game.player import AIPlayer
from gambit.game.state import CandidateMove, GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
PromotionCallback = Callable[[Square], None]
StatusCallback = Callable[[GameStatus], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[StatusCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns, prompts
    players and notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  AI moves arrive through the players' schedulers,
    which run callbacks on that same thread.
    """

    __slots__ = (
        "_state",
        "_players",
        "_phase",
        "_turn_token",
        "events",
    )

    def __init__(self, rng: random.Random | None = None) -> None:
        self._state = GameState(rng=rng)
        self._players: dict[Color, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        # Bumped whenever a scheduled AI reply could have gone stale.
        self._turn_token = 0
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        mode: GameMode | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._turn_token += 1
        self._state.reset(mode or GameMode.CLASSIC, rng)
        self._emit_status(self._state.status)
        self._prompt_current_player()

    def legal_moves_from(self, sq: Square) -> set[Square]:
        return self._state.legal_moves_from(sq)

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        if self._phase == GamePhase.NOT_STARTED:
            return False
        try:
            move = self._state.apply_move(from_sq, to_sq, promotion)
        except GameError as exc:
            _LOGGER.debug("Move %s%s rejected: %s", from_sq, to_sq, exc)
            return False

        self._emit_move(move)
        if self._state.pending_promotion is not None:
            self._set_phase(GamePhase.AWAITING_PROMOTION)
            for cb in self.events.on_promotion_required:
                cb(self._state.pending_promotion)
            return True

        self._after_turn()
        return True

    def promote(self, piece_type: PieceType) -> bool:
        try:
            move = self._state.promote(piece_type)
        except GameError as exc:
            _LOGGER.debug("Promotion rejected: %s", exc)
            return False
        self._emit_move(move)
        self._after_turn()
        return True

    def undo_move(self) -> Move:
        """Undo the last move.

        Raises ``EmptyHistory`` when nothing was played, so callers cannot
        mistake an empty history for a successful undo.
        """
        move = self._state.undo()

        # Replies scheduled before the undo must not land.
        cp = self.current_player
        if cp and not cp.is_human:
            cp.cancel()
        self._turn_token += 1

        self._emit_status(self._state.status)
        self._prompt_current_player()
        return move

    def set_ai_enabled(self, color: Color, enabled: bool) -> None:
        """Switch the AI playing *color* on or off."""
        player = self._players.get(color)
        if not isinstance(player, AIPlayer):
            return
        player.enabled = enabled
        if enabled and color == self._state.side_to_move:
            self._prompt_current_player()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_turn(self) -> None:
        status = self._state.status
        self._emit_status(status)
        if status.is_terminal:
            self._set_phase(GamePhase.GAME_OVER)
            for cb in self.events.on_game_over:
                cb(status)
            return
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        if self._state.is_game_over:
            self._set_phase(GamePhase.GAME_OVER)
            return
        if self._state.pending_promotion is not None:
            self._set_phase(GamePhase.AWAITING_PROMOTION)
            return

        cp = self.current_player
        if cp is None or cp.is_human or (isinstance(cp, AIPlayer) and not cp.enabled):
            self._set_phase(GamePhase.AWAITING_MOVE)
            return

        self._turn_token += 1
        token = self._turn_token
        self._set_phase(GamePhase.THINKING)
        cp.request_move(self._state, lambda choice: self._on_ai_reply(cp, token, choice))

    def _on_ai_reply(self, player: IPlayer, token: int, choice: CandidateMove) -> None:
        if token != self._turn_token or self.current_player is not player:
            _LOGGER.debug("Dropping stale move from %s", player.name)
            return
        self.submit_move(choice.from_sq, choice.to_sq, choice.promotion)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
