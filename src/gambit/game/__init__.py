"""Game management layer - state machine, controller, players, scheduling.

Quick start::

    from gambit.core import Color, GameMode
    from gambit.game import AIPlayer, GameController, HumanPlayer, ManualScheduler

    scheduler = ManualScheduler()
    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK, scheduler=scheduler),
        mode=GameMode.GHOST_PAWN,
    )
"""

from gambit.game.controller import GameController, GameEvents
from gambit.game.interfaces import (
    DEFAULT_MOVE_DELAY_MS,
    GamePhase,
    IGameController,
    IPlayer,
    IScheduler,
)
from gambit.game.move_log import MoveLog, MoveRecord, TurnSnapshot
from gambit.game.player import AIPlayer, HumanPlayer
from gambit.game.scheduler import ImmediateScheduler, ManualScheduler
from gambit.game.state import CandidateMove, GameState
from gambit.game.strategy import GreedyCaptureStrategy, OpponentStrategy

__all__ = [
    # Interfaces
    "DEFAULT_MOVE_DELAY_MS",
    "GamePhase",
    "IGameController",
    "IPlayer",
    "IScheduler",
    "OpponentStrategy",
    # Concrete
    "AIPlayer",
    "CandidateMove",
    "GameController",
    "GameEvents",
    "GameState",
    "GreedyCaptureStrategy",
    "HumanPlayer",
    "ImmediateScheduler",
    "ManualScheduler",
    "MoveLog",
    "MoveRecord",
    "TurnSnapshot",
]
