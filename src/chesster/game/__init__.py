"""Game management layer — state machine, controller, challenge presets.

Quick start::

    from chesster.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move("e2 e4")
"""

from chesster.game.controller import GameController, GameEvents
from chesster.game.interfaces import GameEndReason, GamePhase
from chesster.game.messages import (
    describe_rejection,
    describe_status,
    game_over_message,
)
from chesster.game.scenarios import SCENARIOS, Scenario, build_board
from chesster.game.state import GameState

__all__ = [
    "GameController",
    "GameEndReason",
    "GameEvents",
    "GamePhase",
    "GameState",
    "SCENARIOS",
    "Scenario",
    "build_board",
    "describe_rejection",
    "describe_status",
    "game_over_message",
]
