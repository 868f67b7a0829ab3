"""Game-layer enumerations shared by the state, controller and front ends."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a game ended."""

    CHECKMATE = auto()
    STALEMATE = auto()
    QUIT = auto()
