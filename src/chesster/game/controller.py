"""GameController — the central orchestrator of a chess game.

Coordinates the GameState with whatever front end drives it.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesster.core.board import Board
from chesster.core.enums import Color
from chesster.core.notation import normalize_move_text
from chesster.core.validator import MoveOutcome
from chesster.game.interfaces import GameEndReason, GamePhase
from chesster.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[str, MoveOutcome, GameState], None]  # text, outcome, state
RejectedCallback = Callable[[str, MoveOutcome], None]
CheckCallback = Callable[[Color], None]  # color of the checked king
GameOverCallback = Callable[[GameEndReason, Color | None], None]  # reason, winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a two-player game: validates moves, switches turns,
    detects checkmate and stalemate, notifies listeners.

    Methods must be called from a single thread; the rule engine plays
    trial moves on the live board while it checks legality.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        """Start a game on *board* (a scenario) or the standard layout."""
        self._state = GameState()
        self._state.setup(board)
        _LOGGER.info("New game started")
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._evaluate_position()

    def submit_move(self, text: str) -> bool:
        """Attempt a move like ``"e2 e4"`` for the side to move."""
        if self._state.is_game_over:
            return False
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        text = normalize_move_text(text)
        mover = self._state.side_to_move
        outcome = self._state.apply(text)
        if not outcome.ok:
            _LOGGER.debug("Rejected %r for %s: %s", text, mover, outcome.rejection)
            self._emit_rejected(text, outcome)
            return False

        _LOGGER.info("%s played %s", mover, text)
        self._emit_move(text, outcome)
        if outcome.gives_check:
            self._emit_check(mover.opposite)

        self._evaluate_position()
        return True

    def quit(self) -> None:
        if self._state.is_game_over:
            return
        self._state.quit()
        self._emit_game_over()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _evaluate_position(self) -> None:
        """Detect checkmate / stalemate for the side about to move."""
        status = self._state.refresh_status()
        if status.is_terminal:
            _LOGGER.info("Game over: %s", status.name.lower())
            self._emit_game_over()

    def _emit_move(self, text: str, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(text, outcome, self._state)

    def _emit_rejected(self, text: str, outcome: MoveOutcome) -> None:
        for cb in self.events.on_rejected:
            cb(text, outcome)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self) -> None:
        reason = self._state.end_reason
        if reason is None:
            return
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(reason, self._state.winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
