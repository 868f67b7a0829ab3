"""GameState — board, turn and terminal bookkeeping for one game."""

from __future__ import annotations

from chesster.core.board import Board
from chesster.core.enums import Color, GameStatus
from chesster.core.rules import Rules
from chesster.core.validator import MoveOutcome, MoveValidator
from chesster.game.interfaces import GameEndReason, GamePhase


class GameState:
    """Tracks whose turn it is and whether the game has ended.

    White always moves first. The turn flips exactly once per successful
    move and never on a rejected one.
    """

    __slots__ = (
        "_board",
        "_validator",
        "_side_to_move",
        "phase",
        "status",
        "end_reason",
        "winner",
        "ply_count",
    )

    def __init__(self) -> None:
        self._board = Board.initial()
        self._validator = MoveValidator(self._board)
        self._side_to_move = Color.WHITE
        self.phase = GamePhase.NOT_STARTED
        self.status = GameStatus.IN_PROGRESS
        self.end_reason: GameEndReason | None = None
        self.winner: Color | None = None
        self.ply_count = 0

    # ── Setup ────────────────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Start a game on *board*, or on the standard layout if omitted."""
        self._board = board if board is not None else Board.initial()
        self._validator = MoveValidator(self._board)
        self._side_to_move = Color.WHITE
        self.phase = GamePhase.AWAITING_MOVE
        self.status = GameStatus.IN_PROGRESS
        self.end_reason = None
        self.winner = None
        self.ply_count = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def validator(self) -> MoveValidator:
        return self._validator

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def is_white_turn(self) -> bool:
        return self._side_to_move == Color.WHITE

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def material_score(self) -> int:
        return Rules.material_score(self._board)

    # ── Transitions ──────────────────────────────────────────────────────

    def apply(self, text: str) -> MoveOutcome:
        """Try *text* for the side to move; flip the turn if it was played."""
        outcome = self._validator.try_move(text, self.is_white_turn)
        if outcome.ok:
            self._side_to_move = self._side_to_move.opposite
            self.ply_count += 1
        return outcome

    def refresh_status(self) -> GameStatus:
        """Evaluate check/checkmate/stalemate for the side about to move."""
        self.status = Rules.status(self._board, self._side_to_move)
        if self.status == GameStatus.CHECKMATE:
            self._finish(GameEndReason.CHECKMATE, self._side_to_move.opposite)
        elif self.status == GameStatus.STALEMATE:
            self._finish(GameEndReason.STALEMATE, None)
        return self.status

    def quit(self) -> None:
        self._finish(GameEndReason.QUIT, None)

    def _finish(self, reason: GameEndReason, winner: Color | None) -> None:
        self.phase = GamePhase.GAME_OVER
        self.end_reason = reason
        self.winner = winner
