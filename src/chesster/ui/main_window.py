"""MainWindow — status bar, board and message log around a GameController."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QFont
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from chesster.core.board import Board
from chesster.core.enums import Color
from chesster.core.validator import MoveOutcome
from chesster.game.controller import GameController
from chesster.game.interfaces import GameEndReason
from chesster.game.messages import (
    check_notice,
    describe_rejection,
    describe_status,
    game_over_message,
)
from chesster.game.scenarios import SCENARIOS
from chesster.game.state import GameState
from chesster.settings import AppSettings
from chesster.ui.board_view import BoardView
from chesster.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window for a two-player game on one screen."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        board: Board | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self._controller = GameController()

        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_check.append(self._on_check)
        events.on_game_over.append(self._on_game_over)

        self.setWindowTitle("Chesster")
        self.resize(600, 800)
        self._build_ui()
        self._build_menu()
        self._apply_settings()

        self.new_game(board)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def log_text(self) -> str:
        return self._log.toPlainText()

    # ── Layout ───────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self._status_label = QLabel()
        self._status_label.setFont(QFont("Arial", 16, QFont.Weight.Bold))
        layout.addWidget(self._status_label)

        self._board_view = BoardView(central)
        self._board_view.move_requested.connect(self._on_move_requested)
        layout.addWidget(self._board_view, stretch=1)

        self._log = QPlainTextEdit(central)
        self._log.setReadOnly(True)
        self._log.setMaximumBlockCount(500)
        self._log.setFixedHeight(120)
        layout.addWidget(self._log)

        self.setCentralWidget(central)

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        new_action = QAction("&New Game", self)
        new_action.triggered.connect(lambda: self.new_game(None))
        game_menu.addAction(new_action)

        challenges = game_menu.addMenu("&Challenges")
        if challenges is not None:
            for scenario in SCENARIOS.values():
                action = QAction(scenario.title, self)
                action.setToolTip(scenario.description)
                action.triggered.connect(
                    lambda _checked=False, key=scenario.key: self.start_challenge(key)
                )
                challenges.addAction(action)

        game_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(self._settings.board_theme))
        scene.set_show_coordinates(self._settings.show_coordinates)
        scene.set_show_legal_moves(self._settings.show_legal_moves)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        self._log.clear()
        self._board_view.board_scene.set_interactive(True)
        self._controller.new_game(board)
        self._refresh()

    def start_challenge(self, key: str) -> None:
        _LOGGER.info("Starting challenge %s", key)
        self.new_game(SCENARIOS[key].build_board())

    def submit_move(self, text: str) -> bool:
        """Same path as a click-to-move gesture; used by tests and shortcuts."""
        ok = self._controller.submit_move(text)
        self._refresh()
        return ok

    def _on_move_requested(self, text: str) -> None:
        self.submit_move(text)

    def _refresh(self) -> None:
        state: GameState = self._controller.state
        self._board_view.show_state(state)
        self._status_label.setText(describe_status(state.status, state.side_to_move))

    def log_message(self, text: str) -> None:
        self._log.appendPlainText(text)

    # ── Controller events ────────────────────────────────────────────────

    def _on_move(self, text: str, outcome: MoveOutcome, state: GameState) -> None:
        self.log_message(f"Move completed: {text}")

    def _on_rejected(self, text: str, outcome: MoveOutcome) -> None:
        reason = describe_rejection(outcome.rejection)
        self.log_message(f"Invalid move: {text} ({reason})")

    def _on_check(self, color: Color) -> None:
        self.log_message(check_notice(color))

    def _on_game_over(self, reason: GameEndReason, winner: Color | None) -> None:
        self.log_message(game_over_message(reason, winner))
        self._board_view.board_scene.set_interactive(False)
