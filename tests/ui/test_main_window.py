"""Tests for MainWindow game flow."""

from __future__ import annotations

from PyQt6.QtGui import QAction

from chesster.core.enums import Color
from chesster.core.notation import board_from_placement
from chesster.core.types import E2, E4
from chesster.settings import AppSettings
from chesster.ui.main_window import MainWindow

FOOLS_MATE = ("f2 f3", "e7 e5", "g2 g4", "d8 h4")


def _action(window: MainWindow, text: str) -> QAction:
    for action in window.findChildren(QAction):
        if action.text() == text:
            return action
    raise AssertionError(f"No action {text!r}")


class TestMainWindow:
    def test_initial_status(self) -> None:
        window = MainWindow()
        assert window.status_text == "Current turn: White"
        assert window.log_text == ""

    def test_move_logged(self) -> None:
        window = MainWindow()
        assert window.submit_move("e2 e4")
        assert "Move completed: e2 e4" in window.log_text
        assert window.status_text == "Current turn: Black"

    def test_rejection_logged(self) -> None:
        window = MainWindow()
        assert not window.submit_move("e2 e5")
        assert "Invalid move: e2 e5 (Invalid move!)" in window.log_text
        assert window.controller.state.side_to_move == Color.WHITE

    def test_click_to_move(self) -> None:
        window = MainWindow()
        scene = window.board_view.board_scene
        scene.click_square(E2)
        scene.click_square(E4)
        assert window.controller.state.side_to_move == Color.BLACK
        assert "Move completed: e2 e4" in window.log_text

    def test_checkmate_disables_board(self) -> None:
        window = MainWindow()
        for text in FOOLS_MATE:
            window.submit_move(text)
        assert "The White king is in check!" in window.log_text
        assert "Checkmate! Black wins!" in window.log_text
        assert window.status_text == "Checkmate! Black wins!"

        scene = window.board_view.board_scene
        scene.click_square((7, 4))
        assert scene.selected_square is None

    def test_stalemate_status(self) -> None:
        window = MainWindow(board=board_from_placement("8/8/8/8/8/5kq1/8/7K"))
        assert window.status_text == "Stalemate!"
        assert "Stalemate!" in window.log_text


class TestMenu:
    def test_new_game_action_resets(self) -> None:
        window = MainWindow()
        window.submit_move("e2 e4")
        _action(window, "&New Game").trigger()
        assert window.controller.state.side_to_move == Color.WHITE
        assert window.log_text == ""

    def test_challenge_actions(self) -> None:
        window = MainWindow()
        _action(window, "Cornered King").trigger()
        assert len(list(window.controller.board.pieces())) == 4

    def test_start_challenge(self) -> None:
        window = MainWindow()
        window.start_challenge("endgame")
        assert len(list(window.controller.board.pieces())) == 3
        assert window.status_text == "Current turn: White"


def test_settings_applied() -> None:
    window = MainWindow(AppSettings(show_coordinates=False, board_theme="Blue"))
    scene = window.board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)
    assert scene._theme.light_square == scene._theme.blue().light_square
