"""Tests for BoardScene helpers and click-to-move."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from chesster.core.notation import board_from_placement
from chesster.core.types import A8, E2, E4, E7, H1
from chesster.game.state import GameState
from chesster.ui.board_scene import BoardScene
from chesster.ui.theme import BoardTheme


def _scene_with_game(placement: str | None = None) -> tuple[BoardScene, list[str]]:
    state = GameState()
    state.setup(board_from_placement(placement) if placement else None)
    scene = BoardScene()
    scene.set_state(state)
    requested: list[str] = []
    scene.move_requested.connect(requested.append)
    return scene, requested


def test_pos_to_square() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == A8
    last = BoardScene.TILE * 8 - 1
    assert scene._pos_to_square(QPointF(last, last)) == H1
    assert scene._pos_to_square(QPointF(-1, 0)) is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_show_legal_moves_false_clears_existing_dots() -> None:
    scene = BoardScene()
    dot = scene._make_highlight(E4, scene._theme.highlight_to)
    scene._legal_dot_items.append(dot)

    scene.set_show_legal_moves(False)

    assert scene._legal_dot_items == []


def test_pieces_drawn_for_state() -> None:
    scene, _ = _scene_with_game()
    assert len(scene._piece_items) == 32


def test_set_theme_keeps_pieces() -> None:
    scene, _ = _scene_with_game()
    scene.set_theme(BoardTheme.named("Green"))
    assert len(scene._piece_items) == 32
    assert len(scene._square_items) == 64


class TestClickToMove:
    def test_select_shows_legal_dots(self) -> None:
        scene, requested = _scene_with_game()
        scene.click_square(E2)
        assert scene.selected_square == E2
        assert len(scene._legal_dot_items) == 2
        assert requested == []

    def test_second_click_requests_move(self) -> None:
        scene, requested = _scene_with_game()
        scene.click_square(E2)
        scene.click_square(E4)
        assert requested == ["e2 e4"]
        assert scene.selected_square is None

    def test_any_target_is_requested(self) -> None:
        scene, requested = _scene_with_game()
        scene.click_square(E2)
        scene.click_square((2, 4))
        assert requested == ["e2 e6"]

    def test_clicking_selected_piece_deselects(self) -> None:
        scene, requested = _scene_with_game()
        scene.click_square(E2)
        scene.click_square(E2)
        assert scene.selected_square is None
        assert requested == []

    def test_opponent_piece_not_selectable(self) -> None:
        scene, requested = _scene_with_game()
        scene.click_square(E7)
        assert scene.selected_square is None
        assert requested == []

    def test_legal_dots_hidden_when_disabled(self) -> None:
        scene, _ = _scene_with_game()
        scene.set_show_legal_moves(False)
        scene.click_square(E2)
        assert scene.selected_square == E2
        assert scene._legal_dot_items == []

    def test_non_interactive_ignores_clicks(self) -> None:
        scene, requested = _scene_with_game()
        scene.set_interactive(False)
        scene.click_square(E2)
        scene.click_square(E4)
        assert scene.selected_square is None
        assert requested == []


def test_check_highlight() -> None:
    scene, _ = _scene_with_game("4k3/8/8/8/8/8/8/r3K3")
    assert len(scene._check_items) == 1


def test_no_check_highlight_in_quiet_position() -> None:
    scene, _ = _scene_with_game()
    assert scene._check_items == []
