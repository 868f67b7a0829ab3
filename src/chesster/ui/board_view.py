"""BoardView — QGraphicsView that keeps the whole board in sight."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chesster.game.state import GameState
from chesster.ui.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Scales the board scene to the widget and relays move requests.

    Signals:
        move_requested(str): Move text from a click pair on the scene.
    """

    move_requested = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        # Piece glyphs are text items; smooth them when scaled down.
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing
        )
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(BoardScene.TILE * 4, BoardScene.TILE * 4)

        self._scene.move_requested.connect(self.move_requested)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def show_state(self, state: GameState) -> None:
        """Redraw the pieces for *state*."""
        self._scene.set_state(state)

    # ── Scaling ──────────────────────────────────────────────────────────

    def _fit_board(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit_board()

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit_board()
