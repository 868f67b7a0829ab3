"""Challenge presets: hand-placed positions played from White's move.

Scenario boards are built with direct placement, so they need not contain a
standard piece set or even both kings.
"""

from __future__ import annotations

from dataclasses import dataclass

from chesster.core.board import Board
from chesster.core.enums import Color, PieceType
from chesster.core.piece import Piece
from chesster.core.types import A1, C2, C3, C4, D5, D7, E1, E8, F3, Square

Placement = tuple[tuple[Square, Color, PieceType], ...]


@dataclass(frozen=True)
class Scenario:
    """A named starting position."""

    key: str
    title: str
    description: str
    placement: Placement

    def place(self, board: Board) -> None:
        """Put this scenario's pieces on *board* (other squares untouched)."""
        for sq, color, piece_type in self.placement:
            board.set_piece(sq, Piece(color, piece_type))

    def build_board(self) -> Board:
        board = Board()
        self.place(board)
        return board


SCENARIOS: dict[str, Scenario] = {
    s.key: s
    for s in (
        Scenario(
            key="cornered",
            title="Cornered King",
            description="A lone white king in the corner against queen and rooks.",
            placement=(
                (A1, Color.WHITE, PieceType.KING),
                (C4, Color.BLACK, PieceType.QUEEN),
                (C2, Color.BLACK, PieceType.ROOK),
                (C3, Color.BLACK, PieceType.ROOK),
            ),
        ),
        Scenario(
            key="endgame",
            title="Queen Endgame",
            description="King and queen against a bare king.",
            placement=(
                (E1, Color.WHITE, PieceType.KING),
                (E8, Color.BLACK, PieceType.KING),
                (D5, Color.WHITE, PieceType.QUEEN),
            ),
        ),
        Scenario(
            key="puzzle",
            title="Rook vs Pawn",
            description="Stop the black pawn with king and rook.",
            placement=(
                (E1, Color.WHITE, PieceType.KING),
                (E8, Color.BLACK, PieceType.KING),
                (F3, Color.WHITE, PieceType.ROOK),
                (D7, Color.BLACK, PieceType.PAWN),
            ),
        ),
    )
}


def build_board(key: str) -> Board:
    """Fresh board for the scenario registered under *key*."""
    try:
        scenario = SCENARIOS[key]
    except KeyError:
        raise KeyError(f"Unknown scenario: {key!r}") from None
    return scenario.build_board()
