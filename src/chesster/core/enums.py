"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: White moves up the grid, Black down."""
        return -1 if self is Color.WHITE else 1

    @classmethod
    def for_turn(cls, is_white_turn: bool) -> Color:
        return cls.WHITE if is_white_turn else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """Situation of the side about to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class MoveRejection(IntEnum):
    """Why a move request was refused, in the order the checks run."""

    MALFORMED = 1
    NO_PIECE = 2
    WRONG_TURN = 3
    ILLEGAL_MOVEMENT = 4
    SELF_CHECK = 5
    BOARD_REFUSED = 6
