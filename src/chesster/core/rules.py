"""Game-level rule predicates built on :class:`MoveValidator`."""

from __future__ import annotations

from chesster.core.board import Board
from chesster.core.enums import Color, GameStatus
from chesster.core.validator import MoveValidator


class Rules:
    """Stateless helpers answering game-termination questions for a side."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveValidator(board).is_king_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        validator = MoveValidator(board)
        return validator.is_king_in_check(color) and not validator.can_escape_check(
            color
        )

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        validator = MoveValidator(board)
        return not validator.is_king_in_check(
            color
        ) and not validator.can_escape_check(color)

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Situation of *color*, who is about to move."""
        validator = MoveValidator(board)
        in_check = validator.is_king_in_check(color)
        if validator.can_escape_check(color):
            return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def material_score(board: Board) -> int:
        """White material minus Black material. For display only."""
        score = 0
        for piece in board.pieces():
            score += piece.value if piece.color == Color.WHITE else -piece.value
        return score
