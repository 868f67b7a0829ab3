"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesster.core import Board, MoveValidator, Rules, Color

    board = Board.initial()
    validator = MoveValidator(board)
    validator.process_move("e2 e4", is_white_turn=True)
    Rules.status(board, Color.BLACK)
"""

from chesster.core.board import Board
from chesster.core.enums import Color, GameStatus, MoveRejection, PieceType
from chesster.core.movement import candidate_destinations, valid_movement
from chesster.core.notation import (
    EMPTY_PLACEMENT,
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    format_move,
    normalize_move_text,
    parse_move,
)
from chesster.core.piece import PIECE_VALUES, Piece
from chesster.core.rules import Rules
from chesster.core.types import (
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)
from chesster.core.validator import MoveOutcome, MoveValidator

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveRejection",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveOutcome",
    "MoveValidator",
    "PIECE_VALUES",
    "Piece",
    "Rules",
    "candidate_destinations",
    "valid_movement",
    # Notation
    "EMPTY_PLACEMENT",
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "format_move",
    "normalize_move_text",
    "parse_move",
]
