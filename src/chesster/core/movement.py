"""Per-kind movement rules.

Each rule is a pure predicate over ``(piece, board, destination)``: it reads
occupancy through the :class:`BoardView` protocol and never mutates anything.
King safety is not considered here; that is the validator's job.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Protocol

from chesster.core.enums import Color, PieceType
from chesster.core.piece import Piece
from chesster.core.types import ALL_SQUARES, Square, is_valid_square

# Starting row of each colour's pawns, indexed by Color.
_PAWN_START_ROWS: tuple[int, int] = (6, 1)


class BoardView(Protocol):
    """Read-only occupancy queries the movement rules depend on."""

    def piece_at(self, sq: Square) -> Piece | None: ...

    def is_occupied(self, sq: Square) -> bool: ...

    def is_opponent(self, sq: Square, color: Color) -> bool: ...

    def has_obstacle(self, start: Square, end: Square) -> bool: ...


def _deltas(piece: Piece, dest: Square) -> tuple[int, int]:
    return dest[0] - piece.square[0], dest[1] - piece.square[1]


def _can_land(piece: Piece, board: BoardView, dest: Square) -> bool:
    """Destination is empty or holds an enemy piece."""
    return not board.is_occupied(dest) or board.is_opponent(dest, piece.color)


# -- Geometry ---------------------------------------------------------------


def _is_diagonal(d_row: int, d_col: int) -> bool:
    return d_row != 0 and abs(d_row) == abs(d_col)


def _is_straight(d_row: int, d_col: int) -> bool:
    return (d_row == 0) != (d_col == 0)


# -- Rules ------------------------------------------------------------------


def _pawn_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    d_row, d_col = _deltas(piece, dest)
    forward = piece.color.forward

    if d_row == forward and d_col == 0:
        return not board.is_occupied(dest)

    if d_row == 2 * forward and d_col == 0:
        if piece.square[0] != _PAWN_START_ROWS[piece.color]:
            return False
        between = (piece.square[0] + forward, piece.square[1])
        return not board.is_occupied(dest) and not board.is_occupied(between)

    if d_row == forward and abs(d_col) == 1:
        return board.is_opponent(dest, piece.color)

    return False


def _knight_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    d_row, d_col = _deltas(piece, dest)
    if sorted((abs(d_row), abs(d_col))) != [1, 2]:
        return False
    return _can_land(piece, board, dest)


def _bishop_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    if not _is_diagonal(*_deltas(piece, dest)):
        return False
    return not board.has_obstacle(piece.square, dest) and _can_land(piece, board, dest)


def _rook_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    if not _is_straight(*_deltas(piece, dest)):
        return False
    return not board.has_obstacle(piece.square, dest) and _can_land(piece, board, dest)


def _queen_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    d_row, d_col = _deltas(piece, dest)
    if not (_is_diagonal(d_row, d_col) or _is_straight(d_row, d_col)):
        return False
    return not board.has_obstacle(piece.square, dest) and _can_land(piece, board, dest)


def _king_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    d_row, d_col = _deltas(piece, dest)
    if (d_row, d_col) == (0, 0) or abs(d_row) > 1 or abs(d_col) > 1:
        return False
    return _can_land(piece, board, dest)


MovementRule = Callable[[Piece, BoardView, Square], bool]

MOVEMENT_RULES: dict[PieceType, MovementRule] = {
    PieceType.PAWN: _pawn_movement,
    PieceType.KNIGHT: _knight_movement,
    PieceType.BISHOP: _bishop_movement,
    PieceType.ROOK: _rook_movement,
    PieceType.QUEEN: _queen_movement,
    PieceType.KING: _king_movement,
}


def valid_movement(piece: Piece, board: BoardView, dest: Square) -> bool:
    """Whether *piece* may move to *dest* under its own movement rule."""
    if not is_valid_square(dest):
        return False
    return MOVEMENT_RULES[piece.piece_type](piece, board, dest)


def candidate_destinations(piece: Piece, board: BoardView) -> Iterator[Square]:
    """Every square *piece* could reach by its movement rule alone."""
    for sq in ALL_SQUARES:
        if valid_movement(piece, board, sq):
            yield sq
