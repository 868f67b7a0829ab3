"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chesster.core.enums import Color, PieceType
from chesster.core.movement import valid_movement
from chesster.core.piece import Piece
from chesster.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    FILES,
    Square,
    is_valid_square,
)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# (square, color, piece_type, id(piece)) for every occupied cell.
Snapshot = tuple[tuple[Square, Color, PieceType, int], ...]


def _step(delta: int) -> int:
    return (delta > 0) - (delta < 0)


class Board:
    """Mutable 8x8 grid holding at most one piece per cell.

    Every mutation keeps ``piece.square`` equal to the cell that holds it.
    The board does not require kings or a standard piece count, so scenario
    layouts may place any combination of pieces.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        """Occupant of *sq*, or ``None`` when empty or off the board."""
        if not is_valid_square(sq):
            return None
        return self._grid[sq[0]][sq[1]]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        """Unconditionally place *piece* on *sq* (``None`` clears the cell)."""
        if not is_valid_square(sq):
            raise ValueError(f"Square off the board: {sq!r}")
        self._grid[sq[0]][sq[1]] = piece
        if piece is not None:
            piece.square = sq

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.set_piece(sq, piece)

    def is_occupied(self, sq: Square) -> bool:
        return self.piece_at(sq) is not None

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    def is_opponent(self, sq: Square, color: Color) -> bool:
        """True iff *sq* holds a piece whose colour differs from *color*."""
        piece = self.piece_at(sq)
        return piece is not None and piece.color != color

    # -- Path scanning ------------------------------------------------------

    def has_obstacle(self, start: Square, end: Square) -> bool:
        """Whether any square strictly between *start* and *end* is occupied.

        Walks the unit direction from *start* towards *end*; only meaningful
        for straight or diagonal pairs.
        """
        row_step = _step(end[0] - start[0])
        col_step = _step(end[1] - start[1])
        row, col = start[0] + row_step, start[1] + col_step
        while (row, col) != end:
            if not is_valid_square((row, col)):
                return False
            if self._grid[row][col] is not None:
                return True
            row += row_step
            col += col_step
        return False

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[Piece]:
        """Occupants in row-major order, optionally filtered by *color*."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq[0]][sq[1]]
            if piece is not None and (color is None or piece.color == color):
                yield piece

    def king_squares(self, color: Color) -> list[Square]:
        """Squares holding *color*'s king(s); empty when there is none."""
        return [
            p.square for p in self.pieces(color) if p.piece_type == PieceType.KING
        ]

    def snapshot(self) -> Snapshot:
        """Hashable picture of every occupant, including piece identity."""
        return tuple((p.square, p.color, p.piece_type, id(p)) for p in self.pieces())

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, start: Square, end: Square) -> bool:
        """Relocate the piece on *start* to *end* if its movement rule allows.

        Captures whatever enemy piece stands on *end*. King safety is not
        checked here.
        """
        piece = self.piece_at(start)
        if piece is None or not valid_movement(piece, self, end):
            return False
        if self.is_occupied(end) and not self.is_opponent(end, piece.color):
            return False

        self._grid[start[0]][start[1]] = None
        self._grid[end[0]][end[1]] = piece
        piece.square = end
        return True

    def copy(self) -> Board:
        b = Board()
        for piece in self.pieces():
            b.set_piece(piece.square, Piece(piece.color, piece.piece_type))
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b.set_piece((0, col), Piece(Color.BLACK, pt))
            b.set_piece((1, col), Piece(Color.BLACK, PieceType.PAWN))
            b.set_piece((6, col), Piece(Color.WHITE, PieceType.PAWN))
            b.set_piece((7, col), Piece(Color.WHITE, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)
