"""Move-text grammar and piece-placement strings.

Move text is two squares separated by a single space, e.g. ``"e2 e4"``.
Placement strings follow the board field of FEN: ranks 8 → 1 separated by
``/``, digits for runs of empty squares, uppercase letters for White.
"""

from __future__ import annotations

import re

from chesster.core.board import Board
from chesster.core.piece import Piece
from chesster.core.types import BOARD_SIZE, Square, parse_square, square_name

_MOVE_RE = re.compile(r"[a-h][1-8] [a-h][1-8]")

EMPTY_PLACEMENT = "8/8/8/8/8/8/8/8"
STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def normalize_move_text(text: str) -> str:
    """Trim and lowercase raw user input before validation."""
    return text.strip().lower()


def parse_move(text: str) -> tuple[Square, Square] | None:
    """Decode ``"e2 e4"`` into ``((6, 4), (4, 4))``; ``None`` if malformed."""
    if _MOVE_RE.fullmatch(text) is None:
        return None
    start, end = text.split(" ")
    return parse_square(start), parse_square(end)


def format_move(start: Square, end: Square) -> str:
    return f"{square_name(start)} {square_name(end)}"


# ═══════════════════════════════════════════════════════════════════════════
#  Placement strings
# ═══════════════════════════════════════════════════════════════════════════


def board_from_placement(placement: str) -> Board:
    """Build a board from a FEN-style placement string."""
    ranks = placement.strip().split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for row, rank_str in enumerate(ranks):
        col = 0
        for ch in rank_str:
            if ch.isdigit():
                skip = int(ch)
                if skip < 1 or skip > 8:
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += skip
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board.set_piece((row, col), Piece.from_char(ch))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* into a FEN-style placement string."""
    ranks: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        rank_str = ""
        for col in range(BOARD_SIZE):
            piece = board.piece_at((row, col))
            if piece is None:
                empty += 1
            else:
                if empty:
                    rank_str += str(empty)
                    empty = 0
                rank_str += str(piece)
        if empty:
            rank_str += str(empty)
        ranks.append(rank_str)
    return "/".join(ranks)
