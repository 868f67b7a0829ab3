"""Move legality: check detection, escape search, and move processing.

The validator owns no state besides the board it checks against. Trial
moves are played on that board and always reverted before returning, so
the board must not be shared with another thread while a query runs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from chesster.core.board import Board
from chesster.core.enums import Color, MoveRejection, PieceType
from chesster.core.movement import candidate_destinations, valid_movement
from chesster.core.notation import parse_move
from chesster.core.piece import Piece
from chesster.core.types import BOARD_SIZE, Square, make_square, square_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move attempt.

    ``ok`` is the only field the rules depend on; the rest lets front ends
    explain what happened.
    """

    ok: bool
    rejection: MoveRejection | None = None
    start: Square | None = None
    end: Square | None = None
    captured: Piece | None = None
    gives_check: bool = False

    @classmethod
    def rejected(
        cls,
        reason: MoveRejection,
        start: Square | None = None,
        end: Square | None = None,
    ) -> MoveOutcome:
        return cls(False, reason, start, end)


class MoveValidator:
    """Answers legality questions about a single :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # ── Check detection ──────────────────────────────────────────────────

    def attacks(self, attacker: Piece, target: Square) -> bool:
        """Whether *attacker* could capture on *target* by its own rule."""
        if not valid_movement(attacker, self._board, target):
            return False
        if attacker.piece_type == PieceType.KNIGHT:
            return True
        return not self._board.has_obstacle(attacker.square, target)

    def is_king_in_check(self, color: Color) -> bool:
        """Whether *color*'s king is attacked. No king means no check."""
        king_sq = self._find_king(color)
        if king_sq is None:
            return False
        return any(
            self.attacks(piece, king_sq) for piece in self._board.pieces(color.opposite)
        )

    def _find_king(self, color: Color) -> Square | None:
        """Leftmost king of *color* on the last row (scanning a8 to h1) holding one."""
        for row in reversed(range(BOARD_SIZE)):
            for col in range(BOARD_SIZE):
                sq = make_square(row, col)
                piece = self._board.piece_at(sq)
                if piece is not None and piece.is_kind(color, PieceType.KING):
                    return sq
        return None

    # ── Trial moves ──────────────────────────────────────────────────────

    @contextmanager
    def _trial_move(self, piece: Piece, dest: Square) -> Iterator[None]:
        """Play *piece* to *dest* for the duration of the block, then undo."""
        origin = piece.square
        captured = self._board.piece_at(dest)

        self._board.set_piece(origin, None)
        self._board.set_piece(dest, piece)
        try:
            yield
        finally:
            self._board.set_piece(dest, captured)
            self._board.set_piece(origin, piece)

    def move_leaves_king_in_check(self, piece: Piece, dest: Square) -> bool:
        """Whether moving *piece* to *dest* would leave its own king attacked.

        The board is restored exactly before returning.
        """
        with self._trial_move(piece, dest):
            return self.is_king_in_check(piece.color)

    def can_escape_check(self, color: Color) -> bool:
        """Whether *color* has any move that leaves its king unattacked.

        When *color* is not in check this is the same as "has any legal
        move", which is how stalemate is detected.
        """
        for piece in list(self._board.pieces(color)):
            for dest in list(candidate_destinations(piece, self._board)):
                if not self.move_leaves_king_in_check(piece, dest):
                    return True
        return False

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations from *sq* that obey the movement rule and keep the king safe."""
        piece = self._board.piece_at(sq)
        if piece is None:
            return []
        return [
            dest
            for dest in list(candidate_destinations(piece, self._board))
            if not self.move_leaves_king_in_check(piece, dest)
        ]

    # ── Move processing ──────────────────────────────────────────────────

    def try_move(self, text: str, is_white_turn: bool) -> MoveOutcome:
        """Validate and, if legal, execute the move described by *text*.

        Checks run in order and stop at the first failure; the board is only
        modified when every check passes.
        """
        squares = parse_move(text)
        if squares is None:
            _LOGGER.debug("Malformed move text: %r", text)
            return MoveOutcome.rejected(MoveRejection.MALFORMED)
        start, end = squares

        piece = self._board.piece_at(start)
        if piece is None:
            _LOGGER.debug("No piece on %s", square_name(start))
            return MoveOutcome.rejected(MoveRejection.NO_PIECE, start, end)

        mover = Color.for_turn(is_white_turn)
        if piece.color != mover:
            _LOGGER.debug(
                "%s to move, %s piece on %s", mover, piece.color, square_name(start)
            )
            return MoveOutcome.rejected(MoveRejection.WRONG_TURN, start, end)

        if not valid_movement(piece, self._board, end):
            _LOGGER.debug("Movement rule rejects %s", text)
            return MoveOutcome.rejected(MoveRejection.ILLEGAL_MOVEMENT, start, end)

        if self.move_leaves_king_in_check(piece, end):
            _LOGGER.debug("Move %s would leave the %s king in check", text, mover)
            return MoveOutcome.rejected(MoveRejection.SELF_CHECK, start, end)

        captured = self._board.piece_at(end)
        if not self._board.move_piece(start, end):
            _LOGGER.warning("Board refused validated move %s", text)
            return MoveOutcome.rejected(MoveRejection.BOARD_REFUSED, start, end)

        gives_check = self.is_king_in_check(mover.opposite)
        if gives_check:
            _LOGGER.info("The %s king is in check", mover.opposite)
        return MoveOutcome(True, None, start, end, captured, gives_check)

    def process_move(self, text: str, is_white_turn: bool) -> bool:
        """Attempt the move in *text* for the side to move; ``True`` if played."""
        return self.try_move(text, is_white_turn).ok
