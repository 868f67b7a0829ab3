"""Tests for MoveValidator: check detection, escape search, move processing."""

from collections.abc import Callable

import pytest

from chesster.core.board import Board
from chesster.core.enums import Color, MoveRejection, PieceType
from chesster.core.notation import board_from_placement
from chesster.core.piece import Piece
from chesster.core.types import (
    A1, A8, B1, B8, C2, C3, C4, D2, D4, D5, E1, E2, E4, E5, E8, H1, H5, H8,
    Square,
)
from chesster.core.validator import MoveValidator

Place = Callable[[Square, Color, PieceType], Piece]

FOOLS_MATE = ("f2 f3", "e7 e5", "g2 g4", "d8 h4")


def _play(validator: MoveValidator, moves: tuple[str, ...]) -> None:
    white = True
    for text in moves:
        assert validator.process_move(text, white), text
        white = not white


class TestIsKingInCheck:
    def test_starting_position(self) -> None:
        validator = MoveValidator(Board.initial())
        assert not validator.is_king_in_check(Color.WHITE)
        assert not validator.is_king_in_check(Color.BLACK)

    def test_no_king_is_never_in_check(self, board: Board, place: Place) -> None:
        place(E8, Color.BLACK, PieceType.ROOK)
        assert not MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_empty_board(self, board: Board) -> None:
        assert not MoveValidator(board).is_king_in_check(Color.BLACK)

    def test_rook_on_open_file(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(E8, Color.BLACK, PieceType.ROOK)
        assert MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_blocked_rook(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(E8, Color.BLACK, PieceType.ROOK)
        place(E4, Color.BLACK, PieceType.PAWN)
        assert not MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_knight_checks_over_pieces(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(D2, Color.WHITE, PieceType.PAWN)
        place(E2, Color.WHITE, PieceType.PAWN)
        place(C2, Color.BLACK, PieceType.KNIGHT)
        assert MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_pawn_checks_diagonally_only(self, board: Board, place: Place) -> None:
        place(E4, Color.WHITE, PieceType.KING)
        pawn = place(E5, Color.BLACK, PieceType.PAWN)
        validator = MoveValidator(board)
        assert not validator.is_king_in_check(Color.WHITE)
        board.set_piece(E5, None)
        board.set_piece(D5, pawn)
        assert validator.is_king_in_check(Color.WHITE)

    def test_own_pieces_do_not_check(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(E8, Color.WHITE, PieceType.ROOK)
        assert not MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_two_kings_tolerated(self, board: Board, place: Place) -> None:
        place(A1, Color.WHITE, PieceType.KING)
        place(H1, Color.WHITE, PieceType.KING)
        place(H8, Color.BLACK, PieceType.ROOK)
        validator = MoveValidator(board)
        # Within one row the king nearest file a (a1) is examined.
        assert not validator.is_king_in_check(Color.WHITE)
        assert validator.can_escape_check(Color.WHITE)

    def test_king_on_later_row_is_examined(self, board: Board, place: Place) -> None:
        place(A8, Color.WHITE, PieceType.KING)
        place(A1, Color.WHITE, PieceType.KING)
        place(H1, Color.BLACK, PieceType.ROOK)
        assert MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_king_on_earlier_row_is_ignored(self, board: Board, place: Place) -> None:
        place(A8, Color.WHITE, PieceType.KING)
        place(A1, Color.WHITE, PieceType.KING)
        place(H8, Color.BLACK, PieceType.ROOK)
        assert not MoveValidator(board).is_king_in_check(Color.WHITE)


class TestMoveLeavesKingInCheck:
    def _pinned(self, board: Board, place: Place) -> Piece:
        place(E1, Color.WHITE, PieceType.KING)
        place(E8, Color.BLACK, PieceType.ROOK)
        return place(E2, Color.WHITE, PieceType.ROOK)

    def test_pinned_piece_leaving_the_line(self, board: Board, place: Place) -> None:
        rook = self._pinned(board, place)
        assert MoveValidator(board).move_leaves_king_in_check(rook, D2)

    def test_pinned_piece_along_the_line(self, board: Board, place: Place) -> None:
        rook = self._pinned(board, place)
        assert not MoveValidator(board).move_leaves_king_in_check(rook, E5)

    @pytest.mark.parametrize("dest", [D2, E5, E8])
    def test_board_restored(self, board: Board, place: Place, dest: Square) -> None:
        rook = self._pinned(board, place)
        captured = board[E8]
        before = board.snapshot()
        MoveValidator(board).move_leaves_king_in_check(rook, dest)
        assert board.snapshot() == before
        assert rook.square == E2
        assert board[E8] is captured
        assert captured is not None and captured.square == E8

    def test_capturing_the_attacker(self, board: Board, place: Place) -> None:
        rook = self._pinned(board, place)
        assert not MoveValidator(board).move_leaves_king_in_check(rook, E8)


class TestCanEscapeCheck:
    def test_back_rank_mate(self, board: Board, place: Place) -> None:
        place(A1, Color.WHITE, PieceType.KING)
        place(A8, Color.BLACK, PieceType.ROOK)
        place(B8, Color.BLACK, PieceType.ROOK)
        validator = MoveValidator(board)
        assert validator.is_king_in_check(Color.WHITE)
        assert not validator.can_escape_check(Color.WHITE)

    def test_interposition_escapes(self, board: Board, place: Place) -> None:
        place(A1, Color.WHITE, PieceType.KING)
        place(A8, Color.BLACK, PieceType.ROOK)
        place(B8, Color.BLACK, PieceType.ROOK)
        place(H5, Color.WHITE, PieceType.ROOK)
        validator = MoveValidator(board)
        assert validator.is_king_in_check(Color.WHITE)
        assert validator.can_escape_check(Color.WHITE)

    def test_search_leaves_board_untouched(self, board: Board, place: Place) -> None:
        place(A1, Color.WHITE, PieceType.KING)
        place(A8, Color.BLACK, PieceType.ROOK)
        place(B8, Color.BLACK, PieceType.ROOK)
        place(H5, Color.WHITE, PieceType.ROOK)
        before = board.snapshot()
        MoveValidator(board).can_escape_check(Color.WHITE)
        assert board.snapshot() == before

    def test_queen_and_rooks_around_cornered_king(
        self, board: Board, place: Place
    ) -> None:
        place(A1, Color.WHITE, PieceType.KING)
        place(C4, Color.BLACK, PieceType.QUEEN)
        place(C2, Color.BLACK, PieceType.ROOK)
        place(C3, Color.BLACK, PieceType.ROOK)
        validator = MoveValidator(board)
        # Nothing lines up with a1 and b1 is unattacked.
        assert not validator.is_king_in_check(Color.WHITE)
        assert validator.can_escape_check(Color.WHITE)
        assert validator.legal_destinations(A1) == [B1]

    def test_free_queen_has_moves(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(E8, Color.BLACK, PieceType.KING)
        place(D5, Color.WHITE, PieceType.QUEEN)
        assert MoveValidator(board).can_escape_check(Color.WHITE)

    def test_no_legal_move_without_check_is_stalemate(self) -> None:
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        validator = MoveValidator(board)
        assert not validator.is_king_in_check(Color.BLACK)
        assert not validator.can_escape_check(Color.BLACK)

    def test_fools_mate(self) -> None:
        validator = MoveValidator(Board.initial())
        _play(validator, FOOLS_MATE)
        assert validator.is_king_in_check(Color.WHITE)
        assert not validator.can_escape_check(Color.WHITE)


class TestProcessMove:
    def test_opening_pawn_push(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        assert MoveValidator(board).process_move("e2 e4", True)
        assert board[E4] is pawn
        assert board[E2] is None

    def test_three_square_pawn_push_rejected(self) -> None:
        board = Board.initial()
        before = board.snapshot()
        outcome = MoveValidator(board).try_move("e2 e5", True)
        assert not outcome.ok
        assert outcome.rejection == MoveRejection.ILLEGAL_MOVEMENT
        assert board.snapshot() == before

    def test_wrong_turn(self) -> None:
        board = Board.initial()
        before = board.snapshot()
        outcome = MoveValidator(board).try_move("e2 e4", False)
        assert outcome.rejection == MoveRejection.WRONG_TURN
        assert board.snapshot() == before

    def test_no_piece(self) -> None:
        outcome = MoveValidator(Board.initial()).try_move("e4 e5", True)
        assert outcome.rejection == MoveRejection.NO_PIECE

    @pytest.mark.parametrize(
        "text",
        ["", "e2e4", "e2  e4", "e2-e4", "E2 E4", "i2 e4", "e9 e4", "e2 e4 ", " e2 e4"],
    )
    def test_malformed_text(self, text: str) -> None:
        board = Board.initial()
        before = board.snapshot()
        outcome = MoveValidator(board).try_move(text, True)
        assert outcome.rejection == MoveRejection.MALFORMED
        assert board.snapshot() == before

    def test_self_check_rejected(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(E2, Color.WHITE, PieceType.ROOK)
        place(E8, Color.BLACK, PieceType.ROOK)
        before = board.snapshot()
        outcome = MoveValidator(board).try_move("e2 d2", True)
        assert outcome.rejection == MoveRejection.SELF_CHECK
        assert board.snapshot() == before

    def test_capture_and_check_reported(self, board: Board, place: Place) -> None:
        place(E1, Color.WHITE, PieceType.KING)
        place(A1, Color.WHITE, PieceType.ROOK)
        victim = place(A8, Color.BLACK, PieceType.KNIGHT)
        place((0, 4), Color.BLACK, PieceType.KING)
        outcome = MoveValidator(board).try_move("a1 a8", True)
        assert outcome.ok
        assert outcome.captured is victim
        assert outcome.gives_check
        assert outcome.start == A1 and outcome.end == A8

    def test_knight_leaves_a_crowded_square(self) -> None:
        board = Board.initial()
        knight = board[(7, 6)]
        assert MoveValidator(board).process_move("g1 f3", True)
        assert knight is not None and knight.square == (5, 5)

    def test_alternating_game(self) -> None:
        validator = MoveValidator(Board.initial())
        _play(validator, ("e2 e4", "e7 e5", "g1 f3", "b8 c6", "f1 c4"))
        assert validator.board[(4, 2)] is not None

    def test_black_cannot_move_white_piece_after_white_moved(self) -> None:
        validator = MoveValidator(Board.initial())
        assert validator.process_move("d2 d4", True)
        assert not validator.process_move("d4 d5", False)
        assert validator.board[D4] is not None
