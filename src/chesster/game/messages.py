"""Player-facing text shared by the console and Qt front ends."""

from __future__ import annotations

from chesster.core.enums import Color, GameStatus, MoveRejection
from chesster.game.interfaces import GameEndReason

REJECTION_MESSAGES: dict[MoveRejection, str] = {
    MoveRejection.MALFORMED: 'Invalid input format. Please use notation like "e2 e4".',
    MoveRejection.NO_PIECE: "No piece found at the selected position.",
    MoveRejection.WRONG_TURN: "It's the other player's turn.",
    MoveRejection.ILLEGAL_MOVEMENT: "Invalid move!",
    MoveRejection.SELF_CHECK: "Illegal move: this would put your king in check.",
    MoveRejection.BOARD_REFUSED: "Invalid move!",
}


def side_name(color: Color) -> str:
    return str(color).capitalize()


def describe_rejection(rejection: MoveRejection | None) -> str:
    if rejection is None:
        return "Invalid move!"
    return REJECTION_MESSAGES[rejection]


def check_notice(color: Color) -> str:
    """Announcement that *color*'s king is in check."""
    return f"The {side_name(color)} king is in check!"


def game_over_message(reason: GameEndReason, winner: Color | None) -> str:
    if reason == GameEndReason.CHECKMATE and winner is not None:
        return f"Checkmate! {side_name(winner)} wins!"
    if reason == GameEndReason.STALEMATE:
        return "Stalemate!"
    return "Game ended."


def describe_status(status: GameStatus, side: Color) -> str:
    """One-line summary of *side*'s situation for status bars."""
    if status == GameStatus.CHECKMATE:
        return f"Checkmate! {side_name(side.opposite)} wins!"
    if status == GameStatus.STALEMATE:
        return "Stalemate!"
    if status == GameStatus.CHECK:
        return f"Current turn: {side_name(side)} (in check)"
    return f"Current turn: {side_name(side)}"
