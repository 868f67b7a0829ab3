"""Rich renderables for the console board."""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from chesster.core.board import Board
from chesster.core.enums import Color
from chesster.core.types import BOARD_SIZE, FILES

PIECE_STYLES: dict[Color, str] = {
    Color.WHITE: "bold blue",
    Color.BLACK: "bold red",
}


def board_table(board: Board, *, show_coordinates: bool = True) -> Table:
    """Grid of the board with rank 8 on top, as White sees it."""
    table = Table(
        box=box.SQUARE,
        show_lines=True,
        show_header=show_coordinates,
        padding=(0, 1),
    )
    if show_coordinates:
        table.add_column("", justify="right", style="dim")
    for file in FILES:
        table.add_column(file, justify="center", width=3)
    if show_coordinates:
        table.add_column("", style="dim")

    for row in range(BOARD_SIZE):
        cells: list[Text] = []
        for col in range(BOARD_SIZE):
            piece = board.piece_at((row, col))
            if piece is None:
                cells.append(Text(" "))
            else:
                cells.append(Text(piece.symbol, style=PIECE_STYLES[piece.color]))
        if show_coordinates:
            rank = Text(str(BOARD_SIZE - row))
            table.add_row(rank, *cells, rank)
        else:
            table.add_row(*cells)
    return table


def material_text(score: int) -> Text:
    """``Material advantage: <score>`` coloured by the side ahead."""
    style = "blue" if score > 0 else "red" if score < 0 else "white"
    text = Text("Material advantage: ")
    text.append(str(score), style=style)
    return text
