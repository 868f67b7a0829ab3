"""Console menus and turn loop.

Input and output are injectable (``input_fn`` and a rich ``Console``) so
the loop can be driven by tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.panel import Panel

from chesster.cli.render import board_table, material_text
from chesster.core.board import Board
from chesster.core.enums import Color
from chesster.core.notation import normalize_move_text
from chesster.core.validator import MoveOutcome
from chesster.game.controller import GameController
from chesster.game.interfaces import GameEndReason
from chesster.game.messages import (
    check_notice,
    describe_rejection,
    game_over_message,
    side_name,
)
from chesster.game.scenarios import SCENARIOS
from chesster.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]

EXIT_COMMAND = "exit"

RULES_TEXT = "\n".join(
    (
        "1. Standard piece movement; no castling, en passant or promotion.",
        "2. White moves first.",
        '3. To make a move, type it in the format "e2 e4".',
        "4. The game ends with checkmate or stalemate.",
        f'5. Type "{EXIT_COMMAND}" during a game to quit.',
    )
)


class ConsoleGame:
    """Plays one game in the terminal until it ends or a player exits."""

    def __init__(
        self,
        board: Board | None = None,
        *,
        console: Console | None = None,
        input_fn: InputFn | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._console = console if console is not None else Console()
        self._input = input_fn if input_fn is not None else self._console.input
        self._settings = settings if settings is not None else AppSettings()
        self._start_board = board
        self._controller = GameController()

        events = self._controller.events
        events.on_rejected.append(self._on_rejected)
        events.on_check.append(self._on_check)
        events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self) -> GameEndReason | None:
        """Play until checkmate, stalemate or ``exit``; return why it ended."""
        self._controller.new_game(self._start_board)
        state = self._controller.state

        while not state.is_game_over:
            self._show_position()
            try:
                text = self._input("Enter your move (e.g., e2 e4): ")
            except EOFError:
                text = EXIT_COMMAND
            text = normalize_move_text(text)
            if self._settings.clear_screen:
                self._console.clear()

            if text == EXIT_COMMAND:
                self._controller.quit()
                break
            self._controller.submit_move(text)

        return state.end_reason

    # ── Rendering ────────────────────────────────────────────────────────

    def _show_position(self) -> None:
        state = self._controller.state
        self._console.print(
            board_table(state.board, show_coordinates=self._settings.show_coordinates)
        )
        if self._settings.show_material:
            self._console.print(material_text(state.material_score))
        self._console.print(f"\n{side_name(state.side_to_move)}'s turn.")

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_rejected(self, text: str, outcome: MoveOutcome) -> None:
        self._console.print(describe_rejection(outcome.rejection), style="yellow")

    def _on_check(self, color: Color) -> None:
        self._console.print(check_notice(color), style="bold")

    def _on_game_over(self, reason: GameEndReason, winner: Color | None) -> None:
        if reason == GameEndReason.QUIT:
            return
        self._console.print(game_over_message(reason, winner), style="bold green")


class MainMenu:
    """Top-level menu: new game, challenges, rules, exit."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        input_fn: InputFn | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._console = console if console is not None else Console()
        self._input = input_fn if input_fn is not None else self._console.input
        self._settings = settings if settings is not None else AppSettings()

    def run(self) -> None:
        while True:
            self._show_menu()
            choice = self._read(" ▶ Select an option: ")
            if choice is None or choice == "4":
                self._console.print("See you next time!")
                return
            if choice == "1":
                self.play(None)
            elif choice == "2":
                board = self.choose_challenge()
                if board is not None:
                    self.play(board)
            elif choice == "3":
                self._console.print(Panel(RULES_TEXT, title="Game rules"))
            else:
                self._console.print("Invalid option! Please try again.")

    def play(self, board: Board | None) -> GameEndReason | None:
        game = ConsoleGame(
            board,
            console=self._console,
            input_fn=self._input,
            settings=self._settings,
        )
        return game.run()

    def choose_challenge(self) -> Board | None:
        """Ask for a scenario; ``None`` means back to the main menu."""
        scenarios = list(SCENARIOS.values())
        while True:
            lines = [
                f" {i}. {s.title} - {s.description}"
                for i, s in enumerate(scenarios, 1)
            ]
            lines.append(" 0. Return to Main Menu")
            self._console.print(Panel("\n".join(lines), title="Chess Challenges"))

            choice = self._read(f" ▶ Select a challenge (1-{len(scenarios)}) or 0: ")
            if choice is None or choice == "0":
                return None
            if choice.isdigit() and 1 <= int(choice) <= len(scenarios):
                scenario = scenarios[int(choice) - 1]
                _LOGGER.info("Starting challenge %s", scenario.key)
                return scenario.build_board()
            self._console.print("Invalid option! Please try again.")

    def _show_menu(self) -> None:
        self._console.print(
            Panel(
                " 1. Start New Game\n 2. Challenges\n 3. Rules\n 4. Exit",
                title="Main Menu",
            )
        )

    def _read(self, prompt: str) -> str | None:
        try:
            return self._input(prompt).strip()
        except EOFError:
            return None
