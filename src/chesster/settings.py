"""User-configurable settings shared by the console and Qt front ends."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_THEMES = ("Classic", "Blue", "Green")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Console
    show_material: bool = True
    clear_screen: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.board_theme not in BOARD_THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
