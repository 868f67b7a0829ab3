"""Text front end: menus and the turn loop, rendered with rich."""

from chesster.cli.console import ConsoleGame, MainMenu

__all__ = ["ConsoleGame", "MainMenu"]
