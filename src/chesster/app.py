"""Application entry point."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.table import Table

from chesster import __version__
from chesster.cli.console import ConsoleGame, MainMenu
from chesster.game.scenarios import SCENARIOS
from chesster.settings import BOARD_THEMES, AppSettings

app = typer.Typer(
    name="chesster",
    help="Two-player chess in the terminal or a Qt window.",
    add_completion=False,
)
console = Console()

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    """Route library logging to stderr at *level*."""
    logging.basicConfig(level=getattr(logging, level), format=_LOG_FORMAT, force=True)


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj
    if not isinstance(settings, AppSettings):
        settings = AppSettings()
    return settings


def _check_scenario(key: str | None) -> str | None:
    if key is not None and key not in SCENARIOS:
        choices = ", ".join(SCENARIOS)
        raise typer.BadParameter(f"Unknown challenge {key!r} (choose from {choices})")
    return key


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR"
    ),
) -> None:
    """Open the main menu when no command is given."""
    try:
        settings = AppSettings(log_level=log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from None
    setup_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        MainMenu(console=console, settings=settings).run()


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]Chesster[/bold blue] v{__version__}")


@app.command()
def play(
    ctx: typer.Context,
    no_material: bool = typer.Option(
        False, "--no-material", help="Hide the material score"
    ),
    no_clear: bool = typer.Option(
        False, "--no-clear", help="Keep previous turns on screen"
    ),
) -> None:
    """Play a game from the standard starting position."""
    settings = _settings(ctx)
    settings.show_material = not no_material
    settings.clear_screen = not no_clear
    ConsoleGame(console=console, settings=settings).run()


@app.command()
def challenge(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Challenge key, see `chesster challenges`"),
) -> None:
    """Play one of the preset challenge positions."""
    _check_scenario(key)
    board = SCENARIOS[key].build_board()
    ConsoleGame(board, console=console, settings=_settings(ctx)).run()


@app.command()
def challenges() -> None:
    """List the available challenge positions."""
    table = Table(title="Challenges")
    table.add_column("Key", style="cyan")
    table.add_column("Title")
    table.add_column("Description", style="dim")
    for scenario in SCENARIOS.values():
        table.add_row(scenario.key, scenario.title, scenario.description)
    console.print(table)


@app.command()
def gui(
    ctx: typer.Context,
    theme: str = typer.Option("Classic", "--theme", help="Classic, Blue or Green"),
    challenge_key: str | None = typer.Option(
        None, "--challenge", help="Start from a challenge position"
    ),
) -> None:
    """Open the Qt board window."""
    from chesster.ui.bootstrap import run_application

    if theme not in BOARD_THEMES:
        message = f"Unknown board theme: {theme!r}"
        raise typer.BadParameter(message, param_hint="--theme")
    _check_scenario(challenge_key)

    settings = _settings(ctx)
    settings.board_theme = theme
    board = SCENARIOS[challenge_key].build_board() if challenge_key else None
    raise typer.Exit(run_application(settings=settings, board=board))


def main() -> None:
    """Launch the Chesster command-line application."""
    app()


if __name__ == "__main__":
    main()
