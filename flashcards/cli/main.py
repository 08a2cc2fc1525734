"""
CLI entry point for flashcards.
"""

# Standard library imports
import logging
import os
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Local application imports
from flashcards.commands import (
    AddCommand,
    Command,
    CommandKind,
    CommandResult,
    ListCommand,
    RemoveCommand,
    dispatch,
)
from flashcards.exceptions import FlashcardError, IndexOutOfRangeError
from flashcards.storage import load_deck, save_deck
from flashcards.cli._flip_logic import flip_logic


DECK_FILE_ENVVAR = "FLASHCARDS_FILE"
_MUTATING_KINDS = frozenset({CommandKind.ADD, CommandKind.REMOVE})

console = Console()

app = typer.Typer(
    name="flashcards",
    help="Flashcards: keep a deck of front/back cards and flip through it.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


_file_option = typer.Option(  # noqa: B008
    None,
    "--file",
    "-f",
    help="Path to the YAML deck file. Created on first save. "
    f"Falls back to {DECK_FILE_ENVVAR} env var.",
    envvar=DECK_FILE_ENVVAR,
    dir_okay=False,
)


def _configure_logging(verbose: bool) -> None:
    """Send log records through rich on stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def cli(
    ctx: typer.Context,
    file: Optional[Path] = _file_option,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """Flashcards: keep a deck of front/back cards and flip through it."""
    _configure_logging(verbose)
    ctx.obj = file


def _resolve_deck_path(ctx: typer.Context) -> Path:
    """Resolve the deck path from --file or FLASHCARDS_FILE. Exits on missing."""
    deck_path = ctx.obj
    if deck_path is not None:
        return deck_path
    env_val = os.environ.get(DECK_FILE_ENVVAR)
    if env_val:
        return Path(env_val)
    console.print(
        "[bold red]Error: --file is required "
        f"(or set the {DECK_FILE_ENVVAR} environment variable).[/bold red]"
    )
    raise typer.Exit(code=1)


def _run_command(deck_path: Path, command: Command) -> CommandResult:
    """
    Load the deck, apply one command, and save the deck if it changed.

    Listing never writes, and a failing command leaves the file untouched.
    Errors are printed and turned into exit code 1.
    """
    try:
        deck = load_deck(deck_path)
        result = dispatch(command, deck)
        if command.kind in _MUTATING_KINDS:
            save_deck(deck, deck_path)
    except IndexOutOfRangeError as e:
        # CLI card numbers start at 1
        console.print(
            f"[bold red]Error:[/bold red] No card number {e.index + 1}: "
            f"the deck has {e.size} cards."
        )
        raise typer.Exit(code=1) from e
    except FlashcardError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    return result


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def add(
    ctx: typer.Context,
    front: str = typer.Argument(..., help="Question side of the card."),
    back: str = typer.Argument(..., help="Answer side of the card."),
):
    """Add a card to the end of the deck."""
    deck_path = _resolve_deck_path(ctx)
    result = _run_command(deck_path, AddCommand(front=front, back=back))
    console.print(
        f"[green]Added flashcard {result.index + 1}:[/green] "
        f"{escape(front)}, {escape(back)}"
    )


@app.command()
def remove(
    ctx: typer.Context,
    index: int = typer.Argument(
        ..., help="Card number as shown by `list` (starting at 1)."
    ),
):
    """Remove a card by its number."""
    deck_path = _resolve_deck_path(ctx)
    result = _run_command(deck_path, RemoveCommand(index=index - 1))
    card = result.card
    console.print(
        f"[green]Removed card nbr {index}:[/green] "
        f"{escape(card.front)}, {escape(card.back)}"
    )


@app.command("list")
def list_cards(ctx: typer.Context):
    """List the fronts of all cards in order. Backs stay hidden."""
    deck_path = _resolve_deck_path(ctx)
    result = _run_command(deck_path, ListCommand())
    console.print(f"Cards in [cyan]{escape(str(deck_path))}[/cyan]")
    if not result.entries:
        console.print("[yellow]Deck is empty.[/yellow]")
        return
    for entry in result.entries:
        console.print(f"{entry.index + 1}: {escape(entry.front)}")


@app.command()
def flip(ctx: typer.Context):
    """Review the deck interactively, flipping one card at a time."""
    deck_path = _resolve_deck_path(ctx)
    try:
        flip_logic(deck_path)
    except FlashcardError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


@app.command("help")
def help_command(
    ctx: typer.Context,
    subcommand: Optional[str] = typer.Argument(
        None, help="Command to describe."
    ),
):
    """Show help for the app or for one command."""
    group_ctx = ctx.parent
    group = group_ctx.command
    if subcommand is None:
        typer.echo(group.get_help(group_ctx))
        return

    command = group.get_command(group_ctx, subcommand)
    if command is None:
        console.print(
            f"[bold red]Error: no such command "
            f"'{escape(subcommand)}'.[/bold red]"
        )
        raise typer.Exit(code=1)
    with typer.Context(
        command, info_name=subcommand, parent=group_ctx
    ) as sub_ctx:
        typer.echo(command.get_help(sub_ctx))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {escape(str(e))}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
