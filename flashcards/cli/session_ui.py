"""
Command-line interface for flipping through a deck.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from flashcards.session import (
    STATUS_EMPTY,
    SessionAction,
    SessionController,
    SessionState,
    SessionView,
)

logger = logging.getLogger(__name__)
console = Console()

KEY_BINDINGS: Dict[str, SessionAction] = {
    "": SessionAction.FLIP,
    "f": SessionAction.FLIP,
    "n": SessionAction.NEXT,
    "p": SessionAction.PREVIOUS,
    "q": SessionAction.QUIT,
}

PROMPT = "[bold][Enter/f] flip  [n] next  [p] previous  [q] quit: [/bold]"


def parse_key(raw: str) -> Optional[SessionAction]:
    """
    Map one line of user input to a session action.

    Returns:
        The matching SessionAction, or None for an unrecognised key.
    """
    return KEY_BINDINGS.get(raw.strip().lower())


def render(view: SessionView) -> None:
    """
    Draw one frame of the session.

    Parameters:
        view (SessionView): Snapshot produced by SessionController.view().
    """
    if view.status == STATUS_EMPTY:
        console.print(
            "[bold yellow]Deck is empty. Nothing to show.[/bold yellow]"
        )
        return

    if view.state is SessionState.EMPTY:
        console.print(f"[bold yellow]{view.text}[/bold yellow]")
    elif view.state is SessionState.VIEWING_FRONT:
        console.rule(f"[bold]Card {view.position} of {view.total}[/bold]")
        console.print(Panel(Text(view.text), title="Front", border_style="green"))
    elif view.state is SessionState.VIEWING_BACK:
        console.rule(f"[bold]Card {view.position} of {view.total}[/bold]")
        console.print(Panel(Text(view.text), title="Back", border_style="blue"))


def _read_action() -> SessionAction:
    """
    Prompt until the user enters a known key.

    End of input and Ctrl-C both count as quitting.
    """
    while True:
        try:
            raw = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print("")
            return SessionAction.QUIT
        action = parse_key(raw)
        if action is not None:
            return action
        logger.debug(f"Unknown key {raw!r}")
        console.print(
            "[bold red]Unknown key. Use Enter/f, n, p or q.[/bold red]"
        )


def start_session_flow(controller: SessionController) -> None:
    """
    Run the read-input, apply, render loop until the session terminates.

    Args:
        controller: The SessionController owning the deck under review.
    """
    console.print("[bold cyan]Starting flip session...[/bold cyan]")
    render(controller.view())

    while not controller.is_terminated:
        action = _read_action()
        controller.apply(action)
        if not controller.is_terminated:
            render(controller.view())

    console.print("[bold cyan]Session finished.[/bold cyan]")
