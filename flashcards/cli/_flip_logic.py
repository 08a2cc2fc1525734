from pathlib import Path

from flashcards.cli.session_ui import start_session_flow
from flashcards.commands import FlipCommand, dispatch
from flashcards.storage import load_deck, save_deck


def flip_logic(deck_path: Path) -> None:
    """
    Load a deck, run an interactive flip session over it, and save it back.

    The deck is written only after the session terminates normally; an
    error escaping the loop leaves the file as it was.

    Parameters:
        deck_path (Path): Path to the YAML deck file.
    """
    deck = load_deck(deck_path)
    result = dispatch(FlipCommand(), deck)
    start_session_flow(result.session)
    save_deck(deck, deck_path)
