"""Flashcards - A terminal flashcard deck you flip through one card at a time."""

from .models import Card
from .deck import CardEntry, Deck, DeckListing, Direction
from .session import SessionAction, SessionController, SessionState
from .commands import (
    AddCommand,
    CommandKind,
    CommandResult,
    FlipCommand,
    ListCommand,
    RemoveCommand,
    dispatch,
)
from .storage import load_deck, save_deck

__all__ = [
    "Card",
    "CardEntry",
    "Deck",
    "DeckListing",
    "Direction",
    "SessionAction",
    "SessionController",
    "SessionState",
    "AddCommand",
    "CommandKind",
    "CommandResult",
    "FlipCommand",
    "ListCommand",
    "RemoveCommand",
    "dispatch",
    "load_deck",
    "save_deck",
]
