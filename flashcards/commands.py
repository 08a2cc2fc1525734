"""
One-shot commands applied to a deck.

Each command is a small tagged dataclass; `dispatch` routes it to its
handler through a table keyed by CommandKind. Deck errors propagate to the
caller unchanged so the CLI can report them and skip saving.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Dict, List, Optional, Union

from .deck import CardEntry, Deck
from .models import Card
from .session import SessionController

logger = logging.getLogger(__name__)


class CommandKind(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    LIST = "list"
    FLIP = "flip"


@dataclass(frozen=True)
class AddCommand:
    front: str
    back: str
    kind: ClassVar[CommandKind] = CommandKind.ADD


@dataclass(frozen=True)
class RemoveCommand:
    index: int
    kind: ClassVar[CommandKind] = CommandKind.REMOVE


@dataclass(frozen=True)
class ListCommand:
    kind: ClassVar[CommandKind] = CommandKind.LIST


@dataclass(frozen=True)
class FlipCommand:
    kind: ClassVar[CommandKind] = CommandKind.FLIP


Command = Union[AddCommand, RemoveCommand, ListCommand, FlipCommand]


@dataclass
class CommandResult:
    """
    Outcome of a dispatched command.

    Attributes:
        kind: Which command produced this result.
        card: The card added or removed, if any.
        index: Zero-based position of that card.
        entries: Listing entries for LIST.
        session: Interactive session to run for FLIP.
    """

    kind: CommandKind
    card: Optional[Card] = None
    index: Optional[int] = None
    entries: List[CardEntry] = field(default_factory=list)
    session: Optional[SessionController] = None


def _add(command: AddCommand, deck: Deck) -> CommandResult:
    card = deck.add(command.front, command.back)
    return CommandResult(kind=command.kind, card=card, index=len(deck) - 1)


def _remove(command: RemoveCommand, deck: Deck) -> CommandResult:
    card = deck.remove(command.index)
    return CommandResult(kind=command.kind, card=card, index=command.index)


def _list(command: ListCommand, deck: Deck) -> CommandResult:
    return CommandResult(kind=command.kind, entries=list(deck.list_cards()))


def _flip(command: FlipCommand, deck: Deck) -> CommandResult:
    return CommandResult(kind=command.kind, session=SessionController(deck))


_HANDLERS: Dict[CommandKind, Callable[..., CommandResult]] = {
    CommandKind.ADD: _add,
    CommandKind.REMOVE: _remove,
    CommandKind.LIST: _list,
    CommandKind.FLIP: _flip,
}

_missing = set(CommandKind) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"No handler registered for commands: {_missing}")


def dispatch(command: Command, deck: Deck) -> CommandResult:
    """
    Apply a single command to `deck`.

    Raises:
        CardValidationError: From ADD when a side is empty.
        IndexOutOfRangeError: From REMOVE when the index is invalid.
    """
    logger.debug(f"Dispatching {command!r}")
    handler = _HANDLERS[command.kind]
    return handler(command, deck)
