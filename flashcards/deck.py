"""
This module defines the Deck class, the ordered collection of cards a user
studies, together with the cursor that marks the card currently on screen.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .exceptions import EmptyDeckError, IndexOutOfRangeError
from .models import Card

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Navigation direction for Deck.advance."""

    NEXT = "next"
    PREVIOUS = "previous"


class CardEntry(NamedTuple):
    """Read-only projection of a card for listings. Never carries the back."""

    index: int
    front: str
    revealed: bool = False


class DeckListing:
    """
    Lazy, restartable view over a deck's cards.

    Every iteration walks the deck as it is at that moment, so iterating
    twice without a mutation in between yields the same entries.
    """

    def __init__(self, deck: "Deck"):
        self._deck = deck

    def __iter__(self) -> Iterator[CardEntry]:
        for index, card in enumerate(self._deck.cards):
            yield CardEntry(index=index, front=card.front)

    def __len__(self) -> int:
        return len(self._deck)


class Deck:
    """
    Ordered collection of flashcards with a cursor.

    Insertion order is the listing, navigation and persisted order. The
    cursor is either a valid index or None when the deck is empty. All
    mutations go through the methods below; each one either applies fully
    or raises before touching any state.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = [card.conceal() for card in cards or []]
        self._cursor: Optional[int] = 0 if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._content() == other._content()

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, cursor={self._cursor})"

    def _content(self) -> List[Tuple[str, str]]:
        return [(card.front, card.back) for card in self._cards]

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def current(self) -> Optional[Card]:
        """The card under the cursor, or None for an empty deck."""
        if self._cursor is None:
            return None
        return self._cards[self._cursor]

    def add(self, front: str, back: str) -> Card:
        """
        Append a new face-down card to the end of the deck.

        Raises:
            CardValidationError: If either side is empty after trimming.
        """
        card = Card.create(front, back)
        self._cards.append(card)
        if self._cursor is None:
            self._cursor = 0
        logger.info(f"Added card #{len(self._cards) - 1}: {front!r}")
        return card

    def remove(self, index: int) -> Card:
        """
        Remove and return the card at `index`, shifting later cards down.

        The cursor follows the card it was on. If that card is the one
        removed, the cursor stays on the card that moved into its place
        (or the new last card, or None when the deck becomes empty).

        Raises:
            IndexOutOfRangeError: If `index` is not a current position.
        """
        if not 0 <= index < len(self._cards):
            raise IndexOutOfRangeError(index, len(self._cards))

        removed = self._cards.pop(index)

        if not self._cards:
            self._cursor = None
        elif self._cursor is not None:
            if self._cursor == index:
                self._cursor = min(index, len(self._cards) - 1)
                self._cards[self._cursor] = self._cards[self._cursor].conceal()
            elif self._cursor > index:
                self._cursor -= 1

        logger.info(f"Removed card #{index}: {removed.front!r}")
        return removed

    def list_cards(self) -> DeckListing:
        """Return a lazy listing of (index, front, revealed=False) entries."""
        return DeckListing(self)

    def _require_cursor(self) -> int:
        if self._cursor is None:
            raise EmptyDeckError("The deck has no cards.")
        return self._cursor

    def flip_current(self) -> Card:
        """
        Toggle the revealed side of the current card and return it.

        Raises:
            EmptyDeckError: If the deck has no cards.
        """
        cursor = self._require_cursor()
        flipped = self._cards[cursor].flip()
        self._cards[cursor] = flipped
        return flipped

    def advance(self, direction: Direction) -> Card:
        """
        Move the cursor one step, wrapping around at either end.

        The card landed on is shown front-up.

        Raises:
            EmptyDeckError: If the deck has no cards.
        """
        cursor = self._require_cursor()
        step = 1 if Direction(direction) is Direction.NEXT else -1
        self._cursor = (cursor + step) % len(self._cards)
        landed = self._cards[self._cursor].conceal()
        self._cards[self._cursor] = landed
        return landed

    def reset_cursor(self) -> None:
        """Put the cursor back on the first card, front-up."""
        if not self._cards:
            self._cursor = None
            return
        self._cursor = 0
        self._cards[0] = self._cards[0].conceal()
