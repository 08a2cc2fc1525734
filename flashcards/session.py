"""
This module defines the SessionController, the state machine behind the
interactive review session. It owns the deck for the duration of the session,
applies one action at a time, and exposes a render-ready view of its state.
It does no terminal I/O itself; see flashcards.cli.session_ui for that.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .deck import Deck, Direction
from .exceptions import EmptyDeckError

logger = logging.getLogger(__name__)

EMPTY_DECK_MESSAGE = "The deck is empty. Add cards with the 'add' command."
STATUS_EMPTY = "empty"


class SessionState(str, Enum):
    """
    Review session states.

    State machine:
        VIEWING_FRONT <-(flip)-> VIEWING_BACK
        VIEWING_BACK  -(next/previous)-> VIEWING_FRONT
        EMPTY, VIEWING_FRONT, VIEWING_BACK -(quit)-> TERMINATED
    """

    VIEWING_FRONT = "viewing_front"
    VIEWING_BACK = "viewing_back"
    EMPTY = "empty"
    TERMINATED = "terminated"

    def is_terminal(self) -> bool:
        return self is SessionState.TERMINATED


class SessionAction(str, Enum):
    """Inputs the session understands."""

    FLIP = "flip"
    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"


@dataclass(frozen=True)
class SessionView:
    """Everything a renderer needs to draw one frame."""

    state: SessionState
    text: Optional[str]
    position: Optional[int]
    total: int
    status: Optional[str] = None


class SessionController:
    """
    Drives a review session over a single deck.

    The session starts on the first card, front-up, or in EMPTY when the
    deck has no cards. Flip and navigation on an empty deck are no-ops that
    set `status` to "empty" instead of ending the session.
    """

    def __init__(self, deck: Deck):
        self.deck = deck
        self.deck.reset_cursor()
        self.status: Optional[str] = None
        self._terminated = False
        logger.debug(
            f"Session started on {len(deck)} cards in state {self.state.value}"
        )

    @property
    def state(self) -> SessionState:
        if self._terminated:
            return SessionState.TERMINATED
        current = self.deck.current
        if current is None:
            return SessionState.EMPTY
        if current.revealed:
            return SessionState.VIEWING_BACK
        return SessionState.VIEWING_FRONT

    @property
    def is_terminated(self) -> bool:
        return self._terminated

    def apply(self, action: SessionAction) -> SessionState:
        """
        Apply one action and return the resulting state.

        Actions received after termination are ignored.
        """
        if self._terminated:
            logger.debug(f"Ignoring {action} after termination")
            return SessionState.TERMINATED

        action = SessionAction(action)
        previous_state = self.state
        self.status = None

        if action is SessionAction.QUIT:
            self._terminated = True
        else:
            try:
                if action is SessionAction.FLIP:
                    self.deck.flip_current()
                elif action is SessionAction.NEXT:
                    self.deck.advance(Direction.NEXT)
                else:
                    self.deck.advance(Direction.PREVIOUS)
            except EmptyDeckError:
                self.status = STATUS_EMPTY

        new_state = self.state
        logger.debug(
            f"{action.value}: {previous_state.value} -> {new_state.value} "
            f"(cursor={self.deck.cursor}, status={self.status})"
        )
        return new_state

    def view(self) -> SessionView:
        """Project the current state into the text to show."""
        state = self.state
        card = self.deck.current
        total = len(self.deck)

        if state is SessionState.EMPTY:
            text: Optional[str] = EMPTY_DECK_MESSAGE
        elif state is SessionState.TERMINATED or card is None:
            text = None
        else:
            text = card.face

        position = None if self.deck.cursor is None else self.deck.cursor + 1
        return SessionView(
            state=state,
            text=text,
            position=position,
            total=total,
            status=self.status,
        )
