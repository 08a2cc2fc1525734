"""
Tests for the review session state machine in flashcards.session.
"""

import pytest

from flashcards.deck import Deck, Direction
from flashcards.session import (
    EMPTY_DECK_MESSAGE,
    STATUS_EMPTY,
    SessionAction,
    SessionController,
    SessionState,
)


@pytest.fixture
def controller(sample_deck) -> SessionController:
    return SessionController(sample_deck)


@pytest.fixture
def empty_controller() -> SessionController:
    return SessionController(Deck())


# --- Initial state ---


def test_initial_state_non_empty(controller):
    assert controller.state is SessionState.VIEWING_FRONT
    view = controller.view()
    assert view.text == "2+2"
    assert view.position == 1
    assert view.total == 3
    assert view.status is None


def test_initial_state_resets_cursor_and_flip(sample_deck):
    sample_deck.advance(Direction.NEXT)
    sample_deck.advance(Direction.PREVIOUS)
    sample_deck.flip_current()
    sample_deck.advance(Direction.NEXT)
    sample_deck.flip_current()
    controller = SessionController(sample_deck)
    assert sample_deck.cursor == 0
    assert controller.state is SessionState.VIEWING_FRONT


def test_initial_state_empty(empty_controller):
    assert empty_controller.state is SessionState.EMPTY
    view = empty_controller.view()
    assert view.text == EMPTY_DECK_MESSAGE
    assert view.position is None
    assert view.total == 0


# --- Transitions ---


def test_flip_toggles_front_and_back(controller):
    assert controller.apply(SessionAction.FLIP) is SessionState.VIEWING_BACK
    assert controller.view().text == "4"
    assert controller.apply(SessionAction.FLIP) is SessionState.VIEWING_FRONT
    assert controller.view().text == "2+2"


def test_next_lands_on_front_of_next_card(controller):
    controller.apply(SessionAction.FLIP)
    assert controller.apply(SessionAction.NEXT) is SessionState.VIEWING_FRONT
    view = controller.view()
    assert view.text == "Capital of France"
    assert view.position == 2


def test_previous_wraps_to_last_card(controller):
    assert (
        controller.apply(SessionAction.PREVIOUS)
        is SessionState.VIEWING_FRONT
    )
    assert controller.view().text == "H2O"
    assert controller.view().position == 3


def test_next_from_last_wraps_to_first(controller):
    for _ in range(3):
        controller.apply(SessionAction.NEXT)
    assert controller.view().position == 1


def test_revisited_card_must_be_flipped_again(controller):
    controller.apply(SessionAction.FLIP)
    controller.apply(SessionAction.NEXT)
    controller.apply(SessionAction.PREVIOUS)
    assert controller.state is SessionState.VIEWING_FRONT


@pytest.mark.parametrize(
    "start",
    [SessionAction.FLIP, SessionAction.NEXT, None],
)
def test_quit_terminates_from_any_state(controller, start):
    if start is not None:
        controller.apply(start)
    assert controller.apply(SessionAction.QUIT) is SessionState.TERMINATED
    assert controller.is_terminated
    assert controller.state.is_terminal()
    assert controller.view().text is None


def test_quit_from_empty(empty_controller):
    assert (
        empty_controller.apply(SessionAction.QUIT) is SessionState.TERMINATED
    )


def test_actions_after_termination_are_ignored(controller):
    controller.apply(SessionAction.QUIT)
    assert controller.apply(SessionAction.NEXT) is SessionState.TERMINATED
    assert controller.deck.cursor == 0


def test_apply_accepts_string_actions(controller):
    assert controller.apply("flip") is SessionState.VIEWING_BACK


def test_apply_rejects_unknown_action(controller):
    with pytest.raises(ValueError):
        controller.apply("shuffle")


# --- Empty deck behaviour ---


@pytest.mark.parametrize(
    "action",
    [SessionAction.FLIP, SessionAction.NEXT, SessionAction.PREVIOUS],
)
def test_empty_deck_actions_report_status(empty_controller, action):
    assert empty_controller.apply(action) is SessionState.EMPTY
    assert empty_controller.status == STATUS_EMPTY
    assert empty_controller.view().status == STATUS_EMPTY
    assert not empty_controller.is_terminated


def test_status_clears_on_next_action(empty_controller):
    empty_controller.apply(SessionAction.FLIP)
    empty_controller.apply(SessionAction.QUIT)
    assert empty_controller.status is None


def test_deck_emptied_underneath_goes_to_empty(sample_cards):
    deck = Deck(sample_cards[:1])
    controller = SessionController(deck)
    deck.remove(0)
    assert controller.state is SessionState.EMPTY
    controller.apply(SessionAction.FLIP)
    assert controller.status == STATUS_EMPTY


def test_view_is_pure(controller):
    controller.apply(SessionAction.FLIP)
    assert controller.view() == controller.view()
    assert controller.state is SessionState.VIEWING_BACK
