import pytest

from flashcards.commands import (
    AddCommand,
    CommandKind,
    CommandResult,
    FlipCommand,
    ListCommand,
    RemoveCommand,
    dispatch,
)
from flashcards.deck import CardEntry, Deck
from flashcards.exceptions import CardValidationError, IndexOutOfRangeError
from flashcards.session import SessionController, SessionState


def test_every_kind_has_a_command():
    commands = (AddCommand, RemoveCommand, ListCommand, FlipCommand)
    kinds = {cmd.kind for cmd in commands}
    assert kinds == set(CommandKind)


def test_dispatch_add_on_empty_deck():
    deck = Deck()
    result = dispatch(AddCommand(front="2+2", back="4"), deck)
    assert isinstance(result, CommandResult)
    assert result.kind is CommandKind.ADD
    assert result.index == 0
    assert result.card.front == "2+2"
    assert list(deck.list_cards()) == [CardEntry(0, "2+2")]


def test_dispatch_add_invalid_propagates():
    deck = Deck()
    with pytest.raises(CardValidationError):
        dispatch(AddCommand(front="", back="x"), deck)
    assert len(deck) == 0


def test_dispatch_remove(sample_deck):
    result = dispatch(RemoveCommand(index=1), sample_deck)
    assert result.kind is CommandKind.REMOVE
    assert result.card.front == "Capital of France"
    assert result.index == 1
    assert [e.front for e in sample_deck.list_cards()] == ["2+2", "H2O"]


def test_dispatch_remove_out_of_range_propagates(sample_deck):
    with pytest.raises(IndexOutOfRangeError):
        dispatch(RemoveCommand(index=5), sample_deck)
    assert len(sample_deck) == 3


def test_dispatch_list(sample_deck):
    result = dispatch(ListCommand(), sample_deck)
    assert result.kind is CommandKind.LIST
    assert result.entries == [
        (0, "2+2", False),
        (1, "Capital of France", False),
        (2, "H2O", False),
    ]


def test_dispatch_list_empty_deck():
    result = dispatch(ListCommand(), Deck())
    assert result.entries == []


def test_dispatch_flip_returns_session(sample_deck):
    result = dispatch(FlipCommand(), sample_deck)
    assert result.kind is CommandKind.FLIP
    assert isinstance(result.session, SessionController)
    assert result.session.deck is sample_deck
    assert result.session.state is SessionState.VIEWING_FRONT


def test_commands_are_immutable():
    command = AddCommand(front="q", back="a")
    with pytest.raises(AttributeError):
        command.front = "other"
