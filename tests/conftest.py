import pytest
from pathlib import Path

from flashcards.deck import Deck
from flashcards.models import Card


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir.

    Parameters:
        request: The pytest `request` fixture used to obtain the per-test `tmpdir` fixture.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture(autouse=True)
def no_deck_file_env(monkeypatch):
    """Keep a developer's FLASHCARDS_FILE from leaking into tests."""
    monkeypatch.delenv("FLASHCARDS_FILE", raising=False)


@pytest.fixture
def deck_path(tmp_path: Path) -> Path:
    """
    Provide the path of a deck file that does not exist yet.

    Returns:
        Path: Path to "deck.yaml" inside `tmp_path`.
    """
    return tmp_path / "deck.yaml"


@pytest.fixture
def sample_cards() -> list:
    """Three cards in insertion order."""
    return [
        Card(front="2+2", back="4"),
        Card(front="Capital of France", back="Paris"),
        Card(front="H2O", back="Water"),
    ]


@pytest.fixture
def sample_deck(sample_cards) -> Deck:
    """A three-card deck with the cursor on the first card."""
    return Deck(sample_cards)


@pytest.fixture
def sample_deck_file(deck_path: Path) -> Path:
    """
    Write a three-card YAML deck to disk.

    Returns:
        Path: The written deck file.
    """
    deck_path.write_text(
        "cards:\n"
        "  - front: 2+2\n"
        "    back: '4'\n"
        "  - front: Capital of France\n"
        "    back: Paris\n"
        "  - front: H2O\n"
        "    back: Water\n",
        encoding="utf-8",
    )
    return deck_path
