from pathlib import Path
from typing import Optional


class FlashcardError(Exception):
    """Base exception for flashcard errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class CardValidationError(FlashcardError, ValueError):
    """Raised when a card's front or back is empty."""

    pass


class IndexOutOfRangeError(FlashcardError, IndexError):
    """Raised when an index does not name a card in the deck."""

    def __init__(self, index: int, size: int):
        if size == 0:
            message = f"Index {index} is out of range: the deck is empty."
        else:
            message = (
                f"Index {index} is out of range for a deck of {size} cards."
            )
        super().__init__(message)
        self.index = index
        self.size = size


class EmptyDeckError(FlashcardError):
    """Raised when flipping or navigating a deck with no cards."""

    pass


class PersistenceError(FlashcardError):
    """Indicates the deck file could not be read, parsed or written."""

    def __init__(
        self,
        path: Path,
        message: str,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(f"{path}: {message}", original_exception)
        self.path = path
