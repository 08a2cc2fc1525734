"""
Pydantic model for a single flashcard.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .exceptions import CardValidationError


class Card(BaseModel):
    """
    One front/back study item.

    Cards are immutable: flipping returns a new Card. The `revealed` flag
    is display state only and is never serialized.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    front: str = Field(
        ...,
        description="Question side, shown first.",
    )
    back: str = Field(
        ...,
        description="Answer side, shown after a flip.",
    )
    revealed: bool = Field(
        default=False,
        exclude=True,
        description="Whether the back is currently shown (not persisted).",
    )

    @field_validator("front", "back")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        """Reject text that is empty after trimming whitespace."""
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v

    @classmethod
    def create(cls, front: str, back: str) -> Card:
        """
        Build a face-down card, converting pydantic errors into CardValidationError.

        Raises:
            CardValidationError: If `front` or `back` is empty after trimming.
        """
        try:
            return cls(front=front, back=back)
        except ValidationError as e:
            error_details = e.errors()[0]
            field = ".".join(map(str, error_details["loc"]))
            msg = error_details["msg"]
            raise CardValidationError(
                f"Invalid card {field}: {msg}", original_exception=e
            ) from e

    @property
    def face(self) -> str:
        """Text of the side currently shown."""
        return self.back if self.revealed else self.front

    def flip(self) -> Card:
        """Return a copy of this card with `revealed` toggled."""
        return self.model_copy(update={"revealed": not self.revealed})

    def conceal(self) -> Card:
        """Return a copy of this card showing its front."""
        if not self.revealed:
            return self
        return self.model_copy(update={"revealed": False})
