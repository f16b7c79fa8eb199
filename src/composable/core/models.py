"""Mutable and immutable data models.

Both glasses hold some ``amount`` of a ``content``. Drinking from a
:class:`MutableGlass` changes that glass and hands the same object back;
drinking from an :class:`ImmutableGlass` leaves it untouched and returns a
new glass holding what is left.
"""

from pydantic import BaseModel, ConfigDict, Field


def _check_drink(value: float) -> None:
    if value < 0:
        raise ValueError(f"Cannot drink a negative amount: {value}")


class MutableGlass(BaseModel):
    """A glass whose amount is changed in place."""

    content: str = Field(..., description="What the glass holds.")
    amount: float = Field(..., ge=0, description="How much is left.")

    model_config = ConfigDict(validate_assignment=True)

    def take_drink(self, value: float) -> "MutableGlass":
        _check_drink(value)
        self.amount = max(self.amount - value, 0.0)
        return self


class ImmutableGlass(BaseModel):
    """A frozen glass. Drinking returns a new instance."""

    content: str = Field(..., description="What the glass holds.")
    amount: float = Field(..., ge=0, description="How much is left.")

    model_config = ConfigDict(frozen=True)

    def take_drink(self, value: float) -> "ImmutableGlass":
        _check_drink(value)
        return ImmutableGlass(
            content=self.content, amount=max(self.amount - value, 0.0)
        )
