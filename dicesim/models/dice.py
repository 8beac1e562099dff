"""Dice models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class DiceVariant(str, Enum):
    """Available die behaviours."""

    FAIR = "fair"
    FIXED = "fixed"


class DieSpec(BaseModel):
    """Description of a die to build."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    side_count: int = Field(ge=1, description="Number of faces on the die")
    variant: DiceVariant = Field(default=DiceVariant.FAIR, description="Fair or fixed die")
    seed: Optional[int] = Field(
        default=None, description="Seed for the fair die's generator (None: system entropy)"
    )

    @computed_field
    def fixed(self) -> bool:
        """Whether the die always shows its highest face."""
        return self.variant == DiceVariant.FIXED


class RollResult(BaseModel):
    """A single roll, bounded by the die that produced it."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    value: int = Field(description="Face shown")
    side_count: int = Field(ge=1, description="Number of faces on the rolling die")

    @model_validator(mode="after")
    def check_bounds(self) -> "RollResult":
        """Face must lie in [1, side_count]."""
        if not 1 <= self.value <= self.side_count:
            raise ValueError(
                f"Roll {self.value} outside of range 1..{self.side_count}"
            )
        return self
