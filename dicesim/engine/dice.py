"""Dice rolling system."""

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from dicesim.models.dice import DiceVariant, DieSpec, RollResult

logger = logging.getLogger(__name__)


class Die(ABC):
    """A source of integer outcomes bounded by a side count."""

    def __init__(self, side_count: int) -> None:
        """
        Initialize die.

        Args:
            side_count: Number of faces (at least 1)
        """
        if side_count < 1:
            raise ValueError(f"A die needs at least one side, got {side_count}")
        self._side_count = side_count

    @property
    def side_count(self) -> int:
        """Number of faces on the die."""
        return self._side_count

    @abstractmethod
    def roll(self) -> int:
        """Roll the die and return the face shown, in [1, side_count]."""
        raise NotImplementedError

    def roll_result(self) -> RollResult:
        """Roll the die and wrap the face in a bounds-checked RollResult."""
        return RollResult(value=self.roll(), side_count=self._side_count)


class FairDie(Die):
    """Uniformly random die backed by a single long-lived generator."""

    def __init__(
        self,
        side_count: int = 6,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize fair die.

        Args:
            side_count: Number of faces
            seed: Seed for a new generator; ignored when rng is given
            rng: Generator to draw from
        """
        super().__init__(side_count)
        self._rng = rng if rng is not None else random.Random(seed)

    def roll(self) -> int:
        result = self._rng.randint(1, self._side_count)
        logger.debug(f"Fair d{self._side_count} rolled {result}")
        return result


class FixedDie(Die):
    """Die that always shows its highest face."""

    def roll(self) -> int:
        logger.debug(f"Fixed d{self._side_count} rolled {self._side_count}")
        return self._side_count


def create_die(spec: DieSpec) -> Die:
    """
    Build a die from its description.

    Args:
        spec: Side count, variant and seed

    Returns:
        FairDie or FixedDie
    """
    if spec.variant == DiceVariant.FIXED:
        return FixedDie(spec.side_count)
    return FairDie(spec.side_count, seed=spec.seed)
