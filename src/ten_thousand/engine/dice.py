"""
Ten Thousand - Dice Roller

Throws the unlocked dice of a pool. The random source is injected so a seeded
`random.Random` makes whole turns reproducible in tests and replays.
"""

import random
from dataclasses import replace
from typing import Sequence

from ten_thousand.engine.base import MAX_FACE, MIN_FACE, NUM_DICE, Die
from ten_thousand.engine.errors import EmptyPoolRoll
from ten_thousand.engine.validators import validate_unique_ids


class DiceRoller:
    """
    Rolls D6 pools.

    Args:
        rng: Random source; defaults to a fresh unseeded `random.Random`
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int | None) -> "DiceRoller":
        """Roller whose sequence is fixed by `seed` (None = nondeterministic)."""
        return cls(random.Random(seed))

    def _face(self) -> int:
        return self.rng.randint(MIN_FACE, MAX_FACE)

    def roll(self, dice: Sequence[Die]) -> tuple[Die, ...]:
        """
        Roll every unlocked die in the pool.

        Unlocked dice get a new value and lose their selection flag; locked
        dice pass through unchanged.

        Raises:
            EmptyPoolRoll: If the pool has no dice
        """
        pool = validate_unique_ids(dice)
        if not pool:
            raise EmptyPoolRoll("Cannot roll an empty dice pool.")

        return tuple(
            die if die.is_locked
            else replace(die, value=self._face(), is_selected=False)
            for die in pool
        )

    def fresh_set(self, count: int = NUM_DICE) -> tuple[Die, ...]:
        """Six new unlocked, unselected dice with independent random values."""
        return tuple(Die(id=i, value=self._face()) for i in range(count))
