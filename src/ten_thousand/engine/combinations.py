"""
Ten Thousand - Combination Validator and Scoring-Option Enumerator

Answers two questions about the dice still in play: can the turn continue,
and which groupings may be taken. The enumerated groupings are the only
legal selections, for both human players and the bot.
"""

from collections import Counter
from typing import Sequence

from ten_thousand.engine.base import Die, Grouping
from ten_thousand.engine.scoring import ScoreCalculator
from ten_thousand.engine.validators import dice_values


class CombinationFinder:
    """
    Stateless validator/enumerator over unlocked dice.

    Locked dice are ignored; they already belong to the turn score.
    """

    SCORING_SINGLES = (1, 5)

    @classmethod
    def has_scoring_combination(cls, dice: Sequence[Die] | Sequence[int]) -> bool:
        """
        Check whether the unlocked dice contain at least one scoring grouping.

        Args:
            dice: Dice pool (locked dice are skipped) or face values

        Returns:
            False for an empty pool or a dead roll
        """
        values = dice_values(cls._unlocked(dice))
        if not values:
            return False

        if any(v in values for v in cls.SCORING_SINGLES):
            return True

        if any(count >= 3 for count in Counter(values).values()):
            return True

        return ScoreCalculator.is_straight(values) or ScoreCalculator.is_three_pairs(values)

    @classmethod
    def find_scoring_options(
        cls,
        available: Sequence[Die] | Sequence[int]
    ) -> tuple[Grouping, ...]:
        """
        List every grouping that may legally be selected.

        A straight or three pairs is offered as the only grouping. Otherwise
        each value with three or more dice is offered whole, and any 1s or 5s
        not already covered by such a set are offered together.

        Args:
            available: Unlocked, unselected dice, or face values (given ids 0..n-1)

        Returns:
            Groupings in order of first appearance; empty on a dead roll
        """
        pool = tuple(cls._unlocked(cls._as_dice(available)))
        if not cls.has_scoring_combination(pool):
            return ()

        values = [d.value for d in pool]
        if ScoreCalculator.is_straight(values) or ScoreCalculator.is_three_pairs(values):
            return (pool,)

        by_value: dict[int, list[Die]] = {}
        for die in pool:
            by_value.setdefault(die.value, []).append(die)

        options: list[Grouping] = [
            tuple(group) for group in by_value.values() if len(group) >= 3
        ]
        for face_value in cls.SCORING_SINGLES:
            group = by_value.get(face_value, [])
            if 0 < len(group) < 3:
                options.append(tuple(group))

        return tuple(options)

    @staticmethod
    def _as_dice(dice: Sequence[Die] | Sequence[int]) -> tuple[Die, ...]:
        return tuple(
            d if isinstance(d, Die) else Die(id=i, value=d)
            for i, d in enumerate(dice)
        )

    @staticmethod
    def _unlocked(dice: Sequence[Die] | Sequence[int]) -> list:
        return [d for d in dice if not (isinstance(d, Die) and d.is_locked)]


def has_scoring_combination(dice: Sequence[Die] | Sequence[int]) -> bool:
    """Module-level shortcut for `CombinationFinder.has_scoring_combination`."""
    return CombinationFinder.has_scoring_combination(dice)


def find_scoring_options(available: Sequence[Die] | Sequence[int]) -> tuple[Grouping, ...]:
    """Module-level shortcut for `CombinationFinder.find_scoring_options`."""
    return CombinationFinder.find_scoring_options(available)
