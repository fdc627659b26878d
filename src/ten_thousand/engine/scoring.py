"""
Ten Thousand - Score Calculator

Scores a *selected* set of dice. All methods are stateless class methods
operating on immutable inputs.

Scoring Rules:
    - 1-2-3-4-5-6 (Straight): 1,500 points, nothing else counts
    - Three pairs (six dice): 1,500 points, nothing else counts
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - Four / five / six of a kind: two / three / four times the triple value
    - Single 1: 100 points, single 5: 50 points (fewer than three of them)
    - Any other 2, 3, 4 or 6 outside a triple: 0 points
"""

from collections import Counter
from typing import Sequence

from ten_thousand.engine.base import (
    NUM_DICE,
    Die,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from ten_thousand.engine.validators import dice_values


_COUNT_WORDS = {3: "Three", 4: "Four", 5: "Five", 6: "Six"}

_SET_CATEGORIES = {
    3: ScoringCategory.THREE_OF_A_KIND,
    4: ScoringCategory.FOUR_OF_A_KIND,
    5: ScoringCategory.FIVE_OF_A_KIND,
    6: ScoringCategory.SIX_OF_A_KIND,
}


class ScoreCalculator:
    """
    Stateless scorer for the six-dice 10000 rules.

    Accepts dice objects or plain face values; the result never depends on
    the order of the input.
    """

    # Scoring values
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    STRAIGHT_POINTS = 1500
    THREE_PAIRS_POINTS = 1500

    # count -> multiple of the triple value
    SET_MULTIPLIERS = {3: 1, 4: 2, 5: 3, 6: 4}

    @classmethod
    def calculate_score(cls, dice: Sequence[Die] | Sequence[int]) -> ScoringResult:
        """
        Calculate the score for a selection of dice.

        Args:
            dice: Selected dice (Die objects or face values)

        Returns:
            ScoringResult with total points and per-group breakdown
        """
        values = dice_values(dice)
        if not values:
            return ScoringResult(points=0)

        if cls.is_straight(values):
            return cls._single(
                ScoringCategory.STRAIGHT, values, cls.STRAIGHT_POINTS,
                "Straight (1-2-3-4-5-6)",
            )

        if cls.is_three_pairs(values):
            return cls._single(
                ScoringCategory.THREE_PAIRS, values, cls.THREE_PAIRS_POINTS,
                "Three pairs",
            )

        breakdown: list[ScoringBreakdown] = []
        # Counter keeps first-appearance order, which drives the description
        for face_value, count in Counter(values).items():
            item = cls._score_group(face_value, count)
            if item is not None:
                breakdown.append(item)

        return ScoringResult(
            points=sum(item.points for item in breakdown),
            breakdown=tuple(breakdown),
        )

    @classmethod
    def triple_value(cls, face_value: int) -> int:
        """Points for exactly three of `face_value`."""
        if face_value == 1:
            return cls.THREE_ONES_POINTS
        return face_value * 100

    @classmethod
    def _score_group(cls, face_value: int, count: int) -> ScoringBreakdown | None:
        if count >= 3:
            points = cls.triple_value(face_value) * cls.SET_MULTIPLIERS[count]
            return ScoringBreakdown(
                category=_SET_CATEGORIES[count],
                dice_values=(face_value,) * count,
                points=points,
                description=f"{_COUNT_WORDS[count]} {face_value}s ({points})",
            )

        if face_value == 1:
            category, per_die = ScoringCategory.SINGLE_ONE, cls.SINGLE_ONE_POINTS
        elif face_value == 5:
            category, per_die = ScoringCategory.SINGLE_FIVE, cls.SINGLE_FIVE_POINTS
        else:
            return None

        points = count * per_die
        label = f"Single {face_value}" if count == 1 else f"{count}x Single {face_value}s"
        return ScoringBreakdown(
            category=category,
            dice_values=(face_value,) * count,
            points=points,
            description=f"{label} ({points})",
        )

    @classmethod
    def _single(
        cls,
        category: ScoringCategory,
        values: tuple[int, ...],
        points: int,
        label: str
    ) -> ScoringResult:
        return ScoringResult(
            points=points,
            breakdown=(ScoringBreakdown(
                category=category,
                dice_values=tuple(sorted(values)),
                points=points,
                description=f"{label} ({points})",
            ),),
        )

    @staticmethod
    def is_straight(values: Sequence[int]) -> bool:
        """Six dice showing every face exactly once."""
        return len(values) == NUM_DICE and sorted(values) == [1, 2, 3, 4, 5, 6]

    @staticmethod
    def is_three_pairs(values: Sequence[int]) -> bool:
        """Six dice made of three distinct values, two of each."""
        if len(values) != NUM_DICE:
            return False
        counts = Counter(values)
        return len(counts) == 3 and all(c == 2 for c in counts.values())


def calculate_score(dice: Sequence[Die] | Sequence[int]) -> ScoringResult:
    """Module-level shortcut for `ScoreCalculator.calculate_score`."""
    return ScoreCalculator.calculate_score(dice)
