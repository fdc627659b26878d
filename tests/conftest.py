"""
Ten Thousand - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Iterable

import pytest

from ten_thousand.engine.base import Die, GameRules, PlayerStanding
from ten_thousand.engine.dice import DiceRoller


class ScriptedRandom(random.Random):
    """Random source that hands out a fixed sequence of die faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        super().__init__(0)
        self.faces = list(faces)

    def randint(self, a: int, b: int) -> int:
        if not self.faces:
            raise AssertionError("Scripted dice ran out of faces.")
        return self.faces.pop(0)


def make_dice(*values: int, locked: Iterable[int] = ()) -> tuple[Die, ...]:
    """Dice with ids 0..n-1; `locked` lists ids to lock."""
    locked_ids = set(locked)
    return tuple(
        Die(id=i, value=v, is_locked=i in locked_ids)
        for i, v in enumerate(values)
    )


def scripted_roller(*faces: int) -> DiceRoller:
    return DiceRoller(ScriptedRandom(faces))


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_selections() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Common selections with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "two_fives": ((5, 5), 100, "Two 5s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),

        # Non-scoring
        "single_two": ((2,), 0, "Single 2"),
        "two_twos": ((2, 2), 0, "Two 2s without a triple"),

        # Sets
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_fours": ((4, 4, 4), 400, "Three 4s"),
        "four_twos": ((2, 2, 2, 2), 400, "Four 2s"),
        "four_ones": ((1, 1, 1, 1), 2000, "Four 1s"),
        "five_threes": ((3, 3, 3, 3, 3), 900, "Five 3s"),
        "five_ones": ((1, 1, 1, 1, 1), 3000, "Five 1s"),
        "six_ones": ((1, 1, 1, 1, 1, 1), 4000, "Six 1s"),
        "six_sixes": ((6, 6, 6, 6, 6, 6), 2400, "Six 6s"),

        # Six-dice patterns
        "straight": ((1, 2, 3, 4, 5, 6), 1500, "Straight"),
        "straight_shuffled": ((6, 4, 2, 5, 3, 1), 1500, "Straight shuffled"),
        "three_pairs": ((2, 2, 3, 3, 4, 4), 1500, "Three pairs"),
        "three_pairs_with_ones": ((1, 5, 1, 5, 6, 6), 1500, "Three pairs incl. 1s and 5s"),

        # Mixed
        "three_ones_plus_five": ((1, 1, 1, 5), 1050, "Three 1s + single 5"),
        "three_fours_plus_one": ((4, 4, 4, 1), 500, "Three 4s + single 1"),
        "two_triples": ((1, 1, 1, 5, 5, 5), 1500, "Three 1s + three 5s"),
        "four_and_pair": ((2, 2, 2, 2, 3, 3), 400, "Four 2s + dead pair"),
    }


@pytest.fixture
def dead_rolls() -> list[tuple[int, ...]]:
    """Rolls with no scoring grouping."""
    return [
        (2,),
        (6,),
        (2, 3),
        (4, 6),
        (2, 2, 3, 4),
        (2, 3, 4, 6),
        (2, 2, 3, 3, 4),
        (2, 2, 3, 4, 6, 6),
    ]


# =============================================================================
# TURN FIXTURES
# =============================================================================

@pytest.fixture
def rules() -> GameRules:
    return GameRules(target_score=10000, entry_threshold=500)


@pytest.fixture
def newcomer() -> PlayerStanding:
    """Player who has not yet met the entry threshold."""
    return PlayerStanding(player_id="ana")


@pytest.fixture
def entered_player() -> PlayerStanding:
    return PlayerStanding(player_id="ana", total_score=2000, has_entered=True)


@pytest.fixture
def seeded_roller() -> DiceRoller:
    return DiceRoller.seeded(1234)


@pytest.fixture
def dice_factory():
    """Builder for dice pools: dice_factory(1, 5, 2, locked={1})."""
    return make_dice


@pytest.fixture
def roller_factory():
    """Builder for rollers that throw a scripted sequence of faces."""
    return scripted_roller
