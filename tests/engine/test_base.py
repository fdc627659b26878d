"""
Ten Thousand - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest
from ten_thousand.engine.base import (
    Die,
    DifficultyTier,
    GameRules,
    PlayerStanding,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    TurnPhase,
    TurnState,
)
from ten_thousand.engine.errors import DieValueOutOfRange, EngineError
from ten_thousand.engine.validators import (
    dice_values,
    validate_dice_values,
    validate_player_count,
    validate_score,
    validate_target_score,
    validate_unique_ids,
)


class TestDifficultyTier:
    """Tests for DifficultyTier enum."""

    def test_tiers_are_ordered_by_value(self):
        assert DifficultyTier.BEGINNER.value < DifficultyTier.INTERMEDIATE.value
        assert DifficultyTier.INTERMEDIATE.value < DifficultyTier.EXPERT.value


class TestTurnPhase:
    """Tests for TurnPhase enum."""

    @pytest.mark.parametrize("phase", [TurnPhase.BANKED, TurnPhase.LOST])
    def test_terminal_phases(self, phase: TurnPhase):
        assert phase.is_terminal

    @pytest.mark.parametrize("phase", [
        TurnPhase.NOT_STARTED,
        TurnPhase.AWAITING_SELECTION,
        TurnPhase.ROLLING,
    ])
    def test_live_phases(self, phase: TurnPhase):
        assert not phase.is_terminal


class TestDie:
    """Tests for Die dataclass."""

    def test_defaults(self):
        die = Die(id=3, value=4)
        assert die.is_locked is False
        assert die.is_selected is False

    def test_invalid_value_raises(self):
        with pytest.raises(DieValueOutOfRange, match="Invalid die value 7"):
            Die(id=0, value=7)

    def test_zero_value_raises(self):
        with pytest.raises(DieValueOutOfRange, match="Invalid die value 0"):
            Die(id=0, value=0)

    def test_negative_value_raises(self):
        with pytest.raises(DieValueOutOfRange, match="Invalid die value -1"):
            Die(id=0, value=-1)

    def test_non_integer_value_raises(self):
        with pytest.raises(DieValueOutOfRange, match="must be an integer"):
            Die(id=0, value="3")  # type: ignore[arg-type]

    def test_out_of_range_is_a_value_error(self):
        with pytest.raises(ValueError):
            Die(id=0, value=9)

    def test_die_is_immutable(self):
        die = Die(id=0, value=1)
        with pytest.raises(AttributeError):
            die.value = 2  # type: ignore[misc]


class TestScoringResult:
    """Tests for ScoringResult dataclass."""

    def test_description_joins_breakdown(self):
        result = ScoringResult(
            points=500,
            breakdown=(
                ScoringBreakdown(ScoringCategory.THREE_OF_A_KIND, (4, 4, 4), 400, "Three 4s (400)"),
                ScoringBreakdown(ScoringCategory.SINGLE_ONE, (1,), 100, "Single 1 (100)"),
            ),
        )
        assert result.description == "Three 4s (400), Single 1 (100)"

    def test_unpacks_to_points_and_description(self):
        points, description = ScoringResult(points=0)
        assert points == 0
        assert description == ""

    def test_str_for_zero(self):
        assert str(ScoringResult(points=0)) == "No score."


class TestGameRules:
    """Tests for GameRules dataclass."""

    def test_defaults(self):
        rules = GameRules()
        assert rules.target_score == 10000
        assert rules.entry_threshold == 500
        assert rules.num_dice == 6

    def test_non_positive_target_raises(self):
        with pytest.raises(ValueError, match="positive"):
            GameRules(target_score=0)

    def test_threshold_above_target_raises(self):
        with pytest.raises(ValueError, match="exceed"):
            GameRules(target_score=400, entry_threshold=500)

    @pytest.mark.parametrize("num_dice", [5, 7])
    def test_pool_size_other_than_six_raises(self, num_dice: int):
        with pytest.raises(ValueError, match="always 6 dice"):
            GameRules(num_dice=num_dice)


class TestTurnState:
    """Tests for TurnState properties."""

    def test_fresh_state_throws_full_pool(self):
        state = TurnState(standing=PlayerStanding("p1"))
        assert state.phase is TurnPhase.NOT_STARTED
        assert state.available_dice_count == 6
        assert state.can_bank is False
        assert state.is_over is False

    def test_locked_and_unlocked_split(self, dice_factory):
        state = TurnState(
            standing=PlayerStanding("p1"),
            dice=dice_factory(1, 2, 3, 4, 5, 6, locked={0, 4}),
        )
        assert [d.id for d in state.locked_dice] == [0, 4]
        assert [d.id for d in state.unlocked_dice] == [1, 2, 3, 5]
        assert state.available_dice_count == 4

    def test_can_bank_only_while_rolling(self):
        for phase in TurnPhase:
            state = TurnState(standing=PlayerStanding("p1"), phase=phase)
            assert state.can_bank is (phase is TurnPhase.ROLLING)


class TestValidators:
    """Tests for validation utilities."""

    def test_validate_dice_values_returns_tuple(self):
        assert validate_dice_values([1, 2, 3]) == (1, 2, 3)

    def test_validate_dice_values_empty_allowed(self):
        assert validate_dice_values([]) == ()

    def test_validate_dice_values_min_count(self):
        with pytest.raises(ValueError, match="At least 1"):
            validate_dice_values([], min_count=1)

    def test_validate_dice_values_max_count(self):
        with pytest.raises(ValueError, match="At most 6"):
            validate_dice_values([1] * 7, max_count=6)

    @pytest.mark.parametrize("bad", [0, 7, -3])
    def test_validate_dice_values_out_of_range(self, bad: int):
        with pytest.raises(DieValueOutOfRange):
            validate_dice_values([1, bad])

    def test_validate_dice_values_rejects_bool(self):
        with pytest.raises(DieValueOutOfRange, match="integer"):
            validate_dice_values([True])

    def test_dice_values_accepts_dice_and_ints(self, dice_factory):
        assert dice_values(dice_factory(4, 5)) == (4, 5)
        assert dice_values([4, 5]) == (4, 5)

    def test_validate_unique_ids(self):
        with pytest.raises(ValueError, match="unique"):
            validate_unique_ids([Die(id=1, value=1), Die(id=1, value=2)])

    def test_validate_score(self):
        assert validate_score(0) == 0
        with pytest.raises(ValueError, match="negative"):
            validate_score(-50)
        assert validate_score(-50, allow_negative=True) == -50

    @pytest.mark.parametrize("count", [1, 2, 3, 4])
    def test_validate_player_count_valid(self, count: int):
        assert validate_player_count(count) == count

    @pytest.mark.parametrize("count", [0, 5])
    def test_validate_player_count_invalid(self, count: int):
        with pytest.raises(ValueError, match="1-4"):
            validate_player_count(count)

    def test_validate_target_score(self):
        assert validate_target_score(10000, 500) == 10000
        with pytest.raises(ValueError, match="positive"):
            validate_target_score(0)
        with pytest.raises(ValueError, match="below the entry threshold"):
            validate_target_score(400, 500)

    def test_engine_errors_are_value_errors(self):
        assert issubclass(EngineError, ValueError)
        assert issubclass(DieValueOutOfRange, EngineError)
