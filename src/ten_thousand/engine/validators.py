"""
Ten Thousand - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions.
"""

from typing import Sequence

from ten_thousand.engine.base import MAX_FACE, MIN_FACE, NUM_DICE, Die
from ten_thousand.engine.errors import DieValueOutOfRange


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 0,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        DieValueOutOfRange: If a value is not a D6 face
        ValueError: If the count is out of bounds
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise DieValueOutOfRange(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (MIN_FACE <= value <= MAX_FACE):
            raise DieValueOutOfRange(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def dice_values(dice: Sequence[Die] | Sequence[int]) -> tuple[int, ...]:
    """Face values of at most six dice; plain ints are accepted and validated."""
    values = tuple(d.value if isinstance(d, Die) else d for d in dice)
    return validate_dice_values(values, max_count=NUM_DICE)


def validate_unique_ids(dice: Sequence[Die]) -> tuple[Die, ...]:
    """Reject pools where two dice share an id."""
    dice_tuple = tuple(dice)
    ids = [d.id for d in dice_tuple]
    if len(ids) != len(set(ids)):
        raise ValueError(f"Dice ids must be unique, got {ids}.")
    return dice_tuple


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If score is invalid
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Raises:
        ValueError: If count is not 1-4
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if not (1 <= count <= 4):
        raise ValueError(f"Player count must be 1-4, got {count}.")

    return count


def validate_target_score(score: int, entry_threshold: int = 0) -> int:
    """
    Validate target score for a game.

    Args:
        score: Target score to validate
        entry_threshold: The target must be reachable from a first bank

    Raises:
        ValueError: If score is invalid
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Target score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"Target score must be positive, got {score}.")

    if score < entry_threshold:
        raise ValueError(
            f"Target score {score} is below the entry threshold {entry_threshold}."
        )

    return score
