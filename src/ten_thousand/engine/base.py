"""
Ten Thousand - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a turn can
be shared freely between the engine, the bot and any front end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

from ten_thousand.engine.errors import DieValueOutOfRange

if TYPE_CHECKING:
    from ten_thousand.config.settings import Settings


MIN_FACE = 1
MAX_FACE = 6
NUM_DICE = 6


class DifficultyTier(Enum):
    """Difficulty of the automated opponent, ordered by risk tolerance."""
    BEGINNER = 1
    INTERMEDIATE = 2
    EXPERT = 3


class TurnPhase(Enum):
    """Phases of a single player's turn."""
    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()  # live roll, a grouping must be locked
    ROLLING = auto()             # grouping locked, may roll or bank
    BANKED = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (TurnPhase.BANKED, TurnPhase.LOST)


class BankOutcome(Enum):
    """What happened to the turn score when the player banked."""
    CREDITED = auto()
    BELOW_ENTRY_THRESHOLD = auto()
    EXCEEDED_TARGET = auto()
    WON = auto()


class BotAction(Enum):
    """Decision of the bot policy after a grouping has been locked."""
    CONTINUE = auto()
    BANK = auto()


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()
    THREE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    FIVE_OF_A_KIND = auto()
    SIX_OF_A_KIND = auto()
    STRAIGHT = auto()      # 1-2-3-4-5-6
    THREE_PAIRS = auto()


@dataclass(frozen=True)
class Die:
    """
    A single die in the pool.

    Attributes:
        id: Stable position of the die within the six-dice pool
        value: Current face value (1-6)
        is_selected: Transient flag while a grouping is being chosen
        is_locked: Committed to the turn score; not re-rolled until hot dice
    """
    id: int
    value: int = 1
    is_selected: bool = False
    is_locked: bool = False

    def __post_init__(self) -> None:
        """Validate the die value is a face of a D6."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DieValueOutOfRange(
                f"Die {self.id} value must be an integer, got {type(self.value).__name__}."
            )
        if not (MIN_FACE <= self.value <= MAX_FACE):
            raise DieValueOutOfRange(
                f"Invalid die value {self.value} for die {self.id}. "
                f"Must be between {MIN_FACE} and {MAX_FACE}."
            )


Grouping = tuple[Die, ...]


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a selection.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a selection of dice.

    Attributes:
        points: Total points scored
        breakdown: Individual scoring components, in grouping order
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...] = ()

    @property
    def description(self) -> str:
        """Per-group fragments joined for display, e.g. "Three 4s (400)"."""
        return ", ".join(item.description for item in self.breakdown)

    def __iter__(self):
        # Allows `points, description = calculate_score(...)`
        yield self.points
        yield self.description

    def __str__(self) -> str:
        if not self.points:
            return "No score."
        return f"{self.description} = {self.points}"


@dataclass(frozen=True)
class GameRules:
    """
    House rules shared by every turn of a game.

    Attributes:
        target_score: Exact total needed to win; overshooting forfeits the bank
        entry_threshold: Minimum single-turn bank before points first count
        num_dice: Dice in a full pool
    """
    target_score: int = 10000
    entry_threshold: int = 500
    num_dice: int = NUM_DICE

    def __post_init__(self) -> None:
        if self.target_score <= 0:
            raise ValueError(f"Target score must be positive, got {self.target_score}.")
        if self.entry_threshold < 0:
            raise ValueError(f"Entry threshold cannot be negative, got {self.entry_threshold}.")
        if self.entry_threshold > self.target_score:
            raise ValueError("Entry threshold cannot exceed the target score.")
        if self.num_dice != NUM_DICE:
            raise ValueError(f"A pool is always {NUM_DICE} dice, got {self.num_dice}.")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GameRules":
        return cls(
            target_score=settings.target_score,
            entry_threshold=settings.entry_threshold,
        )


@dataclass(frozen=True)
class PlayerStanding:
    """
    A player's running position in the game, owned by the caller.

    Attributes:
        player_id: Identifier assigned by the surrounding application
        total_score: Points already banked
        has_entered: Whether the entry threshold has been met once
    """
    player_id: str
    total_score: int = 0
    has_entered: bool = False


@dataclass(frozen=True)
class TurnState:
    """
    Complete state of a player's turn.

    Attributes:
        standing: Standing of the player whose turn this is
        rules: Rules the turn is played under
        phase: Current phase of the turn
        dice: The six-dice pool
        turn_score: Points accumulated this turn (not yet banked)
        roll_count: Number of rolls taken this turn
        options: Groupings that may still be locked from the current roll
        is_hot_dice: All six dice scored and were reset for a fresh roll
        last_roll_score: Points locked from the most recent roll
        banked_points: Points actually credited when the turn was banked
        bank_outcome: Result of banking, set once the phase is BANKED
    """
    standing: PlayerStanding
    rules: GameRules = field(default_factory=GameRules)
    phase: TurnPhase = TurnPhase.NOT_STARTED
    dice: tuple[Die, ...] = field(default_factory=tuple)
    turn_score: int = 0
    roll_count: int = 0
    options: tuple[Grouping, ...] = field(default_factory=tuple)
    is_hot_dice: bool = False
    last_roll_score: int = 0
    banked_points: int = 0
    bank_outcome: BankOutcome | None = None

    @property
    def locked_dice(self) -> tuple[Die, ...]:
        return tuple(d for d in self.dice if d.is_locked)

    @property
    def unlocked_dice(self) -> tuple[Die, ...]:
        return tuple(d for d in self.dice if not d.is_locked)

    @property
    def available_dice_count(self) -> int:
        """Number of dice the next roll would throw."""
        if not self.dice:
            return self.rules.num_dice
        return len(self.unlocked_dice)

    @property
    def can_bank(self) -> bool:
        return self.phase is TurnPhase.ROLLING

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal


@dataclass(frozen=True)
class RollRequested:
    """Roll every unlocked die."""


@dataclass(frozen=True)
class GroupingSelected:
    """Lock one of the offered groupings."""
    grouping: Grouping


@dataclass(frozen=True)
class BankRequested:
    """Stop rolling and transfer the turn score."""


TurnEvent = Union[RollRequested, GroupingSelected, BankRequested]
