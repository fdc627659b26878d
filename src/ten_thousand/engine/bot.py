"""
Ten Thousand - Bot Decision Policy

Pure decision functions for the automated opponent. Risk tolerance is a
per-difficulty profile of tunable constants rather than a player subclass,
so the same context always yields the same decision.

The continue/bank rule weighs the expected gain of one more roll against the
chance of losing the turn score:

    risk × catch_up × (1 - p_bust) × expected_gain  >=  p_bust × turn_score

`p_bust` and `expected_gain` depend only on how many dice would be thrown.
Higher tiers carry a larger `risk` and a larger minimum bank, so for the same
context a harder bot keeps rolling at least as often as an easier one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ten_thousand.engine.base import (
    NUM_DICE,
    BankRequested,
    BotAction,
    DifficultyTier,
    GameRules,
    Grouping,
    GroupingSelected,
    RollRequested,
    TurnPhase,
    TurnState,
)
from ten_thousand.engine.dice import DiceRoller
from ten_thousand.engine.errors import InvalidSelection
from ten_thousand.engine.scoring import ScoreCalculator
from ten_thousand.engine.turn import TurnEngine
from ten_thousand.engine.validators import validate_score

logger = logging.getLogger(__name__)


# Chance that throwing N dice shows no 1, no 5, no triple, no straight and no
# three pairs.
BUST_PROBABILITY: dict[int, float] = {
    1: 0.667,
    2: 0.444,
    3: 0.278,
    4: 0.157,
    5: 0.077,
    6: 0.023,
}

# Rough points gained by a surviving throw of N dice.
EXPECTED_ROLL_GAIN: dict[int, int] = {
    1: 75,
    2: 100,
    3: 150,
    4: 200,
    5: 275,
    6: 400,
}


@dataclass(frozen=True)
class BotProfile:
    """
    Tunable risk constants for one difficulty tier.

    Attributes:
        risk_multiplier: Weight on the expected gain of rolling again
        min_score_to_bank: Turn score below which the bot never banks
        prefer_more_dice: Break point ties by the grouping with most dice
    """
    risk_multiplier: float
    min_score_to_bank: int
    prefer_more_dice: bool = False


DEFAULT_PROFILES: dict[DifficultyTier, BotProfile] = {
    DifficultyTier.BEGINNER: BotProfile(risk_multiplier=0.6, min_score_to_bank=300),
    DifficultyTier.INTERMEDIATE: BotProfile(risk_multiplier=0.8, min_score_to_bank=450),
    DifficultyTier.EXPERT: BotProfile(
        risk_multiplier=1.0, min_score_to_bank=600, prefer_more_dice=True,
    ),
}


@dataclass(frozen=True)
class DecisionContext:
    """
    Everything the bot knows when deciding whether to roll again.

    Attributes:
        turn_score: Points accumulated this turn
        banked_score: Bot's running total
        opponent_max_score: Highest running total among the other players
        dice_remaining: Unlocked dice; 0 means hot dice (six on the next throw)
        has_entered: Entry flag; None derives it from a non-zero banked score
        target_score: Score that wins the game
        entry_threshold: Minimum first bank
    """
    turn_score: int
    banked_score: int
    opponent_max_score: int
    dice_remaining: int
    has_entered: bool | None = None
    target_score: int = GameRules.target_score
    entry_threshold: int = GameRules.entry_threshold

    def __post_init__(self) -> None:
        validate_score(self.turn_score)
        validate_score(self.banked_score)
        validate_score(self.opponent_max_score)
        if not (0 <= self.dice_remaining <= NUM_DICE):
            raise ValueError(
                f"Dice remaining must be between 0 and {NUM_DICE}, got {self.dice_remaining}."
            )

    @property
    def entered(self) -> bool:
        if self.has_entered is None:
            return self.banked_score > 0
        return self.has_entered

    @property
    def dice_to_throw(self) -> int:
        return self.dice_remaining or NUM_DICE

    @classmethod
    def from_turn(cls, state: TurnState, opponent_max_score: int) -> "DecisionContext":
        return cls(
            turn_score=state.turn_score,
            banked_score=state.standing.total_score,
            opponent_max_score=opponent_max_score,
            dice_remaining=0 if state.is_hot_dice else state.available_dice_count,
            has_entered=state.standing.has_entered,
            target_score=state.rules.target_score,
            entry_threshold=state.rules.entry_threshold,
        )


@dataclass(frozen=True)
class BotPolicy:
    """
    Continue/bank and grouping choice for every difficulty tier.

    Attributes:
        profiles: Risk constants per tier
        catch_up_bias: Extra appetite when an opponent is ahead
        urgency_bias: Further appetite when an opponent nears the target
        urgency_score: Opponent total that triggers `urgency_bias`
    """
    profiles: dict[DifficultyTier, BotProfile] = field(
        default_factory=lambda: dict(DEFAULT_PROFILES)
    )
    catch_up_bias: float = 0.25
    urgency_bias: float = 0.5
    urgency_score: int = 8000

    def decide(self, context: DecisionContext, difficulty: DifficultyTier) -> BotAction:
        """
        Decide whether to roll again or bank.

        Args:
            context: Turn and game situation
            difficulty: Tier whose profile applies

        Returns:
            BotAction.CONTINUE or BotAction.BANK
        """
        profile = self.profiles[difficulty]

        if not context.entered and context.turn_score < context.entry_threshold:
            return BotAction.CONTINUE

        if context.banked_score + context.turn_score >= context.target_score:
            return BotAction.BANK

        if context.turn_score < profile.min_score_to_bank:
            return BotAction.CONTINUE

        p_bust = self.bust_probability(context.dice_to_throw)
        gain = EXPECTED_ROLL_GAIN[context.dice_to_throw]
        appetite = profile.risk_multiplier * self.catch_up_factor(context)

        roll_value = appetite * (1.0 - p_bust) * gain
        risk_value = p_bust * context.turn_score
        return BotAction.CONTINUE if roll_value >= risk_value else BotAction.BANK

    def catch_up_factor(self, context: DecisionContext) -> float:
        factor = 1.0
        if context.opponent_max_score > context.banked_score + context.turn_score:
            factor += self.catch_up_bias
        if context.opponent_max_score >= self.urgency_score:
            factor += self.urgency_bias
        return factor

    @staticmethod
    def bust_probability(dice_count: int) -> float:
        return BUST_PROBABILITY[dice_count or NUM_DICE]

    def select(self, options: Sequence[Grouping], difficulty: DifficultyTier) -> Grouping:
        """
        Pick one grouping among the offered options.

        Highest immediate points wins. Ties go to the grouping with the most
        dice when the tier prefers reaching hot dice, otherwise to the one
        enumerated first.

        Raises:
            InvalidSelection: If there is nothing to choose from
        """
        if not options:
            raise InvalidSelection("No scoring groupings to choose from.")

        prefer_more_dice = self.profiles[difficulty].prefer_more_dice

        def rank(indexed: tuple[int, Grouping]) -> tuple[int, int, int]:
            index, grouping = indexed
            points = ScoreCalculator.calculate_score(grouping).points
            dice = len(grouping) if prefer_more_dice else 0
            return points, dice, -index

        return max(enumerate(options), key=rank)[1]


@dataclass(frozen=True)
class BotTurn:
    """
    Result of a complete bot turn.

    Attributes:
        final_state: Terminal TurnState (BANKED or LOST)
        history: Every intermediate state, in order, for replay/pacing
    """
    final_state: TurnState
    history: tuple[TurnState, ...]


def play_bot_turn(
    state: TurnState,
    difficulty: DifficultyTier,
    opponent_max_score: int,
    roller: DiceRoller,
    policy: BotPolicy | None = None
) -> BotTurn:
    """
    Play a bot turn to completion through the turn engine.

    After every roll the bot locks one grouping chosen by the policy, then
    asks the policy whether to roll again or bank.

    Args:
        state: Turn state in NOT_STARTED (or ROLLING to resume)
        difficulty: Bot tier
        opponent_max_score: Best running total among the other players
        roller: Dice source
        policy: Decision policy (default constants if None)

    Returns:
        BotTurn with the terminal state and the path that led to it
    """
    policy = policy or BotPolicy()
    history: list[TurnState] = [state]

    if state.phase is TurnPhase.ROLLING:
        state = _decide_and_act(state, difficulty, opponent_max_score, policy)
        if state is not history[-1]:
            history.append(state)

    while not state.is_over:
        state = TurnEngine.advance_turn(state, RollRequested(), roller)
        history.append(state)
        if state.is_over:
            break

        grouping = policy.select(state.options, difficulty)
        state = TurnEngine.advance_turn(state, GroupingSelected(grouping))
        history.append(state)

        state = _decide_and_act(state, difficulty, opponent_max_score, policy)
        if state is not history[-1]:
            history.append(state)

    logger.info(
        "Bot %s (%s) finished turn: %s after %d rolls",
        state.standing.player_id, difficulty.name, state.phase.name, state.roll_count,
    )
    return BotTurn(final_state=state, history=tuple(history))


def _decide_and_act(
    state: TurnState,
    difficulty: DifficultyTier,
    opponent_max_score: int,
    policy: BotPolicy
) -> TurnState:
    """Bank now if the policy says so; otherwise leave the roll to the loop."""
    context = DecisionContext.from_turn(state, opponent_max_score)
    action = policy.decide(context, difficulty)
    logger.debug(
        "Bot %s decide(turn=%d, dice=%d) -> %s",
        state.standing.player_id, context.turn_score, context.dice_remaining, action.name,
    )
    if action is BotAction.BANK:
        return TurnEngine.advance_turn(state, BankRequested())
    return state
