"""
Ten Thousand - Turn State Machine

Drives one player's turn across repeated rolls:

    NOT_STARTED --roll--> AWAITING_SELECTION | LOST
    AWAITING_SELECTION --select--> ROLLING
    ROLLING --select--> ROLLING (another grouping from the same roll)
    ROLLING --roll--> AWAITING_SELECTION | LOST
    ROLLING --bank--> BANKED

State is passed in and returned, never stored. An illegal event raises and
leaves the caller's state untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ten_thousand.engine.base import (
    BankOutcome,
    BankRequested,
    Die,
    GameRules,
    Grouping,
    GroupingSelected,
    PlayerStanding,
    RollRequested,
    TurnEvent,
    TurnPhase,
    TurnState,
)
from ten_thousand.engine.combinations import CombinationFinder
from ten_thousand.engine.dice import DiceRoller
from ten_thousand.engine.errors import EmptyPoolRoll, InvalidSelection, InvalidTransition
from ten_thousand.engine.scoring import ScoreCalculator

logger = logging.getLogger(__name__)


class TurnEngine:
    """
    Stateless engine for the 10000 turn flow.

    All methods are class methods operating on immutable data.
    """

    @classmethod
    def create_initial_turn_state(
        cls,
        standing: PlayerStanding,
        rules: GameRules | None = None
    ) -> TurnState:
        """
        Create the initial state for a new turn.

        Returns:
            Fresh TurnState with no dice rolled yet
        """
        return TurnState(standing=standing, rules=rules or GameRules())

    @classmethod
    def advance_turn(
        cls,
        state: TurnState,
        event: TurnEvent,
        roller: DiceRoller | None = None
    ) -> TurnState:
        """
        Apply one event to a turn.

        Args:
            state: Current turn state
            event: RollRequested, GroupingSelected or BankRequested
            roller: Dice source for roll events (default: unseeded)

        Returns:
            The new TurnState

        Raises:
            InvalidTransition: If the event is not legal in the current phase
            InvalidSelection: If a selected grouping was not offered
        """
        if isinstance(event, RollRequested):
            return cls.process_roll(state, roller or DiceRoller())
        if isinstance(event, GroupingSelected):
            return cls.process_selection(state, event.grouping)
        if isinstance(event, BankRequested):
            return cls.process_bank(state)
        raise InvalidTransition(f"Unknown turn event {event!r}.")

    @classmethod
    def process_roll(cls, state: TurnState, roller: DiceRoller) -> TurnState:
        """
        Roll the unlocked dice and check whether the turn survives.

        On the first roll a fresh six-dice pool is thrown; after hot dice
        the reset pool carried on the state is thrown whole.
        """
        if state.phase not in (TurnPhase.NOT_STARTED, TurnPhase.ROLLING):
            raise InvalidTransition(f"Cannot roll while the turn is {state.phase.name}.")

        if not state.dice:
            dice = roller.fresh_set(state.rules.num_dice)
        else:
            if not state.unlocked_dice:
                raise EmptyPoolRoll("No unlocked dice left to roll; hot dice reset was skipped.")
            dice = roller.roll(state.dice)

        roll_count = state.roll_count + 1
        unlocked = tuple(d for d in dice if not d.is_locked)

        if not CombinationFinder.has_scoring_combination(unlocked):
            logger.info(
                "Player %s busted on roll %d, losing %d points",
                state.standing.player_id, roll_count, state.turn_score,
            )
            return replace(
                state,
                phase=TurnPhase.LOST,
                dice=dice,
                turn_score=0,
                roll_count=roll_count,
                options=(),
                is_hot_dice=False,
                last_roll_score=0,
            )

        options = CombinationFinder.find_scoring_options(unlocked)
        logger.debug(
            "Player %s roll %d: %s (%d options)",
            state.standing.player_id, roll_count, [d.value for d in unlocked], len(options),
        )
        return replace(
            state,
            phase=TurnPhase.AWAITING_SELECTION,
            dice=dice,
            roll_count=roll_count,
            options=options,
            is_hot_dice=False,
            last_roll_score=0,
        )

    @classmethod
    def process_selection(cls, state: TurnState, grouping: Grouping) -> TurnState:
        """
        Lock an offered grouping and add its points to the turn score.

        When every die ends up locked the pool is reset to six unlocked
        dice (hot dice) without touching the turn score.
        """
        if state.phase not in (TurnPhase.AWAITING_SELECTION, TurnPhase.ROLLING):
            raise InvalidTransition(f"Cannot select dice while the turn is {state.phase.name}.")

        chosen = cls._match_option(state.options, grouping)
        chosen_ids = {d.id for d in chosen}
        result = ScoreCalculator.calculate_score(chosen)

        dice = tuple(
            replace(d, is_locked=True, is_selected=False) if d.id in chosen_ids else d
            for d in state.dice
        )
        turn_score = state.turn_score + result.points
        last_roll_score = state.last_roll_score + result.points

        if all(d.is_locked for d in dice):
            logger.info(
                "Player %s has hot dice with %d points",
                state.standing.player_id, turn_score,
            )
            return replace(
                state,
                phase=TurnPhase.ROLLING,
                dice=cls.reset_hot_dice(dice),
                turn_score=turn_score,
                options=(),
                is_hot_dice=True,
                last_roll_score=last_roll_score,
            )

        remaining = tuple(d for d in dice if not d.is_locked)
        return replace(
            state,
            phase=TurnPhase.ROLLING,
            dice=dice,
            turn_score=turn_score,
            options=CombinationFinder.find_scoring_options(remaining),
            is_hot_dice=False,
            last_roll_score=last_roll_score,
        )

    @classmethod
    def process_bank(cls, state: TurnState) -> TurnState:
        """
        End the turn and transfer its score under the entry and target rules.
        """
        if not state.can_bank:
            raise InvalidTransition(
                f"Cannot bank while the turn is {state.phase.name}; lock a grouping first."
            )

        outcome, credited = cls.resolve_bank(state.standing, state.turn_score, state.rules)
        standing = state.standing
        if credited:
            standing = replace(
                standing,
                total_score=standing.total_score + credited,
                has_entered=True,
            )

        logger.info(
            "Player %s banked %d points (%s), total %d",
            standing.player_id, state.turn_score, outcome.name, standing.total_score,
        )
        return replace(
            state,
            phase=TurnPhase.BANKED,
            standing=standing,
            turn_score=0,
            options=(),
            banked_points=credited,
            bank_outcome=outcome,
        )

    @classmethod
    def resolve_bank(
        cls,
        standing: PlayerStanding,
        turn_score: int,
        rules: GameRules
    ) -> tuple[BankOutcome, int]:
        """
        Decide how much of a turn score is credited.

        Returns:
            Tuple of (outcome, points credited to the running total)
        """
        if not standing.has_entered and turn_score < rules.entry_threshold:
            return BankOutcome.BELOW_ENTRY_THRESHOLD, 0

        total = standing.total_score + turn_score
        if total > rules.target_score:
            return BankOutcome.EXCEEDED_TARGET, 0
        if total == rules.target_score:
            return BankOutcome.WON, turn_score
        return BankOutcome.CREDITED, turn_score

    @classmethod
    def reset_hot_dice(cls, dice: tuple[Die, ...]) -> tuple[Die, ...]:
        """Unlock every die so the whole pool can be thrown again."""
        return tuple(replace(d, is_locked=False, is_selected=False) for d in dice)

    @classmethod
    def _match_option(cls, options: tuple[Grouping, ...], grouping: Grouping) -> Grouping:
        """Find the offered option with exactly the ids in `grouping`."""
        wanted = sorted(d.id for d in grouping)
        for option in options:
            if sorted(d.id for d in option) == wanted:
                return option
        raise InvalidSelection(
            f"Dice {wanted} are not one of the offered groupings "
            f"{[sorted(d.id for d in o) for o in options]}."
        )


def advance_turn(
    state: TurnState,
    event: TurnEvent,
    roller: DiceRoller | None = None
) -> TurnState:
    """Module-level shortcut for `TurnEngine.advance_turn`."""
    return TurnEngine.advance_turn(state, event, roller)
