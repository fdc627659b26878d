"""
Ten Thousand - Game Session

Rotation of turns between players, running totals and the winner. The
session never rolls dice itself; it hands out a fresh TurnState for the
current player and records the terminal state it gets back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Sequence

from ten_thousand.engine.base import (
    BankOutcome,
    GameRules,
    PlayerStanding,
    TurnState,
)
from ten_thousand.engine.errors import InvalidTransition
from ten_thousand.engine.turn import TurnEngine
from ten_thousand.engine.validators import validate_player_count, validate_target_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSession:
    """
    Immutable snapshot of a game in progress.

    Attributes:
        players: Standings in turn order
        rules: Target score and entry threshold
        current_index: Index of the player whose turn it is
        current_round: Round number, starting at 1
        winner_id: Player who hit the target exactly, once the game is over
    """
    players: tuple[PlayerStanding, ...]
    rules: GameRules = field(default_factory=GameRules)
    current_index: int = 0
    current_round: int = 1
    winner_id: str | None = None

    @classmethod
    def new(cls, player_ids: Sequence[str], rules: GameRules | None = None) -> "GameSession":
        """
        Start a game for the given players, in turn order.

        Raises:
            ValueError: If the player count or ids are invalid
        """
        rules = rules or GameRules()
        validate_player_count(len(player_ids))
        validate_target_score(rules.target_score, rules.entry_threshold)
        if len(set(player_ids)) != len(player_ids):
            raise ValueError(f"Player ids must be unique, got {list(player_ids)}.")

        return cls(
            players=tuple(PlayerStanding(player_id=pid) for pid in player_ids),
            rules=rules,
        )

    @property
    def is_over(self) -> bool:
        return self.winner_id is not None

    @property
    def current_player(self) -> PlayerStanding:
        return self.players[self.current_index]

    def standing(self, player_id: str) -> PlayerStanding:
        for player in self.players:
            if player.player_id == player_id:
                return player
        raise KeyError(player_id)

    def opponent_max_score(self, player_id: str) -> int:
        """Highest running total among everyone except `player_id`."""
        return max(
            (p.total_score for p in self.players if p.player_id != player_id),
            default=0,
        )

    def start_turn(self) -> TurnState:
        """Fresh turn for the current player."""
        if self.is_over:
            raise InvalidTransition("The game is over.")
        return TurnEngine.create_initial_turn_state(self.current_player, self.rules)

    def complete_turn(self, final_state: TurnState) -> "GameSession":
        """
        Record a finished turn and pass play to the next player.

        Raises:
            InvalidTransition: If the game is over, the turn is still live,
                or the turn belongs to someone else
        """
        if self.is_over:
            raise InvalidTransition("The game is over.")
        if not final_state.is_over:
            raise InvalidTransition(
                f"Turn is still {final_state.phase.name}; bank or bust before completing it."
            )
        if final_state.standing.player_id != self.current_player.player_id:
            raise InvalidTransition(
                f"It is {self.current_player.player_id}'s turn, "
                f"not {final_state.standing.player_id}'s."
            )

        players = list(self.players)
        players[self.current_index] = final_state.standing

        if final_state.bank_outcome is BankOutcome.WON:
            logger.info(
                "Player %s wins with %d in round %d",
                final_state.standing.player_id,
                final_state.standing.total_score,
                self.current_round,
            )
            return replace(self, players=tuple(players), winner_id=final_state.standing.player_id)

        next_index = (self.current_index + 1) % len(players)
        next_round = self.current_round + 1 if next_index == 0 else self.current_round
        return replace(
            self,
            players=tuple(players),
            current_index=next_index,
            current_round=next_round,
        )
