"""
Ten Thousand - Watch a Bot Game

Plays a complete game between bots through the real engine and logs every
turn. Useful for eyeballing the bot tiers against each other.

    python -m ten_thousand --difficulty beginner --difficulty expert --seed 7
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from ten_thousand.config import configure_logging, get_settings
from ten_thousand.config.settings import Settings
from ten_thousand.engine import (
    BotPolicy,
    DiceRoller,
    DifficultyTier,
    GameRules,
    GameSession,
    play_bot_turn,
)

logger = logging.getLogger(__name__)


def watch_bot_game(
    difficulties: Sequence[DifficultyTier],
    settings: Settings,
    max_rounds: int = 500,
) -> GameSession:
    """
    Play bots against each other until one wins or `max_rounds` pass.

    Players are named `bot-<n>-<tier>` in seating order.
    """
    roller = DiceRoller.seeded(settings.rng_seed)
    policy = BotPolicy()
    tiers = {
        f"bot-{i + 1}-{tier.name.lower()}": tier
        for i, tier in enumerate(difficulties)
    }
    session = GameSession.new(list(tiers), GameRules.from_settings(settings))

    while not session.is_over and session.current_round <= max_rounds:
        player = session.current_player
        turn = play_bot_turn(
            session.start_turn(),
            tiers[player.player_id],
            session.opponent_max_score(player.player_id),
            roller,
            policy,
        )
        final = turn.final_state
        logger.info(
            "Round %d %s: %s %s -> total %d",
            session.current_round,
            player.player_id,
            final.phase.name,
            final.bank_outcome.name if final.bank_outcome else "",
            final.standing.total_score,
        )
        session = session.complete_turn(final)

    if session.is_over:
        logger.info("Winner: %s in round %d", session.winner_id, session.current_round)
    else:
        logger.warning("No winner after %d rounds", max_rounds)
    return session


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Watch bots play 10000.")
    parser.add_argument(
        "--difficulty",
        action="append",
        choices=[t.name.lower() for t in DifficultyTier],
        help="Tier of each bot, in seating order (repeat for more bots).",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed.")
    parser.add_argument("--max-rounds", type=int, default=500)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    if args.seed is not None:
        settings = settings.model_copy(update={"rng_seed": args.seed})
    configure_logging(settings)

    names = args.difficulty or [settings.default_difficulty.name.lower()] * 2
    if len(names) < 2:
        names = names * 2
    session = watch_bot_game(
        [DifficultyTier[name.upper()] for name in names],
        settings,
        max_rounds=args.max_rounds,
    )
    return 0 if session.is_over else 1
