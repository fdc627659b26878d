"""
Ten Thousand Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles dice rolling, scoring, bust detection, hot dice, banking and the
automated opponent.
"""

from ten_thousand.engine.base import (
    BankOutcome,
    BankRequested,
    BotAction,
    Die,
    DifficultyTier,
    GameRules,
    Grouping,
    GroupingSelected,
    PlayerStanding,
    RollRequested,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    TurnEvent,
    TurnPhase,
    TurnState,
)
from ten_thousand.engine.bot import BotPolicy, BotProfile, BotTurn, DecisionContext, play_bot_turn
from ten_thousand.engine.combinations import (
    CombinationFinder,
    find_scoring_options,
    has_scoring_combination,
)
from ten_thousand.engine.dice import DiceRoller
from ten_thousand.engine.errors import (
    DieValueOutOfRange,
    EmptyPoolRoll,
    EngineError,
    InvalidSelection,
    InvalidTransition,
)
from ten_thousand.engine.scoring import ScoreCalculator, calculate_score
from ten_thousand.engine.session import GameSession
from ten_thousand.engine.turn import TurnEngine, advance_turn

__all__ = [
    # Data Classes
    "Die",
    "GameRules",
    "Grouping",
    "PlayerStanding",
    "ScoringBreakdown",
    "ScoringResult",
    "TurnState",
    "DecisionContext",
    "BotProfile",
    "BotTurn",
    "GameSession",
    # Events
    "RollRequested",
    "GroupingSelected",
    "BankRequested",
    "TurnEvent",
    # Enums
    "BankOutcome",
    "BotAction",
    "DifficultyTier",
    "ScoringCategory",
    "TurnPhase",
    # Engines
    "BotPolicy",
    "CombinationFinder",
    "DiceRoller",
    "ScoreCalculator",
    "TurnEngine",
    # Functions
    "advance_turn",
    "calculate_score",
    "find_scoring_options",
    "has_scoring_combination",
    "play_bot_turn",
    # Errors
    "EngineError",
    "InvalidSelection",
    "InvalidTransition",
    "EmptyPoolRoll",
    "DieValueOutOfRange",
]
