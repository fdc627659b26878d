"""
Ten Thousand - Engine Errors

Every error the engine raises signals a broken caller contract or corrupted
data, never a normal game outcome. Busts and banks are reported through
TurnState, not through exceptions.
"""


class EngineError(ValueError):
    """Base class for all engine errors."""


class InvalidSelection(EngineError):
    """A grouping was chosen that is not among the offered scoring options."""


class EmptyPoolRoll(EngineError):
    """A roll was requested for a pool with no dice in it."""


class DieValueOutOfRange(EngineError):
    """A die carries a face value outside 1-6."""


class InvalidTransition(EngineError):
    """An event is not legal in the current turn or game phase."""
