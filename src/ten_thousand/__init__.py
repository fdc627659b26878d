"""
Ten Thousand.

Scoring and turn-progression engine for the six-dice "10000" game.
"""

__version__ = "0.1.0"
