"""Deterministic simulation kernel for a career scouting game."""

from .rng import RNG, EmptyInputError, InvalidRangeError, RNGError, WeightedItem
from .session import GameSession, SessionSnapshot, WeeklyTickResult

__all__ = [
    "RNG",
    "EmptyInputError",
    "GameSession",
    "InvalidRangeError",
    "RNGError",
    "SessionSnapshot",
    "WeeklyTickResult",
    "WeightedItem",
]
