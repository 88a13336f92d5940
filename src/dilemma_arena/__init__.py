"""Dilemma Arena: iterated Prisoner's Dilemma against Axelrod's tournament strategies."""

from dilemma_arena.engine import MatchEngine
from dilemma_arena.errors import (
    DilemmaArenaError,
    MatchFinishedError,
    SessionNotFoundError,
    UnknownStrategyError,
)
from dilemma_arena.models import Choice, RoundRecord, StrategyMeta

__version__ = "0.1.0"

__all__ = [
    "MatchEngine",
    "Choice",
    "RoundRecord",
    "StrategyMeta",
    "DilemmaArenaError",
    "UnknownStrategyError",
    "SessionNotFoundError",
    "MatchFinishedError",
]
