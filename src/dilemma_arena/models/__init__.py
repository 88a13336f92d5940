"""Data models for Dilemma Arena.

This module contains the value types and the match state machine:
- choices: Choice enum and RoundRecord
- strategy_meta: StrategyMeta and StrategyTag
- session: MatchSession and round-count clamping
"""

from dilemma_arena.models.choices import Choice, RoundRecord
from dilemma_arena.models.session import MatchSession, clamp_rounds
from dilemma_arena.models.strategy_meta import StrategyMeta, StrategyTag

__all__ = [
    "Choice",
    "RoundRecord",
    "StrategyMeta",
    "StrategyTag",
    "MatchSession",
    "clamp_rounds",
]
