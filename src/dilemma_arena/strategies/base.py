"""Base strategy interface for Dilemma Arena.

This module defines the abstract base class every tournament strategy
implements, plus small history helpers shared by the concrete strategies.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from dilemma_arena.models.choices import Choice, RoundRecord
from dilemma_arena.models.strategy_meta import StrategyMeta


class Strategy(ABC):
    """Abstract base class for all tournament strategies.

    A strategy is a decision rule over the match history. It holds no
    per-match state, so a single instance can serve any number of
    concurrent sessions.

    History is given from the strategy's own point of view: at index i,
    ``player_choice`` is the strategy's move in round i+1 and
    ``opponent_choice`` is the other side's.
    """

    meta: ClassVar[StrategyMeta]

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def name(self) -> str:
        return self.meta.name

    @abstractmethod
    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        """Choose the move for the next round.

        Args:
            history: All previous rounds, empty on round 1
            rng: Randomness source, only consulted by probabilistic strategies

        Returns:
            Choice.C or Choice.D
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


def last_opponent_choice(history: Sequence[RoundRecord]) -> Choice | None:
    """The other side's most recent move, or None before round 2."""
    if not history:
        return None
    return history[-1].opponent_choice


def opponent_ever_defected(history: Sequence[RoundRecord]) -> bool:
    """True if the other side has defected at least once."""
    return any(r.opponent_choice == Choice.D for r in history)
