"""Strategy implementations for Dilemma Arena.

This module provides the twelve strategies a player can face, all of them
implementing the Strategy base class, and the catalog that looks them up.
"""

from dilemma_arena.strategies.base import (
    Strategy,
    last_opponent_choice,
    opponent_ever_defected,
)
from dilemma_arena.strategies.catalog import (
    StrategyCatalog,
    get_default_catalog,
    get_strategy,
    list_strategy_ids,
    normalize_strategy_id,
)
from dilemma_arena.strategies.classic import (
    CLASSIC_STRATEGIES,
    AlwaysCooperate,
    AlwaysDefect,
    Davis,
    Friedman,
    Grudger,
    Joss,
    Pavlov,
    Prober,
    RandomStrategy,
    SuspiciousTitForTat,
    TitForTat,
    TitForTwoTats,
)

__all__ = [
    # Base class and helpers
    "Strategy",
    "last_opponent_choice",
    "opponent_ever_defected",
    # Catalog
    "StrategyCatalog",
    "get_default_catalog",
    "get_strategy",
    "list_strategy_ids",
    "normalize_strategy_id",
    # Strategies
    "CLASSIC_STRATEGIES",
    "TitForTat",
    "TitForTwoTats",
    "Pavlov",
    "Friedman",
    "Davis",
    "Grudger",
    "SuspiciousTitForTat",
    "Joss",
    "Prober",
    "RandomStrategy",
    "AlwaysCooperate",
    "AlwaysDefect",
]
