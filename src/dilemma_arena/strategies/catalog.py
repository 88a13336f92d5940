"""Strategy catalog for Dilemma Arena.

The catalog holds one instance of each tournament strategy in a fixed order,
keyed by id. It is immutable after construction and safe to share between
threads.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from dilemma_arena.errors import UnknownStrategyError
from dilemma_arena.models.strategy_meta import StrategyMeta
from dilemma_arena.strategies.base import Strategy
from dilemma_arena.strategies.classic import CLASSIC_STRATEGIES


def normalize_strategy_id(strategy_id: str) -> str:
    """Normalize a strategy id ("Tit-For-Tat" -> "tit_for_tat")."""
    return strategy_id.strip().lower().replace("-", "_").replace(" ", "_")


class StrategyCatalog:
    """Ordered, id-keyed collection of strategies."""

    def __init__(self, strategies: Iterable[Strategy] | None = None):
        if strategies is None:
            strategies = [strategy_cls() for strategy_cls in CLASSIC_STRATEGIES]
        self._ordered: tuple[Strategy, ...] = tuple(strategies)
        self._by_id: dict[str, Strategy] = {}
        for strategy in self._ordered:
            if strategy.id in self._by_id:
                raise ValueError(f"Duplicate strategy id: {strategy.id}")
            self._by_id[strategy.id] = strategy

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Strategy]:
        return iter(self._ordered)

    def __contains__(self, strategy_id: object) -> bool:
        return isinstance(strategy_id, str) and self.find(strategy_id) is not None

    def find(self, strategy_id: str | None) -> Strategy | None:
        """Look up a strategy by id, returning None if it is unknown."""
        if not strategy_id:
            return None
        return self._by_id.get(normalize_strategy_id(strategy_id))

    def get(self, strategy_id: str | None) -> Strategy:
        """Look up a strategy by id.

        Raises:
            UnknownStrategyError: If the id is not in the catalog
        """
        strategy = self.find(strategy_id)
        if strategy is None:
            raise UnknownStrategyError(strategy_id, self.ids())
        return strategy

    def random_choice(self, rng: random.Random | None = None) -> Strategy:
        """Pick a strategy uniformly at random."""
        return (rng or random).choice(self._ordered)

    def all_meta(self) -> list[StrategyMeta]:
        return [strategy.meta for strategy in self._ordered]

    def ids(self) -> list[str]:
        return [strategy.id for strategy in self._ordered]


_default_catalog: StrategyCatalog | None = None


def get_default_catalog() -> StrategyCatalog:
    """Get the process-wide catalog of the twelve classic strategies."""
    global _default_catalog

    if _default_catalog is None:
        _default_catalog = StrategyCatalog()
    return _default_catalog


def get_strategy(strategy_id: str) -> Strategy:
    """Fetch a strategy by id from the default catalog.

    Raises:
        UnknownStrategyError: If the id is unknown
    """
    return get_default_catalog().get(strategy_id)


def list_strategy_ids() -> list[str]:
    """List all strategy ids in catalog order."""
    return get_default_catalog().ids()
