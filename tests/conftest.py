"""Shared pytest fixtures and markers for all tests."""

import random

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "webapp: marks webapp-specific tests"
    )


@pytest.fixture
def history_from():
    """Provide a builder for histories written as space-separated rounds.

    Each token is "<own><other>" from the point of view of whoever reads
    the history, e.g. history_from("CC CD DD").
    """
    from dilemma_arena.engine.payoff import resolve_round
    from dilemma_arena.models.choices import Choice

    def build(moves: str):
        return [
            resolve_round(Choice(token[0]), Choice(token[1]))
            for token in moves.split()
        ]

    return build


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return random.Random(1980)


@pytest.fixture
def engine():
    """Provide a match engine with a seeded random source."""
    from dilemma_arena.engine import MatchEngine
    return MatchEngine(rng=random.Random(1980))
