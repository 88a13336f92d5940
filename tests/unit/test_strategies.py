"""Tests for the twelve tournament strategies.

Histories are written from the deciding strategy's point of view: in each
two-letter round the first letter is the strategy's own move and the second
is its opponent's.
"""

import random

import pytest

from dilemma_arena.models.choices import Choice
from dilemma_arena.strategies import (
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

C, D = Choice.C, Choice.D


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class TestTitForTat:
    def test_cooperates_first(self, rng):
        assert TitForTat().decide([], rng) == C

    def test_replays_opponent_last_move(self, rng, history_from):
        assert TitForTat().decide(history_from("CD"), rng) == D
        assert TitForTat().decide(history_from("CC CD DC"), rng) == C
        assert TitForTat().decide(history_from("CD DC CD"), rng) == D


class TestTitForTwoTats:
    def test_forgives_single_defection(self, rng, history_from):
        assert TitForTwoTats().decide([], rng) == C
        assert TitForTwoTats().decide(history_from("CD"), rng) == C
        assert TitForTwoTats().decide(history_from("CD CC CD"), rng) == C

    def test_retaliates_after_two_defections(self, rng, history_from):
        assert TitForTwoTats().decide(history_from("CD CD"), rng) == D
        assert TitForTwoTats().decide(history_from("CC CD CD"), rng) == D


class TestPavlov:
    def test_cooperates_first(self, rng):
        assert Pavlov().decide([], rng) == C

    @pytest.mark.parametrize(
        "last_round,expected",
        [
            ("CC", C),  # 3 points: stay
            ("DC", D),  # 5 points: stay
            ("CD", D),  # 0 points: shift
            ("DD", C),  # 1 point: shift
        ],
    )
    def test_win_stay_lose_shift(self, rng, history_from, last_round, expected):
        assert Pavlov().decide(history_from(f"CC {last_round}"), rng) == expected


class TestGrimTriggers:
    """Friedman and Grudger share the same permanent trigger."""

    @pytest.mark.parametrize("strategy_cls", [Friedman, Grudger])
    def test_cooperates_while_unprovoked(self, rng, history_from, strategy_cls):
        assert strategy_cls().decide([], rng) == C
        assert strategy_cls().decide(history_from("CC CC CC"), rng) == C

    @pytest.mark.parametrize("strategy_cls", [Friedman, Grudger])
    def test_defects_forever_after_betrayal(self, rng, history_from, strategy_cls):
        strategy = strategy_cls()
        moves = "CD"
        for _ in range(10):
            assert strategy.decide(history_from(moves), rng) == D
            moves += " DC"


class TestDavis:
    def test_grace_period_ignores_defection(self, rng, history_from):
        assert Davis().decide(history_from(" ".join(["CC"] * 9)), rng) == C
        assert Davis().decide(history_from("CD " + " ".join(["CC"] * 8)), rng) == C

    def test_grim_after_grace_period(self, rng, history_from):
        history = history_from(" ".join(["CC"] * 4 + ["CD"] + ["CC"] * 5))
        assert len(history) == 10
        assert Davis().decide(history, rng) == D

    def test_keeps_cooperating_if_never_betrayed(self, rng, history_from):
        assert Davis().decide(history_from(" ".join(["CC"] * 15)), rng) == C


class TestSuspiciousTitForTat:
    def test_defects_first(self, rng):
        assert SuspiciousTitForTat().decide([], rng) == D

    def test_then_mirrors(self, rng, history_from):
        assert SuspiciousTitForTat().decide(history_from("DC"), rng) == C
        assert SuspiciousTitForTat().decide(history_from("DC CD"), rng) == D


class TestJoss:
    def test_sneaky_defection_below_threshold(self, history_from):
        assert Joss().decide([], FixedRandom(0.05)) == D
        assert Joss().decide(history_from("CC"), FixedRandom(0.05)) == D

    def test_cooperates_above_threshold(self, history_from):
        assert Joss().decide([], FixedRandom(0.10)) == C
        assert Joss().decide(history_from("CC"), FixedRandom(0.95)) == C

    def test_always_retaliates(self, history_from):
        assert Joss().decide(history_from("CD"), FixedRandom(0.99)) == D

    def test_defection_rate_is_about_ten_percent(self, history_from):
        rng = random.Random(42)
        history = history_from("CC")
        defections = sum(Joss().decide(history, rng) == D for _ in range(5000))
        assert 350 < defections < 650


class TestProber:
    def test_opening_sequence(self, rng, history_from):
        prober = Prober()
        assert prober.decide([], rng) == D
        assert prober.decide(history_from("DC"), rng) == C
        assert prober.decide(history_from("DC CC"), rng) == C

    def test_exploits_pushover(self, rng, history_from):
        prober = Prober()
        moves = "DC CC CC"
        for _ in range(5):
            assert prober.decide(history_from(moves), rng) == D
            moves += " DC"

    def test_falls_back_to_tit_for_tat(self, rng, history_from):
        prober = Prober()
        assert prober.decide(history_from("DD CC CC"), rng) == C
        assert prober.decide(history_from("DC CD CC"), rng) == C
        assert prober.decide(history_from("DC CC CD"), rng) == D
        assert prober.decide(history_from("DD CC CC CD"), rng) == D

    def test_late_defection_does_not_reopen_probe(self, rng, history_from):
        # Retaliation after round 3 only matters through the TFT mirror
        assert Prober().decide(history_from("DC CC CC DD"), rng) == D
        assert Prober().decide(history_from("DC CC CC DD DC"), rng) == D


class TestRandomStrategy:
    def test_coin_flip(self):
        assert RandomStrategy().decide([], FixedRandom(0.49)) == C
        assert RandomStrategy().decide([], FixedRandom(0.5)) == D

    def test_roughly_even(self):
        rng = random.Random(7)
        cooperations = sum(RandomStrategy().decide([], rng) == C for _ in range(4000))
        assert 1800 < cooperations < 2200


class TestUnconditional:
    def test_always_cooperate(self, rng, history_from):
        assert AlwaysCooperate().decide([], rng) == C
        assert AlwaysCooperate().decide(history_from("CD CD CD"), rng) == C

    def test_always_defect(self, rng, history_from):
        assert AlwaysDefect().decide([], rng) == D
        assert AlwaysDefect().decide(history_from("DC DC"), rng) == D


class TestDecisionContract:
    """Properties every strategy satisfies."""

    @pytest.mark.parametrize("strategy_cls", CLASSIC_STRATEGIES)
    def test_total_over_random_histories(self, strategy_cls, history_from):
        strategy = strategy_cls()
        rng = random.Random(3)
        for length in range(0, 25):
            moves = " ".join(rng.choice(["CC", "CD", "DC", "DD"]) for _ in range(length))
            assert strategy.decide(history_from(moves), rng) in (C, D)

    @pytest.mark.parametrize("strategy_cls", CLASSIC_STRATEGIES)
    def test_does_not_mutate_history(self, strategy_cls, history_from, rng):
        history = history_from("CC CD DC DD CC CD DC DD CC CD DC")
        snapshot = list(history)
        strategy_cls().decide(history, rng)
        assert history == snapshot

    @pytest.mark.parametrize("strategy_cls", CLASSIC_STRATEGIES)
    def test_meta_id_matches(self, strategy_cls):
        strategy = strategy_cls()
        assert strategy.id == strategy_cls.meta.id
        assert strategy.name == strategy_cls.meta.name
