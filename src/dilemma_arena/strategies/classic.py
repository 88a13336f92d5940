"""The twelve tournament strategies of Dilemma Arena.

Each class embodies one entry (or well-known baseline) from Axelrod's
computer tournaments. Strategies are stateless; everything they know comes
from the history passed to ``decide``.

Sources:
    Axelrod, R. (1980). Effective Choice in the Prisoner's Dilemma.
    Journal of Conflict Resolution, 24(1), 3-25.
    Axelrod, R. (1984). The Evolution of Cooperation. Basic Books.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import ClassVar

from dilemma_arena.models.choices import Choice, RoundRecord
from dilemma_arena.models.strategy_meta import StrategyMeta, StrategyTag
from dilemma_arena.parameters import (
    DAVIS_GRACE_ROUNDS,
    JOSS_DEFECT_PROBABILITY,
    PAVLOV_WIN_THRESHOLD,
    PROBER_PROBE_ROUNDS,
    RANDOM_COOPERATE_PROBABILITY,
)
from dilemma_arena.strategies.base import (
    Strategy,
    last_opponent_choice,
    opponent_ever_defected,
)


class TitForTat(Strategy):
    """Anatol Rapoport's winning entry.

    Cooperates first, then replays whatever the opponent did last round.
    """

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="tit_for_tat",
        name="TIT FOR TAT",
        description="Cooperate first. Mirror whatever the opponent did last round.",
        tag=StrategyTag.NICE,
        tag_label="NICE",
        historical_rank=1,
        historical_score=504,
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return last_opponent_choice(history) or Choice.C


class TitForTwoTats(Strategy):
    """Retaliates only after two consecutive defections."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="tit_for_two_tats",
        name="TIT FOR 2 TATS",
        description="Defect only after the opponent defects twice in a row. Very forgiving.",
        tag=StrategyTag.NICE,
        tag_label="FORGIVING",
        historical_rank=5,
        historical_score=481,
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        if len(history) < 2:
            return Choice.C
        if all(r.opponent_choice == Choice.D for r in history[-2:]):
            return Choice.D
        return Choice.C


class Pavlov(Strategy):
    """Win-Stay, Lose-Shift (Nowak & May).

    A round counts as a win when it paid at least PAVLOV_WIN_THRESHOLD
    points, i.e. mutual cooperation or a successful defection.
    """

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="pavlov",
        name="PAVLOV / WIN-STAY",
        description=(
            "Win-Stay, Lose-Shift. Repeats a move if it earned 3 or more points, "
            "switches if it didn't."
        ),
        tag=StrategyTag.MIXED,
        tag_label="ADAPTIVE",
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        if not history:
            return Choice.C
        last = history[-1]
        if last.player_points >= PAVLOV_WIN_THRESHOLD:
            return last.player_choice
        return last.player_choice.flipped()


class Friedman(Strategy):
    """Grim trigger: one defection and cooperation is over for good."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="friedman",
        name="FRIEDMAN",
        description="Cooperate until any defection, then retaliate permanently. Grim trigger.",
        tag=StrategyTag.MIXED,
        tag_label="GRIM",
        historical_rank=7,
        historical_score=473,
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return Choice.D if opponent_ever_defected(history) else Choice.C


class Davis(Strategy):
    """Grim trigger with a grace period of DAVIS_GRACE_ROUNDS rounds."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="davis",
        name="DAVIS",
        description=(
            "Cooperates unconditionally for 10 rounds. "
            "After that, defects if opponent ever did."
        ),
        tag=StrategyTag.MIXED,
        tag_label="PATIENT",
        historical_rank=8,
        historical_score=472,
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        if len(history) < DAVIS_GRACE_ROUNDS:
            return Choice.C
        return Choice.D if opponent_ever_defected(history) else Choice.C


class Grudger(Strategy):
    """Cooperates until betrayed once, then defects for the rest of the match."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="grudger",
        name="GRUDGER",
        description="Cooperate until betrayed once, then defect for the rest of the game.",
        tag=StrategyTag.MIXED,
        tag_label="VENGEFUL",
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return Choice.D if opponent_ever_defected(history) else Choice.C


class SuspiciousTitForTat(Strategy):
    """Tit for Tat that opens with a defection."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="suspicious_tft",
        name="SUSPICIOUS TFT",
        description="Defects first to probe intent. Mirrors from round 2 onward.",
        tag=StrategyTag.MIXED,
        tag_label="CAUTIOUS",
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return last_opponent_choice(history) or Choice.D


class Joss(Strategy):
    """Tit for Tat that sneaks in a defection 10% of the time it would cooperate."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="joss",
        name="JOSS",
        description="Tit for Tat with a 10% random defection when it should cooperate. Sneaky.",
        tag=StrategyTag.NASTY,
        tag_label="SNEAKY",
        historical_rank=12,
        historical_score=304,
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        tft_move = last_opponent_choice(history) or Choice.C
        if tft_move == Choice.C and rng.random() < JOSS_DEFECT_PROBABILITY:
            return Choice.D
        return tft_move


class Prober(Strategy):
    """Opens D, C, C to test for a pushover.

    If the opponent never defected during the probe, Prober defects for the
    rest of the match. Otherwise it falls back to Tit for Tat.
    """

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="prober",
        name="PROBER",
        description=(
            "Opens D,C,C to test for a pushover. "
            "If not punished, exploits forever. Otherwise TFT."
        ),
        tag=StrategyTag.NASTY,
        tag_label="EXPLOITER",
        historical_rank=10,
        historical_score=391,
    )

    OPENING: ClassVar[tuple[Choice, ...]] = (Choice.D, Choice.C, Choice.C)

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        played = len(history)
        if played < len(self.OPENING):
            return self.OPENING[played]

        probe_window = history[: min(PROBER_PROBE_ROUNDS, played)]
        if not opponent_ever_defected(probe_window):
            return Choice.D
        return history[-1].opponent_choice


class RandomStrategy(Strategy):
    """Flips a fair coin every round."""

    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="random",
        name="RANDOM",
        description="Cooperate or defect randomly with equal probability each round.",
        tag=StrategyTag.MIXED,
        tag_label="CHAOS",
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return Choice.C if rng.random() < RANDOM_COOPERATE_PROBABILITY else Choice.D


class AlwaysCooperate(Strategy):
    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="always_cooperate",
        name="ALWAYS COOPERATE",
        description="Cooperate every single round, no matter what.",
        tag=StrategyTag.NICE,
        tag_label="NAIVE",
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return Choice.C


class AlwaysDefect(Strategy):
    meta: ClassVar[StrategyMeta] = StrategyMeta(
        id="always_defect",
        name="ALWAYS DEFECT",
        description="Defect every single round. Never cooperates.",
        tag=StrategyTag.NASTY,
        tag_label="NASTY",
    )

    def decide(self, history: Sequence[RoundRecord], rng: random.Random) -> Choice:
        return Choice.D


# Catalog order is part of the public contract (listings, leaderboard ties).
CLASSIC_STRATEGIES: tuple[type[Strategy], ...] = (
    TitForTat,
    TitForTwoTats,
    Pavlov,
    Friedman,
    Davis,
    Grudger,
    SuspiciousTitForTat,
    Joss,
    Prober,
    RandomStrategy,
    AlwaysCooperate,
    AlwaysDefect,
)
