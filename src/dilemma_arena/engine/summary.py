"""Match summary statistics and leaderboard ranking.

The leaderboard puts the player's live score next to the 1980 tournament
totals. Ranking contract:
    - Sort by score, highest first.
    - Ties keep HISTORICAL_SCORES order, and the player comes after every
      historical entry with the same score.
    - Ranks are the 1-based positions in that order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from dilemma_arena.engine.results import (
    LeaderboardEntry,
    MatchResultLabel,
    MatchSummary,
    RoundHistoryEntry,
)
from dilemma_arena.models.choices import Choice, RoundRecord
from dilemma_arena.models.session import MatchSession
from dilemma_arena.parameters import HISTORICAL_SCORES, PLAYER_LEADERBOARD_NAME
from dilemma_arena.strategies.catalog import StrategyCatalog


@dataclass(frozen=True)
class OutcomeCounts:
    """Per-outcome round counts, from the player's point of view."""

    mutual_coop: int = 0
    mutual_defect: int = 0
    betrayed: int = 0
    betrayal: int = 0


def count_outcomes(history: Sequence[RoundRecord]) -> OutcomeCounts:
    """Count CC, DD, CD (player betrayed) and DC (player betrays) rounds."""
    tally = {"CC": 0, "DD": 0, "CD": 0, "DC": 0}
    for record in history:
        tally[record.outcome] += 1
    return OutcomeCounts(
        mutual_coop=tally["CC"],
        mutual_defect=tally["DD"],
        betrayed=tally["CD"],
        betrayal=tally["DC"],
    )


def result_label(player_score: int, opponent_score: int) -> MatchResultLabel:
    if player_score > opponent_score:
        return "WIN"
    if opponent_score > player_score:
        return "LOSE"
    return "DRAW"


def rank_leaderboard(
    historical: Sequence[tuple[str, int]],
    player_score: int,
    player_name: str = PLAYER_LEADERBOARD_NAME,
) -> list[LeaderboardEntry]:
    """Merge historical rows with the player's score and rank them.

    Args:
        historical: (display name, score) pairs in tie-break order
        player_score: The player's live cumulative score
        player_name: Display name for the player row

    Returns:
        Entries sorted by score descending with ranks 1..n
    """
    rows = [(name, score, False) for name, score in historical]
    rows.append((player_name, player_score, True))

    # sorted() is stable, so equal scores keep table order with the player last
    ordered = sorted(rows, key=lambda row: -row[1])

    return [
        LeaderboardEntry(rank=rank, name=name, score=score, is_player=is_player)
        for rank, (name, score, is_player) in enumerate(ordered, start=1)
    ]


class SummaryBuilder:
    """Builds MatchSummary reports from sessions."""

    def __init__(
        self,
        catalog: StrategyCatalog,
        historical_scores: Mapping[str, int] | None = None,
    ):
        self.catalog = catalog
        self.historical_scores = dict(
            HISTORICAL_SCORES if historical_scores is None else historical_scores
        )

    def historical_table(self) -> list[tuple[str, int]]:
        """Historical (display name, score) rows in tie-break order."""
        table = []
        for strategy_id, score in self.historical_scores.items():
            strategy = self.catalog.find(strategy_id)
            name = strategy.name if strategy else strategy_id.upper()
            table.append((name, score))
        return table

    def build(self, session: MatchSession) -> MatchSummary:
        """Summarize a session. The caller holds the session's lock."""
        history = list(session.history)
        counts = count_outcomes(history)
        strategy = self.catalog.get(session.strategy_id)

        return MatchSummary(
            session_id=session.session_id,
            strategy_id=strategy.id,
            strategy_name=strategy.name,
            total_rounds=session.total_rounds,
            rounds_played=session.current_round,
            finished=session.finished,
            player_score=session.player_score,
            opponent_score=session.opponent_score,
            result=result_label(session.player_score, session.opponent_score),
            mutual_coop_count=counts.mutual_coop,
            mutual_defect_count=counts.mutual_defect,
            betrayed_count=counts.betrayed,
            betrayal_count=counts.betrayal,
            history=[
                RoundHistoryEntry(
                    round=index,
                    player_choice=record.player_choice,
                    opponent_choice=record.opponent_choice,
                    player_points=record.player_points,
                    opponent_points=record.opponent_points,
                )
                for index, record in enumerate(history, start=1)
            ],
            leaderboard=rank_leaderboard(self.historical_table(), session.player_score),
        )


def cooperation_rate(
    history: Sequence[RoundRecord | RoundHistoryEntry], side: str = "player"
) -> float:
    """Fraction of rounds in which one side cooperated (0.0 for no rounds)."""
    if not history:
        return 0.0
    attr = "player_choice" if side == "player" else "opponent_choice"
    cooperated = sum(1 for r in history if getattr(r, attr) == Choice.C)
    return cooperated / len(history)
