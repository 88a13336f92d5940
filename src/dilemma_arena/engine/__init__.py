"""Match engine module for Dilemma Arena.

This module contains the core game logic including:
- payoff: the fixed 2x2 payoff matrix lookup
- session_store: thread-safe in-memory session registry
- summary: outcome statistics and leaderboard ranking
- match_engine: start, play, summarize and clean up matches

Usage:
    from dilemma_arena.engine import MatchEngine

    engine = MatchEngine()
    started = engine.start_match("tit_for_tat", total_rounds=10)

    result = engine.play_round(started.session_id, "C")
    print(result.outcome, result.player_score, result.opponent_score)

    summary = engine.get_summary(started.session_id)
    for entry in summary.leaderboard:
        print(entry.rank, entry.name, entry.score)

    engine.cleanup_session(started.session_id)
"""

from dilemma_arena.engine.match_engine import MatchEngine
from dilemma_arena.engine.payoff import resolve_payoff, resolve_round
from dilemma_arena.engine.results import (
    LeaderboardEntry,
    MatchStarted,
    MatchSummary,
    RoundHistoryEntry,
    RoundResult,
)
from dilemma_arena.engine.session_store import SessionStore
from dilemma_arena.engine.summary import (
    OutcomeCounts,
    SummaryBuilder,
    cooperation_rate,
    count_outcomes,
    rank_leaderboard,
    result_label,
)

__all__ = [
    # Engine
    "MatchEngine",
    "SessionStore",
    # Payoffs
    "resolve_payoff",
    "resolve_round",
    # Results
    "MatchStarted",
    "RoundResult",
    "MatchSummary",
    "RoundHistoryEntry",
    "LeaderboardEntry",
    # Summary
    "OutcomeCounts",
    "SummaryBuilder",
    "cooperation_rate",
    "count_outcomes",
    "rank_leaderboard",
    "result_label",
]
