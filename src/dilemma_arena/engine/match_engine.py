"""Match engine for Dilemma Arena.

This module drives matches between a human player and a catalog strategy:

1. start_match: bind a strategy, clamp the length, register a session
2. play_round: ask the strategy for its move, resolve payoffs, record
3. get_summary: statistics, 1-indexed history and leaderboard
4. cleanup_session: forget a session (idempotent)

Every operation is synchronous and bounded. Sessions are independent; the
engine takes a session's own lock for any read or write of its history.
"""

from __future__ import annotations

import logging
import random
import threading

from dilemma_arena.engine.payoff import resolve_round
from dilemma_arena.engine.results import MatchStarted, MatchSummary, RoundResult
from dilemma_arena.engine.session_store import SessionStore
from dilemma_arena.engine.summary import SummaryBuilder
from dilemma_arena.errors import MatchFinishedError
from dilemma_arena.models.choices import Choice
from dilemma_arena.models.session import MatchSession, clamp_rounds
from dilemma_arena.models.strategy_meta import StrategyMeta
from dilemma_arena.parameters import DEFAULT_ROUNDS, RANDOM_OPPONENT_NAME
from dilemma_arena.strategies.catalog import StrategyCatalog, get_default_catalog

logger = logging.getLogger(__name__)


class MatchEngine:
    """Runs Prisoner's Dilemma matches against catalog strategies.

    Args:
        catalog: Strategies available to play; defaults to the classic twelve
        store: Session store; a fresh one is created if omitted
        rng: Source for random opponent selection and for seeding each
            session's private generator. Pass a seeded Random for
            reproducible matches.
    """

    def __init__(
        self,
        catalog: StrategyCatalog | None = None,
        store: SessionStore | None = None,
        rng: random.Random | None = None,
    ):
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.store = store if store is not None else SessionStore()
        self._rng = rng or random.Random()
        self._rng_lock = threading.Lock()
        self.summary_builder = SummaryBuilder(self.catalog)

    def list_strategies(self) -> list[StrategyMeta]:
        """Metadata for every strategy, in catalog order."""
        return self.catalog.all_meta()

    def start_match(
        self,
        strategy_id: str | None = None,
        total_rounds: int | None = None,
        random_mode: bool = False,
    ) -> MatchStarted:
        """Start a new match.

        Args:
            strategy_id: Strategy to face; ignored when random_mode is set
            total_rounds: Requested length, clamped into [5, 500]
            random_mode: Draw the opponent at random and hide its identity

        Returns:
            MatchStarted with the new session id

        Raises:
            UnknownStrategyError: If strategy_id is unknown and random_mode is off
        """
        if not random_mode:
            strategy = self.catalog.get(strategy_id)

        with self._rng_lock:
            if random_mode:
                strategy = self.catalog.random_choice(self._rng)
            session_seed = self._rng.getrandbits(64)

        rounds = clamp_rounds(DEFAULT_ROUNDS if total_rounds is None else total_rounds)
        session = MatchSession(
            strategy_id=strategy.id,
            total_rounds=rounds,
            random_mode=random_mode,
            rng=random.Random(session_seed),
        )
        self.store.add(session)

        logger.info(
            f"Match {session.session_id} started: strategy={strategy.id} "
            f"rounds={session.total_rounds} random_mode={random_mode}"
        )

        return MatchStarted(
            session_id=session.session_id,
            strategy_id=None if random_mode else strategy.id,
            strategy_name=RANDOM_OPPONENT_NAME if random_mode else strategy.name,
            total_rounds=session.total_rounds,
            random_mode=random_mode,
        )

    def play_round(self, session_id: str, player_choice: Choice | str) -> RoundResult:
        """Play one round of a match.

        Args:
            session_id: Session to play in
            player_choice: The human's move, as a Choice or "C"/"D"

        Returns:
            RoundResult for the round just completed

        Raises:
            ValueError: If player_choice is not a valid choice
            SessionNotFoundError: If the session does not exist
            MatchFinishedError: If the session has already finished
        """
        choice = Choice.parse(player_choice)

        with self.store.locked(session_id) as session:
            if not session.can_play:
                logger.warning(f"Rejected round for finished match {session_id}")
                raise MatchFinishedError(session_id, session.total_rounds)

            strategy = self.catalog.get(session.strategy_id)
            opponent_choice = Choice.parse(
                strategy.decide(session.strategy_view(), session.rng)
            )
            record = resolve_round(choice, opponent_choice)
            session.record_round(record)

            result = RoundResult(
                session_id=session.session_id,
                round_number=session.current_round,
                total_rounds=session.total_rounds,
                player_choice=record.player_choice,
                opponent_choice=record.opponent_choice,
                player_points=record.player_points,
                opponent_points=record.opponent_points,
                player_score=session.player_score,
                opponent_score=session.opponent_score,
                outcome=record.outcome,
                finished=session.finished,
            )

        if result.finished:
            logger.info(
                f"Match {session_id} finished: player={result.player_score} "
                f"opponent={result.opponent_score}"
            )
        return result

    def get_summary(self, session_id: str) -> MatchSummary:
        """Summarize a match, finished or not.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        with self.store.locked(session_id) as session:
            return self.summary_builder.build(session)

    def cleanup_session(self, session_id: str) -> None:
        """Remove a session. Unknown ids are ignored."""
        removed = self.store.remove(session_id)
        if removed:
            logger.debug(f"Session {session_id} removed")
