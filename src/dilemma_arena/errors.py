"""Exception hierarchy for Dilemma Arena.

Every error here is local and recoverable: the engine rejects the request and
leaves session state untouched.
"""

from __future__ import annotations


class DilemmaArenaError(Exception):
    """Base exception for all Dilemma Arena errors."""


class UnknownStrategyError(DilemmaArenaError, ValueError):
    """Raised when a strategy id is not in the catalog."""

    def __init__(self, strategy_id: str | None, valid_ids: list[str] | None = None):
        self.strategy_id = strategy_id
        self.valid_ids = valid_ids or []
        message = f"Unknown strategy: {strategy_id}"
        if self.valid_ids:
            message += f". Valid strategies: {self.valid_ids}"
        super().__init__(message)


class SessionNotFoundError(DilemmaArenaError, LookupError):
    """Raised when a session id is absent from the store."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class MatchFinishedError(DilemmaArenaError, RuntimeError):
    """Raised when a round is played on a session that already finished."""

    def __init__(self, session_id: str, total_rounds: int):
        self.session_id = session_id
        self.total_rounds = total_rounds
        super().__init__(
            f"Match {session_id} is already finished after {total_rounds} rounds."
        )
