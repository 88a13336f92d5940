"""Result records returned by the match engine.

These are plain data: the engine produces them, and transport layers turn
them into whatever wire format they speak. ``to_dict`` gives the camelCase
view the web client expects.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from dilemma_arena.models.choices import Choice

MatchResultLabel = Literal["WIN", "LOSE", "DRAW"]


class MatchStarted(BaseModel):
    """Response to starting a match.

    Attributes:
        session_id: Identifier for all later calls
        strategy_id: Bound strategy id, None when the opponent is hidden
        strategy_name: Display name, or the placeholder when hidden
        total_rounds: Match length after clamping
        random_mode: Whether the opponent was drawn at random
    """

    model_config = ConfigDict(frozen=True)

    session_id: str
    strategy_id: str | None
    strategy_name: str
    total_rounds: int
    random_mode: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "algorithmId": self.strategy_id,
            "algorithmName": self.strategy_name,
            "totalRounds": self.total_rounds,
            "randomMode": self.random_mode,
        }


class RoundResult(BaseModel):
    """Outcome of one played round."""

    model_config = ConfigDict(frozen=True)

    session_id: str
    round_number: int = Field(..., ge=1)
    total_rounds: int
    player_choice: Choice
    opponent_choice: Choice
    player_points: int
    opponent_points: int
    player_score: int
    opponent_score: int
    outcome: str = Field(..., min_length=2, max_length=2)
    finished: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "roundNumber": self.round_number,
            "totalRounds": self.total_rounds,
            "playerChoice": self.player_choice.value,
            "opponentChoice": self.opponent_choice.value,
            "playerPoints": self.player_points,
            "opponentPoints": self.opponent_points,
            "playerScore": self.player_score,
            "opponentScore": self.opponent_score,
            "outcome": self.outcome,
            "finished": self.finished,
        }


class RoundHistoryEntry(BaseModel):
    """One row of the per-round history in a summary (1-indexed)."""

    model_config = ConfigDict(frozen=True)

    round: int = Field(..., ge=1)
    player_choice: Choice
    opponent_choice: Choice
    player_points: int
    opponent_points: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "round": self.round,
            "playerChoice": self.player_choice.value,
            "opponentChoice": self.opponent_choice.value,
            "playerPoints": self.player_points,
            "opponentPoints": self.opponent_points,
        }


class LeaderboardEntry(BaseModel):
    """One ranked row of the leaderboard."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    name: str
    score: int
    is_player: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "rank": self.rank,
            "name": self.name,
            "score": self.score,
            "isPlayer": self.is_player,
        }


class MatchSummary(BaseModel):
    """Aggregate report for a match, available at any point during play.

    Attributes:
        mutual_coop_count: Rounds where both cooperated
        mutual_defect_count: Rounds where both defected
        betrayed_count: Rounds where the player cooperated and the opponent defected
        betrayal_count: Rounds where the player defected and the opponent cooperated
    """

    model_config = ConfigDict(frozen=True)

    session_id: str
    strategy_id: str
    strategy_name: str
    total_rounds: int
    rounds_played: int
    finished: bool
    player_score: int
    opponent_score: int
    result: MatchResultLabel
    mutual_coop_count: int
    mutual_defect_count: int
    betrayed_count: int
    betrayal_count: int
    history: list[RoundHistoryEntry]
    leaderboard: list[LeaderboardEntry]

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "algorithmId": self.strategy_id,
            "algorithmName": self.strategy_name,
            "totalRounds": self.total_rounds,
            "roundsPlayed": self.rounds_played,
            "finished": self.finished,
            "playerScore": self.player_score,
            "opponentScore": self.opponent_score,
            "result": self.result,
            "mutualCoopCount": self.mutual_coop_count,
            "mutualDefectCount": self.mutual_defect_count,
            "betrayedCount": self.betrayed_count,
            "betrayalCount": self.betrayal_count,
            "history": [entry.to_dict() for entry in self.history],
            "leaderboard": [entry.to_dict() for entry in self.leaderboard],
        }
