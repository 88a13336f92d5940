"""Choices and per-round records for Dilemma Arena.

A round is always stored from the human player's point of view. Strategies
receive the mirrored view (see RoundRecord.mirrored) so that, to them,
``opponent_choice`` is the human's move and ``player_choice`` is their own.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Choice(str, Enum):
    """Matrix game choice: Cooperate or Defect.

    Inherits from str for proper JSON serialization.
    """

    C = "C"  # Cooperate
    D = "D"  # Defect

    def flipped(self) -> Choice:
        """Return the other choice."""
        return Choice.D if self is Choice.C else Choice.C

    @classmethod
    def parse(cls, value: Choice | str) -> Choice:
        """Parse a choice from its tag or a spelled-out word.

        Accepts "C", "D", "cooperate" and "defect" in any case.

        Raises:
            ValueError: If the value names neither choice
        """
        if isinstance(value, Choice):
            return value
        normalized = str(value).strip().upper()
        aliases = {"COOPERATE": "C", "DEFECT": "D"}
        normalized = aliases.get(normalized, normalized)
        if normalized not in ("C", "D"):
            raise ValueError(f"Invalid choice: {value!r}. Expected 'C' or 'D'.")
        return cls(normalized)


class RoundRecord(BaseModel):
    """One resolved round.

    Attributes:
        player_choice: Move of the side whose view this is
        opponent_choice: Move of the other side
        player_points: Points earned by player_choice's side this round
        opponent_points: Points earned by the other side this round
    """

    model_config = ConfigDict(frozen=True)

    player_choice: Choice
    opponent_choice: Choice
    player_points: int = Field(..., ge=0)
    opponent_points: int = Field(..., ge=0)

    @property
    def outcome(self) -> str:
        """Two-letter outcome code, own move first (e.g. "CD")."""
        return f"{self.player_choice.value}{self.opponent_choice.value}"

    def mirrored(self) -> RoundRecord:
        """Return this round as seen by the other side."""
        return RoundRecord(
            player_choice=self.opponent_choice,
            opponent_choice=self.player_choice,
            player_points=self.opponent_points,
            opponent_points=self.player_points,
        )
