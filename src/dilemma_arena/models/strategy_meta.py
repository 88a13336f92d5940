"""Descriptive metadata for tournament strategies."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StrategyTag(str, Enum):
    """Broad temperament of a strategy.

    NICE strategies are never the first to defect, NASTY ones are, and MIXED
    covers everything conditional or random.
    """

    NICE = "nice"
    NASTY = "nasty"
    MIXED = "mixed"


class StrategyMeta(BaseModel):
    """Human-readable description of a strategy for listings.

    Attributes:
        id: Permanent machine-readable identifier
        name: Display name
        description: One-line summary of the rule
        tag: Temperament bucket
        tag_label: Short label shown next to the name
        historical_rank: Rank in Axelrod's 1980 tournament, if it entered
        historical_score: Tournament total, if recorded
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    tag: StrategyTag
    tag_label: str = Field(default="")
    historical_rank: int | None = Field(default=None, ge=1)
    historical_score: int | None = Field(default=None, ge=0)

    def to_dict(self) -> dict:
        """Serialize with the camelCase field names used by web clients."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "tag": self.tag.value,
            "tagLabel": self.tag_label,
            "historicalRank": self.historical_rank,
            "historicalScore": self.historical_score,
        }
