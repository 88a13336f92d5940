"""Request bodies accepted by the JSON API.

Field aliases follow the camelCase names the browser client sends.
"""

from pydantic import BaseModel, ConfigDict, Field

from dilemma_arena.models.choices import Choice


class StartGameRequest(BaseModel):
    """Body of POST /api/game/start."""

    model_config = ConfigDict(populate_by_name=True)

    algorithm_id: str | None = Field(default=None, alias="algorithmId")
    total_rounds: int | None = Field(default=None, alias="totalRounds")
    random_mode: bool = Field(default=False, alias="randomMode")


class PlayRoundRequest(BaseModel):
    """Body of POST /api/game/round."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., min_length=1, alias="sessionId")
    player_choice: Choice = Field(..., alias="playerChoice")
