"""Match session state machine.

A session is Open while ``current_round < total_rounds`` and becomes Finished
exactly when the last round is recorded. Finished is terminal.
"""

from __future__ import annotations

import random
import threading
import uuid
from dataclasses import dataclass, field

from dilemma_arena.errors import MatchFinishedError
from dilemma_arena.models.choices import RoundRecord
from dilemma_arena.parameters import MAX_ROUNDS, MIN_ROUNDS


def clamp_rounds(requested: int) -> int:
    """Clamp a requested match length into [MIN_ROUNDS, MAX_ROUNDS]."""
    return max(MIN_ROUNDS, min(MAX_ROUNDS, int(requested)))


@dataclass
class MatchSession:
    """One match between the human player and a bound strategy.

    History is append-only and stored from the human player's point of view.
    Only ``record_round`` mutates a session; callers hold ``lock`` around
    any read-decide-record sequence.

    Attributes:
        strategy_id: Id of the strategy the player faces
        total_rounds: Match length, clamped at creation
        random_mode: Whether the opponent was drawn at random
        session_id: Generated unique identifier
        current_round: Rounds played so far
        player_score: Cumulative human points
        opponent_score: Cumulative strategy points
        history: Recorded rounds in play order
        finished: True once current_round reaches total_rounds
        rng: Private randomness source for the bound strategy
    """

    strategy_id: str
    total_rounds: int
    random_mode: bool = False
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    current_round: int = 0
    player_score: int = 0
    opponent_score: int = 0
    history: list[RoundRecord] = field(default_factory=list)
    finished: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self.total_rounds = clamp_rounds(self.total_rounds)

    @property
    def can_play(self) -> bool:
        """True while the session is Open."""
        return not self.finished and self.current_round < self.total_rounds

    @property
    def rounds_remaining(self) -> int:
        return self.total_rounds - self.current_round

    def record_round(self, record: RoundRecord) -> None:
        """Append a resolved round and advance the state machine.

        Raises:
            MatchFinishedError: If the session is already Finished
        """
        if not self.can_play:
            raise MatchFinishedError(self.session_id, self.total_rounds)

        self.history.append(record)
        self.player_score += record.player_points
        self.opponent_score += record.opponent_points
        self.current_round += 1
        if self.current_round >= self.total_rounds:
            self.finished = True

    def strategy_view(self) -> list[RoundRecord]:
        """History as seen by the bound strategy."""
        return [record.mirrored() for record in self.history]
