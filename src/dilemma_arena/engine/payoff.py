"""Payoff resolution for a single Prisoner's Dilemma round."""

from __future__ import annotations

from dilemma_arena.models.choices import Choice, RoundRecord
from dilemma_arena.parameters import PAYOFF_MATRIX


def resolve_payoff(player_choice: Choice, opponent_choice: Choice) -> tuple[int, int]:
    """Look up (player_points, opponent_points) for a pair of choices.

    Total over the four possible inputs:
        CC -> (3, 3), CD -> (0, 5), DC -> (5, 0), DD -> (1, 1)
    """
    return PAYOFF_MATRIX[(Choice(player_choice).value, Choice(opponent_choice).value)]


def resolve_round(player_choice: Choice, opponent_choice: Choice) -> RoundRecord:
    """Resolve both choices into an immutable round record."""
    player_points, opponent_points = resolve_payoff(player_choice, opponent_choice)
    return RoundRecord(
        player_choice=player_choice,
        opponent_choice=opponent_choice,
        player_points=player_points,
        opponent_points=opponent_points,
    )
