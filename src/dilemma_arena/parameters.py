"""Match parameters for Dilemma Arena.

This module is the SINGLE SOURCE OF TRUTH for the constants of the game.
Payoffs and historical scores come from Axelrod's 1980 computer tournament.

Usage:
    from dilemma_arena.parameters import PAYOFF_MATRIX, MIN_ROUNDS
"""

# =============================================================================
# PAYOFF PARAMETERS
# =============================================================================

PAYOFF_MATRIX: dict[tuple[str, str], tuple[int, int]] = {
    ("C", "C"): (3, 3),
    ("C", "D"): (0, 5),
    ("D", "C"): (5, 0),
    ("D", "D"): (1, 1),
}
"""Points awarded as (player, opponent) keyed by (player choice, opponent choice).

Standard Axelrod values:
    - Reward for mutual cooperation (R): 3
    - Sucker's payoff (S): 0
    - Temptation to defect (T): 5
    - Punishment for mutual defection (P): 1

T > R > P > S and 2R > T + S, so mutual cooperation beats alternating
exploitation over repeated play.
"""


# =============================================================================
# MATCH LENGTH
# =============================================================================

MIN_ROUNDS = 5
"""Shortest match accepted. Smaller requests are raised to this value."""

MAX_ROUNDS = 500
"""Longest match accepted. Larger requests are lowered to this value."""

DEFAULT_ROUNDS = 20
"""Match length used when the caller does not ask for one."""


# =============================================================================
# STRATEGY PARAMETERS
# =============================================================================

JOSS_DEFECT_PROBABILITY = 0.10
"""Chance that Joss replaces a Tit for Tat cooperation with a defection."""

DAVIS_GRACE_ROUNDS = 10
"""Rounds Davis cooperates unconditionally before turning grim."""

PROBER_PROBE_ROUNDS = 3
"""Length of Prober's D, C, C opening."""

PAVLOV_WIN_THRESHOLD = 3
"""Points in the last round at or above which Pavlov repeats its move."""

RANDOM_COOPERATE_PROBABILITY = 0.5
"""Chance that the Random strategy cooperates in any round."""


# =============================================================================
# LEADERBOARD
# =============================================================================

HISTORICAL_SCORES: dict[str, int] = {
    "tit_for_tat": 504,
    "tit_for_two_tats": 481,
    "friedman": 473,
    "davis": 472,
    "suspicious_tft": 452,
    "prober": 391,
    "joss": 304,
}
"""Tournament totals from the 1980 round robin, keyed by strategy id.

Iteration order is the leaderboard's tie-break order: among equal scores,
entries appear in this order and the live player comes after all of them.
"""

PLAYER_LEADERBOARD_NAME = "YOU"
"""Leaderboard display name for the human player."""

RANDOM_OPPONENT_NAME = "UNKNOWN OPPONENT"
"""Opponent name shown at match start when the opponent was drawn at random."""
