"""Flask configuration."""

import os

from dilemma_arena.parameters import DEFAULT_ROUNDS


class Config:
    """Base configuration."""

    # Match defaults
    DEFAULT_ROUNDS = int(os.environ.get("DILEMMA_ARENA_DEFAULT_ROUNDS", DEFAULT_ROUNDS))

    # Logging
    LOG_LEVEL = os.environ.get("DILEMMA_ARENA_LOG_LEVEL", "INFO")

    # Seed for opponent draws and strategy randomness (None = unseeded)
    RNG_SEED = os.environ.get("DILEMMA_ARENA_SEED")


class TestConfig(Config):
    """Testing configuration."""

    TESTING = True
    LOG_LEVEL = "WARNING"
    RNG_SEED = "1980"
