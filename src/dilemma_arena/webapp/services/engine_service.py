"""Engine service - one MatchEngine per Flask application."""

import random

from flask import Flask, current_app

from dilemma_arena.engine import MatchEngine

EXTENSION_KEY = "match_engine"


def init_match_engine(app: Flask) -> MatchEngine:
    """Create the application's engine from its config and register it."""
    seed = app.config.get("RNG_SEED")
    rng = random.Random(int(seed)) if seed not in (None, "") else random.Random()
    engine = MatchEngine(rng=rng)
    app.extensions[EXTENSION_KEY] = engine
    return engine


def get_match_engine() -> MatchEngine:
    """Get the engine bound to the current application.

    Creates one on first use if the app factory did not.
    """
    engine = current_app.extensions.get(EXTENSION_KEY)
    if engine is None:
        engine = init_match_engine(current_app)
    return engine
