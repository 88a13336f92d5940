"""Route blueprints for the webapp."""

from . import game, strategies

__all__ = ["game", "strategies"]
