"""Services for the webapp."""

from .engine_service import get_match_engine, init_match_engine

__all__ = ["get_match_engine", "init_match_engine"]
