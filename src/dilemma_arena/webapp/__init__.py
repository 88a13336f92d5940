"""Flask JSON API over the match engine."""

from .app import create_app

__all__ = ["create_app"]
