"""Flask application factory."""

import logging

from flask import Flask, jsonify
from pydantic import ValidationError

from dilemma_arena.errors import (
    MatchFinishedError,
    SessionNotFoundError,
    UnknownStrategyError,
)

from .config import Config
from .services.engine_service import init_match_engine

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Map engine errors onto HTTP status codes."""

    @app.errorhandler(UnknownStrategyError)
    def unknown_strategy(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(MatchFinishedError)
    def match_finished(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(SessionNotFoundError)
    def session_not_found(error):
        return jsonify({"error": str(error)}), 404

    @app.errorhandler(ValidationError)
    def invalid_body(error):
        messages = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()]
        return jsonify({"error": "; ".join(messages)}), 400


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = init_match_engine(app)
    logger.info(f"Match engine ready with {len(engine.catalog)} strategies")

    # Register blueprints
    from .routes import game, strategies

    app.register_blueprint(strategies.bp)
    app.register_blueprint(game.bp)

    register_error_handlers(app)

    return app


def main():
    """Entry point for `dilemma-arena-web` command."""
    app = create_app()
    app.run(debug=True, host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
