"""Strategy listing routes."""

from flask import Blueprint, jsonify

from ..services.engine_service import get_match_engine

bp = Blueprint("strategies", __name__, url_prefix="/api")


@bp.route("/algorithms")
def index():
    """Metadata for all twelve strategies."""
    return jsonify([meta.to_dict() for meta in get_match_engine().list_strategies()])
