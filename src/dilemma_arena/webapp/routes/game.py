"""Game routes - start, play, summarize and delete matches."""

from flask import Blueprint, current_app, jsonify, request

from ..schemas import PlayRoundRequest, StartGameRequest
from ..services.engine_service import get_match_engine

bp = Blueprint("game", __name__, url_prefix="/api/game")


@bp.route("/start", methods=["POST"])
def start():
    """Start a new match.

    Body: {algorithmId, totalRounds, randomMode}
    """
    body = StartGameRequest.model_validate(request.get_json(silent=True) or {})
    total_rounds = body.total_rounds
    if total_rounds is None:
        total_rounds = current_app.config["DEFAULT_ROUNDS"]

    started = get_match_engine().start_match(
        strategy_id=body.algorithm_id,
        total_rounds=total_rounds,
        random_mode=body.random_mode,
    )
    return jsonify(started.to_dict())


@bp.route("/round", methods=["POST"])
def play_round():
    """Play one round.

    Body: {sessionId, playerChoice: "C" | "D"}
    """
    body = PlayRoundRequest.model_validate(request.get_json(silent=True) or {})
    result = get_match_engine().play_round(body.session_id, body.player_choice)
    return jsonify(result.to_dict())


@bp.route("/<session_id>/summary")
def summary(session_id: str):
    """Full match statistics and leaderboard."""
    return jsonify(get_match_engine().get_summary(session_id).to_dict())


@bp.route("/<session_id>", methods=["DELETE"])
def delete(session_id: str):
    """Forget a session. Unknown ids are not an error."""
    get_match_engine().cleanup_session(session_id)
    return "", 204
