"""Tests for the match session state machine."""

import pytest

from dilemma_arena.engine.payoff import resolve_round
from dilemma_arena.errors import MatchFinishedError
from dilemma_arena.models.choices import Choice
from dilemma_arena.models.session import MatchSession, clamp_rounds


class TestClampRounds:
    @pytest.mark.parametrize(
        "requested,expected",
        [(-3, 5), (0, 5), (3, 5), (5, 5), (6, 6), (200, 200), (500, 500), (501, 500), (10000, 500)],
    )
    def test_clamps_into_range(self, requested, expected):
        assert clamp_rounds(requested) == expected

    def test_session_clamps_on_creation(self):
        assert MatchSession(strategy_id="tit_for_tat", total_rounds=3).total_rounds == 5
        assert MatchSession(strategy_id="tit_for_tat", total_rounds=10000).total_rounds == 500


class TestMatchSession:
    @pytest.fixture
    def session(self) -> MatchSession:
        return MatchSession(strategy_id="tit_for_tat", total_rounds=5)

    def test_initial_state(self, session):
        assert session.current_round == 0
        assert session.player_score == 0
        assert session.opponent_score == 0
        assert session.history == []
        assert session.finished is False
        assert session.can_play is True

    def test_ids_are_unique(self):
        a = MatchSession(strategy_id="davis", total_rounds=5)
        b = MatchSession(strategy_id="davis", total_rounds=5)
        assert a.session_id != b.session_id

    def test_finishes_exactly_on_last_round(self, session):
        for round_number in range(1, 6):
            assert session.finished is False
            session.record_round(resolve_round(Choice.C, Choice.D))
            assert session.current_round == round_number
            assert session.finished is (round_number == 5)
        assert session.rounds_remaining == 0

    def test_scores_track_history(self, session):
        for player, opponent in [("C", "C"), ("C", "D"), ("D", "C"), ("D", "D")]:
            session.record_round(resolve_round(Choice(player), Choice(opponent)))
        assert session.player_score == sum(r.player_points for r in session.history)
        assert session.opponent_score == sum(r.opponent_points for r in session.history)
        assert session.player_score == 9
        assert session.opponent_score == 9

    def test_finished_is_terminal(self, session):
        for _ in range(5):
            session.record_round(resolve_round(Choice.C, Choice.C))
        with pytest.raises(MatchFinishedError):
            session.record_round(resolve_round(Choice.C, Choice.C))
        assert session.current_round == 5
        assert len(session.history) == 5
        assert session.player_score == 15

    def test_strategy_view_is_mirrored(self, session):
        session.record_round(resolve_round(Choice.D, Choice.C))
        view = session.strategy_view()
        assert view[0].player_choice == Choice.C
        assert view[0].opponent_choice == Choice.D
        assert view[0].player_points == 0
        assert session.history[0].player_choice == Choice.D
