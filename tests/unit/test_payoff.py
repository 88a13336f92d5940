"""Tests for dilemma_arena.engine.payoff."""

import pytest

from dilemma_arena.engine.payoff import resolve_payoff, resolve_round
from dilemma_arena.models.choices import Choice


class TestResolvePayoff:
    """Tests for the fixed 2x2 payoff matrix."""

    @pytest.mark.parametrize(
        "player,opponent,expected",
        [
            (Choice.C, Choice.C, (3, 3)),
            (Choice.C, Choice.D, (0, 5)),
            (Choice.D, Choice.C, (5, 0)),
            (Choice.D, Choice.D, (1, 1)),
        ],
    )
    def test_matrix_values(self, player, opponent, expected):
        assert resolve_payoff(player, opponent) == expected

    def test_symmetric_under_swap(self):
        """Swapping both choices swaps both awards."""
        for player in Choice:
            for opponent in Choice:
                a, b = resolve_payoff(player, opponent)
                assert resolve_payoff(opponent, player) == (b, a)

    def test_accepts_plain_strings(self):
        assert resolve_payoff("D", "C") == (5, 0)


class TestResolveRound:
    """Tests for building round records."""

    def test_record_fields(self):
        record = resolve_round(Choice.C, Choice.D)
        assert record.player_choice == Choice.C
        assert record.opponent_choice == Choice.D
        assert record.player_points == 0
        assert record.opponent_points == 5
        assert record.outcome == "CD"

    def test_mirrored_swaps_sides(self):
        mirrored = resolve_round(Choice.C, Choice.D).mirrored()
        assert mirrored.player_choice == Choice.D
        assert mirrored.opponent_choice == Choice.C
        assert mirrored.player_points == 5
        assert mirrored.opponent_points == 0
        assert mirrored.outcome == "DC"

    def test_record_is_immutable(self):
        from pydantic import ValidationError

        record = resolve_round(Choice.C, Choice.C)
        with pytest.raises(ValidationError):
            record.player_points = 10


class TestChoiceParse:
    """Tests for parsing choices from text."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("C", Choice.C), ("d", Choice.D), (" c ", Choice.C), ("cooperate", Choice.C), ("DEFECT", Choice.D)],
    )
    def test_valid(self, raw, expected):
        assert Choice.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["", "X", "cd", "maybe"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            Choice.parse(raw)

    def test_flipped(self):
        assert Choice.C.flipped() == Choice.D
        assert Choice.D.flipped() == Choice.C
