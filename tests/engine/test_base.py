"""
Rock Paper Scissors - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest
from src.engine.base import (
    PLACEHOLDER_OPPONENT_CHOICE,
    PLACEHOLDER_PLAYER_CHOICE,
    Choice,
    MatchConfig,
    MatchState,
    Outcome,
    Phase,
    RoundResult,
)
from src.engine.validators import (
    validate_choice,
    validate_score_delay,
    validate_total_rounds,
)


class TestChoice:
    """Tests for Choice enum."""

    def test_exactly_three_members(self):
        assert [c.value for c in Choice] == ["rock", "paper", "scissors"]

    def test_lookup_by_value(self):
        assert Choice("scissors") is Choice.SCISSORS


class TestOutcome:
    """Tests for Outcome enum."""

    def test_labels(self):
        assert Outcome.WIN.label == "YOU WIN"
        assert Outcome.LOSE.label == "YOU LOSE"
        assert Outcome.DRAW.label == "DRAW"


class TestPhase:
    """Tests for Phase enum."""

    def test_phase_names(self):
        assert {p.name for p in Phase} == {"AWAITING_CHOICE", "SHOWING_OUTCOME", "ENDED"}


class TestMatchConfig:
    """Tests for MatchConfig dataclass."""

    def test_defaults(self):
        config = MatchConfig()
        assert config.total_rounds == 10
        assert config.score_delay == pytest.approx(1.2)

    def test_zero_delay_allowed(self):
        assert MatchConfig(score_delay=0).score_delay == 0

    def test_zero_rounds_raises(self):
        with pytest.raises(ValueError, match="must be positive"):
            MatchConfig(total_rounds=0)

    def test_non_int_rounds_raises(self):
        with pytest.raises(ValueError, match="must be an integer"):
            MatchConfig(total_rounds=2.5)

    def test_negative_delay_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            MatchConfig(score_delay=-0.1)

    def test_is_frozen(self):
        config = MatchConfig()
        with pytest.raises(AttributeError):
            config.total_rounds = 3


class TestRoundResult:
    """Tests for RoundResult dataclass."""

    def test_win_flags(self):
        result = RoundResult(1, Choice.ROCK, Choice.SCISSORS, Outcome.WIN)
        assert result.is_win is True
        assert result.is_draw is False

    def test_draw_flags(self):
        result = RoundResult(2, Choice.PAPER, Choice.PAPER, Outcome.DRAW)
        assert result.is_win is False
        assert result.is_draw is True

    def test_str(self):
        result = RoundResult(3, Choice.ROCK, Choice.PAPER, Outcome.LOSE)
        assert str(result) == "Round 3: rock vs paper -> YOU LOSE"


class TestMatchState:
    """Tests for MatchState dataclass."""

    def test_initial_state(self):
        state = MatchState()
        assert state.score == 0
        assert state.rounds_played == 0
        assert state.phase is Phase.AWAITING_CHOICE
        assert state.outcome is None
        assert state.epoch == 0

    def test_placeholders(self):
        state = MatchState()
        assert state.player_choice is PLACEHOLDER_PLAYER_CHOICE is Choice.ROCK
        assert state.opponent_choice is PLACEHOLDER_OPPONENT_CHOICE is Choice.PAPER

    def test_outcome_flags(self):
        assert MatchState(outcome=Outcome.DRAW).is_draw is True
        assert MatchState(outcome=Outcome.WIN).is_player_win is True
        assert MatchState().is_player_win is False


class TestValidateChoice:
    """Tests for validate_choice()."""

    @pytest.mark.parametrize("choice", list(Choice))
    def test_choice_passes_through(self, choice):
        assert validate_choice(choice) is choice

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("rock", Choice.ROCK),
            ("PAPER", Choice.PAPER),
            ("  Scissors ", Choice.SCISSORS),
            ("r", Choice.ROCK),
            ("P", Choice.PAPER),
            ("s", Choice.SCISSORS),
        ],
    )
    def test_strings(self, raw, expected):
        assert validate_choice(raw) is expected

    def test_unknown_string_raises(self):
        with pytest.raises(ValueError, match="Invalid choice 'lizard'"):
            validate_choice("lizard")

    def test_non_string_raises(self):
        with pytest.raises(ValueError, match="must be a string or Choice"):
            validate_choice(1)


class TestValidateTotalRounds:
    """Tests for validate_total_rounds()."""

    def test_valid(self):
        assert validate_total_rounds(10) == 10

    def test_zero_raises(self):
        with pytest.raises(ValueError, match="must be positive"):
            validate_total_rounds(0)

    def test_bool_raises(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_total_rounds(True)


class TestValidateScoreDelay:
    """Tests for validate_score_delay()."""

    def test_int_becomes_float(self):
        result = validate_score_delay(2)
        assert result == 2.0
        assert isinstance(result, float)

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            validate_score_delay(-1)

    def test_string_raises(self):
        with pytest.raises(ValueError, match="must be a number"):
            validate_score_delay("1.2")
