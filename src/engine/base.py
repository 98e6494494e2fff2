"""
Rock Paper Scissors - Game Engine Base Classes

This module defines the foundational enums and data structures used throughout
the game engine. Configuration and round results are immutable (frozen
dataclasses); MatchState is the one mutable record and is owned by the
MatchController.
"""

from dataclasses import dataclass
from enum import Enum, auto


class Choice(Enum):
    """A hand the player or the opponent can show."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class Outcome(Enum):
    """Result of a round from the player's point of view."""
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"

    @property
    def label(self) -> str:
        """Banner text shown on the reveal screen."""
        if self is Outcome.DRAW:
            return "DRAW"
        return f"YOU {self.name}"


class Phase(Enum):
    """Controls whether a new choice may be submitted."""
    AWAITING_CHOICE = auto()
    SHOWING_OUTCOME = auto()
    ENDED = auto()


DEFAULT_TOTAL_ROUNDS = 10
DEFAULT_SCORE_DELAY = 1.2

# Picks shown before the first round of a match
PLACEHOLDER_PLAYER_CHOICE = Choice.ROCK
PLACEHOLDER_OPPONENT_CHOICE = Choice.PAPER


@dataclass(frozen=True)
class MatchConfig:
    """
    Configuration for a match.

    Attributes:
        total_rounds: Number of rounds in a match
        score_delay: Seconds between a winning reveal and the score update
    """
    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    score_delay: float = DEFAULT_SCORE_DELAY

    def __post_init__(self) -> None:
        """Validate configuration."""
        # validators imports this module
        from src.engine.validators import validate_score_delay, validate_total_rounds

        validate_total_rounds(self.total_rounds)
        validate_score_delay(self.score_delay)


@dataclass(frozen=True)
class RoundResult:
    """
    One accepted round.

    Attributes:
        round_number: 1-based index of the round within its match
        player_choice: What the player showed
        opponent_choice: What the opponent drew
        outcome: Result from the player's point of view
        epoch: Match the round belongs to
    """
    round_number: int
    player_choice: Choice
    opponent_choice: Choice
    outcome: Outcome
    epoch: int = 0

    @property
    def is_win(self) -> bool:
        return self.outcome is Outcome.WIN

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW

    def __str__(self) -> str:
        return (
            f"Round {self.round_number}: {self.player_choice.value} vs "
            f"{self.opponent_choice.value} -> {self.outcome.label}"
        )


@dataclass
class MatchState:
    """
    Mutable state of the current match.

    Attributes:
        score: Wins applied so far (delayed relative to the reveal)
        rounds_played: Rounds accepted in this match
        player_choice: Latest player pick, or the placeholder
        opponent_choice: Latest opponent pick, or the placeholder
        outcome: Result of the latest round, None before the first one
        phase: Where the match is in its round cycle
        epoch: Incremented on every restart
    """
    score: int = 0
    rounds_played: int = 0
    player_choice: Choice = PLACEHOLDER_PLAYER_CHOICE
    opponent_choice: Choice = PLACEHOLDER_OPPONENT_CHOICE
    outcome: Outcome | None = None
    phase: Phase = Phase.AWAITING_CHOICE
    epoch: int = 0

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW

    @property
    def is_player_win(self) -> bool:
        return self.outcome is Outcome.WIN
