"""
Rock Paper Scissors - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest

from src.engine.base import Choice, MatchConfig, Outcome
from src.engine.match import MatchController
from src.engine.opponent import ScriptedOpponent
from src.realtime.events import EventPayload
from src.realtime.scheduler import ManualScoreScheduler


# =============================================================================
# RULE TEST DATA
# =============================================================================

@pytest.fixture
def outcome_table() -> dict[tuple[Choice, Choice], Outcome]:
    """
    Every (player, opponent) pair with the expected outcome for the player.
    """
    return {
        (Choice.ROCK, Choice.ROCK): Outcome.DRAW,
        (Choice.ROCK, Choice.PAPER): Outcome.LOSE,
        (Choice.ROCK, Choice.SCISSORS): Outcome.WIN,
        (Choice.PAPER, Choice.ROCK): Outcome.WIN,
        (Choice.PAPER, Choice.PAPER): Outcome.DRAW,
        (Choice.PAPER, Choice.SCISSORS): Outcome.LOSE,
        (Choice.SCISSORS, Choice.ROCK): Outcome.LOSE,
        (Choice.SCISSORS, Choice.PAPER): Outcome.WIN,
        (Choice.SCISSORS, Choice.SCISSORS): Outcome.DRAW,
    }


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def scheduler() -> ManualScoreScheduler:
    """Scheduler whose clock only moves when the test ticks it."""
    return ManualScoreScheduler()


@pytest.fixture
def events() -> list[EventPayload]:
    """Collects every event a controller emits."""
    return []


@pytest.fixture
def make_controller(
    scheduler: ManualScoreScheduler, events: list[EventPayload]
) -> Callable[..., MatchController]:
    """
    Factory for controllers with a scripted opponent and the manual scheduler.

    Usage:
        controller = make_controller([Choice.SCISSORS])
    """
    def _make(
        opponent_picks: Iterable[Choice] = (Choice.SCISSORS,),
        total_rounds: int = 10,
        score_delay: float = 1.2,
    ) -> MatchController:
        return MatchController(
            config=MatchConfig(total_rounds=total_rounds, score_delay=score_delay),
            opponent=ScriptedOpponent(opponent_picks),
            scheduler=scheduler,
            on_event=events.append,
        )

    return _make
