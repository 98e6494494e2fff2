"""
Rock Paper Scissors Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the rock/paper/scissors rule, opponent picks, and the match
state machine with its delayed scoring.
"""

from src.engine.base import (
    Choice,
    MatchConfig,
    MatchState,
    Outcome,
    Phase,
    RoundResult,
)
from src.engine.match import MatchController
from src.engine.opponent import OpponentStrategy, RandomOpponent, ScriptedOpponent
from src.engine.rules import beats, determine_outcome

__all__ = [
    # Data Classes
    "MatchConfig",
    "MatchState",
    "RoundResult",
    # Enums
    "Choice",
    "Outcome",
    "Phase",
    # Rules
    "beats",
    "determine_outcome",
    # Opponents
    "OpponentStrategy",
    "RandomOpponent",
    "ScriptedOpponent",
    # Controller
    "MatchController",
]
