"""
Rock Paper Scissors Real-time Layer.

Match events and the single-writer scheduler for delayed score updates.
"""

from src.realtime.events import EventPayload, MatchEvent
from src.realtime.scheduler import (
    ManualScoreScheduler,
    ScoreIncrement,
    ScoreScheduler,
    ThreadedScoreScheduler,
)

__all__ = [
    "EventPayload",
    "ManualScoreScheduler",
    "MatchEvent",
    "ScoreIncrement",
    "ScoreScheduler",
    "ThreadedScoreScheduler",
]
