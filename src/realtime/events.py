"""
Rock Paper Scissors - Match Event Definitions

Event types and payloads emitted by the MatchController so the
presentation layer can re-render on state changes.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class MatchEvent(Enum):
    """Events that can occur during a match."""

    ROUND_PLAYED = auto()
    PHASE_CHANGED = auto()
    SCORE_APPLIED = auto()
    SCORE_DISCARDED = auto()
    MATCH_ENDED = auto()
    MATCH_RESTARTED = auto()


@dataclass
class EventPayload:
    """Wrapper for match event data."""

    event: MatchEvent
    epoch: int
    round_number: int | None = None
    data: dict[str, Any] = field(default_factory=dict)

