"""
Rock Paper Scissors - Opponent Strategies

The opponent is a replaceable strategy object so matches can be replayed
deterministically. Rounds are independent: no strategy looks at the
player's history.
"""

import random
from itertools import cycle
from typing import Iterable, Protocol

from src.engine.base import Choice


class OpponentStrategy(Protocol):
    """Anything that can produce the opponent's pick for a round."""

    def pick(self) -> Choice:
        ...


class RandomOpponent:
    """Draws uniformly from the three choices every round."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self._rng = rng if rng is not None else random.Random(seed)
        self._choices = tuple(Choice)

    def pick(self) -> Choice:
        return self._rng.choice(self._choices)


class ScriptedOpponent:
    """
    Replays a fixed sequence of picks, wrapping around when exhausted.

    Useful for demos and for forcing a particular outcome in tests.
    """

    def __init__(self, choices: Iterable[Choice]) -> None:
        script = tuple(choices)
        if not script:
            raise ValueError("Scripted opponent needs at least one choice.")
        for item in script:
            if not isinstance(item, Choice):
                raise ValueError(f"Scripted pick must be a Choice, got {type(item).__name__}.")
        self.script = script
        self._iter = cycle(script)

    def pick(self) -> Choice:
        return next(self._iter)
