"""
Rock Paper Scissors - Match Controller

Owns the match state machine:

    AWAITING_CHOICE --submit_choice--> SHOWING_OUTCOME
    SHOWING_OUTCOME --advance--> AWAITING_CHOICE, or ENDED after the last round
    any phase --restart--> AWAITING_CHOICE (new epoch)

A winning round does not touch the score directly. It hands an
epoch-tagged ScoreIncrement to the score scheduler, which delivers it
back to ``_apply_increment`` after the configured delay. Increments
from a previous epoch are dropped on arrival.

Out-of-phase calls are no-ops rather than errors: the presentation layer
is expected to prevent them, but a late rerun can still race the state.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Callable

from src.engine.base import (
    Choice,
    MatchConfig,
    MatchState,
    Phase,
    RoundResult,
)
from src.engine.opponent import OpponentStrategy, RandomOpponent
from src.engine.rules import determine_outcome
from src.engine.validators import validate_choice
from src.realtime.events import EventPayload, MatchEvent
from src.realtime.scheduler import ScoreIncrement, ScoreScheduler, ThreadedScoreScheduler

logger = logging.getLogger(__name__)

# Event emitted on entering each phase through submit_choice or advance
_PHASE_EVENTS: dict[Phase, MatchEvent] = {
    Phase.AWAITING_CHOICE: MatchEvent.PHASE_CHANGED,
    Phase.SHOWING_OUTCOME: MatchEvent.ROUND_PLAYED,
    Phase.ENDED: MatchEvent.MATCH_ENDED,
}


class MatchController:
    """Runs one player's series of rounds against a random opponent.

    All state mutations happen under a single re-entrant lock, including
    score increments arriving from the scheduler's worker thread. Event
    callbacks are invoked after the lock is released.
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        opponent: OpponentStrategy | None = None,
        scheduler: ScoreScheduler | None = None,
        on_event: Callable[[EventPayload], None] | None = None,
    ) -> None:
        self.config = config if config is not None else MatchConfig()
        self._opponent = opponent if opponent is not None else RandomOpponent()
        self._scheduler = scheduler if scheduler is not None else ThreadedScoreScheduler()
        self._scheduler.bind(self._apply_increment)
        self._on_event = on_event
        self._lock = threading.RLock()
        self._state = MatchState()
        self._pending_wins = 0
        self._closed = False

    # -- Queries ---------------------------------------------------------

    @property
    def state(self) -> MatchState:
        """Snapshot of the current state. Mutating it has no effect."""
        with self._lock:
            return dataclasses.replace(self._state)

    @property
    def is_ended(self) -> bool:
        """True once every round of the match has been played."""
        with self._lock:
            return self._state.rounds_played >= self.config.total_rounds

    def matches_remaining(self) -> int:
        """Rounds left to play in this match."""
        with self._lock:
            return self.config.total_rounds - self._state.rounds_played

    def pending_increments(self) -> int:
        """Won rounds of the current epoch whose point has not landed yet."""
        with self._lock:
            return self._pending_wins

    # -- Operations ------------------------------------------------------

    def submit_choice(self, choice: Choice | str) -> RoundResult | None:
        """Play one round with the player's pick.

        Args:
            choice: A Choice or anything ``validate_choice`` accepts

        Returns:
            The resolved round, or None if the match was not awaiting a choice

        Raises:
            ValueError: If ``choice`` names no valid choice
        """
        player_choice = validate_choice(choice)

        with self._lock:
            state = self._state
            if self._closed:
                logger.debug("Ignoring choice %s: controller is shut down", player_choice.value)
                return None
            if state.phase is not Phase.AWAITING_CHOICE:
                logger.debug("Ignoring choice %s during %s", player_choice.value, state.phase.name)
                return None

            opponent_choice = self._opponent.pick()
            result = RoundResult(
                round_number=state.rounds_played + 1,
                player_choice=player_choice,
                opponent_choice=opponent_choice,
                outcome=determine_outcome(player_choice, opponent_choice),
                epoch=state.epoch,
            )

            # Schedule before committing so a failure leaves the state untouched
            if result.is_win:
                self._scheduler.schedule(
                    ScoreIncrement(epoch=state.epoch, round_number=result.round_number),
                    self.config.score_delay,
                )
                self._pending_wins += 1

            state.player_choice = result.player_choice
            state.opponent_choice = result.opponent_choice
            state.rounds_played = result.round_number
            state.outcome = result.outcome
            state.phase = Phase.SHOWING_OUTCOME
            event = _PHASE_EVENTS[state.phase]

        logger.info("Epoch %d %s", result.epoch, result)
        self._emit(EventPayload(
            event=event,
            epoch=result.epoch,
            round_number=result.round_number,
            data={"result": result},
        ))
        return result

    def advance(self) -> None:
        """Acknowledge the revealed outcome and move to the next round.

        After the final round the match moves to ENDED instead and keeps
        its state until ``restart``.
        """
        with self._lock:
            state = self._state
            if self._closed:
                logger.debug("Ignoring advance: controller is shut down")
                return
            if state.phase is not Phase.SHOWING_OUTCOME:
                logger.debug("Ignoring advance during %s", state.phase.name)
                return

            if state.rounds_played >= self.config.total_rounds:
                state.phase = Phase.ENDED
            else:
                state.phase = Phase.AWAITING_CHOICE
            event = _PHASE_EVENTS[state.phase]
            payload = EventPayload(
                event=event,
                epoch=state.epoch,
                round_number=state.rounds_played,
                data={"phase": state.phase, "score": state.score},
            )

        if payload.event is MatchEvent.MATCH_ENDED:
            logger.info("Match %d ended with score %d", payload.epoch, payload.data["score"])
        self._emit(payload)

    def restart(self) -> None:
        """Start a fresh match. Always succeeds, from any phase.

        Opens a new epoch so score increments still in flight from the
        previous match are dropped when they arrive.
        """
        with self._lock:
            epoch = self._state.epoch + 1
            self._state = MatchState(epoch=epoch)
            self._pending_wins = 0

        logger.info("Match restarted (epoch %d)", epoch)
        self._emit(EventPayload(event=MatchEvent.MATCH_RESTARTED, epoch=epoch))

    def shutdown(self) -> None:
        """Stop the score scheduler. Later submit_choice and advance calls are no-ops."""
        with self._lock:
            self._closed = True
        self._scheduler.shutdown()

    # -- Score delivery --------------------------------------------------

    def _apply_increment(self, increment: ScoreIncrement) -> None:
        """Single write path for the score, called by the scheduler."""
        with self._lock:
            state = self._state
            if increment.epoch != state.epoch:
                applied = False
            else:
                state.score += 1
                self._pending_wins -= 1
                applied = True
            score = state.score

        if not applied:
            logger.debug(
                "Discarding stale increment for epoch %d round %d",
                increment.epoch, increment.round_number,
            )
            self._emit(EventPayload(
                event=MatchEvent.SCORE_DISCARDED,
                epoch=increment.epoch,
                round_number=increment.round_number,
            ))
            return

        logger.debug("Score is now %d after round %d", score, increment.round_number)
        self._emit(EventPayload(
            event=MatchEvent.SCORE_APPLIED,
            epoch=increment.epoch,
            round_number=increment.round_number,
            data={"score": score},
        ))

    def _emit(self, payload: EventPayload) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(payload)
        except Exception:
            logger.exception("Error in match event listener for %s", payload.event.name)
